"""Timed sequence sources."""

from hotseq.sources.multicast import MulticastSequenceSource, MulticastSubscription
from hotseq.sources.unicast import UnicastSequenceSource, UnicastSubscription

__all__ = [
    "MulticastSequenceSource",
    "MulticastSubscription",
    "UnicastSequenceSource",
    "UnicastSubscription",
]
