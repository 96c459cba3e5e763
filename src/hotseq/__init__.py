"""Hot (multicast) and cold (unicast) timed sequence sources."""

from hotseq.scheduling import AsyncioScheduler, VirtualScheduler
from hotseq.sources import MulticastSequenceSource, UnicastSequenceSource
from hotseq.types import CallbackObserver, Observer, Subscription

__all__ = [
    "AsyncioScheduler",
    "CallbackObserver",
    "MulticastSequenceSource",
    "Observer",
    "Subscription",
    "UnicastSequenceSource",
    "VirtualScheduler",
]
