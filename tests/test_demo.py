from __future__ import annotations

import asyncio

from hotseq.config import AppSettings
from hotseq.demo import FIRST, SECOND, run_demo, run_demo_realtime


def test_multicast_demo_second_subscriber_misses_first_value() -> None:
    lines: list[str] = []
    observers = run_demo(AppSettings(), mode="multicast", emit=lines.append)

    assert observers[FIRST].values == list(range(1, 11))
    assert observers[SECOND].values == list(range(2, 11))
    assert "2nd subscribe: 1" not in lines
    assert lines[:3] == ["1st subscribe: 1", "1st subscribe: 2", "2nd subscribe: 2"]
    assert lines[-2:] == ["1st sequence finished.", "2nd sequence finished."]


def test_unicast_demo_second_subscriber_gets_everything() -> None:
    lines: list[str] = []
    observers = run_demo(AppSettings(), mode="unicast", emit=lines.append)

    assert observers[SECOND].values == list(range(1, 11))
    assert observers[SECOND].notifications[0].clock == 2.5
    assert lines[-1] == "2nd sequence finished."


def test_demo_writes_jsonl(tmp_path) -> None:
    path = tmp_path / "demo.jsonl"
    settings = AppSettings.model_validate({"sequence": {"values": [1, 2, 3]}})
    run_demo(settings, emit=lambda line: None, jsonl_path=path)

    # 3 + 1 for the first observer, 2 + 1 for the late one
    assert len(path.read_text(encoding="utf-8").splitlines()) == 7


def test_realtime_demo_matches_virtual_run() -> None:
    settings = AppSettings.model_validate(
        {
            "sequence": {"values": [1, 2, 3], "delay_seconds": 0.1},
            "demo": {"late_subscribe_at_seconds": 0.15},
        }
    )
    observers = asyncio.run(run_demo_realtime(settings, emit=lambda line: None))

    assert observers[FIRST].values == [1, 2, 3]
    assert observers[SECOND].values == [2, 3]
    assert observers[SECOND].completed
