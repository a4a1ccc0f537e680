from __future__ import annotations
"""
engine/eventlog.py

Dziennik zdarzeń meczu: wpis do listy silnika i ew. wydruk na stdout.
API: add_event(engine, round_index, kind, text)
"""
from typing import Any


def add_event(engine: Any, round_index: int, kind: str, text: str) -> None:
    if getattr(engine, 'verbose', False):
        print(text)
    events = getattr(engine, '_events', None)
    if events is None:
        return
    events.append({"round": int(round_index), "kind": kind, "text": text})
