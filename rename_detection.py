"""Heuristics for spotting thread renames in Workplace/Messenger webhook payloads.

Event shapes vary by product version, so everything here probes fields
tolerantly and never raises on unexpected structure.
"""
from dataclasses import dataclass
from typing import Any, Iterator, List, Optional


@dataclass(frozen=True)
class RenameSignal:
    event: dict
    thread_id: Optional[str] = None


def _as_dict(value: Any) -> dict:
    return value if isinstance(value, dict) else {}


def _present(value: Any) -> bool:
    # empty objects and lists still count as present
    return isinstance(value, (dict, list)) or bool(value)


def extract_events(body: Any) -> List[Any]:
    """Flatten entry[].messaging / entry[].events, falling back to top-level events.

    A single event object in place of a list is taken as one item.
    """
    body = _as_dict(body)
    entries = body.get("entry")
    if isinstance(entries, list):
        events: List[Any] = []
        for entry in entries:
            entry = _as_dict(entry)
            items = entry.get("messaging")
            if not _present(items):
                items = entry.get("events")
            if isinstance(items, list):
                events.extend(items)
            elif _present(items):
                events.append(items)
        return events

    events = body.get("events")
    return list(events) if isinstance(events, list) else []


def looks_like_rename(event: Any) -> bool:
    if not isinstance(event, dict) or not event:
        return False
    return bool(
        _present(event.get("thread_name"))
        or _present(event.get("thread_title"))
        or _present(event.get("thread"))
        or event.get("event") == "thread_rename"
        or event.get("type") == "rename"
        or _as_dict(event.get("change")).get("field") == "name"
    )


def resolve_thread_id(event: dict) -> Optional[str]:
    # first match wins: thread_id, thread.id, sender.id, group_id
    thread_id = (
        event.get("thread_id")
        or _as_dict(event.get("thread")).get("id")
        or _as_dict(event.get("sender")).get("id")
        or event.get("group_id")
    )
    return str(thread_id) if thread_id else None


def detect_rename(event: Any) -> Optional[RenameSignal]:
    if not looks_like_rename(event):
        return None
    return RenameSignal(event=event, thread_id=resolve_thread_id(event))


def iter_rename_signals(body: Any) -> Iterator[RenameSignal]:
    for event in extract_events(body):
        signal = detect_rename(event)
        if signal is not None:
            yield signal
