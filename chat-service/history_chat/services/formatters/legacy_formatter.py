"""
legacy_formatter.py — Old backend format, keyed directly by year.

    {
        "938": {
            "summary": "...",
            "events": [
                {"year": 938, "event": "...", "persons": [...], "places": [...], "keywords": [...]}
            ]
        }
    }

Each year with a summary becomes a block ending in "---". Keys without a
summary are skipped. Returns "" if no key produced output.
"""

from collections.abc import Mapping
from typing import Any, List

from history_chat.services.shape_detector import is_year_entry, iter_year_entries

# (field, label) for optional sub-bullets, in display order
_DETAIL_FIELDS = (
    ("persons", "Nhân vật"),
    ("places", "Địa danh"),
    ("keywords", "Từ khóa"),
)


def _text(value: Any) -> str:
    """Missing values render as empty text, not "None"."""
    return "" if value is None else str(value)


def _format_event(ev: Any) -> List[str]:
    if not isinstance(ev, Mapping):
        ev = {}
    lines = [f"- **{_text(ev.get('year'))}:** {_text(ev.get('event'))}"]

    for key, label in _DETAIL_FIELDS:
        values = ev.get(key)
        if isinstance(values, list) and values:
            lines.append(f"  - *{label}:* {', '.join(_text(v) for v in values)}")

    lines.append("")
    return lines


def format_legacy_payload(obj: Any) -> str:
    lines: List[str] = []

    for year, details in iter_year_entries(obj):
        if not is_year_entry(details):
            continue

        lines.append(f"### Năm {year}")
        lines.append("")
        lines.append(f"**Tóm tắt:** {_text(details['summary'])}")
        lines.append("")

        events = details.get("events")
        if isinstance(events, list):
            lines.append("**Sự kiện tiêu biểu:**")
            lines.append("")
            for ev in events:
                lines.extend(_format_event(ev))

        lines.append("---")
        lines.append("")

    return "\n".join(lines).strip()
