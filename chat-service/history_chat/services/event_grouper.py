"""
event_grouper.py — Bucket filtered records by year and drop restatements.

Architecture:
    Filtered records
        ↓
    Year key (stringified as given, None → "Khác")
        ↓
    Similarity key = "<year>_" + first N chars of normalize_for_similarity(content)
        ↓
    First record per key wins, later ones are dropped whole
        ↓
    Year groups in encounter order

Two records under different years never collapse: the key embeds the year.
"""

import logging
import math
from typing import Any, Dict, Iterable, List, Mapping, Optional, Tuple

from history_chat.core.config import (
    MIN_SIMILARITY_CHARS,
    OTHER_YEAR_KEY,
    SIMILARITY_KEY_LENGTH,
)
from history_chat.core.payload_schema import Event, YearGroup
from history_chat.services.event_filter import extract_content
from history_chat.utils.normalize import normalize_for_similarity

logger = logging.getLogger(__name__)


def year_key(year: Any) -> str:
    """
    Label used for grouping and headings.

    Kept as given: "1945" and 1945 both → "1945", 1945.5 → "1945.5".
    Integral floats drop the ".0" so JSON 1945.0 groups with 1945.
    """
    if year is None:
        return OTHER_YEAR_KEY
    if isinstance(year, bool):
        return "true" if year else "false"
    if isinstance(year, float) and year.is_integer():
        return str(int(year))
    return str(year)


def build_events(
    records: Iterable[Mapping],
    key_length: int = SIMILARITY_KEY_LENGTH,
    min_chars: int = MIN_SIMILARITY_CHARS,
) -> List[Event]:
    """
    Deduplicated events in encounter order.

    The seen-set spans the whole call; it is equivalent to one set per year
    because every key starts with its year.
    """
    seen = set()
    events: List[Event] = []

    for record in records:
        content = extract_content(record)
        if not content:
            continue

        key = year_key(record.get("year"))
        normalized = normalize_for_similarity(content)
        if len(normalized) < min_chars:
            logger.debug("Dropping record with short similarity text: %r", content[:50])
            continue

        sim_key = f"{key}_{normalized[:key_length]}"
        if sim_key in seen:
            continue
        seen.add(sim_key)
        events.append(Event(year_key=key, content=content, similarity_key=sim_key))

    return events


def _sort_key(label: str) -> Tuple[int, float]:
    """Numeric labels first (ascending), other labels after, in encounter order."""
    try:
        value = float(label)
    except ValueError:
        return (1, 0.0)
    if not math.isfinite(value):
        return (1, 0.0)
    return (0, value)


def group_events(
    records: Iterable[Mapping],
    key_length: Optional[int] = None,
    min_chars: Optional[int] = None,
) -> List[YearGroup]:
    """
    Group filtered records by year, deduplicated, ordered for rendering.

    "Khác" (no year) is always last.
    """
    events = build_events(
        records,
        key_length=SIMILARITY_KEY_LENGTH if key_length is None else key_length,
        min_chars=MIN_SIMILARITY_CHARS if min_chars is None else min_chars,
    )

    groups: Dict[str, YearGroup] = {}
    for ev in events:
        if ev.year_key not in groups:
            groups[ev.year_key] = YearGroup(year_key=ev.year_key)
        groups[ev.year_key].contents.append(ev.content)

    other = groups.pop(OTHER_YEAR_KEY, None)
    # sorted() is stable, so non-numeric labels keep encounter order
    ordered = sorted(groups.values(), key=lambda g: _sort_key(g.year_key))
    if other is not None:
        ordered.append(other)

    logger.debug("Grouped %d events into %d years", len(events), len(ordered))
    return ordered
