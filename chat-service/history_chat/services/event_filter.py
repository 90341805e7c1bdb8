"""
event_filter.py — Drop empty and scaffold-only event records.

The answer generator sometimes leaks its own template into `story`:

    "Năm 1911, B1. gắn mốc 1911 với ... B2. nêu diễn biến trọng tâm – ..."
    "Câu hỏi nhắm tới sự kiện ... Cốt lõi. ..."

Those records carry no content of their own (the same fact always comes
back in a clean record too), so they are removed whole rather than cleaned.
"""

import logging
from collections.abc import Mapping
from typing import Any, Iterable, List, Optional, Sequence

from history_chat.core.config import SCAFFOLD_PREFIXES
from history_chat.utils.normalize import strip_year_prefix

logger = logging.getLogger(__name__)


def extract_content(record: Any) -> str:
    """
    Content of a record: story > event, trimmed.
    Returns "" for non-mapping records or when both fields are blank.
    """
    if not isinstance(record, Mapping):
        return ""
    content = record.get("story") or record.get("event") or ""
    if not isinstance(content, str):
        content = str(content)
    return content.strip()


def is_scaffold(content: str, banned_prefixes: Sequence[str] = SCAFFOLD_PREFIXES) -> bool:
    """True if content (minus "Năm XXXX, ") starts with a template marker."""
    body = strip_year_prefix(content).strip()
    return body.startswith(tuple(banned_prefixes))


def filter_events(
    records: Iterable[Any],
    banned_prefixes: Optional[Sequence[str]] = None,
) -> List[Mapping]:
    """
    Keep records that have content and are not template scaffolding.

    Order is preserved. Running the filter on its own output is a no-op.
    """
    prefixes = SCAFFOLD_PREFIXES if banned_prefixes is None else banned_prefixes
    kept: List[Mapping] = []
    dropped = 0

    for record in records:
        content = extract_content(record)
        if not content or is_scaffold(content, prefixes):
            dropped += 1
            continue
        kept.append(record)

    if dropped:
        logger.debug("Filtered %d empty/scaffold records, kept %d", dropped, len(kept))
    return kept
