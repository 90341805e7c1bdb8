"""
shape_detector.py — Classify a parsed payload into exactly one PayloadKind.

Priority (first match wins):
    1. {"no_data": true}                     → NO_DATA   (beats events)
    2. {"events": [...]} or {"answer": str}  → EVENTS
    3. {"documents": [...]}                  → DOCUMENTS
    4. {"<year>": {"summary": ...}}          → LEGACY
    5. anything else                         → OPAQUE

Downstream handlers never re-test shapes; they trust `kind`.
"""

import logging
from collections.abc import Mapping
from typing import Any, Iterable, Tuple

from history_chat.core.payload_schema import ClassifiedPayload, PayloadKind

logger = logging.getLogger(__name__)


def iter_year_entries(obj: Any) -> Iterable[Tuple[str, Any]]:
    """(label, value) pairs of a legacy payload; list indices act as labels."""
    if isinstance(obj, Mapping):
        return ((str(k), v) for k, v in obj.items())
    if isinstance(obj, list):
        return ((str(i), v) for i, v in enumerate(obj))
    return iter(())


def is_year_entry(value: Any) -> bool:
    """A legacy year block is a mapping with a non-empty summary."""
    return isinstance(value, Mapping) and bool(value.get("summary"))


def _has_legacy_years(obj: Any) -> bool:
    return any(is_year_entry(v) for _, v in iter_year_entries(obj))


def classify_payload(obj: Any) -> ClassifiedPayload:
    """Pick the handler for a parsed payload."""
    if isinstance(obj, Mapping):
        if obj.get("no_data") is True:
            result = ClassifiedPayload(kind=PayloadKind.NO_DATA, data=obj)
        elif isinstance(obj.get("events"), list) or isinstance(obj.get("answer"), str):
            # events first, documents when events is missing
            records = next(
                (obj[k] for k in ("events", "documents") if isinstance(obj.get(k), list)),
                [],
            )
            result = ClassifiedPayload(
                kind=PayloadKind.EVENTS,
                data=obj,
                records=list(records),
                answer=obj.get("answer") if isinstance(obj.get("answer"), str) else None,
            )
        elif isinstance(obj.get("documents"), list):
            result = ClassifiedPayload(
                kind=PayloadKind.DOCUMENTS,
                data=obj,
                records=list(obj["documents"]),
            )
        elif _has_legacy_years(obj):
            result = ClassifiedPayload(kind=PayloadKind.LEGACY, data=obj)
        else:
            result = ClassifiedPayload(kind=PayloadKind.OPAQUE, data=obj)
    elif isinstance(obj, list) and _has_legacy_years(obj):
        result = ClassifiedPayload(kind=PayloadKind.LEGACY, data=obj)
    else:
        result = ClassifiedPayload(kind=PayloadKind.OPAQUE, data=obj)

    logger.debug("Payload classified as %s", result.kind.value)
    return result
