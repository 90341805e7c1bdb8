"""
payload_schema.py — Data shapes flowing through the response formatter.

PIPELINE:
    RawPayload → normalize_input → classify_payload → ClassifiedPayload
        EVENTS / DOCUMENTS → filter_events → group_events → List[YearGroup] → markdown
        LEGACY             → format_legacy_payload → markdown
        NO_DATA / OPAQUE   → fixed sentence / pretty JSON

Nothing here is persisted; every object is rebuilt per formatting call.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, List


class PayloadKind(str, Enum):
    """The five payload shapes the backend is known to send."""
    NO_DATA = "no_data"
    EVENTS = "events"
    DOCUMENTS = "documents"
    LEGACY = "legacy"
    OPAQUE = "opaque"


@dataclass
class ClassifiedPayload:
    """
    Tagged payload: `kind` says which handler owns `data`.

    Fields:
        kind:    PayloadKind chosen by classify_payload()
        data:    The parsed object, untouched
        records: Event records for EVENTS / DOCUMENTS (empty otherwise)
        answer:  Prose answer for EVENTS, None when absent or not a string
    """
    kind: PayloadKind
    data: Any
    records: List[Any] = field(default_factory=list)
    answer: Any = None


@dataclass
class Event:
    """One surviving record, reduced to what the renderer needs."""
    year_key: str
    content: str
    similarity_key: str


@dataclass
class YearGroup:
    """Deduplicated contents for one year, in encounter order."""
    year_key: str
    contents: List[str] = field(default_factory=list)
