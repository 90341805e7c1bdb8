"""
response_formatter.py — Backend payload → clean markdown for the chat UI.

PIPELINE:
    Input Normalize → Shape Detect → Event Filter → Group & Dedup → Render

    Each stage is a pure function; this module only routes between them and
    owns the error boundary. format_history_response() never raises: the
    chat UI always gets a string back.

Handlers by PayloadKind:
    NO_DATA   → fixed apology sentence
    EVENTS    → answer if present, else grouped events
    DOCUMENTS → grouped documents (same pipeline as events)
    LEGACY    → year-keyed summary blocks
    OPAQUE    → pretty JSON
"""

import json
import logging
from typing import Any, Callable, Dict, Optional, Sequence, Tuple

from history_chat.core.payload_schema import ClassifiedPayload, PayloadKind
from history_chat.services.event_filter import filter_events
from history_chat.services.event_grouper import group_events
from history_chat.services.formatters.legacy_formatter import format_legacy_payload
from history_chat.services.formatters.markdown_renderer import (
    NOT_FOUND_MESSAGE,
    pick_answer,
    render_year_groups,
)
from history_chat.services.input_normalizer import normalize_input
from history_chat.services.shape_detector import classify_payload

logger = logging.getLogger(__name__)

NO_DATA_MESSAGE = "Xin lỗi, tôi không tìm thấy thông tin lịch sử phù hợp với yêu cầu của bạn."

# Kinds reported when the normalizer stops before classification
KIND_EMPTY = "empty"
KIND_TEXT = "text"


def to_pretty_json(obj: Any) -> str:
    """Last-resort rendering for objects we do not understand."""
    if isinstance(obj, str):
        return obj
    try:
        return json.dumps(obj, indent=2, ensure_ascii=False, default=str)
    except Exception:
        # Circular references, nesting too deep for the encoder, a failing __str__
        pass
    try:
        return str(obj)
    except Exception:
        # Called from the error boundary, so this must not raise
        return repr(type(obj))


# ===================================================================
# HANDLERS BY KIND
# ===================================================================

def _format_no_data(payload: ClassifiedPayload, **_) -> str:
    return NO_DATA_MESSAGE


def format_events_payload(
    payload: ClassifiedPayload,
    banned_prefixes: Optional[Sequence[str]] = None,
    key_length: Optional[int] = None,
    min_chars: Optional[int] = None,
) -> str:
    """
    EVENTS / DOCUMENTS handler.

    A non-blank `answer` wins outright: the backend's prose is preferred
    over rebuilding the answer from its event list.
    """
    answer = pick_answer(payload.answer)
    if answer is not None:
        return answer

    kept = filter_events(payload.records, banned_prefixes=banned_prefixes)
    groups = group_events(kept, key_length=key_length, min_chars=min_chars)
    markdown = render_year_groups(groups)
    return markdown or NOT_FOUND_MESSAGE


def _format_legacy(payload: ClassifiedPayload, **_) -> str:
    markdown = format_legacy_payload(payload.data)
    return markdown or to_pretty_json(payload.data)


def _format_opaque(payload: ClassifiedPayload, **_) -> str:
    return to_pretty_json(payload.data)


_HANDLERS: Dict[PayloadKind, Callable[..., str]] = {
    PayloadKind.NO_DATA: _format_no_data,
    PayloadKind.EVENTS: format_events_payload,
    PayloadKind.DOCUMENTS: format_events_payload,
    PayloadKind.LEGACY: _format_legacy,
    PayloadKind.OPAQUE: _format_opaque,
}


# ===================================================================
# ENTRY POINTS
# ===================================================================

def describe_payload(payload: Any, **options) -> Tuple[str, str]:
    """
    Format a payload and report which branch handled it.

    Returns:
        (kind, markdown) — kind is a PayloadKind value, or "empty" / "text"
        when the input stopped at normalization.

    Options (banned_prefixes, key_length, min_chars) override config for the
    events pipeline.
    """
    obj: Any = payload
    try:
        terminal, obj = normalize_input(payload)
        if terminal is not None:
            return (KIND_EMPTY if terminal == "" else KIND_TEXT), terminal

        classified = classify_payload(obj)
        handler = _HANDLERS[classified.kind]
        return classified.kind.value, handler(classified, **options).strip()
    except Exception:
        logger.exception("Error formatting history response")
        return PayloadKind.OPAQUE.value, to_pretty_json(obj)


def format_history_response(payload: Any, **options) -> str:
    """
    Main entry point: backend payload (str or object) → markdown string.

    Returns "" only for empty input (None, "", ...). Never raises.
    """
    _, markdown = describe_payload(payload, **options)
    return markdown
