"""
input_normalizer.py — First stage of the response formatter.

Turns whatever the chat stream handed us into either:
    - a terminal string (nothing left to format), or
    - a parsed object for classify_payload().
"""

import json
import logging
from typing import Any, Optional, Tuple

logger = logging.getLogger(__name__)


def _is_empty(payload: Any) -> bool:
    if payload is None:
        return True
    # "", 0, 0.0, False; {} and [] still get formatted
    if isinstance(payload, float) and payload != payload:
        # NaN
        return True
    if isinstance(payload, (str, int, float)):
        return not payload
    return False


def normalize_input(payload: Any) -> Tuple[Optional[str], Any]:
    """
    Returns (terminal_text, obj).

    terminal_text is not None → pipeline stops and returns it.
    Otherwise obj is the object to classify.
    """
    if _is_empty(payload):
        return "", None

    if not isinstance(payload, str):
        return None, payload

    trimmed = payload.strip()
    if not trimmed.startswith(("{", "[")):
        # Plain prose answer
        return payload, None

    try:
        return None, json.loads(trimmed)
    except ValueError as e:
        # Partial stream chunk or prose that happens to start with a brace
        logger.warning("Payload looks like JSON but does not parse: %s", e)
        return payload, None
