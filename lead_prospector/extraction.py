"""Helpers for pulling a JSON array out of free-form model output."""
from __future__ import annotations

import json
import logging
from typing import Any, Dict, List

LOGGER = logging.getLogger(__name__)


class MalformedResponse(ValueError):
    """Raised when a response does not contain a parseable JSON array."""


def extract_json_array(text: str) -> List[Dict[str, Any]]:
    """Return the JSON array embedded in ``text``.

    The payload is taken to span from the first ``[`` to the last ``]``, so
    prose around the array is ignored.  Brackets inside string values that sit
    outside the real payload are not accounted for.
    """

    stripped = (text or "").strip()
    start = stripped.find("[")
    end = stripped.rfind("]")
    if start == -1 or end == -1:
        raise MalformedResponse("No JSON array delimiters found in response.")

    payload = stripped[start : end + 1]
    try:
        parsed = json.loads(payload)
    except (ValueError, RecursionError) as exc:
        LOGGER.debug("Unable to parse JSON payload: %r", payload[:200])
        raise MalformedResponse(f"Response array is not valid JSON: {exc}") from exc

    if not isinstance(parsed, list):
        raise MalformedResponse(f"Expected a JSON array, got {type(parsed).__name__}")
    return parsed
