"""Recover fitment JSON from free-text model output.

Models often wrap the requested JSON in prose or code fences. Extraction is
two-stage: parse the whole text, then fall back to the greedy span from the
first ``{`` to the last ``}``. The fallback is a heuristic: when the text holds
two separate brace regions the span covers both plus whatever lies between,
which usually fails to parse and is reported as a parse failure.
"""

import json
import re
from typing import Any

from ..core.errors import ResponseParseError
from ..core.logging import logger

# Greedy: first "{" to last "}" across newlines
BRACE_SPAN = re.compile(r"\{[\s\S]*\}")

_NO_VALUE = object()


def _reject_constant(name: str) -> Any:
    # NaN, Infinity and -Infinity are not JSON
    raise ValueError(f"Non-standard JSON constant: {name}")


def _load(text: str) -> Any:
    """Parse strict JSON, returning ``_NO_VALUE`` on failure."""
    try:
        return json.loads(text, parse_constant=_reject_constant)
    except ValueError:
        return _NO_VALUE


def extract_fitment(text: str) -> Any:
    """Return the JSON value in ``text`` or raise ``ResponseParseError``.

    Any value that parses directly is returned as-is, whatever its shape.
    """
    data = _load(text)
    if data is not _NO_VALUE:
        return data

    logger.warning("Completion text is not bare JSON, trying brace span")

    match = BRACE_SPAN.search(text)
    if match is None:
        raise ResponseParseError("Could not extract JSON from response")

    data = _load(match.group(0))
    if data is _NO_VALUE:
        raise ResponseParseError("Failed to parse fitment data from response")
    return data
