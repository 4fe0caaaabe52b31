"""Match-mode detection for text-bearing selector bodies."""

from __future__ import annotations

import json
import re
from typing import NamedTuple

from locatorgen.exceptions import InvalidSelectorError
from locatorgen.models.selector import TextPattern

_REGEX_BODY_RE = re.compile(r"/(.*)/([igm]*)")


class ExactMatch(NamedTuple):
    exact: bool | None
    text: str | TextPattern


def detect_exact(text: str) -> ExactMatch:
    """Split a selector body into its text (or pattern) and its match mode.

    ``/re/flags`` becomes a pattern, a trailing ``"`` or ``"s`` means an exact
    (case-sensitive, whole string) match, a trailing ``"i`` means a
    case-insensitive substring match. Anything else is returned unchanged as
    an inexact match. A pattern that would not compile raises
    ``InvalidSelectorError``.
    """
    match = _REGEX_BODY_RE.fullmatch(text)
    if match:
        return ExactMatch(exact=None, text=TextPattern(source=match.group(1), flags=match.group(2)))
    if text.endswith('"'):
        return ExactMatch(exact=True, text=_json_unquote(text))
    if text.endswith('"s'):
        return ExactMatch(exact=True, text=_json_unquote(text[:-1]))
    if text.endswith('"i'):
        return ExactMatch(exact=False, text=_json_unquote(text[:-1]))
    return ExactMatch(exact=False, text=text)


def _json_unquote(quoted: str) -> str:
    # Accepts both "Submit" and the opening-quote-less form Submit".
    if len(quoted) < 2 or not quoted.startswith('"'):
        quoted = '"' + quoted
    try:
        value = json.loads(quoted)
    except ValueError as e:
        raise InvalidSelectorError(f"Malformed quoted text: {quoted}") from e
    if not isinstance(value, str):
        raise InvalidSelectorError(f"Malformed quoted text: {quoted}")
    return value
