"""Data contracts passed between the parser, the generator and the backends."""

from __future__ import annotations

import re
from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator, model_validator

from locatorgen.exceptions import InvalidSelectorError

_NAMED_GROUP_RE = re.compile(r"\(\?<([A-Za-z_]\w*)>")
_BACKREFERENCE_RE = re.compile(r"k<([A-Za-z_]\w*)>")
# Letters that JavaScript accepts as identity escapes and Python rejects.
_IDENTITY_ESCAPES = frozenset("ceghijklmopqyzCEFGHIJKLMNOPQRTUVXY")
_HEX_ESCAPE_RE = re.compile(r"x[0-9a-fA-F]{2}|u[0-9a-fA-F]{4}")


def _to_python_pattern(source: str) -> str:
    """Rewrite the JavaScript-only constructs of ``source`` into Python ``re`` syntax."""
    result: list[str] = []
    in_class = False
    index = 0
    while index < len(source):
        char = source[index]
        if char == "\\" and index + 1 < len(source):
            escaped = source[index + 1]
            backreference = _BACKREFERENCE_RE.match(source, index + 1)
            if backreference and not in_class:
                result.append(f"(?P={backreference.group(1)})")
                index = backreference.end()
                continue
            if escaped in "xu" and not _HEX_ESCAPE_RE.match(source, index + 1):
                result.append(escaped)
            elif escaped in _IDENTITY_ESCAPES:
                result.append(escaped)
            else:
                result.append(char + escaped)
            index += 2
            continue
        if not in_class and char == "[":
            if source.startswith("[^]", index):
                result.append(r"[\s\S]")
                index += 3
                continue
            if source.startswith("[]", index):
                result.append("(?!)")
                index += 2
                continue
            in_class = True
        elif in_class and char == "]":
            in_class = False
        elif not in_class:
            named_group = _NAMED_GROUP_RE.match(source, index)
            if named_group:
                result.append(f"(?P<{named_group.group(1)}>")
                index = named_group.end()
                continue
        result.append(char)
        index += 1
    return "".join(result)


def _check_pattern(source: str, flags: str) -> None:
    """Raise if ``/source/flags`` would not compile as a regular expression."""
    if len(set(flags)) != len(flags):
        raise InvalidSelectorError(f"Invalid regular expression flags: /{source}/{flags}")
    try:
        re.compile(_to_python_pattern(source))
    except re.error as e:
        # JavaScript allows variable-width look-behind, Python does not.
        if "look-behind" in e.msg:
            return
        raise InvalidSelectorError(f"Invalid regular expression: /{source}/{flags}: {e}") from e


def _escape_pattern_source(source: str) -> str:
    """Escape a regex source the way a JavaScript RegExp reports its ``source``."""
    if not source:
        return "(?:)"
    result: list[str] = []
    in_class = False
    index = 0
    while index < len(source):
        char = source[index]
        if char == "\\" and index + 1 < len(source):
            result.append(source[index : index + 2])
            index += 2
            continue
        if char == "[":
            in_class = True
        elif char == "]":
            in_class = False
        if char == "/" and not in_class:
            result.append("\\/")
        elif char == "\n":
            result.append("\\n")
        elif char == "\r":
            result.append("\\r")
        else:
            result.append(char)
        index += 1
    return "".join(result)


class TextPattern(BaseModel):
    """A regular expression taken from selector text, e.g. ``/sub.*mit/i``."""

    model_config = ConfigDict(frozen=True)

    source: str
    flags: str = ""

    @field_validator("source")
    @classmethod
    def _normalize_source(cls, value: str) -> str:
        return _escape_pattern_source(value)

    @model_validator(mode="after")
    def _compile(self) -> TextPattern:
        _check_pattern(self.source, self.flags)
        return self

    @property
    def ignore_case(self) -> bool:
        return "i" in self.flags

    def __str__(self) -> str:
        return f"/{self.source}/{self.flags}"


class NestedSelectorBody(BaseModel):
    parsed: ParsedSelector
    distance: float | None = None  # only for layout engines (left-of, near, ...)


class ParsedSelectorPart(BaseModel):
    name: str
    body: str | NestedSelectorBody
    source: str  # original body text, used when stringifying


class ParsedSelector(BaseModel):
    parts: list[ParsedSelectorPart] = []
    capture: int | None = None


NestedSelectorBody.model_rebuild()
ParsedSelectorPart.model_rebuild()
ParsedSelector.model_rebuild()


class AttributeSelectorPart(BaseModel):
    name: str
    json_path: list[str]
    op: str  # one of = *= ^= $= |= ~= or <truthy>
    value: Any = None  # str, bool, int, float, TextPattern or None
    case_sensitive: bool


class AttributeSelector(BaseModel):
    name: str
    attributes: list[AttributeSelectorPart] = []


class LocatorAttribute(BaseModel):
    name: str
    value: Any  # str, bool, int, float or TextPattern


class LocatorOptions(BaseModel):
    """Optional arguments of a locator call, rendered by each backend in its own idiom."""

    exact: bool | None = None
    name: str | TextPattern | None = None
    attrs: list[LocatorAttribute] = []
