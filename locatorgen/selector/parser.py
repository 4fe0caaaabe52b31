"""Parser for the selector mini-language: ``engine=body >> engine=body``.

Two grammars live here. ``parse_selector`` splits a full selector into its
chain of engine parts and recursively parses nested selectors (``internal:has``
and friends). ``parse_attribute_selector`` handles the bracketed attribute
grammar used by the role, test id and attribute engines, for example
``button[name="Submit"i][pressed=true]``.
"""

from __future__ import annotations

import json
import math
import re
from typing import Any

from locatorgen.exceptions import InvalidSelectorError
from locatorgen.models.selector import (
    AttributeSelector,
    AttributeSelectorPart,
    NestedSelectorBody,
    ParsedSelector,
    ParsedSelectorPart,
    TextPattern,
)

NESTED_SELECTOR_NAMES: frozenset[str] = frozenset(
    {
        "internal:has",
        "internal:has-not",
        "internal:and",
        "internal:or",
        "internal:not",
        "internal:chain",
        "left-of",
        "right-of",
        "above",
        "below",
        "near",
    }
)
NESTED_SELECTOR_NAMES_WITH_DISTANCE: frozenset[str] = frozenset(
    {"left-of", "right-of", "above", "below", "near"}
)

_ENGINE_NAME_RE = re.compile(r"[a-zA-Z_0-9\-+:*]+")
_XPATH_PREFIX_RE = re.compile(r"\(*//")
_TEXT_PREFIX_RE = re.compile(r"\s*text\s*=(.*)")
_ATTRIBUTE_OPERATORS = ("=", "*=", "^=", "$=", "|=", "~=")
_REGEX_FLAGS = "dgimsuy"
_RADIX_NUMBER_RE = re.compile(r"0[xX][0-9a-fA-F]+|0[oO][0-7]+|0[bB][01]+")
_DECIMAL_NUMBER_RE = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")
_INFINITIES = {"Infinity": math.inf, "+Infinity": math.inf, "-Infinity": -math.inf}


def parse_selector(selector: str) -> ParsedSelector:
    """Parse selector text into an ordered list of engine parts."""
    strings = _parse_selector_string(selector)
    parts: list[ParsedSelectorPart] = []
    for name, body in strings.parts:
        if name in ("css", "css:light"):
            if name == "css:light":
                body = ":light(" + body + ")"
            if not body.strip():
                raise InvalidSelectorError(f"Empty css selector in `{selector}`")
            parts.append(ParsedSelectorPart(name="css", body=body, source=body))
            continue
        if name in NESTED_SELECTOR_NAMES:
            parts.append(_parse_nested_part(name, body, parts))
            continue
        parts.append(ParsedSelectorPart(name=name, body=body, source=body))
    if parts[0].name in NESTED_SELECTOR_NAMES:
        raise InvalidSelectorError(f'"{parts[0].name}" selector cannot be first')
    return ParsedSelector(parts=parts, capture=strings.capture)


def _parse_nested_part(
    name: str, body: str, preceding: list[ParsedSelectorPart]
) -> ParsedSelectorPart:
    try:
        unescaped = json.loads("[" + body + "]")
    except ValueError as e:
        raise InvalidSelectorError(f"Malformed selector: {name}={body}") from e
    if not 1 <= len(unescaped) <= 2 or not isinstance(unescaped[0], str):
        raise InvalidSelectorError(f"Malformed selector: {name}={body}")
    distance: float | None = None
    if len(unescaped) == 2:
        value = unescaped[1]
        is_number = isinstance(value, int | float) and not isinstance(value, bool)
        if not is_number or name not in NESTED_SELECTOR_NAMES_WITH_DISTANCE:
            raise InvalidSelectorError(f"Malformed selector: {name}={body}")
        distance = value

    nested = parse_selector(unescaped[0])
    # Nested selectors may repeat the frame prefix of the outer chain.
    last_frame_index = -1
    for index, part in enumerate(nested.parts):
        if is_enter_frame(part):
            last_frame_index = index
    if last_frame_index != -1:
        prefix = nested.parts[: last_frame_index + 1]
        if _parts_equal(prefix, preceding[: last_frame_index + 1]):
            nested = ParsedSelector(
                parts=nested.parts[last_frame_index + 1 :], capture=nested.capture
            )
    return ParsedSelectorPart(
        name=name, body=NestedSelectorBody(parsed=nested, distance=distance), source=body
    )


def is_enter_frame(part: ParsedSelectorPart) -> bool:
    """Return True for the ``internal:control=enter-frame`` marker part."""
    return part.name == "internal:control" and part.body == "enter-frame"


def _parts_equal(left: list[ParsedSelectorPart], right: list[ParsedSelectorPart]) -> bool:
    return stringify_selector(ParsedSelector(parts=left)) == stringify_selector(
        ParsedSelector(parts=right)
    )


def stringify_selector(selector: str | ParsedSelector, force_engine_name: bool = False) -> str:
    """Serialize parsed parts back into selector text."""
    if isinstance(selector, str):
        return selector
    chunks: list[str] = []
    for index, part in enumerate(selector.parts):
        include_engine = True
        if not force_engine_name and index != selector.capture:
            if part.name == "css":
                include_engine = False
            elif part.name == "xpath" and part.source.startswith(("//", "..")):
                include_engine = False
        prefix = part.name + "=" if include_engine else ""
        capture = "*" if index == selector.capture else ""
        chunks.append(f"{capture}{prefix}{part.source}")
    return " >> ".join(chunks)


class _SelectorStrings:
    def __init__(self) -> None:
        self.parts: list[tuple[str, str]] = []
        self.capture: int | None = None

    def append(self, raw: str) -> None:
        part = raw.strip()
        eq_index = part.find("=")
        if eq_index != -1 and _ENGINE_NAME_RE.fullmatch(part[:eq_index].strip()):
            name = part[:eq_index].strip()
            body = part[eq_index + 1 :]
        elif len(part) > 1 and part[0] == '"' and part[-1] == '"':
            name, body = "text", part
        elif len(part) > 1 and part[0] == "'" and part[-1] == "'":
            name, body = "text", part
        elif _XPATH_PREFIX_RE.match(part) or part.startswith(".."):
            name, body = "xpath", part
        else:
            name, body = "css", part

        capture = name.startswith("*")
        if capture:
            name = name[1:]
        self.parts.append((name, body))
        if capture:
            if self.capture is not None:
                raise InvalidSelectorError("Only one of the selectors can capture using * modifier")
            self.capture = len(self.parts) - 1


def _parse_selector_string(selector: str) -> _SelectorStrings:
    result = _SelectorStrings()
    if ">>" not in selector:
        result.append(selector)
        return result

    index = 0
    start = 0
    quote: str | None = None

    def should_ignore_text_selector_quote() -> bool:
        # A quote inside text=foo"bar is part of the text, not a delimiter.
        match = _TEXT_PREFIX_RE.fullmatch(selector[start:index])
        return bool(match and match.group(1))

    while index < len(selector):
        char = selector[index]
        if char == "\\" and index + 1 < len(selector):
            index += 2
        elif char == quote:
            quote = None
            index += 1
        elif quote is None and char in "\"'`" and not should_ignore_text_selector_quote():
            quote = char
            index += 1
        elif quote is None and char == ">" and selector[index + 1 : index + 2] == ">":
            result.append(selector[start:index])
            index += 2
            start = index
        else:
            index += 1
    result.append(selector[start:index])
    return result


class _AttributeSelectorReader:
    """Recursive-descent reader over a single attribute selector string."""

    def __init__(self, selector: str, allow_unquoted_strings: bool) -> None:
        self.selector = selector
        self.allow_unquoted_strings = allow_unquoted_strings
        self.wp = 0

    @property
    def eol(self) -> bool:
        return self.wp >= len(self.selector)

    def next(self) -> str:
        return self.selector[self.wp] if self.wp < len(self.selector) else ""

    def eat1(self) -> str:
        result = self.next()
        self.wp += 1
        return result

    def syntax_error(self, stage: str | None) -> InvalidSelectorError:
        if self.eol:
            return InvalidSelectorError(
                f"Unexpected end of selector while parsing selector `{self.selector}`"
            )
        during = f" during {stage}" if stage else ""
        return InvalidSelectorError(
            f"Error while parsing selector `{self.selector}` - unexpected symbol "
            f'"{self.next()}" at position {self.wp}{during}'
        )

    def skip_spaces(self) -> None:
        while not self.eol and self.next().isspace():
            self.eat1()

    @staticmethod
    def is_css_name_char(char: str) -> bool:
        return (
            char >= "\u0080"
            or "0" <= char <= "9"
            or "A" <= char <= "Z"
            or "a" <= char <= "z"
            or char in "_-"
        )

    def read_identifier(self) -> str:
        result = ""
        self.skip_spaces()
        while not self.eol and self.is_css_name_char(self.next()):
            result += self.eat1()
        return result

    def read_quoted_string(self, quote: str) -> str:
        result = self.eat1()
        if result != quote:
            raise self.syntax_error("parsing quoted string")
        while not self.eol and self.next() != quote:
            if self.next() == "\\":
                self.eat1()
            result += self.eat1()
        if self.next() != quote:
            raise self.syntax_error("parsing quoted string")
        result += self.eat1()
        return result

    def read_regular_expression(self) -> TextPattern:
        if self.eat1() != "/":
            raise self.syntax_error("parsing regular expression")
        source = ""
        in_class = False
        while not self.eol:
            if self.next() == "\\":
                source += self.eat1()
                if self.eol:
                    raise self.syntax_error("parsing regular expression")
            elif in_class and self.next() == "]":
                in_class = False
            elif not in_class and self.next() == "[":
                in_class = True
            elif not in_class and self.next() == "/":
                break
            source += self.eat1()
        if self.eat1() != "/":
            raise self.syntax_error("parsing regular expression")
        flags = ""
        while not self.eol and self.next() in _REGEX_FLAGS:
            flags += self.eat1()
        return TextPattern(source=source, flags=flags)

    def read_attribute_token(self) -> str:
        self.skip_spaces()
        if self.next() in ("'", '"'):
            token = self.read_quoted_string(self.next())[1:-1]
        else:
            token = self.read_identifier()
        if not token:
            raise self.syntax_error("parsing property path")
        return token

    def read_operator(self) -> str:
        self.skip_spaces()
        op = ""
        if not self.eol:
            op += self.eat1()
        if not self.eol and op != "=":
            op += self.eat1()
        if op not in _ATTRIBUTE_OPERATORS:
            raise self.syntax_error("parsing operator")
        return op

    def read_attribute(self) -> AttributeSelectorPart:
        self.eat1()  # [

        json_path = [self.read_attribute_token()]
        self.skip_spaces()
        while self.next() == ".":
            self.eat1()
            json_path.append(self.read_attribute_token())
            self.skip_spaces()
        # [enabled]
        if self.next() == "]":
            self.eat1()
            return AttributeSelectorPart(
                name=".".join(json_path),
                json_path=json_path,
                op="<truthy>",
                value=None,
                case_sensitive=False,
            )

        operator = self.read_operator()
        value: Any
        case_sensitive = True
        self.skip_spaces()
        if self.next() == "/":
            if operator != "=":
                raise InvalidSelectorError(
                    f"Error while parsing selector `{self.selector}` - cannot use {operator} "
                    "in attribute with regular expression"
                )
            value = self.read_regular_expression()
        elif self.next() in ("'", '"'):
            value = self.read_quoted_string(self.next())[1:-1]
            self.skip_spaces()
            if self.next() in ("i", "I"):
                case_sensitive = False
                self.eat1()
            elif self.next() in ("s", "S"):
                case_sensitive = True
                self.eat1()
        else:
            value = ""
            while (
                not self.eol
                and (self.allow_unquoted_strings or not self.next().isspace())
                and self.next() != "]"
            ):
                value += self.eat1()
            if value == "true":
                value = True
            elif value == "false":
                value = False
            elif not self.allow_unquoted_strings:
                value = to_number(value)
                if value is None:
                    raise self.syntax_error("parsing attribute value")
        self.skip_spaces()
        if self.next() != "]":
            raise self.syntax_error("parsing attribute value")
        self.eat1()

        if operator != "=" and not isinstance(value, str):
            raise InvalidSelectorError(
                f"Error while parsing string value `{self.selector}` - cannot use {operator} "
                f"in attribute with non-string matching value - {value}"
            )
        return AttributeSelectorPart(
            name=".".join(json_path),
            json_path=json_path,
            op=operator,
            value=value,
            case_sensitive=case_sensitive,
        )

    def read(self) -> AttributeSelector:
        result = AttributeSelector(name=self.read_identifier())
        self.skip_spaces()
        while self.next() == "[":
            result.attributes.append(self.read_attribute())
            self.skip_spaces()
        if not self.eol:
            raise self.syntax_error(None)
        if not result.name and not result.attributes:
            raise InvalidSelectorError(
                f"Error while parsing selector `{self.selector}` - selector cannot be empty"
            )
        return result


def to_number(text: str) -> int | float | None:
    """Coerce ``text`` the way JavaScript's unary ``+`` does; ``None`` stands for NaN."""
    text = text.strip()
    if not text:
        return 0
    if _RADIX_NUMBER_RE.fullmatch(text):
        return int(text, 0)
    if text in _INFINITIES:
        return _INFINITIES[text]
    if not _DECIMAL_NUMBER_RE.fullmatch(text):
        return None
    number = float(text)
    return int(number) if number.is_integer() else number


def parse_attribute_selector(selector: str, allow_unquoted_strings: bool) -> AttributeSelector:
    """Parse ``name[attr=value]...`` into a name and its attribute conditions."""
    return _AttributeSelectorReader(selector, allow_unquoted_strings).read()
