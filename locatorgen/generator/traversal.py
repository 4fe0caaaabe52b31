"""Walks a parsed selector and renders it as a chain of locator calls."""

from __future__ import annotations

import math
from typing import NamedTuple

from locatorgen.backends.base import LocatorFactory
from locatorgen.exceptions import InvalidSelectorError
from locatorgen.generator.exact import detect_exact
from locatorgen.generator.normalizer import normalize_parts
from locatorgen.models.selector import (
    LocatorAttribute,
    LocatorOptions,
    NestedSelectorBody,
    ParsedSelector,
    ParsedSelectorPart,
    TextPattern,
)
from locatorgen.selector.parser import (
    is_enter_frame,
    parse_attribute_selector,
    stringify_selector,
    to_number,
)
from locatorgen.types import LocatorBase, LocatorKind

NESTED_LOCATOR_KINDS: dict[str, LocatorKind] = {
    "internal:has": LocatorKind.HAS,
    "internal:or": LocatorKind.OR,
    "internal:and": LocatorKind.AND,
    "internal:not": LocatorKind.NOT,
}

ATTRIBUTE_LOCATOR_KINDS: dict[str, LocatorKind] = {
    "placeholder": LocatorKind.PLACEHOLDER,
    "alt": LocatorKind.ALT,
    "title": LocatorKind.TITLE,
}


class Step(NamedTuple):
    """Result of translating one part: the call, the receiver for what follows, parts used."""

    token: str
    next_base: LocatorBase
    consumed: int = 1


def inner_as_locator(
    factory: LocatorFactory, parsed: ParsedSelector, is_frame_locator: bool = False
) -> str:
    """Render ``parsed`` as one chained expression using ``factory``."""
    base = LocatorBase.FRAME_LOCATOR if is_frame_locator else LocatorBase.PAGE
    return render_chain(factory, parsed, base)


def render_chain(factory: LocatorFactory, parsed: ParsedSelector, base: LocatorBase) -> str:
    """Render ``parsed`` with its first call invoked on ``base``."""
    parts = normalize_parts(parsed.parts)
    tokens: list[str] = []
    index = 0
    while index < len(parts):
        step = translate_part(factory, parts, index, base)
        tokens.append(step.token)
        base = step.next_base
        index += step.consumed
    return factory.chain(tokens)


def translate_part(
    factory: LocatorFactory, parts: list[ParsedSelectorPart], index: int, base: LocatorBase
) -> Step:
    """Translate ``parts[index]`` into one call invoked on ``base``."""
    part = parts[index]
    body = part.body

    if part.name == "nth":
        if body == "0":
            return _step(factory.generate_locator(base, LocatorKind.FIRST, ""))
        if body == "-1":
            return _step(factory.generate_locator(base, LocatorKind.LAST, ""))
        return _step(factory.generate_locator(base, LocatorKind.NTH, _text_body(part)))

    if part.name in ("internal:text", "internal:label"):
        exact, text = detect_exact(_text_body(part))
        kind = LocatorKind.TEXT if part.name == "internal:text" else LocatorKind.LABEL
        return _step(factory.generate_locator(base, kind, text, LocatorOptions(exact=exact)))

    if part.name == "internal:has-text":
        exact, text = detect_exact(_text_body(part))
        # No locator call matches has-text strictly; exact bodies stay as raw selectors.
        if not exact:
            options = LocatorOptions(exact=exact)
            return _step(factory.generate_locator(base, LocatorKind.HAS_TEXT, text, options))

    if part.name in NESTED_LOCATOR_KINDS:
        if not isinstance(body, NestedSelectorBody):
            raise InvalidSelectorError(f"Malformed selector: {part.name}={part.source}")
        inner = render_chain(factory, body.parsed, LocatorBase.LOCATOR)
        return _step(factory.generate_locator(base, NESTED_LOCATOR_KINDS[part.name], inner))

    if part.name == "internal:role":
        return _step(_role_locator(factory, base, part))

    if part.name == "internal:testid":
        attr_selector = parse_attribute_selector(_text_body(part), True)
        if not attr_selector.attributes:
            raise InvalidSelectorError(f"Missing test id in selector: {part.source}")
        value = attr_selector.attributes[0].value
        if not isinstance(value, str | TextPattern):
            raise InvalidSelectorError(f"Invalid test id in selector: {part.source}")
        return _step(factory.generate_locator(base, LocatorKind.TEST_ID, value))

    if part.name == "internal:attr":
        attr_selector = parse_attribute_selector(_text_body(part), True)
        if not attr_selector.attributes:
            raise InvalidSelectorError(f"Missing attribute in selector: {part.source}")
        attr = attr_selector.attributes[0]
        kind = ATTRIBUTE_LOCATOR_KINDS.get(attr.name)
        if kind is not None:
            if not isinstance(attr.value, str | TextPattern):
                raise InvalidSelectorError(f"Invalid {attr.name} in selector: {part.source}")
            options = LocatorOptions(exact=bool(attr.case_sensitive))
            return _step(factory.generate_locator(base, kind, attr.value, options))

    return _default_step(factory, parts, index, base)


def _default_step(
    factory: LocatorFactory, parts: list[ParsedSelectorPart], index: int, base: LocatorBase
) -> Step:
    part = parts[index]
    source = stringify_selector(ParsedSelector(parts=[part]))
    if index + 1 < len(parts) and is_enter_frame(parts[index + 1]):
        token = factory.generate_locator(base, LocatorKind.FRAME, source)
        return Step(token=token, next_base=LocatorBase.FRAME_LOCATOR, consumed=2)
    return _step(factory.generate_locator(base, LocatorKind.DEFAULT, source))


def _role_locator(factory: LocatorFactory, base: LocatorBase, part: ParsedSelectorPart) -> str:
    attr_selector = parse_attribute_selector(_text_body(part), True)
    options = LocatorOptions()
    for attr in attr_selector.attributes:
        if attr.name == "name":
            options.exact = attr.case_sensitive
            options.name = attr.value
            continue
        value = attr.value
        if attr.name == "level" and isinstance(value, str):
            value = _to_level(value, part)
        name = "includeHidden" if attr.name == "include-hidden" else attr.name
        options.attrs.append(LocatorAttribute(name=name, value=value))
    return factory.generate_locator(base, LocatorKind.ROLE, attr_selector.name, options)


def _to_level(value: str, part: ParsedSelectorPart) -> int | float:
    number = to_number(value)
    # Infinity has no literal in the generated languages.
    if number is None or not math.isfinite(number):
        raise InvalidSelectorError(f"Invalid level in selector: {part.source}")
    return number


def _text_body(part: ParsedSelectorPart) -> str:
    if not isinstance(part.body, str):
        raise InvalidSelectorError(f"Unexpected nested selector: {part.name}={part.source}")
    return part.body


def _step(token: str) -> Step:
    return Step(token=token, next_base=LocatorBase.LOCATOR)
