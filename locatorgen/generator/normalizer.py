"""Canonical ordering of index and frame-transition parts."""

from __future__ import annotations

from locatorgen.models.selector import ParsedSelectorPart
from locatorgen.selector.parser import is_enter_frame


def normalize_parts(parts: list[ParsedSelectorPart]) -> list[ParsedSelectorPart]:
    """Move ``nth`` after an immediately following ``enter-frame`` marker.

    ``frameLocator('iframe').first()`` is stored as
    ``iframe >> nth=0 >> internal:control=enter-frame``; swapping the pair
    lets the traversal render the frame call before the index call. Only
    adjacent pairs are swapped, in a single left-to-right pass, and a part
    that was just moved is not swapped again.
    """
    result = list(parts)
    index = 0
    while index < len(result) - 1:
        if result[index].name == "nth" and is_enter_frame(result[index + 1]):
            result[index], result[index + 1] = result[index + 1], result[index]
            index += 2
            continue
        index += 1
    return result
