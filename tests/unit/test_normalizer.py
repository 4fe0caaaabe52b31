import pytest

from locatorgen.generator.normalizer import normalize_parts
from locatorgen.locator import as_locator
from locatorgen.models.selector import ParsedSelector
from locatorgen.selector.parser import parse_selector, stringify_selector


def _names(selector: str) -> list[str]:
    return [part.name for part in normalize_parts(parse_selector(selector).parts)]


@pytest.mark.unit
class TestNormalizeParts:
    def test_moves_nth_after_enter_frame(self) -> None:
        assert _names("iframe >> nth=0 >> internal:control=enter-frame") == [
            "css",
            "internal:control",
            "nth",
        ]

    def test_both_orders_normalize_identically(self) -> None:
        index_first = normalize_parts(
            parse_selector("iframe >> nth=0 >> internal:control=enter-frame").parts
        )
        frame_first = normalize_parts(
            parse_selector("iframe >> internal:control=enter-frame >> nth=0").parts
        )
        assert stringify_selector(ParsedSelector(parts=index_first)) == stringify_selector(
            ParsedSelector(parts=frame_first)
        )

    def test_both_orders_render_identically(self) -> None:
        for language in ("javascript", "python", "java", "csharp"):
            assert as_locator(
                language, "iframe >> nth=0 >> internal:control=enter-frame"
            ) == as_locator(language, "iframe >> internal:control=enter-frame >> nth=0")

    def test_non_adjacent_parts_untouched(self) -> None:
        assert _names("iframe >> nth=1 >> div >> internal:control=enter-frame") == [
            "css",
            "nth",
            "css",
            "internal:control",
        ]

    def test_swapped_part_is_not_moved_twice(self) -> None:
        names = _names(
            "iframe >> nth=0 >> internal:control=enter-frame >> internal:control=enter-frame"
        )
        assert names == ["css", "internal:control", "nth", "internal:control"]

    def test_input_is_not_mutated(self) -> None:
        parsed = parse_selector("iframe >> nth=0 >> internal:control=enter-frame")
        normalize_parts(parsed.parts)
        assert [part.name for part in parsed.parts] == ["css", "nth", "internal:control"]
