import pytest

from locatorgen.exceptions import InvalidSelectorError
from locatorgen.models.selector import NestedSelectorBody, TextPattern
from locatorgen.selector.parser import (
    parse_attribute_selector,
    parse_selector,
    stringify_selector,
)


@pytest.mark.unit
class TestParseSelector:
    def test_splits_chain_into_parts(self) -> None:
        parsed = parse_selector('div >> internal:text="Hello"i')
        assert [(p.name, p.body) for p in parsed.parts] == [
            ("css", "div"),
            ("internal:text", '"Hello"i'),
        ]

    def test_quoted_part_is_text(self) -> None:
        assert parse_selector('"Login"').parts[0].name == "text"
        assert parse_selector("'Login'").parts[0].name == "text"

    def test_xpath_detection(self) -> None:
        assert parse_selector("//div").parts[0].name == "xpath"
        assert parse_selector("((//div))").parts[0].name == "xpath"
        assert parse_selector("..").parts[0].name == "xpath"

    def test_css_light(self) -> None:
        part = parse_selector("css:light=div").parts[0]
        assert part.name == "css"
        assert part.source == ":light(div)"

    def test_separator_inside_quotes_is_ignored(self) -> None:
        parsed = parse_selector('text="a >> b" >> div')
        assert [p.source for p in parsed.parts] == ['"a >> b"', "div"]

    def test_quote_inside_text_body_is_literal(self) -> None:
        parsed = parse_selector('text=foo"bar >> div')
        assert [p.source for p in parsed.parts] == ['foo"bar', "div"]

    def test_capture(self) -> None:
        parsed = parse_selector("*css=div >> span")
        assert parsed.capture == 0
        assert parsed.parts[0].name == "css"

    def test_two_captures_raise(self) -> None:
        with pytest.raises(InvalidSelectorError, match="capture"):
            parse_selector("*css=div >> *css=span")

    def test_empty_selector_raises(self) -> None:
        with pytest.raises(InvalidSelectorError):
            parse_selector("")

    def test_nested_selector(self) -> None:
        parsed = parse_selector('div >> internal:has="span >> nth=1"')
        nested = parsed.parts[1].body
        assert isinstance(nested, NestedSelectorBody)
        assert [p.name for p in nested.parsed.parts] == ["css", "nth"]
        assert parsed.parts[1].source == '"span >> nth=1"'

    def test_nested_distance(self) -> None:
        body = parse_selector('span >> left-of="div", 10').parts[1].body
        assert isinstance(body, NestedSelectorBody)
        assert body.distance == 10

    def test_distance_only_for_layout_engines(self) -> None:
        with pytest.raises(InvalidSelectorError, match="Malformed"):
            parse_selector('span >> internal:has="div", 10')

    def test_malformed_nested_body(self) -> None:
        with pytest.raises(InvalidSelectorError, match="Malformed"):
            parse_selector('div >> internal:has="unterminated')

    def test_nested_cannot_be_first(self) -> None:
        with pytest.raises(InvalidSelectorError, match="cannot be first"):
            parse_selector('internal:has="div"')

    def test_nested_frame_prefix_is_stripped(self) -> None:
        parsed = parse_selector(
            "#f >> internal:control=enter-frame >> div"
            ' >> internal:has="#f >> internal:control=enter-frame >> span"'
        )
        nested = parsed.parts[3].body
        assert isinstance(nested, NestedSelectorBody)
        assert [p.source for p in nested.parsed.parts] == ["span"]


@pytest.mark.unit
class TestStringifySelector:
    def test_round_trip_omits_css_engine(self) -> None:
        selector = 'div >> internal:text="x"i'
        assert stringify_selector(parse_selector(selector)) == selector

    def test_xpath_engine_omitted(self) -> None:
        assert stringify_selector(parse_selector("//div >> span")) == "//div >> span"

    def test_force_engine_name(self) -> None:
        assert stringify_selector(parse_selector("div"), force_engine_name=True) == "css=div"

    def test_capture_marker(self) -> None:
        assert stringify_selector(parse_selector("*css=div >> span")) == "*css=div >> span"

    def test_string_passthrough(self) -> None:
        assert stringify_selector("div >> span") == "div >> span"


@pytest.mark.unit
class TestParseAttributeSelector:
    def test_role_with_attributes(self) -> None:
        result = parse_attribute_selector('button[name="Submit"i][pressed=true]', True)
        assert result.name == "button"
        name, pressed = result.attributes
        assert (name.name, name.value, name.case_sensitive) == ("name", "Submit", False)
        assert (pressed.name, pressed.value) == ("pressed", True)

    def test_quoted_value_defaults_to_case_sensitive(self) -> None:
        attr = parse_attribute_selector('[data-testid="login"]', True).attributes[0]
        assert attr.value == "login"
        assert attr.case_sensitive is True

    def test_unquoted_value_stays_string_when_allowed(self) -> None:
        assert parse_attribute_selector("heading[level=2]", True).attributes[0].value == "2"

    def test_unquoted_value_is_number_when_strict(self) -> None:
        assert parse_attribute_selector("heading[level=2]", False).attributes[0].value == 2

    def test_unquoted_non_number_rejected_when_strict(self) -> None:
        with pytest.raises(InvalidSelectorError, match="attribute value"):
            parse_attribute_selector("heading[level=abc]", False)

    @pytest.mark.parametrize(
        ("text", "expected"),
        [("0x10", 16), ("0b11", 3), ("1.5", 1.5), ("2.0", 2), ("-3", -3), ("", 0)],
    )
    def test_unquoted_number_coercion(self, text: str, expected: float) -> None:
        value = parse_attribute_selector(f"[a={text}]", False).attributes[0].value
        assert value == expected
        assert type(value) is type(expected)

    @pytest.mark.parametrize("text", ["1_000", "nan", "inf", "0x"])
    def test_python_only_number_forms_rejected(self, text: str) -> None:
        with pytest.raises(InvalidSelectorError, match="attribute value"):
            parse_attribute_selector(f"[a={text}]", False)

    def test_regex_value(self) -> None:
        value = parse_attribute_selector("button[name=/sub.*/i]", True).attributes[0].value
        assert value == TextPattern(source="sub.*", flags="i")

    def test_regex_requires_equals(self) -> None:
        with pytest.raises(InvalidSelectorError, match="regular expression"):
            parse_attribute_selector("button[name*=/sub/]", True)

    def test_invalid_regex_value(self) -> None:
        with pytest.raises(InvalidSelectorError, match="regular expression"):
            parse_attribute_selector("button[name=/(/]", True)

    def test_truthy_attribute(self) -> None:
        attr = parse_attribute_selector("[enabled]", True).attributes[0]
        assert attr.op == "<truthy>"
        assert attr.value is None

    def test_json_path(self) -> None:
        attr = parse_attribute_selector('[a.b="c"]', True).attributes[0]
        assert attr.json_path == ["a", "b"]
        assert attr.name == "a.b"

    def test_escaped_quote_in_value(self) -> None:
        attr = parse_attribute_selector('[name="say \\"hi\\""]', True).attributes[0]
        assert attr.value == 'say "hi"'

    def test_operator_with_non_string_value(self) -> None:
        with pytest.raises(InvalidSelectorError, match="non-string"):
            parse_attribute_selector("[a^=true]", False)

    def test_unexpected_end(self) -> None:
        with pytest.raises(InvalidSelectorError, match="Unexpected end"):
            parse_attribute_selector('button[name="x"', True)

    def test_unexpected_symbol(self) -> None:
        with pytest.raises(InvalidSelectorError, match="unexpected symbol"):
            parse_attribute_selector("button]", True)

    def test_empty_selector(self) -> None:
        with pytest.raises(InvalidSelectorError):
            parse_attribute_selector("", True)
