"""Python locator rendering."""

from __future__ import annotations

from typing import Any

from locatorgen.backends.base import LocatorFactory
from locatorgen.exceptions import UnknownLocatorKindError
from locatorgen.models.selector import LocatorOptions, TextPattern
from locatorgen.types import LocatorBase, LocatorKind
from locatorgen.utils.strings import escape_with_quotes, to_snake_case


class PythonLocatorFactory(LocatorFactory):
    """Renders ``page.get_by_role("button", name="Submit", exact=True)`` style calls."""

    def generate_locator(
        self,
        base: LocatorBase,
        kind: LocatorKind | str,
        body: str | TextPattern,
        options: LocatorOptions | None = None,
    ) -> str:
        options = options or LocatorOptions()
        if kind == LocatorKind.DEFAULT:
            return f"locator({self._quote(body)})"
        elif kind == LocatorKind.FRAME:
            return f"frame_locator({self._quote(body)})"
        elif kind == LocatorKind.NTH:
            return f"nth({body})"
        elif kind == LocatorKind.FIRST:
            return "first"
        elif kind == LocatorKind.LAST:
            return "last"
        elif kind == LocatorKind.ROLE:
            attrs: list[str] = []
            if isinstance(options.name, TextPattern):
                attrs.append(f"name={self._regex_to_string(options.name)}")
            elif isinstance(options.name, str):
                attrs.append(f"name={self._quote(options.name)}")
                if options.exact:
                    attrs.append("exact=True")
            for attr in options.attrs:
                attrs.append(f"{to_snake_case(attr.name)}={self._literal(attr.value)}")
            attr_string = f", {', '.join(attrs)}" if attrs else ""
            return f"get_by_role({self._quote(body)}{attr_string})"
        elif kind == LocatorKind.HAS_TEXT:
            return f"filter(has_text={self._literal(body)})"
        elif kind == LocatorKind.HAS:
            return f"filter(has={body})"
        elif kind == LocatorKind.OR:
            return f"or_({body})"
        elif kind == LocatorKind.AND:
            return f"and_({body})"
        elif kind == LocatorKind.NOT:
            return f"not_({body})"
        elif kind == LocatorKind.TEST_ID:
            return f"get_by_test_id({self._literal(body)})"
        elif kind == LocatorKind.TEXT:
            return self._call_with_exact("get_by_text", body, bool(options.exact))
        elif kind == LocatorKind.ALT:
            return self._call_with_exact("get_by_alt_text", body, bool(options.exact))
        elif kind == LocatorKind.PLACEHOLDER:
            return self._call_with_exact("get_by_placeholder", body, bool(options.exact))
        elif kind == LocatorKind.LABEL:
            return self._call_with_exact("get_by_label", body, bool(options.exact))
        elif kind == LocatorKind.TITLE:
            return self._call_with_exact("get_by_title", body, bool(options.exact))
        raise UnknownLocatorKindError(f"Unknown locator kind: {kind}")

    def _regex_to_string(self, pattern: TextPattern) -> str:
        suffix = ", re.IGNORECASE" if pattern.ignore_case else ""
        source = pattern.source.replace("\\/", "/").replace('"', '\\"')
        return f're.compile(r"{source}"{suffix})'

    def _call_with_exact(self, method: str, body: str | TextPattern, exact: bool) -> str:
        if isinstance(body, TextPattern):
            return f"{method}({self._regex_to_string(body)})"
        if exact:
            return f"{method}({self._quote(body)}, exact=True)"
        return f"{method}({self._quote(body)})"

    def _literal(self, value: Any) -> str:
        if isinstance(value, TextPattern):
            return self._regex_to_string(value)
        if isinstance(value, str):
            return self._quote(value)
        if isinstance(value, bool):
            return "True" if value else "False"
        return str(value)

    def _quote(self, text: str | TextPattern) -> str:
        return escape_with_quotes(str(text), '"')
