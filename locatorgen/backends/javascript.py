"""JavaScript / TypeScript locator rendering."""

from __future__ import annotations

from typing import Any

from locatorgen.backends.base import LocatorFactory
from locatorgen.exceptions import UnknownLocatorKindError
from locatorgen.models.selector import LocatorOptions, TextPattern
from locatorgen.types import LocatorBase, LocatorKind
from locatorgen.utils.strings import escape_with_quotes


class JavaScriptLocatorFactory(LocatorFactory):
    """Renders ``page.getByRole('button', { name: 'Submit', exact: true })`` style calls."""

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
            return f"frameLocator({self._quote(body)})"
        elif kind == LocatorKind.NTH:
            return f"nth({body})"
        elif kind == LocatorKind.FIRST:
            return "first()"
        elif kind == LocatorKind.LAST:
            return "last()"
        elif kind == LocatorKind.ROLE:
            attrs: list[str] = []
            if isinstance(options.name, TextPattern):
                attrs.append(f"name: {options.name}")
            elif isinstance(options.name, str):
                attrs.append(f"name: {self._quote(options.name)}")
                if options.exact:
                    attrs.append("exact: true")
            for attr in options.attrs:
                attrs.append(f"{attr.name}: {self._literal(attr.value)}")
            attr_string = f", {{ {', '.join(attrs)} }}" if attrs else ""
            return f"getByRole({self._quote(body)}{attr_string})"
        elif kind == LocatorKind.HAS_TEXT:
            return f"filter({{ hasText: {self._literal(body)} }})"
        elif kind == LocatorKind.HAS:
            return f"filter({{ has: {body} }})"
        elif kind == LocatorKind.OR:
            return f"or({body})"
        elif kind == LocatorKind.AND:
            return f"and({body})"
        elif kind == LocatorKind.NOT:
            return f"not({body})"
        elif kind == LocatorKind.TEST_ID:
            return f"getByTestId({self._literal(body)})"
        elif kind == LocatorKind.TEXT:
            return self._call_with_exact("getByText", body, bool(options.exact))
        elif kind == LocatorKind.ALT:
            return self._call_with_exact("getByAltText", body, bool(options.exact))
        elif kind == LocatorKind.PLACEHOLDER:
            return self._call_with_exact("getByPlaceholder", body, bool(options.exact))
        elif kind == LocatorKind.LABEL:
            return self._call_with_exact("getByLabel", body, bool(options.exact))
        elif kind == LocatorKind.TITLE:
            return self._call_with_exact("getByTitle", body, bool(options.exact))
        raise UnknownLocatorKindError(f"Unknown locator kind: {kind}")

    def _call_with_exact(self, method: str, body: str | TextPattern, exact: bool) -> str:
        if isinstance(body, TextPattern):
            return f"{method}({body})"
        if exact:
            return f"{method}({self._quote(body)}, {{ exact: true }})"
        return f"{method}({self._quote(body)})"

    def _literal(self, value: Any) -> str:
        if isinstance(value, str):
            return self._quote(value)
        if isinstance(value, bool):
            return "true" if value else "false"
        return str(value)

    def _quote(self, text: str | TextPattern) -> str:
        return escape_with_quotes(str(text), "'")
