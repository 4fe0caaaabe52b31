"""C# locator rendering."""

from __future__ import annotations

from typing import Any

from locatorgen.backends.base import LocatorFactory
from locatorgen.exceptions import UnknownLocatorKindError
from locatorgen.models.selector import LocatorOptions, TextPattern
from locatorgen.types import LocatorBase, LocatorKind
from locatorgen.utils.strings import escape_with_quotes, to_title_case


class CSharpLocatorFactory(LocatorFactory):
    """Renders ``GetByRole(AriaRole.Button, new() { Name = "Submit" })`` style calls."""

    def generate_locator(
        self,
        base: LocatorBase,
        kind: LocatorKind | str,
        body: str | TextPattern,
        options: LocatorOptions | None = None,
    ) -> str:
        options = options or LocatorOptions()
        if kind == LocatorKind.DEFAULT:
            return f"Locator({self._quote(body)})"
        elif kind == LocatorKind.FRAME:
            return f"FrameLocator({self._quote(body)})"
        elif kind == LocatorKind.NTH:
            return f"Nth({body})"
        elif kind == LocatorKind.FIRST:
            return "First"
        elif kind == LocatorKind.LAST:
            return "Last"
        elif kind == LocatorKind.ROLE:
            attrs: list[str] = []
            if isinstance(options.name, TextPattern):
                attrs.append(f"NameRegex = {self._regex_to_string(options.name)}")
            elif isinstance(options.name, str):
                attrs.append(f"Name = {self._quote(options.name)}")
                if options.exact:
                    attrs.append("Exact = true")
            for attr in options.attrs:
                attrs.append(f"{to_title_case(attr.name)} = {self._literal(attr.value)}")
            attr_string = f", new() {{ {', '.join(attrs)} }}" if attrs else ""
            return f"GetByRole(AriaRole.{to_title_case(str(body))}{attr_string})"
        elif kind == LocatorKind.HAS_TEXT:
            return f"Filter(new() {{ {self._has_text(body)} }})"
        elif kind == LocatorKind.HAS:
            return f"Filter(new() {{ Has = {body} }})"
        elif kind == LocatorKind.OR:
            return f"Or({body})"
        elif kind == LocatorKind.AND:
            return f"And({body})"
        elif kind == LocatorKind.NOT:
            return f"Not({body})"
        elif kind == LocatorKind.TEST_ID:
            return f"GetByTestId({self._literal(body)})"
        elif kind == LocatorKind.TEXT:
            return self._call_with_exact("GetByText", body, bool(options.exact))
        elif kind == LocatorKind.ALT:
            return self._call_with_exact("GetByAltText", body, bool(options.exact))
        elif kind == LocatorKind.PLACEHOLDER:
            return self._call_with_exact("GetByPlaceholder", body, bool(options.exact))
        elif kind == LocatorKind.LABEL:
            return self._call_with_exact("GetByLabel", body, bool(options.exact))
        elif kind == LocatorKind.TITLE:
            return self._call_with_exact("GetByTitle", body, bool(options.exact))
        raise UnknownLocatorKindError(f"Unknown locator kind: {kind}")

    def _regex_to_string(self, pattern: TextPattern) -> str:
        suffix = ", RegexOptions.IgnoreCase" if pattern.ignore_case else ""
        return f"new Regex({self._quote(pattern.source)}{suffix})"

    def _call_with_exact(self, method: str, body: str | TextPattern, exact: bool) -> str:
        if isinstance(body, TextPattern):
            return f"{method}({self._regex_to_string(body)})"
        if exact:
            return f"{method}({self._quote(body)}, new() {{ Exact = true }})"
        return f"{method}({self._quote(body)})"

    def _has_text(self, body: str | TextPattern) -> str:
        if isinstance(body, TextPattern):
            return f"HasTextRegex = {self._regex_to_string(body)}"
        return f"HasText = {self._quote(body)}"

    def _literal(self, value: Any) -> str:
        if isinstance(value, TextPattern):
            return self._regex_to_string(value)
        if isinstance(value, str):
            return self._quote(value)
        if isinstance(value, bool):
            return "true" if value else "false"
        return str(value)

    def _quote(self, text: str | TextPattern) -> str:
        return escape_with_quotes(str(text), '"')
