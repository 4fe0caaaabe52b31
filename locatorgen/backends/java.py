"""Java locator rendering."""

from __future__ import annotations

from typing import Any

from locatorgen.backends.base import LocatorFactory
from locatorgen.exceptions import UnknownLocatorKindError
from locatorgen.models.selector import LocatorOptions, TextPattern
from locatorgen.types import LocatorBase, LocatorKind
from locatorgen.utils.strings import escape_with_quotes, to_snake_case, to_title_case

# Options classes are nested in the interface the call is made on.
_RECEIVER_CLASSES: dict[LocatorBase, str] = {
    LocatorBase.PAGE: "Page",
    LocatorBase.FRAME_LOCATOR: "FrameLocator",
    LocatorBase.LOCATOR: "Locator",
}


class JavaLocatorFactory(LocatorFactory):
    """Renders ``getByRole(AriaRole.BUTTON, new Page.GetByRoleOptions()...)`` style calls."""

    def generate_locator(
        self,
        base: LocatorBase,
        kind: LocatorKind | str,
        body: str | TextPattern,
        options: LocatorOptions | None = None,
    ) -> str:
        options = options or LocatorOptions()
        clazz = _RECEIVER_CLASSES[LocatorBase(base)]
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
                attrs.append(f".setName({self._regex_to_string(options.name)})")
            elif isinstance(options.name, str):
                attrs.append(f".setName({self._quote(options.name)})")
                if options.exact:
                    attrs.append(".setExact(true)")
            for attr in options.attrs:
                attrs.append(f".set{to_title_case(attr.name)}({self._literal(attr.value)})")
            attr_string = f", new {clazz}.GetByRoleOptions(){''.join(attrs)}" if attrs else ""
            role = to_snake_case(str(body)).upper()
            return f"getByRole(AriaRole.{role}{attr_string})"
        elif kind == LocatorKind.HAS_TEXT:
            return f"filter(new {clazz}.FilterOptions().setHasText({self._literal(body)}))"
        elif kind == LocatorKind.HAS:
            return f"filter(new {clazz}.FilterOptions().setHas({body}))"
        elif kind == LocatorKind.OR:
            return f"or({body})"
        elif kind == LocatorKind.AND:
            return f"and({body})"
        elif kind == LocatorKind.NOT:
            return f"not({body})"
        elif kind == LocatorKind.TEST_ID:
            return f"getByTestId({self._literal(body)})"
        elif kind == LocatorKind.TEXT:
            return self._call_with_exact(clazz, "getByText", body, bool(options.exact))
        elif kind == LocatorKind.ALT:
            return self._call_with_exact(clazz, "getByAltText", body, bool(options.exact))
        elif kind == LocatorKind.PLACEHOLDER:
            return self._call_with_exact(clazz, "getByPlaceholder", body, bool(options.exact))
        elif kind == LocatorKind.LABEL:
            return self._call_with_exact(clazz, "getByLabel", body, bool(options.exact))
        elif kind == LocatorKind.TITLE:
            return self._call_with_exact(clazz, "getByTitle", body, bool(options.exact))
        raise UnknownLocatorKindError(f"Unknown locator kind: {kind}")

    def _regex_to_string(self, pattern: TextPattern) -> str:
        suffix = ", Pattern.CASE_INSENSITIVE" if pattern.ignore_case else ""
        return f"Pattern.compile({self._quote(pattern.source)}{suffix})"

    def _call_with_exact(
        self, clazz: str, method: str, body: str | TextPattern, exact: bool
    ) -> str:
        if isinstance(body, TextPattern):
            return f"{method}({self._regex_to_string(body)})"
        if exact:
            options = f"new {clazz}.{to_title_case(method)}Options().setExact(true)"
            return f"{method}({self._quote(body)}, {options})"
        return f"{method}({self._quote(body)})"

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
