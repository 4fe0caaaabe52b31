"""Abstract locator factory interface."""

from __future__ import annotations

from abc import ABC, abstractmethod

from locatorgen.models.selector import LocatorOptions, TextPattern
from locatorgen.types import LocatorBase, LocatorKind


class LocatorFactory(ABC):
    """Renders one locator call in a target language.

    Implementations are stateless: the same arguments always produce the
    same fragment. Every ``LocatorKind`` must be handled, anything else
    raises ``UnknownLocatorKindError``.
    """

    separator: str = "."

    @abstractmethod
    def generate_locator(
        self,
        base: LocatorBase,
        kind: LocatorKind | str,
        body: str | TextPattern,
        options: LocatorOptions | None = None,
    ) -> str:
        """Render a single call, invoked on ``base``, as source code."""

    def chain(self, tokens: list[str]) -> str:
        """Join rendered calls into one expression."""
        return self.separator.join(tokens)
