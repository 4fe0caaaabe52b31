"""Selector to locator code generation for JavaScript, Python, Java and C#."""

from locatorgen.locator import as_locator
from locatorgen.types import Language

__all__ = ["Language", "as_locator"]
