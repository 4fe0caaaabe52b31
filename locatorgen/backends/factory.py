"""Lookup of the locator factory for a target language."""

from locatorgen.backends.base import LocatorFactory
from locatorgen.backends.csharp import CSharpLocatorFactory
from locatorgen.backends.java import JavaLocatorFactory
from locatorgen.backends.javascript import JavaScriptLocatorFactory
from locatorgen.backends.python import PythonLocatorFactory
from locatorgen.exceptions import UnsupportedLanguageError
from locatorgen.types import Language

GENERATORS: dict[Language, LocatorFactory] = {
    Language.JAVASCRIPT: JavaScriptLocatorFactory(),
    Language.PYTHON: PythonLocatorFactory(),
    Language.JAVA: JavaLocatorFactory(),
    Language.CSHARP: CSharpLocatorFactory(),
}


def create_locator_factory(language: Language | str) -> LocatorFactory:
    """Return the locator factory for a language."""
    try:
        return GENERATORS[Language(str(language))]
    except (ValueError, KeyError) as e:
        raise UnsupportedLanguageError(f"Unsupported language: {language}") from e
