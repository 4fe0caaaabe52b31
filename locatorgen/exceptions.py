"""Exception hierarchy for locatorgen."""


class LocatorGenError(Exception):
    """Base exception for all locatorgen errors."""


class InvalidSelectorError(LocatorGenError):
    """Raised when a selector or attribute selector cannot be parsed."""


class UnknownLocatorKindError(LocatorGenError):
    """Raised when a backend receives a locator kind it does not render."""


class UnsupportedLanguageError(LocatorGenError):
    """Raised when no backend exists for the requested language."""


class ConfigError(LocatorGenError):
    """Raised when configuration is invalid."""
