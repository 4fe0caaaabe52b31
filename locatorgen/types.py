"""Enums and type aliases for locatorgen."""

from enum import StrEnum


class Language(StrEnum):
    JAVASCRIPT = "javascript"
    PYTHON = "python"
    JAVA = "java"
    CSHARP = "csharp"


class LocatorKind(StrEnum):
    DEFAULT = "default"
    ROLE = "role"
    TEXT = "text"
    LABEL = "label"
    PLACEHOLDER = "placeholder"
    ALT = "alt"
    TITLE = "title"
    TEST_ID = "test-id"
    NTH = "nth"
    FIRST = "first"
    LAST = "last"
    HAS_TEXT = "has-text"
    HAS = "has"
    FRAME = "frame"
    OR = "or"
    AND = "and"
    NOT = "not"


class LocatorBase(StrEnum):
    PAGE = "page"
    LOCATOR = "locator"
    FRAME_LOCATOR = "frame-locator"
