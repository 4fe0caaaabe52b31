"""String literal escaping and identifier case conversion."""

import json
import re


def escape_with_quotes(text: str, char: str = "'") -> str:
    """Render ``text`` as a string literal delimited by ``char``."""
    stringified = json.dumps(text, ensure_ascii=False)
    escaped_text = stringified[1:-1].replace('\\"', '"')
    if char == "'":
        return char + escaped_text.replace("'", "\\'") + char
    if char == '"':
        return char + escaped_text.replace('"', '\\"') + char
    if char == "`":
        return char + escaped_text.replace("`", "\\`") + char
    msg = f"Invalid escape char: {char!r}"
    raise ValueError(msg)


def to_title_case(name: str) -> str:
    """Upper-case the first character: ``includeHidden`` -> ``IncludeHidden``."""
    return name[:1].upper() + name[1:]


def to_snake_case(name: str) -> str:
    """Convert camelCase to snake_case: ``includeHidden`` -> ``include_hidden``."""
    name = re.sub(r"([a-z0-9])([A-Z])", r"\1_\2", name)
    name = re.sub(r"([A-Z])([A-Z][a-z])", r"\1_\2", name)
    return name.lower()
