"""
Printer - Renders values back to reader syntax.

Strings, symbols and the other atoms print exactly as they were read; no
escaping is done.
"""

from .values import (
    MalValue, MalNil, MalBoolean, MalInteger, MalString, MalKeyword,
    MalSymbol, MalList, MalVector,
)


def render(value: MalValue) -> str:
    """Render a value as text that reads back to an equal value."""
    if isinstance(value, MalList):
        return f"({render_items(value.items)})"
    if isinstance(value, MalVector):
        return f"[{render_items(value.items)}]"
    if isinstance(value, MalKeyword):
        return f":{value.name}"
    if isinstance(value, MalNil):
        return "nil"
    if isinstance(value, MalBoolean):
        return "true" if value.value else "false"
    if isinstance(value, (MalInteger, MalString, MalSymbol)):
        return str(value.value)
    raise TypeError(f"Cannot render {type(value).__name__}")


def render_items(items) -> str:
    rendered = (render(item) for item in items)
    return " ".join(text for text in rendered if text)
