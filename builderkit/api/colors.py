from typing import Any
from rich.markup import escape


# Styl Rich dla wartości pola, wg typu ze schematu encji.
TYPE_STYLES: dict[type, str] = {
    int: "cyan",
    float: "blue",
    str: "green",
}


def color_value(value: Any) -> str:
    """Zwraca wartość w Rich-markup z kolorem zależnym od typu (bool bez koloru)."""
    text = escape(str(value))
    style = None if isinstance(value, bool) else TYPE_STYLES.get(type(value))
    if style is None:
        return text
    return f"[{style}]{text}[/{style}]"
