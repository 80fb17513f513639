"""Display text helpers for tray menu labels."""

ELLIPSIS = "…"


def char_width(char: str) -> int:
    """Return the display width of a single character.

    ASCII characters take one column. Everything else is treated as a
    double-width East-Asian glyph.
    """
    return 1 if char.isascii() else 2


def display_width(text: str) -> int:
    return sum(char_width(char) for char in text)


def truncate_display(name: str, max_width: int) -> str:
    """Fit a name into exactly ``max_width`` display columns.

    Names that fit are right-padded with spaces. Longer names are cut on a
    character boundary and end with a single ellipsis, then padded so the
    result is always exactly ``max_width`` columns wide.
    """
    max_width = max(max_width, 0)
    width = display_width(name)
    if width <= max_width:
        return name + " " * (max_width - width)

    budget = max_width - display_width(ELLIPSIS)
    kept: list[str] = []
    width = 0
    for char in name:
        char_columns = char_width(char)
        if width + char_columns > budget:
            break
        kept.append(char)
        width += char_columns

    result = "".join(kept)
    # Widths of 0 or 1 have no room for the marker.
    if budget >= 0:
        result += ELLIPSIS
        width += display_width(ELLIPSIS)
    return result + " " * (max_width - width)


def format_capacity(grams: float) -> str:
    """Format a gram amount as ``999g`` or ``1.25kg``."""
    if grams >= 1000:
        return f"{grams / 1000:.2f}kg"
    return f"{int(grams)}g"
