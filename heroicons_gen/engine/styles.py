"""The three heroicons styles and where their sources live."""

from __future__ import annotations

import enum


class Style(str, enum.Enum):
    OUTLINE = "outline"
    SOLID = "solid"
    MINI = "mini"


_STYLE_DIRS = {
    Style.OUTLINE: "24/outline",
    Style.SOLID: "24/solid",
    Style.MINI: "20/solid",
}

# Generation order
ALL_STYLES: tuple[Style, ...] = (Style.OUTLINE, Style.SOLID, Style.MINI)


def style_to_dir(style: Style | str) -> str:
    """Source subdirectory for a style, relative to the asset root."""
    try:
        return _STYLE_DIRS[Style(style)]
    except ValueError:
        raise ValueError(f"Unknown style: {style!r}") from None
