"""Colour themes for the chart user interface."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum


@dataclass(frozen=True)
class Color:
    """An RGBA colour with 8-bit channels."""

    r: int
    g: int
    b: int
    a: int = 255

    def __post_init__(self) -> None:
        for channel in (self.r, self.g, self.b, self.a):
            if not 0 <= channel <= 255:
                raise ValueError(f"colour channel out of range: {channel}")


BLACK = Color(0, 0, 0)
WHITE = Color(255, 255, 255)
TRANSPARENT = Color(0, 0, 0, 0)


@dataclass(frozen=True)
class ViewPalette:
    """Colours used by a widget in one of its states."""

    text_color: Color
    background_color: Color
    border_color: Color


class Theme(IntEnum):
    LIGHT = 0
    DARK = 1


_MAIN_BACKGROUND = (Color(252, 252, 252), Color(44, 54, 63))
_MAIN_TEXT = (BLACK, WHITE)
_MAIN_CONTOUR = (Color(44, 54, 63), Color(84, 104, 120))
_CHART_BACKGROUND = (Color(252, 252, 252), Color(44, 54, 63))
_AXIS = (BLACK, WHITE)
_HIGHLIGHT = (Color(255, 73, 92), Color(215, 78, 9))
_BACKGROUND_LINE = (Color(200, 200, 200), Color(75, 93, 108))
_CHART_TEXT = (BLACK, WHITE)
_OPTION_TAB_BACKGROUND = (Color(113, 137, 255), Color(215, 78, 9))
_FUNCTION_VIEW_CONTENT = (Color(245, 245, 245), Color(44, 54, 63))
_OPTION_TAB_MARGIN = (Color(133, 153, 255), Color(245, 95, 20))

CHART_COLORS = (
    Color(71, 168, 189),
    Color(167, 29, 49),
    Color(147, 129, 255),
    Color(53, 206, 141),
    Color(30, 56, 136),
    Color(193, 120, 23),
    Color(35, 150, 127),
    Color(137, 2, 62),
    Color(52, 228, 234),
)

_DARK_SLATE = Color(44, 54, 63)
_HOVER = Color(255, 187, 92)
_PRESSED = Color(255, 159, 28)
_LIGHT_GREY = Color(245, 245, 245)

PaletteSet = tuple[ViewPalette, ViewPalette, ViewPalette, ViewPalette]


def _state_palettes(base: Color, background: Color, border_follows: bool,
                    border: Color = TRANSPARENT) -> PaletteSet:
    """Build the four state palettes: normal, hovered, pressed, selected."""
    texts = (base, _HOVER, _PRESSED, _PRESSED)
    return tuple(  # type: ignore[return-value]
        ViewPalette(text, background, text if border_follows else border)
        for text in texts
    )


class Palette:
    """Colours of the interface for the current theme."""

    def __init__(self, theme: Theme = Theme.LIGHT) -> None:
        self.theme = Theme(theme)

    def set_theme(self, theme: Theme) -> None:
        self.theme = Theme(theme)

    def main_background_color(self) -> Color:
        return _MAIN_BACKGROUND[self.theme]

    def main_text_color(self) -> Color:
        return _MAIN_TEXT[self.theme]

    def main_contour_color(self) -> Color:
        return _MAIN_CONTOUR[self.theme]

    def chart_background_color(self) -> Color:
        return _CHART_BACKGROUND[self.theme]

    def axis_color(self) -> Color:
        return _AXIS[self.theme]

    def highlight_color(self) -> Color:
        return _HIGHLIGHT[self.theme]

    def background_line_color(self) -> Color:
        return _BACKGROUND_LINE[self.theme]

    def chart_text_color(self) -> Color:
        return _CHART_TEXT[self.theme]

    def option_tab_background(self) -> Color:
        return _OPTION_TAB_BACKGROUND[self.theme]

    def function_view_content_background(self) -> Color:
        return _FUNCTION_VIEW_CONTENT[self.theme]

    def option_tab_margin_color(self) -> Color:
        return _OPTION_TAB_MARGIN[self.theme]

    def chart_color(self, index: int) -> Color:
        """Colour of the plotted function at ``index``; black when out of range."""
        if 0 <= index < len(CHART_COLORS):
            return CHART_COLORS[index]
        return BLACK

    def option_button_palette(self) -> PaletteSet:
        return _state_palettes(_DARK_SLATE, TRANSPARENT, False)

    def load_file_button_palette(self) -> PaletteSet:
        base = self.option_tab_background()
        return _state_palettes(base, TRANSPARENT, True)

    def delete_button_palette(self) -> PaletteSet:
        return _state_palettes(Color(254, 74, 73), TRANSPARENT, True)

    def add_button_palette(self) -> PaletteSet:
        return _state_palettes(_DARK_SLATE, TRANSPARENT, False)

    def random_button_palette(self) -> PaletteSet:
        return _state_palettes(_DARK_SLATE, TRANSPARENT, False)

    def navigation_button_palette(self) -> PaletteSet:
        return _state_palettes(_DARK_SLATE, TRANSPARENT, False)

    def checkbox_palette(self) -> PaletteSet:
        return _state_palettes(_DARK_SLATE, _LIGHT_GREY, False, _DARK_SLATE)

    def theme_button_palette(self) -> PaletteSet:
        return _state_palettes(_DARK_SLATE, _LIGHT_GREY, False)