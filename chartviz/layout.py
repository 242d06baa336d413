"""Placement of widget rectangles inside a containing rectangle."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

Position = tuple[int, int]


@dataclass
class Rect:
    """An integer rectangle given by its top-left corner and size."""

    left: int = 0
    top: int = 0
    width: int = 0
    height: int = 0

    @property
    def position(self) -> Position:
        return (self.left, self.top)

    @property
    def size(self) -> Position:
        return (self.width, self.height)


@dataclass(frozen=True)
class Margins:
    """Space kept free on each side of a rectangle."""

    left: int = 0
    top: int = 0
    right: int = 0
    bottom: int = 0


class Alignment(Enum):
    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"


class SpacingType(Enum):
    BALANCED = "balanced"
    DISPERSED = "dispersed"


def _half(value: int) -> int:
    """Halve an integer, truncating towards zero."""
    quotient = abs(value) // 2
    return quotient if value >= 0 else -quotient


def _centered_y(margin: Margins, rect: Rect, item: Rect) -> int:
    return _half(rect.height - margin.top - margin.bottom - item.height) + rect.top


def _centered_x(margin: Margins, rect: Rect, item: Rect) -> int:
    return _half(rect.width - margin.left - margin.right - item.width) + rect.left


def align_left(margin: Margins, rect: Rect, items: list[Rect], spacing: int) -> list[Position]:
    """Place items in a row starting at the left margin, centred vertically."""
    positions: list[Position] = []
    x = margin.left
    for item in items:
        positions.append((x + rect.left, _centered_y(margin, rect, item)))
        x += spacing + item.width
    return positions


def align_right(margin: Margins, rect: Rect, items: list[Rect], spacing: int) -> list[Position]:
    """Place items leftwards from the right margin, the first item rightmost."""
    positions: list[Position] = []
    x = rect.width - margin.right
    for item in items:
        x -= item.width
        positions.append((x + rect.left, _centered_y(margin, rect, item)))
        x -= spacing
    return positions


def align_center_balanced_x(
    margin: Margins, rect: Rect, items: list[Rect], spacing: int
) -> list[Position]:
    """Place items as one row with fixed spacing, centred horizontally."""
    if not items:
        return []
    total_width = sum(item.width for item in items) + spacing * (len(items) - 1)
    x = _half(rect.width - total_width)
    positions: list[Position] = []
    for item in items:
        positions.append((x + rect.left, _centered_y(margin, rect, item)))
        x += item.width + spacing
    return positions


def align_center_dispersed_x(margin: Margins, rect: Rect, items: list[Rect]) -> list[Position]:
    """Place items from the left margin separated by all the free width."""
    if not items:
        return []
    total_width = sum(item.width for item in items)
    spacing = rect.width - total_width - margin.left - margin.top
    x = margin.left
    positions: list[Position] = []
    for item in items:
        positions.append((x + rect.left, _centered_y(margin, rect, item)))
        x += spacing + item.width
    return positions


def align_top(margin: Margins, rect: Rect, items: list[Rect], spacing: int) -> list[Position]:
    """Place items in a column starting at the top margin, centred horizontally."""
    positions: list[Position] = []
    y = margin.top
    for item in items:
        positions.append((_centered_x(margin, rect, item), y + rect.top))
        y += spacing + item.height
    return positions


@dataclass
class HorizontalLayout:
    """Arranges a row of rectangles, which it moves but does not own."""

    rect: Rect
    alignment: Alignment = Alignment.LEFT
    spacing_type: SpacingType = SpacingType.BALANCED
    margin: Margins = field(default_factory=Margins)
    spacing: int = 0
    items: list[Rect] = field(default_factory=list)

    def _positions(self) -> list[Position]:
        if self.alignment is Alignment.LEFT:
            return align_left(self.margin, self.rect, self.items, self.spacing)
        if self.alignment is Alignment.RIGHT:
            return align_right(self.margin, self.rect, self.items, self.spacing)
        if self.spacing_type is SpacingType.BALANCED:
            return align_center_balanced_x(self.margin, self.rect, self.items, self.spacing)
        return align_center_dispersed_x(self.margin, self.rect, self.items)

    def apply(self) -> None:
        """Move every item to its place in the layout."""
        for item, (x, y) in zip(self.items, self._positions()):
            item.left = x
            item.top = y

    def update_rect(self, rect: Rect) -> None:
        """Set a new containing rectangle and lay the items out again."""
        self.rect = rect
        self.apply()