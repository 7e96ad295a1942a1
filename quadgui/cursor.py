"""Layout cursor: decides where the next widget is placed inside a window."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field, replace
from typing import Optional, Union

from quadgui.geometry import Rect, Vec2


@dataclass
class Scroll:
    """Scroll state of a window's content area."""

    rect: Rect
    inner_rect: Rect
    inner_rect_previous_frame: Rect
    scroll: Vec2 = field(default_factory=Vec2)
    dragging_x: bool = False
    dragging_y: bool = False
    initial_scroll: Vec2 = field(default_factory=Vec2)

    def _clamped(self, y: float) -> float:
        prev = self.inner_rect_previous_frame
        return min(max(y, prev.y), prev.h - self.rect.h + prev.y)

    def scroll_to(self, y: float) -> None:
        """Scroll vertically to ``y``, clamped to the content of the last frame."""
        self.rect = replace(self.rect, y=self._clamped(y))

    def update(self) -> None:
        """Re-clamp the current scroll position to the content of the last frame."""
        self.rect = replace(self.rect, y=self._clamped(self.rect.y))


class Layout(enum.Enum):
    """Automatic placement modes."""

    VERTICAL = "vertical"
    HORIZONTAL = "horizontal"


@dataclass(frozen=True)
class Free:
    """Place a widget at an explicit point instead of following the flow."""

    point: Vec2


LayoutKind = Union[Layout, Free]


class Cursor:
    """Tracks where the next widget goes within an area."""

    def __init__(self, area: Rect, margin: float) -> None:
        self.area = area
        self.margin = margin
        self.x = margin
        self.y = margin
        self.start_x = margin
        self.start_y = margin
        self.ident = 0.0
        self.next_same_line: Optional[float] = None
        self.max_row_y = 0.0
        self.scroll = Scroll(
            rect=Rect(0.0, 0.0, area.w, area.h),
            inner_rect=Rect(0.0, 0.0, area.w, area.h),
            inner_rect_previous_frame=Rect(0.0, 0.0, area.w, area.h),
        )

    def __repr__(self) -> str:
        return (
            f"Cursor(x={self.x!r}, y={self.y!r}, area={self.area!r}, "
            f"margin={self.margin!r})"
        )

    def _origin(self) -> Vec2:
        return self.area.point() + self.scroll.scroll + Vec2(self.ident, 0.0)

    def reset(self) -> None:
        """Start a new frame: rewind to the start and rotate the content rect."""
        self.x = self.start_x
        self.y = self.start_y
        self.max_row_y = 0.0
        self.ident = 0.0
        self.scroll.inner_rect_previous_frame = self.scroll.inner_rect
        self.scroll.inner_rect = Rect(0.0, 0.0, self.area.w, self.area.h)

    def current_position(self) -> Vec2:
        """Absolute position the cursor points at now."""
        return Vec2(self.x, self.y) + self._origin()

    def fit(self, size: Vec2, layout: LayoutKind) -> Vec2:
        """Reserve room for a widget of ``size`` and return its absolute position."""
        if self.next_same_line is not None:
            same_line_x = self.next_same_line
            self.next_same_line = None
            if same_line_x != 0.0:
                self.x = same_line_x
            layout = Layout.HORIZONTAL

        if isinstance(layout, Free):
            res = layout.point
        elif layout is Layout.HORIZONTAL:
            self.max_row_y = max(self.max_row_y, size.y)
            if self.x + size.x >= self.area.w - self.margin * 2.0:
                # the +1 makes a following vertical widget start a fresh row
                self.x = self.margin + 1.0
                self.y += self.max_row_y + self.margin
                self.max_row_y = 0.0
            res = Vec2(self.x, self.y)
            self.x += size.x + self.margin
        else:
            if self.x != self.margin:
                self.x = self.margin
                self.y += self.max_row_y
            res = Vec2(self.x, self.y)
            self.x += size.x + self.margin
            self.max_row_y = size.y + self.margin

        self.scroll.inner_rect = self.scroll.inner_rect.combine_with(
            Rect(res.x, res.y, size.x, size.y)
        )
        return res + self._origin()