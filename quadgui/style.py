"""Widget styles: colours, margins and backgrounds resolved per element state."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Hashable, Optional

from quadgui.geometry import Color, RectOffset

_BLACK = Color.from_rgba(0, 0, 0, 255)
_WHITE = Color.from_rgba(255, 255, 255, 255)

_UNFOCUSED_TEXT_FACTOR = 0.6
_UNFOCUSED_ALPHA_FACTOR = 0.8


@dataclass(frozen=True)
class ElementState:
    """Interaction state of a widget for the current frame."""

    focused: bool = False
    hovered: bool = False
    clicked: bool = False
    selected: bool = False


def _to_byte(value: float) -> int:
    """Truncate a 0..255 float to a byte, saturating at both ends."""
    return min(max(int(value), 0), 255)


@dataclass
class Style:
    """Appearance of one kind of widget.

    ``background_margin`` is the part of the background image that is not
    scaled (useful for borders); ``margin`` is extra space around the content
    that does not affect textures and may be negative.
    Background sprites are opaque keys into a sprite atlas.
    """

    font: Any = None
    font_size: int = 16
    background: Optional[Hashable] = None
    background_hovered: Optional[Hashable] = None
    background_clicked: Optional[Hashable] = None
    color: Color = field(default=_WHITE)
    color_inactive: Optional[Color] = None
    color_hovered: Color = field(default=_WHITE)
    color_clicked: Color = field(default=_WHITE)
    color_selected: Color = field(default=_WHITE)
    color_selected_hovered: Color = field(default=_WHITE)
    background_margin: Optional[RectOffset] = None
    margin: Optional[RectOffset] = None
    text_color: Color = field(default=_BLACK)
    text_color_hovered: Color = field(default=_BLACK)
    text_color_clicked: Color = field(default=_BLACK)
    reverse_background_z: bool = False

    def border_margin(self) -> RectOffset:
        """Sum of the background margin and the content margin on each side."""
        background = self.background_margin or RectOffset()
        content = self.margin or RectOffset()
        return RectOffset(
            left=background.left + content.left,
            right=background.right + content.right,
            top=background.top + content.top,
            bottom=background.bottom + content.bottom,
        )

    def resolve_text_color(self, element_state: ElementState) -> Color:
        """Text colour for the given state; unfocused text is dimmed."""
        if element_state.clicked:
            return self.text_color_clicked
        if element_state.hovered:
            return self.text_color_hovered
        if element_state.focused:
            return self.text_color
        c = self.text_color
        f = _UNFOCUSED_TEXT_FACTOR
        return Color(c.r * f, c.g * f, c.b * f, c.a * f)

    def resolve_color(self, element_state: ElementState) -> Color:
        """Background colour for the given state."""
        if not element_state.focused:
            if self.color_inactive is not None:
                return self.color_inactive
            c = self.color
            return Color.from_rgba(
                _to_byte(c.r * 255.0),
                _to_byte(c.g * 255.0),
                _to_byte(c.b * 255.0),
                _to_byte(c.a * 255.0 * _UNFOCUSED_ALPHA_FACTOR),
            )
        if element_state.clicked:
            return self.color_clicked
        if element_state.selected and element_state.hovered:
            return self.color_selected_hovered
        if element_state.selected:
            return self.color_selected
        if element_state.hovered:
            return self.color_hovered
        return self.color

    def background_sprite(self, element_state: ElementState) -> Optional[Hashable]:
        """Background sprite key for the given state, falling back to the plain one."""
        if element_state.clicked and self.background_clicked is not None:
            return self.background_clicked
        if element_state.hovered and self.background_hovered is not None:
            return self.background_hovered
        return self.background