"""Draw commands produced by the UI painter and consumed by the mesh rasterizer."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field, replace
from typing import Any, Optional, Union

from quadgui.geometry import Color, Rect, RectOffset, Vec2

_BLACK = Color(0.0, 0.0, 0.0, 1.0)


class DrawCommand:
    """Base of all draw commands.

    Each command can be moved by an offset, and reports an estimate of the
    vertex and index budget it needs once rasterized.
    """

    _budget: tuple[int, int] = (10, 10)

    def offset(self, offset: Vec2) -> DrawCommand:
        """A copy of the command moved by ``offset``."""
        raise NotImplementedError(f"{type(self).__name__} cannot be offset")

    def estimate_triangles_budget(self) -> tuple[int, int]:
        """Estimated (vertices, indices) the command adds to a draw list."""
        return self._budget


@dataclass(frozen=True)
class DrawCharacter(DrawCommand):
    """A glyph copied from the atlas region ``source`` to ``dest``."""

    dest: Rect
    source: Rect
    color: Color

    def offset(self, offset: Vec2) -> DrawCharacter:
        return replace(self, dest=self.dest.offset(offset))


@dataclass(frozen=True)
class DrawRect(DrawCommand):
    """A rectangle with optional fill and optional one-pixel stroke."""

    rect: Rect
    source: Rect
    fill: Optional[Color] = None
    stroke: Optional[Color] = None

    def offset(self, offset: Vec2) -> DrawRect:
        return replace(self, rect=self.rect.offset(offset))


@dataclass(frozen=True)
class DrawSprite(DrawCommand):
    """A nine-patch sprite; the margins are kept unscaled."""

    _budget = (0, 0)

    rect: Rect
    source: Rect
    color: Color
    offsets: Optional[RectOffset] = None
    offsets_uv: Optional[RectOffset] = None

    def offset(self, offset: Vec2) -> DrawSprite:
        return replace(self, rect=self.rect.offset(offset))


@dataclass(frozen=True)
class DrawTriangle(DrawCommand):
    """A solid triangle."""

    p0: Vec2
    p1: Vec2
    p2: Vec2
    source: Rect
    color: Color

    def offset(self, offset: Vec2) -> DrawTriangle:
        return replace(
            self, p0=self.p0 + offset, p1=self.p1 + offset, p2=self.p2 + offset
        )


@dataclass(frozen=True)
class DrawLine(DrawCommand):
    """A one-pixel line segment."""

    start: Vec2
    end: Vec2
    source: Rect
    color: Color

    def offset(self, offset: Vec2) -> DrawLine:
        return replace(self, start=self.start + offset, end=self.end + offset)


@dataclass(frozen=True)
class DrawRawTexture(DrawCommand):
    """A whole texture stretched over ``rect``."""

    rect: Rect
    texture: Any = field(compare=True)

    def offset(self, offset: Vec2) -> DrawRawTexture:
        return replace(self, rect=self.rect.offset(offset))


@dataclass(frozen=True)
class Clip(DrawCommand):
    """Set the clipping zone for following commands; None disables clipping."""

    _budget = (0, 0)

    rect: Optional[Rect] = None

    def offset(self, offset: Vec2) -> Clip:
        if self.rect is None:
            return self
        return replace(self, rect=self.rect.offset(offset))


class Alignment(enum.Enum):
    """Horizontal text alignment."""

    LEFT = "left"
    CENTER = "center"


@dataclass(frozen=True)
class LabelParams:
    """Colour and alignment used to draw a label."""

    color: Color = _BLACK
    alignment: Alignment = Alignment.LEFT

    @classmethod
    def from_value(
        cls,
        value: Union[None, Color, tuple[Color, Alignment], LabelParams],
    ) -> LabelParams:
        """Build parameters from None, a colour, a (colour, alignment) pair or parameters."""
        if value is None:
            return cls()
        if isinstance(value, LabelParams):
            return value
        if isinstance(value, Color):
            return cls(color=value)
        if isinstance(value, tuple) and len(value) == 2:
            color, alignment = value
            if isinstance(color, Color) and isinstance(alignment, Alignment):
                return cls(color=color, alignment=alignment)
        raise TypeError(f"cannot build label parameters from {value!r}")