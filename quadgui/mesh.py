"""Rasterize draw commands into triangle meshes grouped into draw lists."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterable, Optional

from quadgui.draw import (
    Clip,
    DrawCharacter,
    DrawCommand,
    DrawLine,
    DrawRawTexture,
    DrawRect,
    DrawSprite,
    DrawTriangle,
)
from quadgui.geometry import Color, Rect, RectOffset, Vec2

MAX_VERTICES = 8000
MAX_INDICES = 4000

_F32_EPSILON = 1.1920929e-07
_WHITE = Color(1.0, 1.0, 1.0, 1.0)
_FULL_UV = Rect(0.0, 0.0, 1.0, 1.0)

_RECT_INDICES = (0, 1, 2, 0, 2, 3)
_LINE_INDICES = (0, 1, 2, 2, 1, 3)
_TRIANGLE_INDICES = (0, 1, 2)
_SPRITE_INDICES = tuple(
    index
    for row in range(3)
    for column in range(3)
    for index in (
        row * 4 + column,
        row * 4 + column + 1,
        (row + 1) * 4 + column,
        row * 4 + column + 1,
        (row + 1) * 4 + column,
        (row + 1) * 4 + column + 1,
    )
)


@dataclass(frozen=True)
class Vertex:
    """A mesh vertex: position, texture coordinates and colour."""

    pos: tuple[float, float, float]
    uv: tuple[float, float]
    color: tuple[float, float, float, float]

    @classmethod
    def new(cls, x: float, y: float, u: float, v: float, color: Color) -> Vertex:
        """A vertex in the z=0 plane."""
        return cls((x, y, 0.0), (u, v), color.as_tuple())

    def as_tuple(
        self,
    ) -> tuple[tuple[float, float, float], tuple[float, float], tuple[float, float, float, float]]:
        return (self.pos, self.uv, self.color)


@dataclass
class DrawList:
    """A batch of triangles sharing one texture and one clipping zone."""

    vertices: list[Vertex] = field(default_factory=list)
    indices: list[int] = field(default_factory=list)
    clipping_zone: Optional[Rect] = None
    texture: Any = None

    def clear(self) -> None:
        """Drop all geometry and the clipping zone; the texture is kept."""
        self.vertices.clear()
        self.indices.clear()
        self.clipping_zone = None

    def _append(self, vertices: Iterable[Vertex], indices: Iterable[int]) -> None:
        base = len(self.vertices)
        self.vertices.extend(vertices)
        self.indices.extend(index + base for index in indices)

    def draw_rectangle_lines(self, rect: Rect, source: Rect, color: Color) -> None:
        """Outline ``rect`` with one-pixel edges."""
        x, y, w, h = rect.x, rect.y, rect.w, rect.h
        self.draw_rectangle(Rect(x, y, w, 1.0), source, color)
        self.draw_rectangle(Rect(x + w - 1.0, y + 1.0, 1.0, h - 2.0), source, color)
        self.draw_rectangle(Rect(x, y + h - 1.0, w, 1.0), source, color)
        self.draw_rectangle(Rect(x, y + 1.0, 1.0, h - 2.0), source, color)

    def draw_sprite(
        self,
        rect: Rect,
        src: Rect,
        offsets: RectOffset,
        uv_offsets: RectOffset,
        color: Color,
    ) -> None:
        """Draw a nine-patch: a 4x4 vertex grid whose border cells keep their size."""
        x, y, w, h = rect.x, rect.y, rect.w, rect.h
        xs = (x, x + offsets.left, x + w - offsets.right, x + w)
        ys = (y, y + offsets.top, y + h - offsets.top, y + h)
        us = (src.x, src.x + uv_offsets.left, src.x + src.w - uv_offsets.right, src.x + src.w)
        vs = (src.y, src.y + uv_offsets.top, src.y + src.h - uv_offsets.bottom, src.y + src.h)

        vertices = [
            Vertex.new(vx, vy, u, v, color)
            for vx, u in zip(xs, us)
            for vy, v in zip(ys, vs)
        ]
        self._append(vertices, _SPRITE_INDICES)

    def draw_rectangle(self, rect: Rect, src: Rect, color: Color) -> None:
        """A filled rectangle mapped onto the texture region ``src``."""
        x, y, w, h = rect.x, rect.y, rect.w, rect.h
        vertices = (
            Vertex.new(x, y, src.x, src.y, color),
            Vertex.new(x + w, y, src.x + src.w, src.y, color),
            Vertex.new(x + w, y + h, src.x + src.w, src.y + src.h, color),
            Vertex.new(x, y + h, src.x, src.y + src.h, color),
        )
        self._append(vertices, _RECT_INDICES)

    def draw_triangle(self, p0: Vec2, p1: Vec2, p2: Vec2, source: Rect, color: Color) -> None:
        """A solid triangle sampling a single texel of ``source``."""
        vertices = tuple(
            Vertex.new(p.x, p.y, source.x, source.y, color) for p in (p0, p1, p2)
        )
        self._append(vertices, _TRIANGLE_INDICES)

    def draw_line(
        self,
        x1: float,
        y1: float,
        x2: float,
        y2: float,
        thickness: float,
        source: Rect,
        color: Color,
    ) -> None:
        """A line segment as a quad of the given thickness; degenerate lines are skipped."""
        nx = -(y2 - y1)
        ny = x2 - x1
        tlen = (nx * nx + ny * ny) ** 0.5 / (thickness * 0.5)
        if tlen < _F32_EPSILON:
            return
        tx = nx / tlen
        ty = ny / tlen

        vertices = (
            Vertex.new(x1 + tx, y1 + ty, source.x, source.y, color),
            Vertex.new(x1 - tx, y1 - ty, source.x, source.y, color),
            Vertex.new(x2 + tx, y2 + ty, source.x, source.y, color),
            Vertex.new(x2 - tx, y2 - ty, source.x, source.y, color),
        )
        self._append(vertices, _LINE_INDICES)


def _active_draw_list(draw_lists: list[DrawList], command: DrawCommand) -> DrawList:
    if not draw_lists:
        draw_lists.append(DrawList())
    last = draw_lists[-1]

    if isinstance(command, Clip):
        if last.clipping_zone != command.rect:
            draw_lists.append(DrawList())
    elif isinstance(command, DrawRawTexture):
        if last.texture is None or last.texture != command.texture:
            draw_lists.append(
                DrawList(texture=command.texture, clipping_zone=last.clipping_zone)
            )
    else:
        vertices, indices = command.estimate_triangles_budget()
        if (
            last.texture is not None
            or len(last.vertices) + vertices >= MAX_VERTICES
            or len(last.indices) + indices >= MAX_INDICES
        ):
            draw_lists.append(DrawList(clipping_zone=last.clipping_zone))
    return draw_lists[-1]


def render_command(draw_lists: list[DrawList], command: DrawCommand) -> None:
    """Rasterize ``command`` into the last suitable draw list, starting new ones as needed."""
    if not isinstance(command, DrawCommand):
        raise TypeError(f"not a draw command: {command!r}")

    active = _active_draw_list(draw_lists, command)

    match command:
        case Clip(rect=rect):
            active.clipping_zone = rect
        case DrawRect(rect=rect, source=source, fill=fill, stroke=stroke):
            if fill is not None:
                active.draw_rectangle(rect, source, fill)
            if stroke is not None:
                active.draw_rectangle_lines(rect, source, stroke)
        case DrawSprite(rect=rect, source=source, color=color, offsets=offsets, offsets_uv=uv):
            active.draw_sprite(
                rect, source, offsets or RectOffset(), uv or RectOffset(), color
            )
        case DrawLine(start=start, end=end, source=source, color=color):
            active.draw_line(start.x, start.y, end.x, end.y, 1.0, source, color)
        case DrawCharacter(dest=dest, source=source, color=color):
            active.draw_rectangle(dest, source, color)
        case DrawRawTexture(rect=rect):
            active.draw_rectangle(rect, _FULL_UV, _WHITE)
        case DrawTriangle(p0=p0, p1=p1, p2=p2, source=source, color=color):
            active.draw_triangle(p0, p1, p2, source, color)
        case _:
            raise TypeError(f"unsupported draw command: {command!r}")