import pytest

from quadgui.draw import (
    Clip,
    DrawCharacter,
    DrawLine,
    DrawRawTexture,
    DrawRect,
    DrawSprite,
    DrawTriangle,
)
from quadgui.geometry import Color, Rect, RectOffset, Vec2
from quadgui.mesh import MAX_VERTICES, DrawList, Vertex, render_command

RED = Color(1.0, 0.0, 0.0, 1.0)
SRC = Rect(0.0, 0.0, 1.0, 1.0)


def test_vertex_new_sets_fields():
    v = Vertex.new(3.0, 4.0, 0.5, 0.25, RED)
    assert v.pos == (3.0, 4.0, 0.0)
    assert v.uv == (0.5, 0.25)
    assert v.color == RED.as_tuple()
    assert v.as_tuple() == ((3.0, 4.0, 0.0), (0.5, 0.25), RED.as_tuple())


def test_draw_rectangle_corners_and_indices():
    dl = DrawList()
    dl.draw_rectangle(Rect(10.0, 20.0, 5.0, 6.0), SRC, RED)
    assert [v.pos[:2] for v in dl.vertices] == [
        (10.0, 20.0),
        (15.0, 20.0),
        (15.0, 26.0),
        (10.0, 26.0),
    ]
    assert dl.indices == [0, 1, 2, 0, 2, 3]


def test_indices_are_offset_by_existing_vertices():
    dl = DrawList()
    dl.draw_rectangle(Rect(0.0, 0.0, 1.0, 1.0), SRC, RED)
    dl.draw_rectangle(Rect(0.0, 0.0, 1.0, 1.0), SRC, RED)
    assert dl.indices[6:] == [i + 4 for i in dl.indices[:6]]


def test_draw_triangle():
    dl = DrawList()
    dl.draw_triangle(Vec2(0, 0), Vec2(1, 0), Vec2(0, 1), SRC, RED)
    assert len(dl.vertices) == 3
    assert dl.indices == [0, 1, 2]
    assert all(v.uv == (SRC.x, SRC.y) for v in dl.vertices)


def test_draw_line_degenerate_is_skipped():
    dl = DrawList()
    dl.draw_line(5.0, 5.0, 5.0, 5.0, 1.0, SRC, RED)
    assert dl.vertices == []
    assert dl.indices == []


def test_draw_line_quad_is_symmetric_around_endpoints():
    dl = DrawList()
    dl.draw_line(0.0, 0.0, 10.0, 0.0, 2.0, SRC, RED)
    assert len(dl.vertices) == 4
    assert dl.indices == [0, 1, 2, 2, 1, 3]
    a, b, c, d = (v.pos for v in dl.vertices)
    assert (a[0] + b[0]) / 2 == pytest.approx(0.0)
    assert (a[1] + b[1]) / 2 == pytest.approx(0.0)
    assert (c[0] + d[0]) / 2 == pytest.approx(10.0)
    assert abs(a[1] - b[1]) == pytest.approx(2.0)


def test_draw_rectangle_lines_makes_four_rects():
    dl = DrawList()
    dl.draw_rectangle_lines(Rect(0.0, 0.0, 10.0, 10.0), SRC, RED)
    assert len(dl.vertices) == 16
    assert len(dl.indices) == 24


def test_draw_sprite_grid():
    dl = DrawList()
    dl.draw_sprite(
        Rect(0.0, 0.0, 30.0, 30.0),
        SRC,
        RectOffset(2.0, 2.0, 2.0, 2.0),
        RectOffset(0.1, 0.1, 0.1, 0.1),
        RED,
    )
    assert len(dl.vertices) == 16
    assert len(dl.indices) == 54
    assert max(dl.indices) == 15
    assert dl.vertices[0].pos == (0.0, 0.0, 0.0)
    assert dl.vertices[-1].pos == (30.0, 30.0, 0.0)


def test_clear_keeps_texture():
    dl = DrawList(texture="tex", clipping_zone=Rect(0, 0, 1, 1))
    dl.draw_rectangle(Rect(0, 0, 1, 1), SRC, RED)
    dl.clear()
    assert dl.vertices == [] and dl.indices == []
    assert dl.clipping_zone is None
    assert dl.texture == "tex"


def test_render_into_empty_list_creates_draw_list():
    lists = []
    render_command(lists, DrawRect(Rect(0, 0, 4, 4), SRC, fill=RED))
    assert len(lists) == 1
    assert len(lists[0].vertices) == 4


def test_render_rect_fill_and_stroke():
    lists = []
    render_command(lists, DrawRect(Rect(0, 0, 4, 4), SRC, fill=RED, stroke=RED))
    assert len(lists[0].vertices) == 20


def test_render_rect_without_fill_or_stroke_adds_nothing():
    lists = []
    render_command(lists, DrawRect(Rect(0, 0, 4, 4), SRC))
    assert lists[0].vertices == []


def test_clip_starts_new_list_when_zone_changes():
    lists = []
    zone = Rect(0, 0, 50, 50)
    render_command(lists, Clip(zone))
    assert len(lists) == 2
    assert lists[-1].clipping_zone == zone
    render_command(lists, Clip(zone))
    assert len(lists) == 2


def test_texture_switches_lists_and_inherits_clip():
    lists = []
    zone = Rect(0, 0, 50, 50)
    render_command(lists, Clip(zone))
    render_command(lists, DrawRawTexture(Rect(0, 0, 8, 8), "tex-a"))
    assert lists[-1].texture == "tex-a"
    assert lists[-1].clipping_zone == zone
    count = len(lists)
    render_command(lists, DrawRawTexture(Rect(0, 0, 8, 8), "tex-a"))
    assert len(lists) == count
    render_command(lists, DrawCharacter(Rect(0, 0, 2, 2), SRC, RED))
    assert len(lists) == count + 1
    assert lists[-1].texture is None
    assert lists[-1].clipping_zone == zone


def test_raw_texture_uses_white_full_uv():
    lists = []
    render_command(lists, DrawRawTexture(Rect(0, 0, 8, 8), "tex"))
    vertices = lists[-1].vertices
    assert vertices[2].uv == (1.0, 1.0)
    assert all(v.color == (1.0, 1.0, 1.0, 1.0) for v in vertices)


def test_budget_overflow_starts_new_list():
    full = DrawList()
    full.vertices.extend([Vertex.new(0, 0, 0, 0, RED)] * (MAX_VERTICES - 5))
    lists = [full]
    render_command(lists, DrawTriangle(Vec2(0, 0), Vec2(1, 0), Vec2(0, 1), SRC, RED))
    assert len(lists) == 2
    assert len(lists[1].vertices) == 3


def test_line_and_sprite_commands():
    lists = []
    render_command(lists, DrawLine(Vec2(0, 0), Vec2(5, 5), SRC, RED))
    render_command(lists, DrawSprite(Rect(0, 0, 10, 10), SRC, RED))
    assert len(lists) == 1
    assert len(lists[0].vertices) == 4 + 16


def test_render_rejects_non_commands():
    with pytest.raises(TypeError):
        render_command([], "draw")