import pytest

from quadgui.geometry import Color, RectOffset
from quadgui.style import ElementState, Style

RED = Color.from_rgba(255, 0, 0, 255)
GREEN = Color.from_rgba(0, 255, 0, 255)
BLUE = Color.from_rgba(0, 0, 255, 255)
GREY = Color.from_rgba(128, 128, 128, 255)
PURPLE = Color.from_rgba(128, 0, 128, 255)
TEAL = Color.from_rgba(0, 128, 128, 255)


def _style() -> Style:
    return Style(
        color=RED,
        color_hovered=GREEN,
        color_clicked=BLUE,
        color_selected=GREY,
        color_selected_hovered=PURPLE,
        text_color=RED,
        text_color_hovered=GREEN,
        text_color_clicked=BLUE,
    )


def test_defaults_match_source():
    style = Style()
    assert style.font_size == 16
    assert style.color == Color.from_rgba(255, 255, 255, 255)
    assert style.text_color == Color.from_rgba(0, 0, 0, 255)
    assert style.color_inactive is None
    assert style.reverse_background_z is False


def test_border_margin_sums_both_margins():
    style = Style(
        background_margin=RectOffset(1.0, 14.0, 1.0, 1.0),
        margin=RectOffset(2.0, 2.0, 2.0, 2.0),
    )
    assert style.border_margin() == RectOffset(3.0, 16.0, 3.0, 3.0)


def test_border_margin_without_margins_is_zero():
    assert Style().border_margin() == RectOffset()


def test_border_margin_with_only_one_margin():
    offset = RectOffset(1.0, 2.0, 3.0, 4.0)
    assert Style(margin=offset).border_margin() == offset
    assert Style(background_margin=offset).border_margin() == offset


@pytest.mark.parametrize(
    "state, expected",
    [
        (ElementState(focused=True), RED),
        (ElementState(focused=True, hovered=True), GREEN),
        (ElementState(focused=True, hovered=True, clicked=True), BLUE),
        (ElementState(clicked=True), BLUE),
        (ElementState(hovered=True), GREEN),
    ],
)
def test_text_color_priority(state, expected):
    assert _style().resolve_text_color(state) == expected


def test_text_color_unfocused_is_dimmed():
    style = Style(text_color=Color(1.0, 1.0, 1.0, 1.0))
    result = style.resolve_text_color(ElementState())
    assert result.as_tuple() == pytest.approx((0.6, 0.6, 0.6, 0.6))


@pytest.mark.parametrize(
    "state, expected",
    [
        (ElementState(focused=True), RED),
        (ElementState(focused=True, hovered=True), GREEN),
        (ElementState(focused=True, clicked=True, hovered=True, selected=True), BLUE),
        (ElementState(focused=True, selected=True), GREY),
        (ElementState(focused=True, selected=True, hovered=True), PURPLE),
    ],
)
def test_color_priority(state, expected):
    assert _style().resolve_color(state) == expected


def test_color_unfocused_uses_inactive_color():
    style = Style(color=RED, color_inactive=TEAL)
    assert style.resolve_color(ElementState(clicked=True, hovered=True)) == TEAL


def test_color_unfocused_without_inactive_reduces_alpha():
    style = Style(color=Color(1.0, 1.0, 1.0, 1.0))
    assert style.resolve_color(ElementState()) == Color.from_rgba(255, 255, 255, 204)


def test_color_unfocused_keeps_rgb_channels():
    style = Style(color=RED)
    result = style.resolve_color(ElementState())
    assert (result.r, result.g, result.b) == (RED.r, RED.g, RED.b)
    assert result.a < RED.a


def test_background_sprite_prefers_clicked_then_hovered():
    style = Style(background="plain", background_hovered="hover", background_clicked="click")
    assert style.background_sprite(ElementState(clicked=True, hovered=True)) == "click"
    assert style.background_sprite(ElementState(hovered=True)) == "hover"
    assert style.background_sprite(ElementState()) == "plain"


def test_background_sprite_falls_back_when_variants_missing():
    style = Style(background="plain")
    assert style.background_sprite(ElementState(clicked=True)) == "plain"
    assert style.background_sprite(ElementState(hovered=True)) == "plain"


def test_background_sprite_none_without_background():
    assert Style().background_sprite(ElementState(clicked=True)) is None


def test_element_state_defaults_and_equality():
    assert ElementState() == ElementState(False, False, False, False)
    assert ElementState(focused=True) != ElementState()