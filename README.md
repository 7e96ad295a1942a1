# quadgui

Building blocks for an immediate-mode GUI, in pure Python with no
dependencies: geometry types, a layout cursor, a text editing model,
widget styles, draw commands and a rasterizer that batches them into
vertex and index buffers.

## Modules

- `quadgui.geometry`: frozen value types `Vec2`, `Rect`, `RectOffset` and
  `Color`. `Rect` has `contains`, `overlaps`, `combine_with`, `intersect`
  and `offset`; `Color.from_rgba` takes 0..255 components.
- `quadgui.cursor`: `Cursor` decides where the next widget goes inside an
  area. `Cursor.fit(size, layout)` takes `Layout.VERTICAL`,
  `Layout.HORIZONTAL` or `Free(point)` and returns the absolute position.
  `Cursor.reset()` starts a new frame. `Scroll` holds the scroll state and
  clamps it with `scroll_to` and `update`.
- `quadgui.text_editor`: `EditboxState`, an edit box model with cursor
  movement, word and line navigation, shift-selection, single, double and
  triple clicks (`click_down`, `click_move`, `click_up`) and undo/redo.
  Text is a plain `str`: every editing method returns the new text.
  `word_delimiter` tells which characters separate words.
- `quadgui.style`: `Style` and `ElementState`. `resolve_color`,
  `resolve_text_color` and `background_sprite` pick the colour or sprite for
  the focused, hovered, clicked and selected states; `border_margin` sums
  the background and content margins.
- `quadgui.draw`: the draw commands `DrawCharacter`, `DrawRect`,
  `DrawSprite`, `DrawTriangle`, `DrawLine`, `DrawRawTexture` and `Clip`, all
  subclasses of `DrawCommand` with `offset` and
  `estimate_triangles_budget`; plus `Alignment` and `LabelParams`.
- `quadgui.mesh`: `Vertex`, `DrawList` and `render_command`, which turns a
  draw command into triangles in the right draw list, starting a new list
  when the clipping zone or texture changes or the list would exceed
  `MAX_VERTICES` / `MAX_INDICES`.

## Installing

```
pip install .
```

## Examples

Laying out widgets:

```python
from quadgui.cursor import Cursor, Layout
from quadgui.geometry import Rect, Vec2

cursor = Cursor(Rect(0, 0, 200, 100), margin=2)
first = cursor.fit(Vec2(50, 20), Layout.VERTICAL)   # Vec2(2, 2)
second = cursor.fit(Vec2(50, 20), Layout.VERTICAL)  # Vec2(2, 24)
```

Editing text:

```python
from quadgui.text_editor import EditboxState

state = EditboxState()
text = state.insert_string("", "hello")  # "hello", cursor at 5
text = state.undo(text)                  # ""
text = state.redo(text)                  # "hello"
```

Rasterizing draw commands:

```python
from quadgui.draw import DrawRect
from quadgui.geometry import Color, Rect
from quadgui.mesh import render_command

lists = []
render_command(lists, DrawRect(Rect(0, 0, 10, 10), Rect(0, 0, 1, 1), fill=Color(1, 0, 0, 1)))
# lists[0] now holds 4 vertices and 6 indices
```

## What it does not do

quadgui opens no window, reads no keyboard or mouse events, rasterizes no
fonts and sends nothing to a GPU. It has no ready-made widgets such as
buttons or windows: it supplies the layout, editing, styling and mesh
pieces, and the caller feeds in input and draws the resulting
`DrawList` buffers with a renderer of its choice.

## Running the tests

```
pip install .[test]
pytest
```