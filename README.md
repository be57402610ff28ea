# pixcells

The core of a pixel-art editor as a Python library. Pixels are packed RGBA
integers with red in the low byte (`0xAABBGGRR`).

## Modules

- `pixcells.canvas`: `Canvas`, a fixed-size pixel grid with `in_bounds`,
  `get`, `set`, `fill` and `resize`. Reads outside the grid return
  transparent black, and writes outside it are ignored. `resize` discards the
  content and fills the canvas with opaque white.
- `pixcells.blend`: `blend_pixel(dst, src, mode)` composites one pixel over
  another with the `BlendMode` values Normal, Multiply, Screen, Overlay and
  Add. `apply_opacity(src, opacity)` scales a pixel's alpha by a layer's
  opacity.
- `pixcells.raster`: `paint_pixel` (square or round brush), `bresenham`
  lines, `flood_fill` (4-connected), `color_select` (contiguous or global,
  returning a `ColorSelectResult` with a bounding box and a mask relative to
  it), `draw_rect`, `draw_ellipse`, `rasterize_ellipse` (a generator of
  points that fits the bounding box exactly) and `nn_scale` for
  nearest-neighbour resizing.
- `pixcells.document`: `Document` made of `Frame`s of `Layer`s, with
  `AnimTag`s, a `Palette` and a cached `composite` of the active frame.
  It provides `new_canvas`, `active_canvas`, `composite_frame` and
  `rebuild_composite`.
- `pixcells.pixc`: `save(document, path)` and `load(path)` for `.pixc`
  project files. `load` reads versions 1 and 2, and `save` writes version 2.
  A malformed, truncated or unsupported file raises `PixcError`, which is a
  subclass of `ValueError`.
- `pixcells.png`: `save(canvas, path)` and `load(path)` through Pillow.
  `load` accepts any image Pillow can open and converts it to RGBA.
  `build_sprite_sheet` and `save_sprite_sheet` lay out every composited
  frame in a `SheetLayout` (`HORIZONTAL`, `VERTICAL` or `GRID`). The grid
  has 4 columns when none are given.
- `pixcells.selection`: `Selection`, `lift_selection` to cut the selected
  pixels into a floating buffer, and `commit_floating` to paste them back.
- `pixcells.timeline`: `playback_range`, `next_frame` and `previous_frame`,
  which wrap within the active tag's range. Also `add_frame`, `move_frame`
  (tags and the active frame follow the moved frame), `add_tag`,
  `delete_tag`, and `Playback` for timed playback with `toggle` and `tick`.
- `pixcells.palette`: the hex and CSS strings of a colour (`color_to_hex`,
  `parse_hex`, `hex_rgba_string`, `css_string`) and HSV conversion. It also
  edits a `Palette`: `swap_colors`, `select_swatch` (keeps up to 8 recent
  colours), `add_swatch` (skips duplicate RGB), `remove_selected` and
  `sort_by_hue`.
- `pixcells.preview`: `fit_zoom`, `step_zoom`, and `PreviewView` for zooming
  and panning a preview while the point under the mouse stays fixed.
- `pixcells.ui_scale`: the interface scale presets 0.75, 1, 1.25, 1.5 and 2.
  It provides `nearest_scale` and `UiScale`, and `save_scale` and
  `load_scale` read and write a `ui_scale=` settings file.
- `pixcells.session`: `display_name`, `window_title`, `is_pixc_path` and
  `sniff_pixc`. `open_file` opens a project file, or any other image as a
  document with one frame and one layer, and chooses by the file's content.
  `QuitQueue` steps through the documents that have unsaved changes before
  quitting.

## What it does not do

There is no graphical interface, no window and no command-line program. The
package holds the document model and the logic behind an editor's panels. You
need to supply the drawing surface, the input handling and the file dialogs
yourself. There is no tool-selection state, and palettes cannot be imported or
exported as GPL or HEX files.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Example

```python
from pixcells.document import Document
from pixcells import pixc, png, raster
from pixcells.png import SheetLayout

doc = Document()
doc.new_canvas(32, 32)
raster.draw_ellipse(doc.active_canvas(), 4, 4, 27, 27, 0xFF0000FF, True)
doc.rebuild_composite()

pixc.save(doc, "sprite.pixc")
restored = pixc.load("sprite.pixc")

png.save_sprite_sheet(restored, "sheet.png", SheetLayout.GRID, 4)
```