from typing import TextIO

import numpy as np
from PIL import Image, ImageDraw

from imgascii.glyphs import draw_glyph, load_font
from imgascii.model import CharacterGrid, ScaleFactors
from imgascii.palette import map_intensities, validate_palette

BACKGROUND = (0, 0, 0)


def _check_buffer(buffer, ndim: int, name: str) -> np.ndarray:
    arr = np.asarray(buffer)
    if arr.ndim != ndim or arr.size == 0:
        raise ValueError(f"{name} must be a non-empty {ndim}-D array, got shape {arr.shape}")
    if ndim == 3 and arr.shape[2] != 3:
        raise ValueError(f"{name} must have 3 channels, got {arr.shape[2]}")
    if arr.min() < 0 or arr.max() > 255:
        raise ValueError(f"{name} values must lie in [0, 255]")
    return arr


def _grid_lines(intensities: np.ndarray, palette: str) -> list[str]:
    chars = np.array(list(palette))[map_intensities(intensities, palette)]
    return ["".join(row) for row in chars]


def render_monochrome(buffer, palette: str, echo: TextIO | None = None) -> CharacterGrid:
    """Map a (rows, cols) intensity buffer to a character grid.

    If echo is given, every character is written to it in row-major order,
    with a newline after each row.
    """
    validate_palette(palette)
    intensities = _check_buffer(buffer, 2, "Intensity buffer")
    lines = _grid_lines(intensities, palette)
    if echo is not None:
        for line in lines:
            for char in line:
                echo.write(char)
            echo.write("\n")
    return CharacterGrid(rows=tuple(lines))


def render_colour(
    colours,
    intensities,
    palette: str,
    scale: ScaleFactors,
    font_path: str | None = None,
) -> Image.Image:
    """Draw one glyph per cell, tinted with that cell's colour, on a black canvas.

    colours is (rows, cols, 3) RGB, intensities the matching (rows, cols)
    grayscale buffer that picks the glyph.
    """
    validate_palette(palette)
    colours = _check_buffer(colours, 3, "Colour buffer")
    intensities = _check_buffer(intensities, 2, "Intensity buffer")
    if colours.shape[:2] != intensities.shape:
        raise ValueError(f"Colour buffer {colours.shape[:2]} does not match intensity buffer {intensities.shape}")

    rows, cols = intensities.shape
    canvas = Image.new("RGB", (cols * scale.width, rows * scale.height), BACKGROUND)
    draw = ImageDraw.Draw(canvas)
    font, y_offset = load_font(font_path, scale.width, scale.height)

    for i, line in enumerate(_grid_lines(intensities, palette)):
        for j, char in enumerate(line):
            colour = tuple(int(v) for v in colours[i, j])
            draw_glyph(draw, j * scale.width, i * scale.height, char, colour, font, y_offset)
    return canvas
