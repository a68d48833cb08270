from PIL import ImageDraw, ImageFont

MIN_FONT_SIZE = 6


def _open_font(font_path: str | None, size: int) -> ImageFont.FreeTypeFont:
    if font_path:
        return ImageFont.truetype(font_path, size)
    return ImageFont.load_default(size=size)


def load_font(font_path: str | None, cell_width: int, cell_height: int) -> tuple[ImageFont.FreeTypeFont, int]:
    """Find the largest font size whose "M" fits inside one cell.

    Returns the font and the vertical offset that puts the top of an "M" on
    the cell's top edge. Falls back to the Pillow built-in font when no
    font_path is given.
    """
    for size in range(max(cell_height, MIN_FONT_SIZE), MIN_FONT_SIZE - 1, -1):
        font = _open_font(font_path, size)
        bbox = font.getbbox("M")
        if bbox[2] - bbox[0] <= cell_width and bbox[3] - bbox[1] <= cell_height:
            return font, -bbox[1]
    return _open_font(font_path, MIN_FONT_SIZE), 0


def draw_glyph(
    draw: ImageDraw.ImageDraw,
    x: int,
    y: int,
    char: str,
    colour: tuple[int, int, int],
    font: ImageFont.FreeTypeFont,
    y_offset: int = 0,
) -> None:
    if char.isspace():
        return
    draw.text((x, y + y_offset), char, fill=colour, font=font)
