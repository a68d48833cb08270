from PIL import Image

from imgascii.errors import DegenerateDimensions
from imgascii.model import ScaleFactors


def target_size(source_rows: int, source_cols: int, scale: ScaleFactors) -> tuple[int, int]:
    """Grid (rows, cols) for a source image, one cell per scale block.

    Remainder pixels that do not fill a whole block are dropped.
    """
    rows = source_rows // scale.height
    cols = source_cols // scale.width
    if rows == 0 or cols == 0:
        raise DegenerateDimensions(
            f"Effective output has zero rows/cols: {source_cols}x{source_rows} image "
            f"with scale {scale.width}x{scale.height} gives {cols}x{rows}"
        )
    return rows, cols


def downsample(image: Image.Image, scale: ScaleFactors) -> Image.Image:
    rows, cols = target_size(image.height, image.width, scale)
    return image.resize((cols, rows), Image.Resampling.BILINEAR)
