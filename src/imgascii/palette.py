import numpy as np

from imgascii.errors import InvalidPalette


def validate_palette(palette: str) -> None:
    if not isinstance(palette, str) or len(palette) == 0:
        raise InvalidPalette("Character palette must contain at least one character")


def intensity_to_char(intensity: int, palette: str) -> str:
    """Map a 0-255 intensity to a palette character.

    Uses truncating division, so 0 is always the first character and 255
    always the last, while the boundaries in between are not evenly spaced
    unless ``len(palette) - 1`` divides 255.
    """
    return palette[(intensity * (len(palette) - 1)) // 255]


def map_intensities(buffer: np.ndarray, palette: str) -> np.ndarray:
    """Vectorised ``intensity_to_char``. Returns an array of palette indices."""
    return (np.asarray(buffer, dtype=np.int64) * (len(palette) - 1)) // 255
