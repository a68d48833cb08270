import numpy as np
import pytest

from imgascii.charsets import PRESETS, STANDARD
from imgascii.errors import InvalidPalette
from imgascii.palette import intensity_to_char, map_intensities, validate_palette


def test_standard_palette_scenario():
    assert intensity_to_char(0, STANDARD) == " "
    assert intensity_to_char(255, STANDARD) == "@"
    # 128 * 9 // 255 == 4
    assert intensity_to_char(128, STANDARD) == "="


@pytest.mark.parametrize("length", [1, 2, 3, 7, 10, 16, 70, 256, 300])
def test_endpoints_and_monotonic(length):
    palette = "".join(chr(0x4E00 + i) for i in range(length))
    assert intensity_to_char(0, palette) == palette[0]
    assert intensity_to_char(255, palette) == palette[-1]
    indices = [palette.index(intensity_to_char(i, palette)) for i in range(256)]
    assert indices == sorted(indices)


def test_single_character_palette():
    assert {intensity_to_char(i, "#") for i in range(256)} == {"#"}


def test_truncates_rather_than_rounds():
    # 127 * 2 / 255 = 0.996, 254 * 2 / 255 = 1.992
    assert intensity_to_char(127, "abc") == "a"
    assert intensity_to_char(128, "abc") == "b"
    assert intensity_to_char(254, "abc") == "b"
    assert intensity_to_char(255, "abc") == "c"


@pytest.mark.parametrize("palette", sorted(PRESETS.values()))
def test_vectorised_matches_scalar(palette):
    intensities = np.arange(256, dtype=np.uint8)
    chars = [palette[i] for i in map_intensities(intensities, palette)]
    assert chars == [intensity_to_char(i, palette) for i in range(256)]


def test_map_intensities_keeps_shape():
    buffer = np.zeros((3, 5), dtype=np.uint8)
    assert map_intensities(buffer, STANDARD).shape == (3, 5)


def test_validate_palette_rejects_empty():
    with pytest.raises(InvalidPalette):
        validate_palette("")


def test_validate_palette_accepts_single_char():
    validate_palette(" ")
