import shutil
import subprocess

import pytest
from PIL import Image


@pytest.fixture
def font_path():
    """A monospace TrueType font located through fontconfig."""
    if shutil.which("fc-match") is None:
        pytest.skip("fontconfig not available")
    out = subprocess.run(["fc-match", "-f", "%{file}", "monospace"], capture_output=True, text=True)
    path = out.stdout.strip()
    if out.returncode != 0 or not path.endswith((".ttf", ".otf", ".ttc")):
        pytest.skip("No monospace TrueType font found")
    return path


@pytest.fixture
def gradient():
    """Factory for a horizontal black-to-white ramp."""

    def _make(width, height):
        img = Image.new("L", (width, height))
        pixels = img.load()
        for x in range(width):
            value = x * 255 // max(width - 1, 1)
            for y in range(height):
                pixels[x, y] = value
        return img

    return _make


@pytest.fixture
def image_file(tmp_path):
    """Write a solid image to tmp_path and return its path."""

    def _make(size=(640, 480), colour=128, mode="L", name="input.png"):
        path = tmp_path / name
        Image.new(mode, size, colour).save(path)
        return path

    return _make
