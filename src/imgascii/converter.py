import logging
from pathlib import Path
from typing import TextIO

import numpy as np
from PIL import Image

from imgascii.downsample import downsample
from imgascii.errors import ImageLoadFailure, OutputCreateFailure
from imgascii.model import CharacterGrid, OutputDestination, RenderConfig, RenderMode
from imgascii.paths import resolve_output_path
from imgascii.renderer import render_colour, render_monochrome

logger = logging.getLogger(__name__)


def load_image(path: str | Path) -> Image.Image:
    try:
        with Image.open(path) as image:
            image.load()
            return image.copy()
    except (OSError, Image.DecompressionBombError) as exc:
        raise ImageLoadFailure(f"Could not load image {str(path)!r}: {exc}") from exc


def _as_image(image: Image.Image | str | Path) -> Image.Image:
    if isinstance(image, Image.Image):
        return image
    return load_image(image)


def image_to_ascii(
    image: Image.Image | str | Path,
    config: RenderConfig,
    echo: TextIO | None = None,
) -> CharacterGrid:
    image = _as_image(image).convert("L")
    small = downsample(image, config.scale)
    logger.debug("Downsampled %dx%d to a %dx%d grid", image.width, image.height, small.width, small.height)
    return render_monochrome(np.asarray(small), config.ascii_chars, echo=echo)


def image_to_canvas(image: Image.Image | str | Path, config: RenderConfig) -> Image.Image:
    image = _as_image(image).convert("RGB")
    small = downsample(image, config.scale)
    logger.debug("Downsampled %dx%d to a %dx%d grid", image.width, image.height, small.width, small.height)
    # Glyph choice uses the luma of the same downsampled cell that provides the tint
    intensities = np.asarray(small.convert("L"))
    return render_colour(np.asarray(small), intensities, config.ascii_chars, config.scale, font_path=config.font_path)


def _discard(path: Path) -> None:
    try:
        path.unlink()
    except FileNotFoundError:
        pass


def save_grid(grid: CharacterGrid, destination: OutputDestination) -> None:
    path = Path(destination.path)
    try:
        f = path.open("w", encoding="utf-8", newline="\n")
    except OSError as exc:
        raise OutputCreateFailure(f"Could not create output file {destination.path!r}: {exc}") from exc
    try:
        with f:
            f.write(grid.to_text())
    except OSError as exc:
        _discard(path)
        raise OutputCreateFailure(f"Could not write output file {destination.path!r}: {exc}") from exc


def save_canvas(canvas: Image.Image, destination: OutputDestination) -> None:
    path = Path(destination.path)
    try:
        f = path.open("wb")
    except OSError as exc:
        raise OutputCreateFailure(f"Could not create output file {destination.path!r}: {exc}") from exc
    # Encoder limits surface as ValueError, a missing codec plugin as KeyError
    try:
        with f:
            canvas.save(f, format=destination.format.name)
    except (OSError, ValueError, KeyError) as exc:
        _discard(path)
        raise OutputCreateFailure(f"Could not write output file {destination.path!r}: {exc}") from exc


def convert(image_path: str | Path, config: RenderConfig, echo: TextIO | None = None) -> OutputDestination:
    """Load, render and persist one image. Returns where the result went."""
    image = load_image(image_path)
    logger.debug("Loaded %s (%dx%d, mode %s)", image_path, image.width, image.height, image.mode)

    if config.mode is RenderMode.MONOCHROME:
        grid = image_to_ascii(image, config, echo=echo)
        destination = resolve_output_path(config.output_path, config.mode)
        logger.debug("Writing %dx%d grid to %s", grid.width, grid.height, destination.path)
        save_grid(grid, destination)
    else:
        canvas = image_to_canvas(image, config)
        destination = resolve_output_path(config.output_path, config.mode)
        logger.debug("Writing %dx%d %s canvas to %s", canvas.width, canvas.height, destination.format.name, destination.path)
        save_canvas(canvas, destination)
    return destination
