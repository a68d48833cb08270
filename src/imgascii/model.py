from dataclasses import dataclass, field
from enum import Enum

from imgascii.charsets import STANDARD
from imgascii.errors import InvalidScaleFactor
from imgascii.palette import validate_palette

DEFAULT_SCALE = 10


class RenderMode(Enum):
    MONOCHROME = "mono"
    COLOUR = "colour"


class OutputFormat(Enum):
    TEXT = "txt"
    PNG = "png"
    JPEG = "jpeg"
    WEBP = "webp"


@dataclass(frozen=True)
class ScaleFactors:
    """Source pixels per character cell along each axis."""

    width: int = DEFAULT_SCALE
    height: int = DEFAULT_SCALE

    def __post_init__(self):
        for name, value in (("width", self.width), ("height", self.height)):
            if isinstance(value, bool) or not isinstance(value, int) or value < 1:
                raise InvalidScaleFactor(f"{name} scale must be a positive integer, got {value!r}")


@dataclass(frozen=True)
class CharacterGrid:
    rows: tuple[str, ...]

    def __post_init__(self):
        widths = {len(row) for row in self.rows}
        if len(widths) > 1:
            raise ValueError(f"Ragged character grid, row widths: {sorted(widths)}")

    @property
    def height(self) -> int:
        return len(self.rows)

    @property
    def width(self) -> int:
        return len(self.rows[0]) if self.rows else 0

    def to_text(self) -> str:
        return "".join(row + "\n" for row in self.rows)


@dataclass(frozen=True)
class OutputDestination:
    path: str
    format: OutputFormat


@dataclass(frozen=True)
class RenderConfig:
    """Everything one conversion needs, fixed for the whole run."""

    scale: ScaleFactors = field(default_factory=ScaleFactors)
    ascii_chars: str = STANDARD
    mode: RenderMode = RenderMode.MONOCHROME
    output_path: str | None = None
    font_path: str | None = None

    def __post_init__(self):
        validate_palette(self.ascii_chars)
