import argparse
import logging
import sys

from imgascii.charsets import PRESETS, STANDARD
from imgascii.converter import convert
from imgascii.errors import AsciiArtError
from imgascii.model import DEFAULT_SCALE, RenderConfig, RenderMode, ScaleFactors

PROG = "imgascii"
USAGE = f"Usage: {PROG} <image> [options]"

MODE_ALIASES = {
    "mono": RenderMode.MONOCHROME,
    "m": RenderMode.MONOCHROME,
    "colour": RenderMode.COLOUR,
    "color": RenderMode.COLOUR,
    "c": RenderMode.COLOUR,
}


def parse_scale(value, default: int = DEFAULT_SCALE) -> int:
    """Read a scale factor, quietly using the default for anything non-numeric."""
    try:
        return int(value)
    except (TypeError, ValueError):
        return default


def parse_mode(value, default: RenderMode = RenderMode.MONOCHROME) -> RenderMode:
    if value is None:
        return default
    return MODE_ALIASES.get(str(value).strip().lower(), default)


def _prompt(label: str, default) -> str | None:
    answer = input(f"{label} [{default}]: ")
    return answer if answer else None


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog=PROG, description="Render an image as ASCII art")
    parser.add_argument("image", nargs="?", default=None, help="Path to input image")
    parser.add_argument(
        "--width-scale", default=None, help=f"Source pixels per character horizontally (default: {DEFAULT_SCALE})"
    )
    parser.add_argument(
        "--height-scale", default=None, help=f"Source pixels per character vertically (default: {DEFAULT_SCALE})"
    )
    parser.add_argument("-c", "--chars", default=None, help=f"Palette, darkest to brightest (default: {STANDARD!r})".replace("%", "%%"))
    parser.add_argument(
        "--charset", default=None, choices=sorted(PRESETS), help="Use a named palette instead of --chars"
    )
    parser.add_argument(
        "-m", "--mode", default=None, choices=sorted(MODE_ALIASES), help="mono = text file, colour = tinted image"
    )
    parser.add_argument("-o", "--output", default=None, help="Output path (default: output.txt / output.png)")
    parser.add_argument("-f", "--font", default=None, help="TrueType font for colour mode (default: built-in)")
    parser.add_argument(
        "-y", "--defaults", action="store_true", default=False, help="Skip prompts and use defaults for unset options"
    )
    parser.add_argument("-v", "--verbose", action="store_true", default=False, help="Log each pipeline stage")
    return parser


def build_config(args: argparse.Namespace, interactive: bool) -> RenderConfig:
    width, height, chars, mode, output = args.width_scale, args.height_scale, args.chars, args.mode, args.output
    if chars is None and args.charset is not None:
        chars = PRESETS[args.charset]

    if interactive:
        if width is None:
            width = _prompt("Width scale", DEFAULT_SCALE)
        if height is None:
            height = _prompt("Height scale", DEFAULT_SCALE)
        if chars is None:
            chars = _prompt("ASCII characters", STANDARD)
        if mode is None:
            mode = _prompt("Mode (mono/colour)", "mono")
        if output is None:
            output = _prompt("Output path", "output.txt / output.png")

    return RenderConfig(
        scale=ScaleFactors(parse_scale(width), parse_scale(height)),
        ascii_chars=STANDARD if chars is None else chars,
        mode=parse_mode(mode),
        output_path=output,
        font_path=args.font,
    )


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.image is None:
        print(USAGE)
        return 1

    interactive = not args.defaults and sys.stdin.isatty()
    try:
        config = build_config(args, interactive)
        echo = sys.stdout if config.mode is RenderMode.MONOCHROME else None
        destination = convert(args.image, config, echo=echo)
    except AsciiArtError as exc:
        print(exc, file=sys.stderr)
        return 1

    print(f"Conversion complete! Output saved to '{destination.path}'")
    return 0


if __name__ == "__main__":
    sys.exit(main())
