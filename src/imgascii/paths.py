import os

from imgascii.errors import OutputPathTooLong
from imgascii.model import OutputDestination, OutputFormat, RenderMode

MAX_PATH_LENGTH = 1024

DEFAULT_NAMES = {
    RenderMode.MONOCHROME: "output.txt",
    RenderMode.COLOUR: "output.png",
}

TEXT_SUFFIX = ".txt"

# Case-sensitive; ".jpg" and ".PNG" are not accepted
IMAGE_SUFFIXES = {
    ".png": OutputFormat.PNG,
    ".jpeg": OutputFormat.JPEG,
    ".webp": OutputFormat.WEBP,
}
FALLBACK_IMAGE_SUFFIX = ".png"

_SEPARATORS = tuple({"/", os.sep})


def _check_length(path: str) -> str:
    if len(path) > MAX_PATH_LENGTH:
        raise OutputPathTooLong(f"Output path too long ({len(path)} > {MAX_PATH_LENGTH} characters)")
    return path


def _image_format(path: str) -> OutputFormat | None:
    for suffix, fmt in IMAGE_SUFFIXES.items():
        if path.endswith(suffix):
            return fmt
    return None


def resolve_output_path(user_input: str | None, mode: RenderMode) -> OutputDestination:
    """Turn a user-supplied output path into a concrete destination.

    An unrecognised image extension gets ``.png`` appended rather than
    replaced, so ``pic.gif`` resolves to ``pic.gif.png``.
    """
    default_name = DEFAULT_NAMES[mode]
    if not user_input:
        path = default_name
    elif user_input.endswith(_SEPARATORS):
        path = _check_length(user_input) + default_name
    else:
        path = _check_length(user_input)
    _check_length(path)

    if mode is RenderMode.MONOCHROME:
        if not path.endswith(TEXT_SUFFIX):
            path = _check_length(path + TEXT_SUFFIX)
        return OutputDestination(path=path, format=OutputFormat.TEXT)

    fmt = _image_format(path)
    if fmt is None:
        path = _check_length(path + FALLBACK_IMAGE_SUFFIX)
        fmt = OutputFormat.PNG
    return OutputDestination(path=path, format=fmt)
