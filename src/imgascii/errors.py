class AsciiArtError(Exception):
    """Base class for failures that end a conversion."""


class ImageLoadFailure(AsciiArtError):
    pass


class DegenerateDimensions(AsciiArtError):
    pass


class OutputPathTooLong(AsciiArtError):
    pass


class OutputCreateFailure(AsciiArtError):
    pass


class InvalidPalette(AsciiArtError):
    pass


class InvalidScaleFactor(AsciiArtError):
    pass
