class InvalidColorFormat(ValueError):
    """A color string is not a supported hexadecimal color."""


class ImageDecodeFailure(OSError):
    """The input file is missing, unreadable or not a decodable image."""


class ImageEncodeFailure(OSError):
    """The recolored image could not be written."""
