"""Type-safe enumerations for template fields."""

from enum import StrEnum


class Conversion(StrEnum):
    """Conversions applied before formatting (``!s``, ``!r``, ``!a``)."""

    DISPLAY = "s"
    DEBUG = "r"
    ASCII = "a"


class Numbering(StrEnum):
    """Positional field numbering mode of a render call."""

    AUTOMATIC = "automatic"
    MANUAL = "manual"
