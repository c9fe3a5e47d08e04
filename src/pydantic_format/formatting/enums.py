"""Type-safe enumerations for the format-spec mini-language."""

from enum import StrEnum


class Align(StrEnum):
    """Alignment options."""

    LEFT = "<"
    RIGHT = ">"
    CENTER = "^"
    AFTER_SIGN = "="


class Sign(StrEnum):
    """Sign display options."""

    PLUS = "+"
    MINUS = "-"
    SPACE = " "


class Grouping(StrEnum):
    """Thousands separator options."""

    NONE = ""
    COMMA = ","
    UNDERSCORE = "_"


class ValueKind(StrEnum):
    """Kinds of values the engine registry dispatches on."""

    TEXT = "text"
    INTEGER = "integer"
    FLOAT = "float"
    CUSTOM = "custom"
