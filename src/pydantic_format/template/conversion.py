"""Conversion stage: ``!s``, ``!r`` and ``!a`` applied before formatting."""

from pydantic_format.core.errors import TemplateSyntaxError
from pydantic_format.formatting.types import ConvertedText
from pydantic_format.formatting.types import Formattable
from pydantic_format.template.enums import Conversion


def convert(value: object, conversion: Conversion | None) -> object:
    """Apply a field's conversion to *value*.

    Args:
        value: Resolved field value
        conversion: Conversion to apply, or None to pass the value through

    Returns:
        The value itself when there is no conversion, else ConvertedText

    """
    match conversion:
        case None:
            return value
        case Conversion.DISPLAY:
            return ConvertedText(to_display_string(value))
        case Conversion.DEBUG:
            return ConvertedText(to_debug_string(value))
        case Conversion.ASCII:
            text = to_debug_string(value)
            return ConvertedText(text.encode("ascii", "backslashreplace").decode())

    msg = f"Unknown conversion specifier {conversion!s}"
    raise TemplateSyntaxError(msg)


def to_display_string(value: object) -> str:
    """Human readable rendering of a value."""
    if isinstance(value, Formattable):
        return value.to_display_string()
    return str(value)


def to_debug_string(value: object) -> str:
    """Programmer rendering of a value."""
    if isinstance(value, Formattable):
        return value.to_debug_string()
    return repr(value)
