"""Engine registry for value formatters."""

from pydantic_format.formatting.engines.custom import CustomEngine
from pydantic_format.formatting.engines.floating import FloatEngine
from pydantic_format.formatting.engines.integer import IntegerEngine
from pydantic_format.formatting.engines.text import TextEngine
from pydantic_format.formatting.enums import ValueKind
from pydantic_format.formatting.types import FormatEngine
from pydantic_format.formatting.types import Formattable

__all__ = [
    "CustomEngine",
    "FloatEngine",
    "IntegerEngine",
    "TextEngine",
    "get_engine",
    "get_value_kind",
]

# __format__ implementations the built-in engines reproduce.
_BUILTIN_FORMATTERS = frozenset(
    {object.__format__, str.__format__, int.__format__, float.__format__}
)


def get_value_kind(value: object) -> ValueKind:
    """Classify a value for engine dispatch.

    Formattable values and values whose type overrides ``__format__`` (such
    as ``datetime`` or ``Decimal``) are CUSTOM; ``str``, ``int``/``bool`` and
    ``float`` map to their own kinds.
    """
    if isinstance(value, Formattable):
        return ValueKind.CUSTOM
    if type(value).__format__ not in _BUILTIN_FORMATTERS:
        return ValueKind.CUSTOM
    if isinstance(value, str):
        return ValueKind.TEXT
    if isinstance(value, int):
        return ValueKind.INTEGER
    if isinstance(value, float):
        return ValueKind.FLOAT
    return ValueKind.CUSTOM


def get_engine(kind: ValueKind) -> FormatEngine:
    """Get a format engine for the specified value kind.

    Args:
        kind: Value kind to get an engine for

    Returns:
        Engine instance for the specified kind

    Raises:
        ValueError: When kind is not supported

    """
    match kind:
        case ValueKind.TEXT:
            return TextEngine()
        case ValueKind.INTEGER:
            return IntegerEngine()
        case ValueKind.FLOAT:
            return FloatEngine()
        case ValueKind.CUSTOM:
            return CustomEngine()
    msg = f"Unsupported value kind: {kind!s}"
    raise ValueError(msg)
