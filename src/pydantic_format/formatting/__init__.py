"""Format-spec mini-language: spec parsing and per-kind engines."""

from pydantic_format.formatting.engines import get_engine
from pydantic_format.formatting.engines import get_value_kind
from pydantic_format.formatting.enums import Align
from pydantic_format.formatting.enums import Grouping
from pydantic_format.formatting.enums import Sign
from pydantic_format.formatting.enums import ValueKind
from pydantic_format.formatting.spec import FormatSpec
from pydantic_format.formatting.spec import parse_format_spec
from pydantic_format.formatting.types import ConvertedText
from pydantic_format.formatting.types import FormatEngine
from pydantic_format.formatting.types import Formattable

__all__ = [
    "Align",
    "ConvertedText",
    "FormatEngine",
    "FormatSpec",
    "Formattable",
    "Grouping",
    "Sign",
    "ValueKind",
    "apply_format",
    "get_engine",
    "get_value_kind",
    "parse_format_spec",
]


def apply_format(value: object, format_spec: str) -> str:
    """Render *value* according to *format_spec*.

    An empty spec yields the value's display rendering, so formatting an
    already formatted string with an empty spec returns it unchanged.

    Args:
        value: Value to render, after any conversion
        format_spec: Raw spec text with nested fields already substituted

    Returns:
        Rendered string

    """
    return get_engine(get_value_kind(value)).render(value, format_spec)
