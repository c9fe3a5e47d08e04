"""Format engine for text values."""

from pydantic_format.core.errors import FormatTypeMismatchError
from pydantic_format.core.errors import InvalidAlignmentError
from pydantic_format.core.errors import InvalidSpecError
from pydantic_format.core.errors import UnsupportedFormatTypeError
from pydantic_format.formatting.enums import Align
from pydantic_format.formatting.enums import Grouping
from pydantic_format.formatting.layout import pad
from pydantic_format.formatting.spec import NUMERIC_TYPES
from pydantic_format.formatting.spec import parse_format_spec
from pydantic_format.formatting.types import ConvertedText


class TextEngine:
    """Render strings: truncate to precision, then pad (left-aligned by default)."""

    def render(self, value: object, format_spec: str) -> str:
        """Render text with a format spec.

        Args:
            value: A ``str`` (possibly ConvertedText)
            format_spec: Raw spec text

        Returns:
            Rendered string

        Raises:
            FormatTypeMismatchError: When a numeric type follows a conversion
            UnsupportedFormatTypeError: When the presentation type is not 's'
            InvalidSpecError: When sign, '#', 'z' or grouping is given
            InvalidAlignmentError: When '=' alignment is requested

        """
        text = str(value)
        if not format_spec:
            return text

        spec = parse_format_spec(format_spec)
        if spec.type not in (None, "s"):
            if isinstance(value, ConvertedText) and spec.type in NUMERIC_TYPES:
                msg = (
                    f"Format code '{spec.type}' cannot be applied after a "
                    "conversion; converted values are always strings"
                )
                raise FormatTypeMismatchError(msg)
            msg = f"Unknown format code '{spec.type}' for object of type 'str'"
            raise UnsupportedFormatTypeError(msg)

        if spec.sign is not None:
            msg = "Sign not allowed in string format specifier"
            raise InvalidSpecError(msg)
        if spec.coerce_zero:
            msg = "Negative zero coercion (z) not allowed in string format specifier"
            raise InvalidSpecError(msg)
        if spec.alternate:
            msg = "Alternate form (#) not allowed in string format specifier"
            raise InvalidSpecError(msg)
        if spec.grouping is not Grouping.NONE:
            msg = f"Cannot specify '{spec.grouping.value}' with 's'."
            raise InvalidSpecError(msg)

        align = spec.alignment_for(Align.LEFT)
        if align is Align.AFTER_SIGN:
            msg = "'=' alignment not allowed in string format specifier"
            raise InvalidAlignmentError(msg)

        if spec.precision is not None:
            text = text[: spec.precision]
        return pad(text, width=spec.width or 0, fill=spec.fill_char, align=align)
