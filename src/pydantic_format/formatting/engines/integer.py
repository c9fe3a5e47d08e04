"""Format engine for integers (and bools)."""

from pydantic_format.core.errors import InvalidSpecError
from pydantic_format.core.errors import UnsupportedFormatTypeError
from pydantic_format.formatting.engines.floating import FloatEngine
from pydantic_format.formatting.engines.floating import sign_text
from pydantic_format.formatting.enums import Grouping
from pydantic_format.formatting.layout import layout_number
from pydantic_format.formatting.layout import locale_grouping
from pydantic_format.formatting.spec import FLOAT_TYPES
from pydantic_format.formatting.spec import FormatSpec
from pydantic_format.formatting.spec import parse_format_spec

_MAX_CODE_POINT = 0x110000

_BASES: dict[str, tuple[int, str]] = {
    "b": (2, "0b"),
    "o": (8, "0o"),
    "x": (16, "0x"),
    "X": (16, "0X"),
}


class IntegerEngine:
    """Render integers in decimal, binary, octal, hex or as a character.

    Float presentation types convert the integer to float first.
    """

    def render(self, value: object, format_spec: str) -> str:
        """Render an integer with a format spec.

        Args:
            value: An ``int`` or ``bool``
            format_spec: Raw spec text

        Returns:
            Rendered string

        Raises:
            UnsupportedFormatTypeError: When the presentation type is not an
                integer or float type
            InvalidSpecError: When precision, 'z', or 'c' with sign or '#' is
                given, or a 'c' value is not a valid code point

        """
        if not format_spec:
            return str(value)

        spec = parse_format_spec(format_spec)
        number = int(value)  # type: ignore[call-overload]

        if spec.type is not None and spec.type != "n" and spec.type in FLOAT_TYPES:
            return FloatEngine().render_spec(float(number), spec)
        if spec.type not in (None, "d", "n", "c", *_BASES):
            msg = (
                f"Unknown format code '{spec.type}' for object of type "
                f"'{type(value).__name__}'"
            )
            raise UnsupportedFormatTypeError(msg)

        if spec.precision is not None:
            msg = "Precision not allowed in integer format specifier"
            raise InvalidSpecError(msg)
        if spec.coerce_zero:
            msg = "Negative zero coercion (z) not allowed in integer format specifier"
            raise InvalidSpecError(msg)

        if spec.type == "c":
            return self._render_char(number, spec)
        return self._render_digits(number, spec)

    def _render_char(self, number: int, spec: FormatSpec) -> str:
        if spec.sign is not None:
            msg = "Sign not allowed with integer format specifier 'c'"
            raise InvalidSpecError(msg)
        if spec.alternate:
            msg = "Alternate form (#) not allowed with integer format specifier 'c'"
            raise InvalidSpecError(msg)
        if not 0 <= number < _MAX_CODE_POINT:
            msg = "%c arg not in range(0x110000)"
            raise InvalidSpecError(msg)
        return layout_number(
            sign="", prefix="", digits=chr(number), remainder="", spec=spec
        )

    def _render_digits(self, number: int, spec: FormatSpec) -> str:
        base, prefix = _BASES.get(spec.type or "d", (10, ""))
        digits = _to_base(abs(number), base)
        if spec.type == "X":
            digits = digits.upper()
        if not spec.alternate:
            prefix = ""

        separator = ""
        grouping: list[int] = []
        if spec.type == "n":
            _, separator, grouping = locale_grouping()
        elif spec.grouping is not Grouping.NONE:
            separator = spec.grouping.value
            grouping = [spec.group_interval]

        return layout_number(
            sign=sign_text(negative=number < 0, spec=spec),
            prefix=prefix,
            digits=digits,
            remainder="",
            spec=spec,
            separator=separator,
            grouping=grouping,
        )


def _to_base(number: int, base: int) -> str:
    """Digits of a non-negative integer in base 2, 8, 10 or 16."""
    match base:
        case 2:
            return bin(number)[2:]
        case 8:
            return oct(number)[2:]
        case 16:
            return hex(number)[2:]
    return str(number)
