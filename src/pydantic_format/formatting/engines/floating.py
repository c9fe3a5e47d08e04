"""Format engine for floating point values.

Digits are produced from the exact binary value of the float using
``decimal`` with round-half-even, so every presentation type is correctly
rounded. The shortest round-tripping rendering (used when neither type nor
precision is given) is the one ``repr`` produces.
"""

from decimal import ROUND_HALF_EVEN
from decimal import Context
from decimal import Decimal
import math
from typing import NamedTuple

from pydantic_format.core.errors import UnsupportedFormatTypeError
from pydantic_format.formatting.enums import Grouping
from pydantic_format.formatting.enums import Sign
from pydantic_format.formatting.layout import layout_number
from pydantic_format.formatting.layout import locale_grouping
from pydantic_format.formatting.spec import FLOAT_TYPES
from pydantic_format.formatting.spec import FormatSpec
from pydantic_format.formatting.spec import parse_format_spec

DEFAULT_PRECISION = 6

# Enough headroom for the integer digits of any finite double.
_INTEGER_DIGITS = 330


class FloatParts(NamedTuple):
    """A non-negative finite number split into the pieces layout needs."""

    integer: str
    fraction: str
    point: bool
    exponent: str


def sign_text(*, negative: bool, spec: FormatSpec) -> str:
    """Return the sign prefix for a number."""
    if negative:
        return "-"
    match spec.effective_sign:
        case Sign.PLUS:
            return "+"
        case Sign.SPACE:
            return " "
    return ""


class FloatEngine:
    """Render floats in fixed, scientific, general or percent notation."""

    def render(self, value: object, format_spec: str) -> str:
        """Render a float with a format spec.

        Args:
            value: A ``float``
            format_spec: Raw spec text

        Returns:
            Rendered string

        Raises:
            UnsupportedFormatTypeError: When the presentation type is not a
                float type

        """
        if not format_spec:
            return str(value)
        spec = parse_format_spec(format_spec)
        return self.render_spec(float(value), spec)  # type: ignore[arg-type]

    def render_spec(self, value: float, spec: FormatSpec) -> str:
        """Render a float with an already parsed spec."""
        type_char = spec.type
        if type_char is not None and type_char not in FLOAT_TYPES:
            msg = f"Unknown format code '{type_char}' for object of type 'float'"
            raise UnsupportedFormatTypeError(msg)

        if type_char == "%":
            value *= 100
        # The sign of a nan is never shown.
        negative = not math.isnan(value) and math.copysign(1.0, value) < 0
        magnitude = abs(value)

        decimal_point = "."
        separator = ""
        grouping: list[int] = []
        if type_char == "n":
            decimal_point, separator, grouping = locale_grouping()
        elif spec.grouping is not Grouping.NONE:
            separator = spec.grouping.value
            grouping = [3]

        suffix = "%" if type_char == "%" else ""
        upper = type_char in ("E", "F", "G")

        if not math.isfinite(magnitude):
            special = "nan" if math.isnan(magnitude) else "inf"
            return layout_number(
                sign=sign_text(negative=negative, spec=spec),
                prefix="",
                digits="",
                remainder=(special.upper() if upper else special) + suffix,
                spec=spec,
            )

        parts = self._split(magnitude, spec)
        rounded_to_zero = not (parts.integer + parts.fraction).strip("0")
        if negative and spec.coerce_zero and rounded_to_zero:
            negative = False

        exponent = parts.exponent.upper() if upper else parts.exponent
        remainder = (decimal_point if parts.point else "") + parts.fraction
        return layout_number(
            sign=sign_text(negative=negative, spec=spec),
            prefix="",
            digits=parts.integer,
            remainder=remainder + exponent + suffix,
            spec=spec,
            separator=separator,
            grouping=grouping,
        )

    def _split(self, magnitude: float, spec: FormatSpec) -> FloatParts:
        precision = spec.precision
        match spec.type:
            case "f" | "F" | "%":
                return fixed(
                    magnitude, _or_default(precision), alternate=spec.alternate
                )
            case "e" | "E":
                return scientific(
                    magnitude, _or_default(precision), alternate=spec.alternate
                )
            case "g" | "G" | "n":
                return general(
                    magnitude, _or_default(precision), alternate=spec.alternate
                )
            case None if precision is not None:
                return general(
                    magnitude, precision, alternate=spec.alternate, add_dot_zero=True
                )
        return shortest(magnitude, alternate=spec.alternate)


def fixed(magnitude: float, precision: int, *, alternate: bool = False) -> FloatParts:
    """Fixed-point notation with *precision* digits after the point."""
    context = Context(prec=_INTEGER_DIGITS + precision, rounding=ROUND_HALF_EVEN)
    quantum = Decimal((0, (1,), -precision))
    rounded = Decimal(magnitude).quantize(quantum, context=context)
    digits = "".join(map(str, rounded.as_tuple().digits)).rjust(precision + 1, "0")
    if precision:
        return FloatParts(digits[:-precision], digits[-precision:], True, "")
    return FloatParts(digits, "", alternate, "")


def scientific(
    magnitude: float, precision: int, *, alternate: bool = False
) -> FloatParts:
    """Scientific notation with *precision* digits after the point."""
    digits, exponent = significant_digits(magnitude, precision + 1)
    return FloatParts(
        digits[0], digits[1:], bool(precision) or alternate, _exponent(exponent)
    )


def general(
    magnitude: float,
    precision: int,
    *,
    alternate: bool = False,
    add_dot_zero: bool = False,
) -> FloatParts:
    """General notation: fixed-point when ``-4 <= exp < precision``.

    The exponent is taken after rounding to *precision* significant digits.
    Trailing zeros (and a bare point) are removed unless *alternate* is set.
    With *add_dot_zero* an integral fixed-point result keeps one ``0``
    after the point, and scientific notation starts one exponent earlier
    (``exp >= precision - 1``) to leave room for it.
    """
    precision = max(precision, 1)
    digits, exponent = significant_digits(magnitude, precision)
    limit = precision - 1 if add_dot_zero else precision

    if -4 <= exponent < limit:
        if exponent >= 0:
            integer, fraction = digits[: exponent + 1], digits[exponent + 1 :]
        else:
            integer, fraction = "0", "0" * (-exponent - 1) + digits
        exponent_text = ""
    else:
        integer, fraction = digits[0], digits[1:]
        exponent_text = _exponent(exponent)

    if not alternate:
        fraction = fraction.rstrip("0")
        if add_dot_zero and not fraction and not exponent_text:
            fraction = "0"
    return FloatParts(integer, fraction, bool(fraction) or alternate, exponent_text)


def shortest(magnitude: float, *, alternate: bool = False) -> FloatParts:
    """The shortest text that round-trips, as produced by ``repr``."""
    mantissa, _, exponent = repr(magnitude).partition("e")
    integer, point, fraction = mantissa.partition(".")
    exponent_text = f"e{exponent}" if exponent else ""
    return FloatParts(integer, fraction, bool(point) or alternate, exponent_text)


def significant_digits(magnitude: float, count: int) -> tuple[str, int]:
    """Round to *count* significant digits.

    Returns:
        The digit string (exactly *count* digits) and the base-10 exponent of
        the first digit after rounding

    """
    context = Context(prec=count, rounding=ROUND_HALF_EVEN)
    rounded = context.plus(Decimal(magnitude))
    digits = "".join(map(str, rounded.as_tuple().digits)).ljust(count, "0")
    return digits, rounded.adjusted()


def _exponent(exponent: int) -> str:
    sign = "-" if exponent < 0 else "+"
    return f"e{sign}{str(abs(exponent)).rjust(2, '0')}"


def _or_default(precision: int | None) -> int:
    return DEFAULT_PRECISION if precision is None else precision
