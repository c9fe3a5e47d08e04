"""Format-spec model and mini-language parser.

The grammar accepted by :func:`parse_format_spec` is::

    [[fill]align][sign]["z"]["#"]["0"][width][grouping]["." precision][type]
"""

import sys

from pydantic import BaseModel
from pydantic import Field

from pydantic_format.core.errors import InvalidSpecError
from pydantic_format.formatting.enums import Align
from pydantic_format.formatting.enums import Grouping
from pydantic_format.formatting.enums import Sign

_ALIGN_CHARS = frozenset("<>=^")
_SIGN_CHARS = frozenset("+- ")
_GROUPING_CHARS = frozenset(",_")

INTEGER_TYPES = frozenset("bcdoxXn")
FLOAT_TYPES = frozenset("eEfFgGn%")
NUMERIC_TYPES = INTEGER_TYPES | FLOAT_TYPES

# Presentation types that accept a thousands separator of either kind.
_GROUPABLE_TYPES = frozenset("defgEG%F")
# Presentation types that accept '_' only, grouped every four digits.
_BASE_TYPES = frozenset("boxX")


class FormatSpec(BaseModel):
    """Parsed form of a format spec such as ``*>+#012,.3f``.

    ``fill``, ``align`` and ``sign`` are None when the format spec does not state
    them; the effective values depend on the kind of value being formatted.
    """

    model_config = {"frozen": True}

    fill: str | None = Field(default=None, min_length=1, max_length=1)
    align: Align | None = None
    sign: Sign | None = None
    coerce_zero: bool = False
    alternate: bool = False
    zero_pad: bool = False
    width: int | None = Field(default=None, ge=0)
    grouping: Grouping = Grouping.NONE
    precision: int | None = Field(default=None, ge=0)
    type: str | None = Field(default=None, min_length=1, max_length=1)

    @property
    def fill_char(self) -> str:
        """Fill character after applying the zero-padding shorthand."""
        if self.fill is not None:
            return self.fill
        return "0" if self.zero_pad else " "

    @property
    def effective_sign(self) -> Sign:
        """Sign option, defaulting to '-'."""
        return self.sign or Sign.MINUS

    def alignment_for(self, default: Align) -> Align:
        """Resolve the alignment for a value whose natural alignment is *default*.

        The ``0`` flag means sign-aware padding for numbers (which default to
        right alignment) unless an explicit alignment overrides it.
        """
        if self.align is not None:
            return self.align
        if self.zero_pad and default is Align.RIGHT:
            return Align.AFTER_SIGN
        return default

    @property
    def group_interval(self) -> int:
        """Number of digits between separators for this spec's type."""
        if self.grouping is Grouping.UNDERSCORE and self.type in _BASE_TYPES:
            return 4
        return 3


def parse_format_spec(text: str) -> FormatSpec:
    """Parse a format spec string into a FormatSpec.

    Args:
        text: Raw spec text, with any nested fields already substituted

    Returns:
        Parsed spec

    Raises:
        InvalidSpecError: When the format spec is malformed or its grouping
            conflicts with its presentation type

    """
    pos = 0
    end = len(text)
    fill: str | None = None
    align: str | None = None

    if end >= 2 and text[1] in _ALIGN_CHARS:
        fill, align = text[0], text[1]
        pos = 2
    elif end >= 1 and text[0] in _ALIGN_CHARS:
        align = text[0]
        pos = 1

    sign: str | None = None
    if pos < end and text[pos] in _SIGN_CHARS:
        sign = text[pos]
        pos += 1

    coerce_zero = pos < end and text[pos] == "z"
    if coerce_zero:
        pos += 1

    alternate = pos < end and text[pos] == "#"
    if alternate:
        pos += 1

    # A leading '0' only means zero padding when no fill was given.
    zero_pad = fill is None and pos < end and text[pos] == "0"
    if zero_pad:
        pos += 1

    width, pos = _read_number(text, pos)

    grouping = Grouping.NONE
    if pos < end and text[pos] in _GROUPING_CHARS:
        grouping = Grouping(text[pos])
        pos += 1
        if pos < end and text[pos] in _GROUPING_CHARS:
            if text[pos] == grouping.value:
                msg = f"Cannot specify '{text[pos]}' twice."
            else:
                msg = "Cannot specify both ',' and '_'."
            raise InvalidSpecError(msg)

    precision: int | None = None
    if pos < end and text[pos] == ".":
        precision, pos = _read_number(text, pos + 1)
        if precision is None:
            msg = "Format specifier missing precision"
            raise InvalidSpecError(msg)

    if end - pos > 1:
        msg = f"Invalid format specifier '{text}'"
        raise InvalidSpecError(msg)
    type_char = text[pos:] or None

    if grouping is not Grouping.NONE and type_char is not None:
        allowed = type_char in _GROUPABLE_TYPES or (
            type_char in _BASE_TYPES and grouping is Grouping.UNDERSCORE
        )
        if not allowed:
            msg = f"Cannot specify '{grouping.value}' with '{type_char}'."
            raise InvalidSpecError(msg)

    return FormatSpec(
        fill=fill,
        align=Align(align) if align is not None else None,
        sign=Sign(sign) if sign is not None else None,
        coerce_zero=coerce_zero,
        alternate=alternate,
        zero_pad=zero_pad,
        width=width,
        grouping=grouping,
        precision=precision,
        type=type_char,
    )


def _read_number(text: str, pos: int) -> tuple[int | None, int]:
    """Read a run of decimal digits (any script) starting at *pos*."""
    start = pos
    while pos < len(text) and text[pos].isdecimal():
        pos += 1
    if pos == start:
        return None, pos
    number = int(text[start:pos])
    if number > sys.maxsize:
        msg = "Too many decimal digits in format string"
        raise InvalidSpecError(msg)
    return number, pos
