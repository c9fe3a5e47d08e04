"""Padding, alignment and digit grouping shared by the format engines."""

from collections.abc import Iterator
from collections.abc import Sequence
from itertools import repeat
import locale

from pydantic_format.formatting.enums import Align
from pydantic_format.formatting.spec import FormatSpec


def pad(body: str, *, width: int, fill: str, align: Align, head: str = "") -> str:
    """Pad *head* + *body* to *width* characters.

    Args:
        body: Main text (digits and remainder for numbers)
        width: Minimum width of the result
        fill: Fill character
        align: Where padding goes; AFTER_SIGN pads between head and body
        head: Sign and base prefix of a number, empty for text

    Returns:
        Padded text

    """
    padding = width - len(head) - len(body)
    if padding <= 0:
        return head + body

    match align:
        case Align.LEFT:
            return head + body + fill * padding
        case Align.RIGHT:
            return fill * padding + head + body
        case Align.CENTER:
            left = padding // 2
            return fill * left + head + body + fill * (padding - left)
        case Align.AFTER_SIGN:
            return head + fill * padding + body

    msg = f"Unsupported alignment: {align!s}"
    raise ValueError(msg)


def group_digits(
    digits: str,
    *,
    separator: str,
    grouping: Sequence[int],
    min_width: int = 0,
) -> str:
    """Insert separators into a run of integer digits.

    Groups are built right to left. When *min_width* is positive the digits
    are zero-extended until the grouped result is at least that wide, with
    separators between the padding zeros as well, so ``1234`` with a width of
    10 becomes ``00,001,234``.

    Args:
        digits: Integer digits, most significant first
        separator: Text placed between groups
        grouping: Group sizes from the right, locale style: a trailing 0 or
            the end of the sequence repeats the last size, ``locale.CHAR_MAX``
            stops grouping
        min_width: Minimum width of the result including separators

    Returns:
        Grouped digits

    """
    min_width = max(0, min_width)
    remaining = len(digits)
    end = len(digits)
    groups: list[str] = []

    for size in _group_sizes(grouping):
        length = min(size, max(remaining, min_width, 1))
        n_chars = max(0, min(remaining, length))
        groups.append("0" * max(0, length - remaining) + digits[end - n_chars : end])
        end -= n_chars
        remaining -= n_chars
        min_width -= length
        if remaining <= 0 and min_width <= 0:
            break
        min_width -= len(separator)
    else:
        length = max(remaining, min_width, 1)
        n_chars = max(0, min(remaining, length))
        groups.append("0" * max(0, length - remaining) + digits[end - n_chars : end])

    return separator.join(reversed(groups))


def layout_number(
    *,
    sign: str,
    prefix: str,
    digits: str,
    remainder: str,
    spec: FormatSpec,
    separator: str = "",
    grouping: Sequence[int] = (),
) -> str:
    """Assemble a formatted number from its parts and pad it.

    Args:
        sign: Sign text ("", "-", "+" or " ")
        prefix: Base prefix such as "0x"
        digits: Integer digits; empty for inf and nan
        remainder: Everything after the integer digits (decimal point,
            fraction, exponent, percent sign)
        spec: Parsed format spec supplying width, fill and alignment
        separator: Thousands separator, empty for none
        grouping: Group sizes for *separator*

    Returns:
        The padded number

    """
    fill = spec.fill_char
    align = spec.alignment_for(Align.RIGHT)
    width = spec.width or 0

    if digits:
        min_width = 0
        if fill == "0" and align is Align.AFTER_SIGN:
            min_width = width - len(sign) - len(prefix) - len(remainder)
        digits = group_digits(
            digits, separator=separator, grouping=grouping, min_width=min_width
        )

    return pad(
        digits + remainder, width=width, fill=fill, align=align, head=sign + prefix
    )


def locale_grouping() -> tuple[str, str, list[int]]:
    """Return (decimal point, thousands separator, grouping) for the 'n' type."""
    conv = locale.localeconv()
    separator = str(conv["thousands_sep"])
    grouping = conv["grouping"] if separator else []
    return str(conv["decimal_point"]), separator, list(grouping)


def _group_sizes(grouping: Sequence[int]) -> Iterator[int]:
    """Yield group sizes, repeating the last one forever unless stopped."""
    previous = 0
    for size in grouping:
        if size == locale.CHAR_MAX:
            return
        if size == 0:
            break
        previous = size
        yield size
    if previous:
        yield from repeat(previous)
