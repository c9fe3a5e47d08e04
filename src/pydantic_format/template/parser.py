"""Template parser: splits a template into literal runs and replacement fields."""

from collections.abc import Iterator
import re

from pydantic_format.core.errors import TemplateSyntaxError
from pydantic_format.core.errors import UnbalancedBraceError
from pydantic_format.template.enums import Conversion
from pydantic_format.template.types import Accessor
from pydantic_format.template.types import AttributeAccessor
from pydantic_format.template.types import FieldName
from pydantic_format.template.types import IndexAccessor
from pydantic_format.template.types import LiteralText
from pydantic_format.template.types import ReplacementField
from pydantic_format.template.types import Segment

_BRACE_RE = re.compile(r"[{}]")


def parse(template: str, *, offset: int = 0) -> Iterator[Segment]:
    """Lazily split a template into segments, left to right.

    Args:
        template: Template text
        offset: Position of ``template`` inside the top-level template, used
            when parsing a format spec that contains nested fields

    Yields:
        LiteralText and ReplacementField segments in source order

    Raises:
        UnbalancedBraceError: On a single '}' or an unterminated field
        TemplateSyntaxError: On a malformed field

    """
    pos = 0
    end = len(template)
    literal: list[str] = []
    literal_start = 0

    while pos < end:
        match = _BRACE_RE.search(template, pos)
        if match is None:
            literal.append(template[pos:])
            break

        brace = match.start()
        literal.append(template[pos:brace])
        char = template[brace]

        if brace + 1 < end and template[brace + 1] == char:
            literal.append(char)
            pos = brace + 2
            continue

        if char == "}":
            msg = "Single '}' encountered in format string"
            raise UnbalancedBraceError(msg, position=offset + brace)

        if any(literal):
            yield LiteralText(text="".join(literal), position=offset + literal_start)
        literal = []

        close = _find_closing_brace(template, brace, offset)
        yield _parse_field(template, brace, close, offset)
        pos = close + 1
        literal_start = pos

    if any(literal):
        yield LiteralText(text="".join(literal), position=offset + literal_start)


def parse_field_name(text: str, position: int = 0) -> FieldName:
    """Split a field name into its argument reference and accessor chain.

    Args:
        text: Field name such as ``0``, ``user.name`` or ``rows[2].total``
        position: Offset of the field, for error reporting

    Returns:
        Parsed field name

    Raises:
        TemplateSyntaxError: On an empty attribute, a missing ']' or text
            following ']' that is not another accessor

    """
    end = len(text)
    pos = 0
    while pos < end and text[pos] not in ".[":
        pos += 1
    first = text[:pos]

    accessors: list[Accessor] = []
    while pos < end:
        if text[pos] == ".":
            start = pos + 1
            pos = start
            while pos < end and text[pos] not in ".[":
                pos += 1
            if pos == start:
                msg = "Empty attribute in format string"
                raise TemplateSyntaxError(msg, position=position)
            accessors.append(AttributeAccessor(name=text[start:pos]))
            continue

        close = text.find("]", pos + 1)
        if close == -1:
            msg = "Missing ']' in format string"
            raise TemplateSyntaxError(msg, position=position)
        key = text[pos + 1 : close]
        if not key:
            msg = "Empty attribute in format string"
            raise TemplateSyntaxError(msg, position=position)
        accessors.append(IndexAccessor(key=_as_index(key)))
        pos = close + 1
        if pos < end and text[pos] not in ".[":
            msg = "Only '.' or '[' may follow ']' in format field specifier"
            raise TemplateSyntaxError(msg, position=position)

    argument = None if not first else _as_index(first)
    return FieldName(argument=argument, accessors=tuple(accessors))


def _as_index(text: str) -> int | str:
    """Integer-like text is an index, anything else a name."""
    return int(text) if text.isdecimal() else text


def _find_closing_brace(template: str, start: int, offset: int) -> int:
    """Return the index of the '}' matching the '{' at *start*."""
    depth = 0
    for pos in range(start, len(template)):
        char = template[pos]
        if char == "{":
            depth += 1
        elif char == "}":
            depth -= 1
            if depth == 0:
                return pos

    if start + 1 == len(template):
        msg = "Single '{' encountered in format string"
    else:
        msg = "expected '}' before end of string"
    raise UnbalancedBraceError(msg, position=offset + start)


def _parse_field(
    template: str, start: int, close: int, offset: int
) -> ReplacementField:
    """Parse the field spanning ``template[start:close + 1]``."""
    position = offset + start
    source = template[start : close + 1]
    body_start = start + 1

    pos = body_start
    while pos < close:
        char = template[pos]
        if char == "{":
            msg = "unexpected '{' in field name"
            raise TemplateSyntaxError(msg, position=position, field=source)
        if char == "[":
            bracket = template.find("]", pos, close)
            pos = close if bracket == -1 else bracket + 1
            continue
        if char in "!:":
            break
        pos += 1

    name = parse_field_name(template[body_start:pos], position)
    conversion: Conversion | None = None

    if pos < close and template[pos] == "!":
        if pos + 1 >= close:
            msg = "end of string while looking for conversion specifier"
            raise TemplateSyntaxError(msg, position=position, field=source)
        char = template[pos + 1]
        try:
            conversion = Conversion(char)
        except ValueError as e:
            msg = f"Unknown conversion specifier {char}"
            raise TemplateSyntaxError(msg, position=position, field=source) from e
        pos += 2
        if pos < close and template[pos] != ":":
            msg = "expected ':' after conversion specifier"
            raise TemplateSyntaxError(msg, position=position, field=source)

    # pos is at ':' or at the closing brace.
    spec_start = min(pos + 1, close)
    return ReplacementField(
        source=source,
        name=name,
        conversion=conversion,
        format_spec=template[spec_start:close],
        position=position,
        spec_position=offset + spec_start,
    )
