"""Template validation utilities."""

from collections.abc import Iterable
from collections.abc import Iterator
from collections.abc import Mapping
from collections.abc import Sequence

from pydantic_format.core.errors import ArgumentValidationError
from pydantic_format.template.parser import parse
from pydantic_format.template.types import ReplacementField


def collect_fields(template: object) -> list[ReplacementField]:
    """Extract every replacement field, including fields nested in specs.

    Args:
        template: Template string

    Returns:
        Fields in source order, each followed by the fields of its spec

    Raises:
        TypeError: When template is not a string
        TemplateSyntaxError: When the template is malformed

    """
    if not isinstance(template, str):
        msg = f"Cannot collect fields from {type(template).__name__}"
        raise TypeError(msg)
    return list(_walk(template, 0))


def collect_variables(template: object) -> set[str]:
    """Extract the keyword argument names a template refers to.

    Args:
        template: Template string

    Returns:
        Set of keyword names (positional fields are not included)

    """
    return keyword_names(collect_fields(template))


def keyword_names(fields: Iterable[ReplacementField]) -> set[str]:
    """Return the keyword roots named by *fields*."""
    return {
        field.name.argument
        for field in fields
        if isinstance(field.name.argument, str)
    }


def validate_arguments(
    template: object,
    args: Sequence[object] = (),
    kwargs: Mapping[str, object] | None = None,
    *,
    allow_extra: bool = True,
) -> None:
    """Validate that arguments cover every field of a template.

    Args:
        template: Template string
        args: Positional arguments that will be supplied
        kwargs: Keyword arguments that will be supplied
        allow_extra: Whether unreferenced arguments are acceptable

    Raises:
        ArgumentValidationError: When arguments are missing, or extra while
            ``allow_extra`` is False

    """
    fields = collect_fields(template)
    provided = set(kwargs or {})
    required = keyword_names(fields)
    automatic = sum(1 for field in fields if field.name.is_automatic)
    indices = [
        field.name.argument for field in fields if isinstance(field.name.argument, int)
    ]
    positional_needed = max([automatic, *(index + 1 for index in indices)])

    msg_parts = []
    missing = required - provided
    if missing:
        msg_parts.append(f"Missing variables: {', '.join(sorted(missing))}")
    if len(args) < positional_needed:
        msg_parts.append(
            f"Expected at least {positional_needed} positional arguments, "
            f"got {len(args)}"
        )
    if not allow_extra:
        extra = provided - required
        if extra:
            msg_parts.append(f"Extra variables: {', '.join(sorted(extra))}")
        if len(args) > positional_needed:
            msg_parts.append(
                f"Expected at most {positional_needed} positional arguments, "
                f"got {len(args)}"
            )

    if msg_parts:
        raise ArgumentValidationError("; ".join(msg_parts))


def _walk(template: str, offset: int) -> Iterator[ReplacementField]:
    for segment in parse(template, offset=offset):
        if isinstance(segment, ReplacementField):
            yield segment
            if segment.has_nested_fields:
                yield from _walk(segment.format_spec, segment.spec_position)
