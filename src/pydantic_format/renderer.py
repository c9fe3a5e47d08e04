"""Template renderer: parse, resolve, convert and format in a single pass."""

from collections.abc import Mapping
from collections.abc import Sequence
import logging
import time

from pydantic_format.core.config import RenderConfig
from pydantic_format.core.errors import FormatError
from pydantic_format.core.errors import InvalidSpecError
from pydantic_format.core.errors import NestingDepthError
from pydantic_format.formatting import apply_format
from pydantic_format.observability import render_span
from pydantic_format.template.conversion import convert
from pydantic_format.template.enums import Conversion
from pydantic_format.template.parser import parse
from pydantic_format.template.resolver import ValueResolver
from pydantic_format.template.types import ArgumentSet
from pydantic_format.template.types import ReplacementField

logger = logging.getLogger(__name__)


class Renderer:
    """Render templates such as ``"{name!r:>{width}}"`` against arguments.

    A renderer holds only its (immutable) configuration; all per-call state
    lives in the call, so one instance can be shared freely.
    """

    def __init__(self, config: RenderConfig | None = None) -> None:
        """Initialize the renderer.

        Args:
            config: Render configuration (defaults to RenderConfig())

        """
        self.config = config or RenderConfig()

    def render(
        self,
        template: object,
        args: Sequence[object] = (),
        kwargs: Mapping[str, object] | None = None,
    ) -> str:
        """Render a template with positional and keyword arguments.

        Args:
            template: Template string
            args: Positional arguments, referenced as ``{}`` or ``{0}``
            kwargs: Keyword arguments, referenced as ``{name}``

        Returns:
            Rendered string

        Raises:
            TypeError: When template is not a string
            FormatError: When the template is malformed or a field cannot be
                resolved or formatted; the error carries the field position

        """
        if not isinstance(template, str):
            msg = f"Format template must be str, got {type(template).__name__}"
            raise TypeError(msg)

        arguments = ArgumentSet(positional=tuple(args), keywords=dict(kwargs or {}))
        if not self.config.trace_rendering:
            return self._render(template, arguments)

        with render_span(template, arguments) as span:
            start_time = time.perf_counter()
            result = self._render(template, arguments)
            span.set_attribute(
                "format.render_ms", (time.perf_counter() - start_time) * 1000
            )
            span.set_attribute("format.result_length", len(result))
            return result

    def format(self, template: object, /, *args: object, **kwargs: object) -> str:
        """Render a template, ``str.format`` style."""
        return self.render(template, args, kwargs)

    def convert_field(self, value: object, conversion: Conversion | None) -> object:
        """Apply a field's conversion. Override to add conversions."""
        return convert(value, conversion)

    def format_field(self, value: object, format_spec: str) -> str:
        """Format a converted value. Override to customise formatting."""
        return apply_format(value, format_spec)

    def _render(self, template: str, arguments: ArgumentSet) -> str:
        logger.debug(
            "Rendering template of %d chars with %d positional and %d keyword args",
            len(template),
            len(arguments.positional),
            len(arguments.keywords),
        )
        resolver = ValueResolver(arguments)
        result = self._expand(
            template,
            resolver,
            depth=self.config.max_nesting_depth,
            offset=0,
        )
        if not self.config.allow_unused_arguments:
            resolver.check_unused()
        return result

    def _expand(
        self,
        template: str,
        resolver: ValueResolver,
        *,
        depth: int,
        offset: int,
    ) -> str:
        """Render *template* (the top level or a nested spec) to text."""
        if depth <= 0:
            msg = "Max string recursion exceeded"
            raise NestingDepthError(msg, position=offset)

        nested = depth < self.config.max_nesting_depth
        parts: list[str] = []
        for segment in parse(template, offset=offset):
            if isinstance(segment, ReplacementField):
                parts.append(self._render_field(segment, resolver, depth, nested))
            else:
                parts.append(segment.text)
        return "".join(parts)

    def _render_field(
        self,
        field: ReplacementField,
        resolver: ValueResolver,
        depth: int,
        nested: bool,
    ) -> str:
        try:
            value = resolver.resolve(field.name)
            if nested:
                _check_spec_value(value)
            value = self.convert_field(value, field.conversion)

            format_spec = field.format_spec
            if field.has_nested_fields:
                format_spec = self._expand(
                    format_spec, resolver, depth=depth - 1, offset=field.spec_position
                )
            return self.format_field(value, format_spec)
        except FormatError as e:
            e.with_location(field.position, field.source)
            raise


def _check_spec_value(value: object) -> None:
    """Reject negative integers substituted into a format spec."""
    if isinstance(value, int) and not isinstance(value, bool) and value < 0:
        msg = f"Width and precision must not be negative, got {value}"
        raise InvalidSpecError(msg)


_default_renderer = Renderer()


def render(
    template: object,
    args: Sequence[object] = (),
    kwargs: Mapping[str, object] | None = None,
) -> str:
    """Render a template with the default renderer.

    Args:
        template: Template string
        args: Positional arguments
        kwargs: Keyword arguments

    Returns:
        Rendered string

    """
    return _default_renderer.render(template, args, kwargs)


def format(template: object, /, *args: object, **kwargs: object) -> str:  # noqa: A001
    """Render a template with the default renderer, ``str.format`` style."""
    return _default_renderer.render(template, args, kwargs)
