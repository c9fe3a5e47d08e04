"""OpenTelemetry instrumentation for render calls."""

from collections.abc import Iterator
from contextlib import contextmanager
import hashlib

from opentelemetry import trace
from opentelemetry.trace import Span

from pydantic_format.template.types import ArgumentSet

tracer = trace.get_tracer(__name__)


@contextmanager
def render_span(template: str, arguments: ArgumentSet) -> Iterator[Span]:
    """Open a ``format.render`` span describing one render call.

    Args:
        template: Template being rendered
        arguments: Arguments supplied to the call

    Yields:
        The active span, so the caller can record result attributes

    """
    with tracer.start_as_current_span("format.render") as span:
        span.set_attribute("format.template_hash", hash_template(template))
        span.set_attribute("format.template_length", len(template))
        span.set_attribute("format.positional_count", len(arguments.positional))
        span.set_attribute(
            "format.keyword_names", ",".join(sorted(arguments.keywords))
        )
        yield span


def hash_template(template: object) -> str:
    """Generate hash of template for telemetry."""
    template_str = str(template)[:500]
    return hashlib.sha256(template_str.encode()).hexdigest()[:16]
