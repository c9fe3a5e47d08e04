"""Render configuration.

This module provides configuration options for template rendering including
nesting limits, argument strictness, and observability settings.
"""

from pydantic import BaseModel
from pydantic import Field


class RenderConfig(BaseModel):
    """Configuration for template rendering.

    Attributes:
        max_nesting_depth: How many levels of format specs may be expanded.
            The default of 2 allows a field's spec to contain fields
            (``{:{width}}``) but not fields inside those. Exceeding it raises
            NestingDepthError.
        allow_unused_arguments: When False, positional or keyword arguments the
            template never references raise UnusedArgumentError.
        trace_rendering: Whether to wrap each render call in an OpenTelemetry
            span. Default is False.

    """

    model_config = {"frozen": True}

    max_nesting_depth: int = Field(default=2, ge=1)
    allow_unused_arguments: bool = Field(default=True)
    trace_rendering: bool = Field(
        default=False,
        description="Emit a 'format.render' span for every render call",
    )
