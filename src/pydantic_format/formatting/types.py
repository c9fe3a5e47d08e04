"""Core types and protocols for the format engines."""

from typing import Protocol
from typing import runtime_checkable


@runtime_checkable
class Formattable(Protocol):
    """Protocol for values that control their own rendering.

    ``apply_format_spec`` receives the raw spec text (after nested fields are
    substituted), so a value may implement its own spec mini-language.
    """

    def to_display_string(self) -> str:
        """Return the human readable rendering used by ``!s``."""
        ...

    def to_debug_string(self) -> str:
        """Return the programmer rendering used by ``!r`` and ``!a``."""
        ...

    def apply_format_spec(self, format_spec: str) -> str:
        """Render the value according to *format_spec*."""
        ...


class FormatEngine(Protocol):
    """Protocol for per-kind formatting engines."""

    def render(self, value: object, format_spec: str) -> str:
        """Render a value according to a raw format spec."""
        ...


class ConvertedText(str):
    """Text produced by a ``!s``, ``!r`` or ``!a`` conversion.

    Behaves exactly like ``str``; the type only records that a conversion
    already happened so numeric presentation types can be rejected with a
    precise error.
    """

    __slots__ = ()
