"""Format engine for values that format themselves."""

from pydantic_format.core.errors import UnsupportedFormatTypeError
from pydantic_format.formatting.types import Formattable


class CustomEngine:
    """Delegate to a Formattable value or to the value's own ``__format__``."""

    def render(self, value: object, format_spec: str) -> str:
        """Render a value that owns its formatting.

        Args:
            value: Formattable instance, or any object
            format_spec: Raw spec text, passed through untouched

        Returns:
            Rendered string

        Raises:
            UnsupportedFormatTypeError: When the value has no formatting of its
                own and the format spec is not empty

        """
        if isinstance(value, Formattable):
            return value.apply_format_spec(format_spec)
        if type(value).__format__ is object.__format__:
            if format_spec:
                msg = (
                    f"Unsupported format string '{format_spec}' passed to "
                    f"{type(value).__name__}.__format__"
                )
                raise UnsupportedFormatTypeError(msg)
            return str(value)
        return format(value, format_spec)
