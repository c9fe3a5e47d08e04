"""Custom exceptions for pydantic-format.

Every error raised while rendering derives from FormatError, which is also a
ValueError so callers that only know about the built-in ``str.format`` keep
working. Lookup errors additionally derive from the matching built-in lookup
exception.
"""


class FormatError(ValueError):
    """Base exception for template rendering errors.

    Attributes:
        message: Human readable description of the problem
        position: Character offset of the offending field in the template,
            or None when the error is not tied to a field
        field: Source text of the offending field, or None

    """

    def __init__(
        self,
        message: str,
        *,
        position: int | None = None,
        field: str | None = None,
    ) -> None:
        """Initialize with message and optional source location."""
        self.message = message
        self.position = position
        self.field = field
        super().__init__(message)

    def __str__(self) -> str:
        """Return the message with the source position when known."""
        if self.position is None:
            return self.message
        return f"{self.message} (at position {self.position})"

    def with_location(self, position: int, field: str | None) -> None:
        """Attach a source location if none was recorded yet.

        Args:
            position: Character offset of the field in the template
            field: Source text of the field

        """
        if self.position is None:
            self.position = position
            self.field = field


class TemplateSyntaxError(FormatError):
    """Raised when a template or a replacement field is malformed."""


class UnbalancedBraceError(TemplateSyntaxError):
    """Raised for a single '{' or '}' that is neither escaped nor matched."""


class NestingDepthError(FormatError):
    """Raised when format specs nest replacement fields too deeply."""


class FieldNumberingError(FormatError):
    """Raised when automatic and manual positional fields are mixed.

    This occurs when:
    - An empty field ``{}`` follows an explicit index such as ``{0}``
    - An explicit index follows an empty field
    """


class AttributeLookupError(FormatError, AttributeError):
    """Raised when a ``.attr`` accessor names a missing attribute."""


class IndexLookupError(FormatError, IndexError):
    """Raised when a positional argument or ``[index]`` accessor is missing."""


class KeyLookupError(FormatError, KeyError):
    """Raised when a keyword argument or ``[key]`` accessor is missing."""


class UnsupportedFormatTypeError(FormatError):
    """Raised when a presentation type does not apply to the value's kind."""


class FormatTypeMismatchError(UnsupportedFormatTypeError):
    """Raised when a numeric presentation type follows a conversion.

    Conversions (``!s``, ``!r``, ``!a``) always produce text, so a spec such as
    ``{0!r:.2f}`` can never be satisfied.
    """


class InvalidAlignmentError(FormatError):
    """Raised when '=' alignment is requested for a non-numeric value."""


class InvalidSpecError(FormatError):
    """Raised when a format spec is malformed or its options conflict."""


class UnusedArgumentError(FormatError):
    """Raised in strict mode when supplied arguments are never referenced."""


class ArgumentValidationError(FormatError):
    """Raised when arguments do not match the fields a template requires."""
