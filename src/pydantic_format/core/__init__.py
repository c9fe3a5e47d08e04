"""Core functionality for pydantic-format.

This module contains the error taxonomy and render configuration.
"""

from pydantic_format.core.config import RenderConfig
from pydantic_format.core.errors import ArgumentValidationError
from pydantic_format.core.errors import AttributeLookupError
from pydantic_format.core.errors import FieldNumberingError
from pydantic_format.core.errors import FormatError
from pydantic_format.core.errors import FormatTypeMismatchError
from pydantic_format.core.errors import IndexLookupError
from pydantic_format.core.errors import InvalidAlignmentError
from pydantic_format.core.errors import InvalidSpecError
from pydantic_format.core.errors import KeyLookupError
from pydantic_format.core.errors import NestingDepthError
from pydantic_format.core.errors import TemplateSyntaxError
from pydantic_format.core.errors import UnbalancedBraceError
from pydantic_format.core.errors import UnsupportedFormatTypeError
from pydantic_format.core.errors import UnusedArgumentError

__all__ = [
    "ArgumentValidationError",
    "AttributeLookupError",
    "FieldNumberingError",
    "FormatError",
    "FormatTypeMismatchError",
    "IndexLookupError",
    "InvalidAlignmentError",
    "InvalidSpecError",
    "KeyLookupError",
    "NestingDepthError",
    "RenderConfig",
    "TemplateSyntaxError",
    "UnbalancedBraceError",
    "UnsupportedFormatTypeError",
    "UnusedArgumentError",
]
