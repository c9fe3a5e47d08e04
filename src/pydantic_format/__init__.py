"""pydantic-format - the format-string mini-language as a library.

This package renders templates containing replacement fields of the form
``{field_name!conversion:format_spec}`` against positional and keyword
arguments. Every stage (field parsing, value resolution, conversion and the
format-spec engine) is a separate, inspectable component, and every failure
is a typed error carrying the position of the offending field.
"""

from pydantic_format.core import ArgumentValidationError
from pydantic_format.core import AttributeLookupError
from pydantic_format.core import FieldNumberingError
from pydantic_format.core import FormatError
from pydantic_format.core import FormatTypeMismatchError
from pydantic_format.core import IndexLookupError
from pydantic_format.core import InvalidAlignmentError
from pydantic_format.core import InvalidSpecError
from pydantic_format.core import KeyLookupError
from pydantic_format.core import NestingDepthError
from pydantic_format.core import RenderConfig
from pydantic_format.core import TemplateSyntaxError
from pydantic_format.core import UnbalancedBraceError
from pydantic_format.core import UnsupportedFormatTypeError
from pydantic_format.core import UnusedArgumentError
from pydantic_format.formatting import ConvertedText
from pydantic_format.formatting import FormatSpec
from pydantic_format.formatting import Formattable
from pydantic_format.formatting import apply_format
from pydantic_format.formatting import parse_format_spec
from pydantic_format.project_info import ProjectInfo
from pydantic_format.project_info import get_project_info
from pydantic_format.renderer import Renderer
from pydantic_format.renderer import format
from pydantic_format.renderer import render
from pydantic_format.template import ArgumentSet
from pydantic_format.template import Conversion
from pydantic_format.template import FieldName
from pydantic_format.template import LiteralText
from pydantic_format.template import ReplacementField
from pydantic_format.template import collect_fields
from pydantic_format.template import collect_variables
from pydantic_format.template import convert
from pydantic_format.template import parse
from pydantic_format.template import validate_arguments
from pydantic_format.templates import FormatTemplate
from pydantic_format.templates import from_template

# Public API - supports both direct and module imports
__all__ = [
    "ArgumentSet",
    "ArgumentValidationError",
    "AttributeLookupError",
    "Conversion",
    "ConvertedText",
    "FieldName",
    "FieldNumberingError",
    "FormatError",
    "FormatSpec",
    "FormatTemplate",
    "FormatTypeMismatchError",
    "Formattable",
    "IndexLookupError",
    "InvalidAlignmentError",
    "InvalidSpecError",
    "KeyLookupError",
    "LiteralText",
    "NestingDepthError",
    "ProjectInfo",
    "RenderConfig",
    "Renderer",
    "ReplacementField",
    "TemplateSyntaxError",
    "UnbalancedBraceError",
    "UnsupportedFormatTypeError",
    "UnusedArgumentError",
    "apply_format",
    "collect_fields",
    "collect_variables",
    "convert",
    "format",
    "from_template",
    "get_project_info",
    "parse",
    "parse_format_spec",
    "render",
    "validate_arguments",
]
__version__ = get_project_info().version
