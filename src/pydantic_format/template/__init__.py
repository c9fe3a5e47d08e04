"""Template parsing, value resolution and conversion."""

from pydantic_format.template.conversion import convert
from pydantic_format.template.enums import Conversion
from pydantic_format.template.enums import Numbering
from pydantic_format.template.parser import parse
from pydantic_format.template.parser import parse_field_name
from pydantic_format.template.resolver import ValueResolver
from pydantic_format.template.types import ArgumentSet
from pydantic_format.template.types import AttributeAccessor
from pydantic_format.template.types import FieldName
from pydantic_format.template.types import IndexAccessor
from pydantic_format.template.types import LiteralText
from pydantic_format.template.types import ReplacementField
from pydantic_format.template.types import Segment
from pydantic_format.template.validation import collect_fields
from pydantic_format.template.validation import collect_variables
from pydantic_format.template.validation import validate_arguments

__all__ = [
    "ArgumentSet",
    "AttributeAccessor",
    "Conversion",
    "FieldName",
    "IndexAccessor",
    "LiteralText",
    "Numbering",
    "ReplacementField",
    "Segment",
    "ValueResolver",
    "collect_fields",
    "collect_variables",
    "convert",
    "parse",
    "parse_field_name",
    "validate_arguments",
]
