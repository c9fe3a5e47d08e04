"""Core types for parsed templates and render arguments."""

from typing import Annotated
from typing import Any
from typing import Literal

from pydantic import BaseModel
from pydantic import Field

from pydantic_format.core.errors import AttributeLookupError
from pydantic_format.core.errors import IndexLookupError
from pydantic_format.core.errors import KeyLookupError
from pydantic_format.template.enums import Conversion


class AttributeAccessor(BaseModel):
    """``.name`` step of a field name."""

    model_config = {"frozen": True}

    kind: Literal["attribute"] = "attribute"
    name: str = Field(min_length=1)

    def apply(self, value: object) -> object:
        """Look the attribute up on *value*."""
        try:
            return getattr(value, self.name)
        except AttributeError as e:
            msg = f"'{type(value).__name__}' object has no attribute '{self.name}'"
            raise AttributeLookupError(msg) from e

    def __str__(self) -> str:
        """Return the accessor as written in a template."""
        return f".{self.name}"


class IndexAccessor(BaseModel):
    """``[key]`` step of a field name.

    Integer-like text inside the brackets is an index, anything else a
    string key; quotes are not interpreted.
    """

    model_config = {"frozen": True}

    kind: Literal["index"] = "index"
    key: int | str

    def apply(self, value: object) -> object:
        """Look the key up on *value* with ``value[key]``."""
        type_name = type(value).__name__
        try:
            return value[self.key]  # type: ignore[index]
        except KeyError as e:
            msg = f"Key {self.key!r} not found in '{type_name}' object"
            raise KeyLookupError(msg) from e
        except IndexError as e:
            msg = f"Index {self.key!r} out of range for '{type_name}' object"
            raise IndexLookupError(msg) from e
        except TypeError as e:
            msg = f"'{type_name}' object cannot be indexed with {self.key!r}"
            raise IndexLookupError(msg) from e

    def __str__(self) -> str:
        """Return the accessor as written in a template."""
        return f"[{self.key}]"


Accessor = Annotated[AttributeAccessor | IndexAccessor, Field(discriminator="kind")]


class FieldName(BaseModel):
    """Argument reference of a replacement field plus its accessor chain.

    Attributes:
        argument: None for an automatic field (``{}``), an int for an
            explicit positional index, a str for a keyword
        accessors: Attribute and index steps applied left to right

    """

    model_config = {"frozen": True}

    argument: int | str | None = None
    accessors: tuple[Accessor, ...] = ()

    @property
    def is_automatic(self) -> bool:
        """Whether the field takes the next positional argument."""
        return self.argument is None

    def __str__(self) -> str:
        """Return the field name as written in a template."""
        root = "" if self.argument is None else str(self.argument)
        return root + "".join(str(accessor) for accessor in self.accessors)


class LiteralText(BaseModel):
    """Literal run of a template, with ``{{``/``}}`` already unescaped."""

    model_config = {"frozen": True}

    kind: Literal["literal"] = "literal"
    text: str
    position: int = Field(ge=0)


class ReplacementField(BaseModel):
    """A ``{name!conversion:format_spec}`` field.

    Attributes:
        source: The field exactly as written, braces included
        name: Parsed field name
        conversion: Conversion to apply before formatting, if any
        format_spec: Raw spec text, possibly containing nested fields
        position: Offset of the opening brace in the top-level template
        spec_position: Offset of the first character of the format spec

    """

    model_config = {"frozen": True}

    kind: Literal["field"] = "field"
    source: str
    name: FieldName
    conversion: Conversion | None = None
    format_spec: str = ""
    position: int = Field(ge=0)
    spec_position: int = Field(ge=0)

    @property
    def has_nested_fields(self) -> bool:
        """Whether the format spec must be expanded before it is parsed."""
        return "{" in self.format_spec


Segment = Annotated[LiteralText | ReplacementField, Field(discriminator="kind")]


class ArgumentSet(BaseModel):
    """Positional and keyword values supplied to one render call."""

    model_config = {"frozen": True}

    positional: tuple[Any, ...] = ()
    keywords: dict[str, Any] = Field(default_factory=dict)
