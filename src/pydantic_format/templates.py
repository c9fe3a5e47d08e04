"""Reusable format templates bound to a pydantic input model."""

from collections.abc import Mapping
from typing import Generic
from typing import TypeVar

from pydantic import BaseModel

from pydantic_format.core.config import RenderConfig
from pydantic_format.core.errors import ArgumentValidationError
from pydantic_format.renderer import Renderer
from pydantic_format.template.types import ReplacementField
from pydantic_format.template.validation import collect_fields
from pydantic_format.template.validation import keyword_names

TIn = TypeVar("TIn", bound=BaseModel)


class FormatTemplate(Generic[TIn]):
    """A checked template, optionally tied to a model providing its keywords."""

    def __init__(
        self,
        template: str,
        *,
        input_model: type[TIn] | None = None,
        config: RenderConfig | None = None,
    ) -> None:
        """Initialize a format template.

        The whole template, nested specs included, is parsed once here so
        syntax errors surface at construction rather than at first render.

        Args:
            template: Template string
            input_model: Optional pydantic model whose fields supply keywords
            config: Render configuration

        Raises:
            TemplateSyntaxError: When the template is malformed
            ArgumentValidationError: When the template names keywords the
                input model does not define

        """
        self.template = template
        self.input_model = input_model
        self.fields: list[ReplacementField] = collect_fields(template)
        self._renderer = Renderer(config)

        if input_model is not None:
            unknown = self.variables - set(input_model.model_fields)
            if unknown:
                msg = (
                    f"Template variables not defined on {input_model.__name__}: "
                    f"{', '.join(sorted(unknown))}"
                )
                raise ArgumentValidationError(msg)

    @property
    def variables(self) -> set[str]:
        """Keyword names referenced by the template."""
        return keyword_names(self.fields)

    def render(self, *args: object, **kwargs: object) -> str:
        """Render with explicit positional and keyword arguments."""
        return self._renderer.render(self.template, args, kwargs)

    def render_model(
        self, input: TIn, extra: Mapping[str, object] | None = None
    ) -> str:
        """Render template with input model instance.

        Field values are passed as they are on the model (nested models stay
        models), so templates can use accessors such as ``{user.name}``.

        Args:
            input: Input model instance providing keyword arguments
            extra: Optional extra keywords not in model

        Returns:
            Rendered string

        Raises:
            TypeError: When input is not an instance of the input model
            FormatError: When rendering fails

        """
        if self.input_model is not None and not isinstance(input, self.input_model):
            msg = (
                f"Expected {self.input_model.__name__} instance, "
                f"got {type(input).__name__}"
            )
            raise TypeError(msg)

        data: dict[str, object] = dict(input)
        if extra:
            data = {**data, **extra}
        return self._renderer.render(self.template, (), data)

    def __repr__(self) -> str:
        """Return a short description of the template."""
        return f"FormatTemplate({self.template!r})"


def from_template(
    template: str,
    *,
    input_model: type[TIn] | None = None,
    config: RenderConfig | None = None,
) -> FormatTemplate[TIn]:
    """Create a format template from a template string.

    Args:
        template: Template string
        input_model: Optional pydantic model defining keyword arguments
        config: Render configuration

    Returns:
        Configured format template instance

    """
    return FormatTemplate(template, input_model=input_model, config=config)
