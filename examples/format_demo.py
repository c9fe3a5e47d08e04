"""Demonstration of pydantic-format's rendering capabilities.

This example showcases:
- Positional, keyword and accessor fields
- The format-spec mini-language for text, integers and floats
- Nested format specs supplying width and precision
- Typed errors carrying the position of the failing field
- FormatTemplate bound to a Pydantic input model
- Strict rendering and tracing configuration
"""

from decimal import Decimal

from pydantic import BaseModel

from pydantic_format import FormatError
from pydantic_format import FormatTemplate
from pydantic_format import RenderConfig
from pydantic_format import Renderer
from pydantic_format import collect_variables
from pydantic_format import format
from pydantic_format import render


class LineItem(BaseModel):
    """A line on an invoice."""

    description: str
    quantity: int
    unit_price: Decimal


class Invoice(BaseModel):
    """Invoice input for the template demo."""

    customer: str
    number: int
    items: list[LineItem]


def banner(title: str) -> None:
    """Print a section header."""
    print("\n" + "=" * 60)
    print(title)
    print("=" * 60)


def demo_basic_fields() -> None:
    """Demonstrate positional, keyword and accessor fields."""
    banner("DEMO 1: Fields")
    print(format("{} + {} = {}", 1, 2, 3))
    print(format("{1} before {0}", "second", "first"))
    user = {"name": "Ada", "langs": ["en"]}
    print(format("{user[name]} speaks {user[langs][0]!r}", user=user))


def demo_format_specs() -> None:
    """Demonstrate the mini-language."""
    banner("DEMO 2: Format specs")
    rows = [
        ("{:05d}", 42),
        ("{:+.2f}", 3.14159),
        ("{:#x}", 255),
        ("{:_b}", 1023),
        ("{:,}", 1234567),
        ("{:*^12}", "centre"),
        ("{:.3g}", 12345.6789),
        ("{:.1%}", 0.256),
        ("{:=+10.1f}", -7.25),
    ]
    for template, value in rows:
        print(f"{template:>12} -> {render(template, [value])!r}")


def demo_nested_specs() -> None:
    """Demonstrate fields inside format specs."""
    banner("DEMO 3: Nested specs")
    for width, precision in [(8, 2), (12, 5)]:
        print(render("[{:>{w}.{p}f}]", [3.14159], {"w": width, "p": precision}))


def demo_errors() -> None:
    """Demonstrate typed errors with positions."""
    banner("DEMO 4: Errors")
    for template, args in [
        ("{} {0}", ["a"]),
        ("Total: {0.missing}", [object()]),
        ("{:d}", ["text"]),
        ("oops }", []),
    ]:
        try:
            render(template, args)
        except FormatError as e:
            print(f"{template!r}: {type(e).__name__}: {e}")


def demo_model_template() -> None:
    """Demonstrate FormatTemplate with an input model."""
    banner("DEMO 5: FormatTemplate")
    template = FormatTemplate(
        "Invoice #{number:06d} for {customer} ({items[0].description})",
        input_model=Invoice,
    )
    print(f"Variables: {sorted(template.variables)}")
    invoice = Invoice(
        customer="Acme",
        number=42,
        items=[LineItem(description="Widgets", quantity=3, unit_price=Decimal("9.99"))],
    )
    print(template.render_model(invoice))

    line = FormatTemplate("{description:<12}{quantity:>4} x {unit_price:>8.2f}")
    for item in invoice.items:
        print(line.render_model(item))

    print(f"collect_variables: {collect_variables('{a:{w}} {b.c}')}")


def demo_configuration() -> None:
    """Demonstrate strict rendering."""
    banner("DEMO 6: Configuration")
    strict = Renderer(RenderConfig(allow_unused_arguments=False))
    try:
        strict.render("{name}", kwargs={"name": "Ada", "unused": 1})
    except FormatError as e:
        print(f"Strict renderer: {e}")


def main() -> None:
    """Run all demonstrations."""
    demo_basic_fields()
    demo_format_specs()
    demo_nested_specs()
    demo_errors()
    demo_model_template()
    demo_configuration()


if __name__ == "__main__":
    main()
