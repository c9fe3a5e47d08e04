"""Command line entry point for pydantic-format.

Usage:
    python -m pydantic_format
    python -m pydantic_format TEMPLATE [VALUE ...]

Without arguments the project name, version and description are printed.
With a template, each VALUE is passed as a positional argument, or as a
keyword argument when written ``name=value``. Values that look like integers
or floats are passed as numbers.
"""

import argparse
from collections.abc import Sequence
import sys

from pydantic_format.core.errors import FormatError
from pydantic_format.project_info import get_project_info
from pydantic_format.renderer import render


def parse_values(values: Sequence[str]) -> tuple[list[object], dict[str, object]]:
    """Split command line values into positional and keyword arguments."""
    args: list[object] = []
    kwargs: dict[str, object] = {}
    for value in values:
        name, sep, text = value.partition("=")
        if sep and name.isidentifier():
            kwargs[name] = coerce_value(text)
        else:
            args.append(coerce_value(value))
    return args, kwargs


def coerce_value(text: str) -> object:
    """Interpret *text* as an int, then a float, else keep it as a string."""
    for kind in (int, float):
        try:
            return kind(text)
        except ValueError:
            continue
    return text


def main(argv: Sequence[str] | None = None) -> int:
    """Print project information or render a template from the command line."""
    parser = argparse.ArgumentParser(
        prog="pydantic-format", description="Render a format template"
    )
    parser.add_argument("template", nargs="?", help="template to render")
    parser.add_argument(
        "values", nargs="*", help="positional values or name=value keywords"
    )
    ns = parser.parse_args(argv)

    if ns.template is None:
        info = get_project_info()
        print(f"{info.name} v{info.version}: {info.description}")
        return 0

    args, kwargs = parse_values(ns.values)
    try:
        print(render(ns.template, args, kwargs))
    except FormatError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
