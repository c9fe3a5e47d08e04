"""Project information utilities."""

from pathlib import Path
import tomllib

from pydantic import BaseModel

_UNAVAILABLE_DESCRIPTION = "Project description not available"
_UNAVAILABLE_VERSION = "Version not available"


class ProjectInfo(BaseModel):
    """Project information from pyproject.toml."""

    name: str = "pydantic-format"
    description: str
    version: str


def get_project_info() -> ProjectInfo:
    """Get project information from pyproject.toml file.

    Falls back to placeholder values when the package runs from an installed
    wheel (no pyproject.toml next to the sources) or the file is unreadable.

    Returns:
        ProjectInfo: A Pydantic model containing name, description and version.

    """
    # src/pydantic_format/project_info.py -> project root
    pyproject_path = Path(__file__).parent.parent.parent / "pyproject.toml"

    if not pyproject_path.exists():
        return ProjectInfo(
            description=_UNAVAILABLE_DESCRIPTION,
            version=_UNAVAILABLE_VERSION,
        )

    try:
        with pyproject_path.open("rb") as f:
            project = tomllib.load(f).get("project", {})
    except (OSError, tomllib.TOMLDecodeError) as e:
        return ProjectInfo(
            description=f"Error reading project info: {e}",
            version=_UNAVAILABLE_VERSION,
        )

    return ProjectInfo(
        name=project.get("name", "pydantic-format"),
        description=project.get("description", _UNAVAILABLE_DESCRIPTION),
        version=project.get("version", _UNAVAILABLE_VERSION),
    )
