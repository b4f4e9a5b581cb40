"""Read project snapshots saved by the editor (JSON or YAML)."""

import json
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from .errors import ProjectLoadError
from .models import ProjectData

YAML_SUFFIXES = {".yaml", ".yml"}


def parse_project(data: Any, path: Path | None = None) -> ProjectData:
    """Validate a decoded document into a ProjectData."""
    if not isinstance(data, dict):
        raise ProjectLoadError("project document must be a mapping", path)
    try:
        return ProjectData.model_validate(data)
    except ValidationError as e:
        raise ProjectLoadError(f"invalid project: {e}", path) from e


def load_project(path: str | Path) -> ProjectData:
    """Load a project from a .json, .yaml or .yml file."""
    path = Path(path)
    try:
        text = path.read_text()
    except OSError as e:
        raise ProjectLoadError(f"cannot read file: {e}", path) from e

    try:
        if path.suffix.lower() in YAML_SUFFIXES:
            data = yaml.safe_load(text)
        else:
            data = json.loads(text)
    except (yaml.YAMLError, json.JSONDecodeError) as e:
        raise ProjectLoadError(f"malformed document: {e}", path) from e

    return parse_project(data, path)
