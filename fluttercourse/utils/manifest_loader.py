"""
Manifest loader utility.

Reads the YAML course manifest and validates it against CourseManifest.
"""

from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from fluttercourse.errors import CatalogError
from fluttercourse.schemas import CourseManifest


def read_manifest_data(path: Path) -> dict[str, Any]:
    """
    Read raw manifest data from a YAML file.

    Args:
        path: Path to course.yaml

    Returns:
        Parsed YAML mapping (empty dict for an empty file)

    Raises:
        CatalogError: If the file is missing, unreadable or not a mapping
    """
    if not path.exists():
        raise CatalogError(f"Course manifest not found: {path}")

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as e:
        raise CatalogError(f"Could not read course manifest {path}: {e}") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise CatalogError(f"Course manifest {path} must be a mapping, got {type(data).__name__}")
    return data


def parse_manifest(data: dict[str, Any], source: str = "<manifest>") -> CourseManifest:
    """Validate raw manifest data, converting validation errors to CatalogError."""
    try:
        return CourseManifest.model_validate(data)
    except ValidationError as e:
        problems = "; ".join(
            f"{'.'.join(str(part) for part in err['loc'])}: {err['msg']}"
            for err in e.errors()
        )
        raise CatalogError(f"Invalid course manifest {source}: {problems}") from e


def load_manifest(path: Path) -> CourseManifest:
    """Read and validate a course manifest."""
    return parse_manifest(read_manifest_data(path), source=str(path))
