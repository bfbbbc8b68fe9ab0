"""
Course manifest schemas.

The manifest (course.yaml) is the declarative source of the catalog.
Validation happens once at startup so that a broken manifest fails
immediately instead of surfacing as a missing lesson later.

Example:

    title: Flutter Training Course
    modules:
      - id: module-00
        title: Setup & First Steps
        lessons:
          - id: "00-01"
            title: Installing Flutter & Dart SDK
            content_ref: module-00/lesson-01-installation.md
"""

from pydantic import BaseModel, ConfigDict, Field
from typing import Optional

from .curriculum import Challenge


class ManifestLesson(BaseModel):
    model_config = ConfigDict(extra="forbid")

    id: str = Field(..., min_length=1)
    title: str = Field(..., min_length=1)
    order_index: Optional[int] = None   # defaults to declaration position
    content_ref: str = Field(..., min_length=1)
    challenge: Optional[Challenge] = None


class ManifestModule(BaseModel):
    model_config = ConfigDict(extra="forbid")

    id: str = Field(..., min_length=1)
    title: str = Field(..., min_length=1)
    description: Optional[str] = None
    order_index: Optional[int] = None
    lessons: list[ManifestLesson] = []


class CourseManifest(BaseModel):
    """Top-level manifest document."""
    title: str = "Flutter Course"
    version: int = 1
    modules: list[ManifestModule] = []
