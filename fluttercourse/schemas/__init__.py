"""
Course platform schemas - Pydantic models.

This module exports all schema classes for:
- Curriculum: modules, lessons, challenges
- Manifest: the declarative course.yaml document
- Progress: the persisted learner record
"""

# Curriculum schemas
from .curriculum import (
    Challenge,
    Lesson,
    Module,
)

# Manifest schemas
from .manifest import (
    ManifestLesson,
    ManifestModule,
    CourseManifest,
)

# Progress schemas
from .progress import (
    ProgressRecord,
)

__all__ = [
    # Curriculum
    'Challenge',
    'Lesson',
    'Module',
    # Manifest
    'ManifestLesson',
    'ManifestModule',
    'CourseManifest',
    # Progress
    'ProgressRecord',
]
