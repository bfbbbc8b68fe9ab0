"""
Exception types for the course platform.

Every condition here is recoverable by the caller:
- LessonNotFound / ModuleNotFound: stale or unknown ids, fall back to the first lesson
- CatalogError: invalid course manifest, raised once at startup
- ProgressLoadFailure: unreadable progress file, treated as "no prior progress"
- ProgressPersistFailure: progress could not be written, in-memory state stays valid
"""

from pathlib import Path
from typing import Optional


class CourseError(Exception):
    """Base class for course platform errors."""


class LessonNotFound(CourseError, KeyError):
    """Requested lesson id is not in the catalog."""

    def __init__(self, lesson_id: str):
        self.lesson_id = lesson_id
        super().__init__(lesson_id)

    def __str__(self) -> str:
        return f"Lesson not found: {self.lesson_id}"


class ModuleNotFound(CourseError, KeyError):
    """Requested module id is not in the catalog."""

    def __init__(self, module_id: str):
        self.module_id = module_id
        super().__init__(module_id)

    def __str__(self) -> str:
        return f"Module not found: {self.module_id}"


class CatalogError(CourseError, ValueError):
    """Course manifest is missing, malformed or inconsistent."""


class ProgressLoadFailure(CourseError):
    """Persisted progress exists but could not be parsed."""

    def __init__(self, path: Path, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Could not load progress from {path}: {reason}")


class ProgressPersistFailure(CourseError, OSError):
    """Progress could not be written to disk."""

    def __init__(self, path: Path, cause: Optional[BaseException] = None):
        self.path = path
        self.cause = cause
        detail = f": {cause}" if cause else ""
        self.message = f"Could not save progress to {path}{detail}"
        super().__init__(self.message)

    def __str__(self) -> str:
        return self.message
