"""
Course Classroom - Runtime components for loading and navigating lessons.

This module provides:
- CourseLoader: Read-only module/lesson catalog
- ProgressTracker: Track learner progress
- Navigator: Next/previous lesson across modules
- CourseSession: The calls the app makes into the above
"""

from .loader import (
    CourseLoader,
)

from .progress import (
    ProgressTracker,
)

from .navigator import (
    Navigator,
)

from .session import (
    CourseSession,
    LessonState,
    NavigationLesson,
    NavigationModule,
    STATUS_INDICATORS,
)

__all__ = [
    # Loader
    "CourseLoader",
    # Progress
    "ProgressTracker",
    # Navigator
    "Navigator",
    # Session
    "CourseSession",
    "LessonState",
    "NavigationLesson",
    "NavigationModule",
    "STATUS_INDICATORS",
]
