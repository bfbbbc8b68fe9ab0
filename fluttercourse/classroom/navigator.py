"""
Navigator - Lesson sequencing across modules.

Flattens modules and lessons into one ordered sequence and answers
next/previous queries against it.
"""

from typing import Optional

from fluttercourse.schemas import Lesson

from .loader import CourseLoader


class Navigator:
    """Next/previous lesson resolution over the flattened course order."""

    def __init__(self, loader: CourseLoader):
        """
        Initialize navigator.

        Args:
            loader: CourseLoader providing the catalog
        """
        self.loader = loader
        self._lesson_order: list[str] = []
        self._lesson_index: dict[str, int] = {}
        self._refresh_lesson_order()

    def _refresh_lesson_order(self):
        """Build ordered list of lesson IDs for navigation."""
        self._lesson_order = [lesson.id for lesson in self.loader.get_all_lessons()]
        self._lesson_index = {lid: idx for idx, lid in enumerate(self._lesson_order)}

    @property
    def total_lessons(self) -> int:
        """Total number of lessons."""
        return len(self._lesson_order)

    # -------------------------------------------------------------------------
    # Navigation
    # -------------------------------------------------------------------------

    def get_first_lesson(self) -> Optional[Lesson]:
        """Get the first lesson in the course."""
        if not self._lesson_order:
            return None
        return self.loader.get_lesson(self._lesson_order[0])

    def get_last_lesson(self) -> Optional[Lesson]:
        """Get the last lesson in the course."""
        if not self._lesson_order:
            return None
        return self.loader.get_lesson(self._lesson_order[-1])

    def find_next(self, current_id: str) -> Optional[Lesson]:
        """
        Get the lesson after current_id.

        Returns None for the last lesson (course complete) and for unknown ids.
        """
        idx = self._lesson_index.get(current_id)
        if idx is None or idx + 1 >= len(self._lesson_order):
            return None
        return self.loader.get_lesson(self._lesson_order[idx + 1])

    def find_previous(self, current_id: str) -> Optional[Lesson]:
        """
        Get the lesson before current_id.

        Returns None for the first lesson and for unknown ids.
        """
        idx = self._lesson_index.get(current_id)
        if idx is None or idx == 0:
            return None
        return self.loader.get_lesson(self._lesson_order[idx - 1])

    def get_lesson_position(self, lesson_id: str) -> tuple[int, int]:
        """
        Get lesson position as (current, total).

        Returns (0, total) if lesson not found.
        """
        if lesson_id not in self._lesson_index:
            return (0, len(self._lesson_order))
        return (self._lesson_index[lesson_id] + 1, len(self._lesson_order))
