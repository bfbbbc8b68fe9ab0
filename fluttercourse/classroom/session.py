"""
CourseSession - The calls the presentation layer makes into the course core.

Combines CourseLoader (content), ProgressTracker (learner state),
Navigator (ordering) and a markdown renderer. All collaborators are
passed in explicitly; nothing here is global.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional

from fluttercourse.errors import LessonNotFound
from fluttercourse.schemas import Lesson, Module
from fluttercourse.viewer import render_lesson_body

from .loader import CourseLoader
from .navigator import Navigator
from .progress import ProgressTracker

logger = logging.getLogger(__name__)


class LessonState(str, Enum):
    """Lesson state for sidebar display."""
    COMPLETED = "completed"
    CURRENT = "current"
    NOT_STARTED = "not_started"


STATUS_INDICATORS = {
    LessonState.COMPLETED: "✓",
    LessonState.CURRENT: "→",
    LessonState.NOT_STARTED: "○",
}


@dataclass(frozen=True)
class NavigationLesson:
    """Lesson with display metadata."""
    lesson: Lesson
    state: LessonState
    is_current: bool
    indicator: str


@dataclass(frozen=True)
class NavigationModule:
    """Module with lessons and completion counts."""
    module: Module
    lessons: list[NavigationLesson]
    completed_count: int
    total_count: int

    @property
    def is_complete(self) -> bool:
        return self.total_count > 0 and self.completed_count == self.total_count


class CourseSession:
    """One learner's view of the course."""

    def __init__(
        self,
        loader: CourseLoader,
        progress: ProgressTracker,
        navigator: Optional[Navigator] = None,
        renderer: Callable[[str], str] = render_lesson_body,
    ):
        """
        Initialize session.

        Args:
            loader: CourseLoader instance for content access
            progress: ProgressTracker instance for learner progress
            navigator: Navigator over loader (built if not given)
            renderer: Markdown to HTML function
        """
        self.loader = loader
        self.progress = progress
        self.navigator = navigator or Navigator(loader)
        self.renderer = renderer

    # -------------------------------------------------------------------------
    # Catalog
    # -------------------------------------------------------------------------

    def list_modules(self) -> list[Module]:
        return self.loader.get_all_modules()

    def get_lesson(self, lesson_id: str) -> Lesson:
        """Raises LessonNotFound for unknown ids."""
        return self.loader.get_lesson(lesson_id)

    def render_lesson(self, lesson_id: str) -> str:
        """Load a lesson's markdown and render it to HTML."""
        lesson = self.loader.get_lesson(lesson_id)
        return self.renderer(self.loader.load_lesson_content(lesson))

    # -------------------------------------------------------------------------
    # Progress
    # -------------------------------------------------------------------------

    def is_lesson_completed(self, lesson_id: str) -> bool:
        return self.progress.is_completed(lesson_id)

    def mark_lesson_complete(self, lesson_id: str) -> bool:
        """
        Mark a lesson complete.

        Raises:
            LessonNotFound: If the id is not in the catalog
            ProgressPersistFailure: If the record could not be saved
        """
        self.loader.get_lesson(lesson_id)
        return self.progress.mark_complete(lesson_id)

    def reset_lesson(self, lesson_id: str) -> bool:
        return self.progress.reset_lesson(lesson_id)

    def get_current_progress_percentage(self) -> float:
        return self.progress.get_progress_percentage(self.loader.get_total_lesson_count())

    def get_progress_summary(self) -> dict:
        """Get progress summary for display."""
        stats = self.progress.get_completion_stats(self.loader.get_total_lesson_count())
        modules = [
            {
                "id": nav_module.module.id,
                "title": nav_module.module.title,
                "completed": nav_module.completed_count,
                "total": nav_module.total_count,
            }
            for nav_module in self.get_navigation_tree()
        ]
        return {
            **stats,
            "modules": modules,
            "current_lesson_id": self.progress.get_current_lesson_id(),
        }

    # -------------------------------------------------------------------------
    # Navigation
    # -------------------------------------------------------------------------

    def find_next_lesson(self, lesson_id: str) -> Optional[Lesson]:
        return self.navigator.find_next(lesson_id)

    def find_previous_lesson(self, lesson_id: str) -> Optional[Lesson]:
        return self.navigator.find_previous(lesson_id)

    def resolve_lesson(self, lesson_id: str) -> Optional[Lesson]:
        """Get a lesson by ID, or the first lesson if the id is unknown."""
        try:
            return self.loader.get_lesson(lesson_id)
        except LessonNotFound:
            logger.warning(f"Unknown lesson {lesson_id}, falling back to first lesson")
            return self.navigator.get_first_lesson()

    def view_lesson(self, lesson_id: str) -> Optional[Lesson]:
        """
        Open a lesson and record it as current.

        Unknown ids fall back to the first lesson. Returns None only for an
        empty course.

        Raises:
            ProgressPersistFailure: If the current lesson could not be saved
        """
        lesson = self.resolve_lesson(lesson_id)
        if lesson is None:
            return None
        self.progress.set_current_lesson(lesson.id)
        return lesson

    def get_resume_lesson(self) -> Optional[Lesson]:
        """Get the last viewed lesson, or the first lesson if none or stale."""
        current_id = self.progress.get_current_lesson_id()
        if current_id:
            try:
                return self.loader.get_lesson(current_id)
            except LessonNotFound:
                logger.warning(f"Saved current lesson {current_id} is not in the course")
        return self.navigator.get_first_lesson()

    def complete_lesson(self, lesson_id: str) -> Optional[Lesson]:
        """
        Complete a lesson and return the next one.

        Returns:
            Next lesson, or None if this was the last lesson
        """
        self.mark_lesson_complete(lesson_id)
        return self.navigator.find_next(lesson_id)

    def get_lesson_position(self, lesson_id: str) -> tuple[int, int]:
        return self.navigator.get_lesson_position(lesson_id)

    # -------------------------------------------------------------------------
    # Course Tree
    # -------------------------------------------------------------------------

    def get_lesson_state(self, lesson_id: str) -> LessonState:
        if self.progress.is_completed(lesson_id):
            return LessonState.COMPLETED
        if lesson_id == self.progress.get_current_lesson_id():
            return LessonState.CURRENT
        return LessonState.NOT_STARTED

    def get_status_indicator(self, lesson_id: str) -> str:
        """
        Get status indicator for sidebar display.

        Returns:
            ✓ for completed
            → for current
            ○ for not started
        """
        return STATUS_INDICATORS[self.get_lesson_state(lesson_id)]

    def get_navigation_tree(self) -> list[NavigationModule]:
        """
        Get the module tree with completion metadata.

        Derived from the catalog on every call so it always reflects the
        latest progress.
        """
        current_id = self.progress.get_current_lesson_id()
        tree = []
        for module in self.loader.get_all_modules():
            nav_lessons = []
            completed_count = 0
            for lesson in module.lessons:
                state = self.get_lesson_state(lesson.id)
                if state == LessonState.COMPLETED:
                    completed_count += 1
                nav_lessons.append(NavigationLesson(
                    lesson=lesson,
                    state=state,
                    is_current=lesson.id == current_id,
                    indicator=STATUS_INDICATORS[state],
                ))
            tree.append(NavigationModule(
                module=module,
                lessons=nav_lessons,
                completed_count=completed_count,
                total_count=len(module.lessons),
            ))
        return tree
