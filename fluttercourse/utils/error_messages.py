"""
Utility for converting course errors to learner-friendly messages.
"""

from fluttercourse.errors import (
    CatalogError,
    LessonNotFound,
    ModuleNotFound,
    ProgressLoadFailure,
    ProgressPersistFailure,
)


def format_learner_error(error: Exception) -> str:
    """
    Convert technical errors to short messages for the learner.

    Args:
        error: The exception that occurred

    Returns:
        A friendly, learner-appropriate message
    """
    if isinstance(error, ProgressPersistFailure):
        return (
            "Your progress couldn't be saved right now. "
            "It is kept for this session and will be saved on your next action. 💾"
        )
    if isinstance(error, ProgressLoadFailure):
        return "We couldn't read your saved progress, so you're starting fresh. 🔄"
    if isinstance(error, LessonNotFound):
        return "That lesson isn't available anymore. Taking you to the first lesson. 📚"
    if isinstance(error, ModuleNotFound):
        return "That module isn't part of this course. 📚"
    if isinstance(error, CatalogError):
        return "The course content is misconfigured. Run scripts/validate_course.py for details. 🛠️"

    return "Something unexpected happened. Please try again. 🤔"
