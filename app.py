"""
Flutter Course Platform - Learn Flutter and Dart one lesson at a time.

Streamlit application that shows markdown lessons, tracks completion
and moves between lessons.

Usage:
    streamlit run app.py
"""

import logging
from pathlib import Path

import streamlit as st
from dotenv import load_dotenv

from fluttercourse.classroom import CourseLoader, CourseSession, ProgressTracker
from fluttercourse.config import configure_logging, get_settings
from fluttercourse.errors import CatalogError, ProgressPersistFailure
from fluttercourse.utils import format_learner_error
from fluttercourse.viewer import get_lesson_css, render_challenge, render_progress_label

PROJECT_ROOT = Path(__file__).parent
load_dotenv(PROJECT_ROOT / ".env")

logger = logging.getLogger(__name__)


# -----------------------------------------------------------------------------
# Configuration
# -----------------------------------------------------------------------------

st.set_page_config(
    page_title="Flutter Training Course Platform",
    page_icon="🎯",
    layout="wide",
    initial_sidebar_state="expanded",
)


# -----------------------------------------------------------------------------
# Session State Initialization
# -----------------------------------------------------------------------------

@st.cache_resource
def get_progress_tracker(path: Path) -> ProgressTracker:
    """One tracker per progress file, shared by all browser sessions."""
    return ProgressTracker(path)


def init_session_state():
    """Build the course session once per browser session."""
    if "notice" not in st.session_state:
        st.session_state.notice = None

    if "session" not in st.session_state:
        settings = get_settings()
        configure_logging(settings.log_level)
        try:
            loader = CourseLoader.from_manifest(settings.manifest_path, settings.lessons_dir)
        except CatalogError as e:
            logger.error(str(e))
            st.session_state.session = None
            st.session_state.startup_error = str(e)
            return
        progress = get_progress_tracker(settings.progress_path)
        st.session_state.session = CourseSession(loader, progress)

    if st.session_state.session is None:
        return

    if "current_lesson_id" not in st.session_state:
        lesson = st.session_state.session.get_resume_lesson()
        st.session_state.current_lesson_id = lesson.id if lesson else None
        if lesson:
            open_lesson(lesson.id)


def open_lesson(lesson_id: str):
    """Open a lesson, keeping the session usable if the save fails."""
    session = st.session_state.session
    try:
        lesson = session.view_lesson(lesson_id)
    except ProgressPersistFailure as e:
        st.session_state.notice = ("warning", format_learner_error(e))
        lesson = session.resolve_lesson(lesson_id)
    st.session_state.current_lesson_id = lesson.id if lesson else None


def select_lesson(lesson_id: str):
    """Select a lesson and rerun."""
    open_lesson(lesson_id)
    st.rerun()


# -----------------------------------------------------------------------------
# Header: Title and Progress
# -----------------------------------------------------------------------------

def render_header():
    """Render title bar with progress."""
    session = st.session_state.session
    st.title("🎯 Flutter Training Course Platform")

    total = session.loader.get_total_lesson_count()
    percent = session.get_current_progress_percentage()
    completed = session.progress.get_completed_count()
    st.markdown(render_progress_label(percent, completed, total))
    st.progress(percent / 100)


# -----------------------------------------------------------------------------
# Sidebar: Module Tree
# -----------------------------------------------------------------------------

def render_sidebar():
    """Render the module and lesson tree."""
    session = st.session_state.session
    st.sidebar.title("📚 Course Modules")

    current_id = st.session_state.current_lesson_id
    for nav_module in session.get_navigation_tree():
        module = nav_module.module
        header = f"**Module {module.order_index}: {module.title}** ({nav_module.completed_count}/{nav_module.total_count})"
        expanded = any(nav_lesson.lesson.id == current_id for nav_lesson in nav_module.lessons)
        with st.sidebar.expander(header, expanded=expanded):
            if module.description:
                st.caption(module.description)
            for nav_lesson in nav_module.lessons:
                lesson = nav_lesson.lesson
                label = f"{nav_lesson.indicator} Lesson {lesson.order_index}: {lesson.title}"
                if st.button(
                    label,
                    key=f"lesson_{lesson.id}",
                    type="primary" if lesson.id == current_id else "secondary",
                    use_container_width=True,
                ):
                    select_lesson(lesson.id)


# -----------------------------------------------------------------------------
# Main Content: Lesson View
# -----------------------------------------------------------------------------

def render_notice():
    notice = st.session_state.notice
    if not notice:
        return
    kind, message = notice
    if kind == "warning":
        st.warning(message)
    elif kind == "balloons":
        st.success(message)
        st.balloons()
    else:
        st.success(message)
    st.session_state.notice = None


def render_lesson_view():
    """Render the current lesson."""
    lesson_id = st.session_state.current_lesson_id
    if not lesson_id:
        st.info("This course has no lessons yet.")
        return

    session = st.session_state.session
    lesson = session.get_lesson(lesson_id)

    render_navigation_bar(lesson_id)

    st.markdown(get_lesson_css(), unsafe_allow_html=True)
    st.markdown(session.render_lesson(lesson_id), unsafe_allow_html=True)

    if lesson.challenge:
        render_challenge_section(lesson)

    render_completion_section(lesson_id)


def render_navigation_bar(lesson_id: str):
    """Render navigation bar with prev/next buttons."""
    session = st.session_state.session
    pos, total = session.get_lesson_position(lesson_id)

    prev_lesson = session.find_previous_lesson(lesson_id)
    next_lesson = session.find_next_lesson(lesson_id)

    col1, col2, col3 = st.columns([1, 2, 1])

    with col1:
        if st.button("← Previous Lesson", use_container_width=True, disabled=prev_lesson is None):
            select_lesson(prev_lesson.id)

    with col2:
        st.markdown(f"<center>Lesson {pos} of {total}</center>", unsafe_allow_html=True)

    with col3:
        if st.button("Next Lesson →", use_container_width=True, disabled=next_lesson is None):
            select_lesson(next_lesson.id)

    st.divider()


def render_challenge_section(lesson):
    """Render the lesson's practice challenge."""
    challenge = lesson.challenge
    st.divider()
    st.markdown(render_challenge(challenge), unsafe_allow_html=True)
    if challenge.starter_code:
        st.code(challenge.starter_code, language="dart")
    if challenge.solution:
        with st.expander("Show solution"):
            st.code(challenge.solution, language="dart")


def render_completion_section(lesson_id: str):
    """Render lesson completion controls."""
    session = st.session_state.session
    lesson = session.get_lesson(lesson_id)

    st.divider()

    if session.is_lesson_completed(lesson_id):
        completed_at = session.progress.get_completion_date(lesson_id)
        when = f" on {completed_at:%Y-%m-%d}" if completed_at else ""
        st.success(f"Lesson completed{when}!")
        if st.button("Mark as incomplete"):
            try:
                session.reset_lesson(lesson_id)
            except ProgressPersistFailure as e:
                st.session_state.notice = ("warning", format_learner_error(e))
            st.rerun()
        return

    if st.button("✓ Mark as Complete", type="primary", use_container_width=True):
        try:
            next_lesson = session.complete_lesson(lesson_id)
        except ProgressPersistFailure as e:
            st.session_state.notice = ("warning", format_learner_error(e))
            next_lesson = session.find_next_lesson(lesson_id)

        if next_lesson:
            if not st.session_state.notice:
                st.session_state.notice = ("success", f"Great job! 🎉 You've completed: {lesson.title}")
            select_lesson(next_lesson.id)
        else:
            st.session_state.notice = (
                "balloons",
                "Congratulations! 🎓 You've reached the end of the available lessons!",
            )
            st.rerun()


# -----------------------------------------------------------------------------
# Main App
# -----------------------------------------------------------------------------

def main():
    """Main application entry point."""
    init_session_state()

    if st.session_state.session is None:
        st.error(f"Course content could not be loaded: {st.session_state.startup_error}")
        st.code("python scripts/validate_course.py")
        return

    render_header()
    render_sidebar()
    render_notice()
    render_lesson_view()


if __name__ == "__main__":
    main()
