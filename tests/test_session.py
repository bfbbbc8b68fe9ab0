"""Tests for the session facade used by the app."""

import pytest

from fluttercourse.classroom import CourseSession, LessonState, ProgressTracker
from fluttercourse.errors import LessonNotFound, ProgressPersistFailure


class TestScenario:
    """Module A (A1, A2), module B (B1)."""

    def test_walkthrough(self, session):
        assert session.find_next_lesson("A1").id == "A2"
        assert session.find_next_lesson("A2").id == "B1"
        assert session.find_next_lesson("B1") is None

        session.mark_lesson_complete("A1")
        assert session.get_current_progress_percentage() == pytest.approx(33.333, abs=0.001)

        session.mark_lesson_complete("A1")
        assert session.get_current_progress_percentage() == pytest.approx(33.333, abs=0.001)

    def test_complete_lesson_returns_next(self, session):
        assert session.complete_lesson("A2").id == "B1"
        assert session.is_lesson_completed("A2")

    def test_complete_last_lesson_returns_none(self, session):
        assert session.complete_lesson("B1") is None
        assert session.is_lesson_completed("B1")

    def test_mark_unknown_lesson(self, session):
        with pytest.raises(LessonNotFound):
            session.mark_lesson_complete("stale")
        assert session.progress.get_completed_count() == 0

    def test_list_modules(self, session):
        assert [m.id for m in session.list_modules()] == ["A", "B"]

    def test_get_lesson(self, session):
        assert session.get_lesson("B1").title == "Lesson B1"
        with pytest.raises(LessonNotFound):
            session.get_lesson("stale")


class TestViewing:
    """Test opening lessons and resuming."""

    def test_view_lesson_sets_current(self, session):
        lesson = session.view_lesson("A2")
        assert lesson.id == "A2"
        assert session.progress.get_current_lesson_id() == "A2"

    def test_view_completed_lesson_updates_current(self, session):
        session.mark_lesson_complete("A1")
        session.view_lesson("B1")
        session.view_lesson("A1")
        assert session.progress.get_current_lesson_id() == "A1"

    def test_view_unknown_falls_back_to_first(self, session):
        assert session.view_lesson("stale").id == "A1"
        assert session.progress.get_current_lesson_id() == "A1"

    def test_resume_without_history(self, session):
        assert session.get_resume_lesson().id == "A1"

    def test_resume_last_viewed(self, session, loader, progress_path):
        session.view_lesson("B1")
        resumed = CourseSession(loader, ProgressTracker(progress_path))
        assert resumed.get_resume_lesson().id == "B1"

    def test_resume_with_stale_current(self, session):
        session.progress.set_current_lesson("removed-lesson")
        assert session.get_resume_lesson().id == "A1"

    def test_render_lesson(self, session):
        html = session.render_lesson("A1")
        assert "<h1" in html
        assert "Body of A1." in html

    def test_custom_renderer(self, loader, tracker):
        session = CourseSession(loader, tracker, renderer=str.upper)
        assert session.render_lesson("A1").startswith("# A1")

    def test_view_persist_failure_keeps_state(self, loader, tmp_path):
        blocker = tmp_path / "blocked"
        blocker.write_text("", encoding="utf-8")
        session = CourseSession(loader, ProgressTracker(blocker / "progress.json"))
        with pytest.raises(ProgressPersistFailure):
            session.view_lesson("A2")
        assert session.get_resume_lesson().id == "A2"

    def test_stale_id_with_persist_failure_resolves_first_lesson(self, loader, tmp_path):
        blocker = tmp_path / "blocked"
        blocker.write_text("", encoding="utf-8")
        session = CourseSession(loader, ProgressTracker(blocker / "progress.json"))
        with pytest.raises(ProgressPersistFailure):
            session.view_lesson("stale")
        assert session.resolve_lesson("stale").id == "A1"

    def test_resolve_lesson(self, session):
        assert session.resolve_lesson("B1").id == "B1"
        assert session.resolve_lesson("stale").id == "A1"
        assert session.get_resume_lesson() is not None
        assert session.progress.get_current_lesson_id() is None


class TestNavigationTree:
    """Test derived sidebar tree."""

    def test_tree_shape(self, session):
        tree = session.get_navigation_tree()
        assert [n.module.id for n in tree] == ["A", "B"]
        assert [l.lesson.id for l in tree[0].lessons] == ["A1", "A2"]
        assert tree[0].total_count == 2

    def test_tree_reflects_completion(self, session):
        session.view_lesson("A2")
        session.mark_lesson_complete("A1")
        module_a = session.get_navigation_tree()[0]
        assert module_a.completed_count == 1
        assert [l.state for l in module_a.lessons] == [LessonState.COMPLETED, LessonState.CURRENT]
        assert [l.indicator for l in module_a.lessons] == ["✓", "→"]
        assert module_a.lessons[1].is_current
        assert not module_a.is_complete

    def test_module_complete(self, session):
        session.mark_lesson_complete("B1")
        assert session.get_navigation_tree()[1].is_complete

    def test_status_indicator(self, session):
        assert session.get_status_indicator("B1") == "○"
        session.mark_lesson_complete("B1")
        assert session.get_status_indicator("B1") == "✓"

    def test_progress_summary(self, session):
        session.view_lesson("A2")
        session.mark_lesson_complete("A1")
        summary = session.get_progress_summary()
        assert summary["completed"] == 1
        assert summary["total_lessons"] == 3
        assert summary["current_lesson_id"] == "A2"
        assert summary["modules"][0] == {"id": "A", "title": "Module A", "completed": 1, "total": 2}

    def test_reset_lesson(self, session):
        session.mark_lesson_complete("A1")
        assert session.reset_lesson("A1") is True
        assert not session.is_lesson_completed("A1")
        assert session.get_current_progress_percentage() == 0.0
