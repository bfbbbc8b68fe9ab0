"""Shared fixtures for the course platform tests."""

from pathlib import Path

import pytest
import yaml

from fluttercourse.classroom import CourseLoader, CourseSession, Navigator, ProgressTracker
from fluttercourse.schemas import Lesson, Module


def make_module(module_id: str, order_index: int, lesson_ids: list[str]) -> Module:
    return Module(
        id=module_id,
        title=f"Module {module_id}",
        order_index=order_index,
        lessons=tuple(
            Lesson(
                id=lesson_id,
                title=f"Lesson {lesson_id}",
                module_id=module_id,
                order_index=pos + 1,
                content_ref=f"{module_id}/{lesson_id}.md",
            )
            for pos, lesson_id in enumerate(lesson_ids)
        ),
    )


@pytest.fixture
def lessons_dir(tmp_path: Path) -> Path:
    """Lesson files for the A1/A2/B1 catalog."""
    root = tmp_path / "lessons"
    for module_id, lesson_ids in (("A", ["A1", "A2"]), ("B", ["B1"])):
        (root / module_id).mkdir(parents=True)
        for lesson_id in lesson_ids:
            (root / module_id / f"{lesson_id}.md").write_text(
                f"# {lesson_id}\n\nBody of {lesson_id}.\n", encoding="utf-8"
            )
    return root


@pytest.fixture
def loader(lessons_dir: Path) -> CourseLoader:
    """Module A (A1, A2) and module B (B1)."""
    return CourseLoader.from_modules(
        [make_module("A", 0, ["A1", "A2"]), make_module("B", 1, ["B1"])],
        lessons_dir=lessons_dir,
    )


@pytest.fixture
def progress_path(tmp_path: Path) -> Path:
    return tmp_path / "data" / "progress.json"


@pytest.fixture
def tracker(progress_path: Path) -> ProgressTracker:
    return ProgressTracker(progress_path)


@pytest.fixture
def navigator(loader: CourseLoader) -> Navigator:
    return Navigator(loader)


@pytest.fixture
def session(loader: CourseLoader, tracker: ProgressTracker) -> CourseSession:
    return CourseSession(loader, tracker)


@pytest.fixture
def write_manifest(tmp_path: Path):
    """Write a manifest dict as course.yaml and return its path."""
    def _write(data) -> Path:
        path = tmp_path / "course.yaml"
        path.write_text(yaml.safe_dump(data, sort_keys=False), encoding="utf-8")
        return path
    return _write


@pytest.fixture
def module_factory():
    return make_module
