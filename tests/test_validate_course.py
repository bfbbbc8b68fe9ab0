"""Tests for scripts/validate_course.py."""

import importlib.util
from pathlib import Path

import pytest

SCRIPT_PATH = Path(__file__).parent.parent / "scripts" / "validate_course.py"


@pytest.fixture(scope="module")
def validate_course():
    spec = importlib.util.spec_from_file_location("validate_course", SCRIPT_PATH)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


def write_course(root: Path, with_file: bool = True) -> Path:
    manifest = root / "course.yaml"
    manifest.write_text(
        "title: Tiny\n"
        "modules:\n"
        "  - id: m0\n"
        "    title: Only module\n"
        "    lessons:\n"
        "      - id: \"m0-1\"\n"
        "        title: Only lesson\n"
        "        content_ref: m0/one.md\n",
        encoding="utf-8",
    )
    if with_file:
        (root / "lessons" / "m0").mkdir(parents=True)
        (root / "lessons" / "m0" / "one.md").write_text("# One\n", encoding="utf-8")
    return manifest


class TestValidateCourse:
    """Test the validation CLI."""

    def test_bundled_course_is_valid(self, validate_course):
        assert validate_course.main([]) == 0

    def test_valid_course(self, validate_course, tmp_path):
        manifest = write_course(tmp_path)
        assert validate_course.main(["--manifest", str(manifest)]) == 0

    def test_missing_lesson_file(self, validate_course, tmp_path, caplog):
        manifest = write_course(tmp_path, with_file=False)
        assert validate_course.main(["--manifest", str(manifest)]) == 1
        assert "Missing content for m0-1" in caplog.text

    def test_invalid_manifest(self, validate_course, tmp_path):
        manifest = tmp_path / "course.yaml"
        manifest.write_text("modules:\n  - title: no id\n", encoding="utf-8")
        assert validate_course.main(["--manifest", str(manifest)]) == 1

    def test_explicit_lessons_dir(self, validate_course, tmp_path):
        manifest = write_course(tmp_path)
        elsewhere = tmp_path / "elsewhere"
        elsewhere.mkdir()
        args = ["--manifest", str(manifest), "--lessons-dir", str(elsewhere)]
        assert validate_course.main(args) == 1
