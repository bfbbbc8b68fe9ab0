"""Tests for markdown rendering."""

from fluttercourse.schemas import Challenge
from fluttercourse.viewer import (
    EMPTY_CONTENT_HTML,
    get_lesson_css,
    render_challenge,
    render_lesson_body,
    render_lesson_page,
    render_markdown,
    render_progress_label,
)


class TestRenderMarkdown:
    """Test the markdown adapter."""

    def test_empty_input(self):
        assert render_markdown("") == EMPTY_CONTENT_HTML
        assert render_markdown(None) == EMPTY_CONTENT_HTML
        assert render_markdown("   \n") == EMPTY_CONTENT_HTML

    def test_heading_has_anchor(self):
        html = render_markdown("# Storing Information")
        assert '<h1 id="storing-information">Storing Information</h1>' in html

    def test_table(self):
        html = render_markdown("| Type | Example |\n|------|---------|\n| `int` | `42` |\n")
        assert "<table>" in html
        assert "<th>Type</th>" in html
        assert "<code>int</code>" in html

    def test_fenced_code(self):
        html = render_markdown("```dart\nvoid main() {}\n```\n")
        assert "<pre>" in html
        assert "void main() {}" in html

    def test_emphasis(self):
        assert "<strong>bold</strong>" in render_markdown("**bold**")


class TestLessonHtml:
    """Test HTML wrappers."""

    def test_lesson_body_container(self):
        html = render_lesson_body("text")
        assert html.startswith('<div class="lesson-body">')
        assert "<p>text</p>" in html

    def test_lesson_page(self):
        page = render_lesson_page("# Hi", title="Intro & Setup")
        assert page.startswith("<!DOCTYPE html>")
        assert "<title>Intro &amp; Setup</title>" in page
        assert "<style>" in page
        assert '<h1 id="hi">Hi</h1>' in page

    def test_css(self):
        assert ".lesson-body" in get_lesson_css()

    def test_challenge(self):
        html = render_challenge(Challenge(description="Print **your** name"))
        assert 'class="challenge-box"' in html
        assert "<strong>your</strong>" in html

    def test_progress_label(self):
        assert render_progress_label(100 / 3, 1, 3) == "Progress: 33% (1/3 lessons)"
        assert render_progress_label(0.0, 0, 0) == "Progress: 0% (0/0 lessons)"
