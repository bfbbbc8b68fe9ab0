"""
Course Viewer - Rendering components for lesson display.

This module provides:
- Markdown lesson rendering
- Standalone HTML lesson pages
- Challenge and progress display helpers
"""

from .lesson import (
    get_lesson_css,
    render_markdown,
    render_lesson_body,
    render_lesson_page,
    render_challenge,
    render_progress_label,
    MARKDOWN_EXTENSIONS,
    EMPTY_CONTENT_HTML,
)

__all__ = [
    "get_lesson_css",
    "render_markdown",
    "render_lesson_body",
    "render_lesson_page",
    "render_challenge",
    "render_progress_label",
    "MARKDOWN_EXTENSIONS",
    "EMPTY_CONTENT_HTML",
]
