"""
Lesson renderer - Generate HTML for lesson display.

Features:
- Markdown to HTML with tables, fenced code and heading anchors
- Standalone HTML page wrapping for export or embedding
- Challenge and progress display helpers
"""

import html
from typing import Optional

import markdown

from fluttercourse.schemas import Challenge


MARKDOWN_EXTENSIONS = ["tables", "fenced_code", "toc"]

EMPTY_CONTENT_HTML = "<p>No content available</p>"


def get_lesson_css() -> str:
    """Get CSS styles for lesson display."""
    return """
    <style>
    .lesson-body {
        font-family: 'Segoe UI', Tahoma, Geneva, Verdana, sans-serif;
        line-height: 1.6;
        color: #333;
        max-width: 900px;
    }
    .lesson-body h1 {
        color: #2c3e50;
        border-bottom: 3px solid #3498db;
        padding-bottom: 10px;
        margin-top: 0;
    }
    .lesson-body h2 {
        color: #34495e;
        margin-top: 30px;
        border-left: 4px solid #3498db;
        padding-left: 10px;
    }
    .lesson-body h3 {
        color: #546e7a;
        margin-top: 20px;
    }
    .lesson-body code {
        background-color: #f4f4f4;
        padding: 2px 6px;
        border-radius: 3px;
        font-family: 'Courier New', monospace;
        font-size: 0.9em;
        color: #c7254e;
    }
    .lesson-body pre {
        background-color: #2d2d2d;
        color: #f8f8f2;
        padding: 15px;
        border-radius: 5px;
        overflow-x: auto;
        line-height: 1.4;
    }
    .lesson-body pre code {
        background-color: transparent;
        color: #f8f8f2;
        padding: 0;
    }
    .lesson-body blockquote {
        border-left: 4px solid #3498db;
        margin: 20px 0;
        padding: 10px 20px;
        background-color: #ecf0f1;
        font-style: italic;
    }
    .lesson-body table {
        border-collapse: collapse;
        width: 100%;
        margin: 20px 0;
    }
    .lesson-body th, .lesson-body td {
        border: 1px solid #ddd;
        padding: 12px;
        text-align: left;
    }
    .lesson-body th {
        background-color: #3498db;
        color: white;
    }
    .lesson-body tr:nth-child(even) {
        background-color: #f2f2f2;
    }
    .challenge-box {
        background-color: #fff3cd;
        border-left: 4px solid #ffc107;
        padding: 15px;
        margin: 15px 0;
        border-radius: 4px;
    }
    .challenge-title {
        font-weight: 600;
        color: #8a6d3b;
        margin-bottom: 0.5em;
    }
    </style>
    """


def render_markdown(text: Optional[str]) -> str:
    """
    Convert lesson markdown to an HTML fragment.

    Args:
        text: Markdown source (None or blank gives a placeholder)

    Returns:
        HTML string
    """
    if not text or not text.strip():
        return EMPTY_CONTENT_HTML
    return markdown.markdown(text, extensions=MARKDOWN_EXTENSIONS)


def render_lesson_body(text: Optional[str]) -> str:
    """Render markdown wrapped in the styled lesson container."""
    return f'<div class="lesson-body">{render_markdown(text)}</div>'


def render_lesson_page(text: Optional[str], title: str = "Lesson") -> str:
    """
    Render markdown as a complete HTML document.

    Args:
        text: Markdown source
        title: Document title

    Returns:
        Standalone HTML page with embedded styles
    """
    return (
        "<!DOCTYPE html>\n"
        "<html>\n"
        "<head>\n"
        '<meta charset="UTF-8">\n'
        f"<title>{html.escape(title)}</title>\n"
        f"{get_lesson_css()}\n"
        "</head>\n"
        "<body>\n"
        f"{render_lesson_body(text)}\n"
        "</body>\n"
        "</html>\n"
    )


def render_challenge(challenge: Challenge) -> str:
    """Render a challenge description box (starter code and solution are shown by the app)."""
    return (
        '<div class="challenge-box">'
        '<div class="challenge-title">🏋️ Challenge</div>'
        f"{render_markdown(challenge.description)}"
        "</div>"
    )


def render_progress_label(percent: float, completed: int, total: int) -> str:
    """Format the header progress label."""
    return f"Progress: {percent:.0f}% ({completed}/{total} lessons)"
