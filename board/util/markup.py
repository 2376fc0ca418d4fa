"""User text to HTML conversion.

All markup in user input is escaped; the only structure produced is
paragraphs (blank-line separated) and line breaks.
"""

import html
import re

_PARAGRAPH_SPLIT = re.compile(r"\n\s*\n")


def render_text_html(text: str) -> str:
    """Render raw user text as sanitized HTML.

    Args:
        text: Raw text as typed by the user

    Returns:
        HTML safe to embed in a page
    """
    normalized = text.replace("\r\n", "\n").replace("\r", "\n").strip()
    if not normalized:
        return ""

    paragraphs = []
    for block in _PARAGRAPH_SPLIT.split(normalized):
        lines = [html.escape(line.strip()) for line in block.split("\n")]
        paragraphs.append("<p>" + "<br>\n".join(lines) + "</p>")

    return "\n".join(paragraphs)
