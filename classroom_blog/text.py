"""
Plain-text helpers for previews and activity descriptions.
"""
import re

from .conf import blog_settings

MARKDOWN_MARKERS_RE = re.compile(r"[#*_~`]")
MARKDOWN_LINK_RE = re.compile(r"\[([^\]]+?)\]\([^)]+?\)")

# Whitespace trimmed around excerpts: space, tab, newline, CR, NUL, vertical tab
TRIM_CHARS = " \t\n\r\0\x0b"


def make_excerpt(content, max_length=None, ellipsis=None):
    """
    Build a plain-text preview of markdown content.

    Emphasis, heading, strike and code markers are removed, links are
    reduced to their text and newlines become spaces. Text longer than
    ``max_length`` characters is cut and suffixed with ``ellipsis``.

    Args:
        content: markdown source
        max_length: maximum length before the ellipsis (default EXCERPT_LENGTH)
        ellipsis: suffix for truncated text (default EXCERPT_ELLIPSIS)

    Returns:
        Excerpt string
    """
    if max_length is None:
        max_length = blog_settings.EXCERPT_LENGTH
    if ellipsis is None:
        ellipsis = blog_settings.EXCERPT_ELLIPSIS

    text = MARKDOWN_MARKERS_RE.sub("", content or "")
    text = MARKDOWN_LINK_RE.sub(r"\1", text)
    text = text.replace("\n", " ")
    text = text.strip(TRIM_CHARS)

    if len(text) > max_length:
        return text[:max_length] + ellipsis
    return text


def limit_text(value, length, end="..."):
    """Cut ``value`` to ``length`` characters, right-trimmed, plus ``end``."""
    value = value or ""
    if len(value) <= length:
        return value
    return value[:length].rstrip() + end


def initials(name):
    """Return upper-cased initials of the first two words of ``name``."""
    return "".join(word[0].upper() for word in (name or "").split()[:2])
