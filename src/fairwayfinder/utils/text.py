"""Text helpers for scraped page content."""

import re

_WHITESPACE_RE = re.compile(r"\s+")


def clean_text(text: str | None) -> str:
    """
    Collapse runs of whitespace and strip the ends.

    Scraped nodes often carry newlines and indentation from the page template:
    "\n   7:30 AM \n" → "7:30 AM". ``None`` becomes an empty string.
    """
    if not text:
        return ""
    return _WHITESPACE_RE.sub(" ", text).strip()
