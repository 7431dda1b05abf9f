"""Outline marker protection: list items start on their own physical line."""

import re
from ..core.sentinels import LINE_BREAK

# "1. ", "12) ", "a. ", "b) ", "• ", "- ", "* " at the start of a line
_MARKER_LINE_RE = re.compile(r"\n[ \t]*(?=(?:\d{1,2}[.)]|[a-z][.)]|[•*\-])\s)")

class NumberedListGuard:
    """Moves every outline item onto its own line-break-delimited line."""

    def protect_markers(self, text: str) -> str:
        if not text:
            return text
        return _MARKER_LINE_RE.sub(LINE_BREAK, text)
