"""Basic text cleaner run ahead of segmentation."""

import re
from typing import Optional
from ..core.sentinels import LINE_BREAK

_CRLF_RE = re.compile(r"\r\n?")
_SPACE_RE = re.compile(r"[ \t\u00a0\u2009\u202f]+")
_TRAILING_SPACE_RE = re.compile(r" +\n|\n +")
_PARAGRAPH_RE = re.compile(r"\n{2,}")
_HYPHEN_WRAP_RE = re.compile(r"(?<=[^\W\d_])-\n(?=[a-z])")
_SOFT_WRAP_RE = re.compile(r"(?<![.!?。！？:;])\n")

class WhitespaceCleaner:
    """
    Normalizes whitespace so the segmentation core sees one convention.

    Line endings become "\\n", runs of spaces/tabs/no-break spaces become one
    space, and blank-line paragraph breaks become the line-break marker. For
    PDF text, hard-wrapped lines inside a sentence are joined.
    """

    def clean(self, text: str, language: str = "en", doc_type: Optional[str] = None) -> str:
        if not text:
            return ""

        text = _CRLF_RE.sub("\n", text)
        text = _SPACE_RE.sub(" ", text)
        text = _TRAILING_SPACE_RE.sub("\n", text)

        if doc_type == "pdf":
            text = _HYPHEN_WRAP_RE.sub("", text)
            paragraphs = _PARAGRAPH_RE.split(text)
            text = "\n\n".join(_SOFT_WRAP_RE.sub(" ", p) for p in paragraphs)

        text = _PARAGRAPH_RE.sub(LINE_BREAK, text)
        return text.strip()
