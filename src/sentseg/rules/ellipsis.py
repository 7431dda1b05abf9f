"""Ellipsis protection: distinguish mid-sentence ellipses from ellipses that end a sentence."""

import re
from ..core.sentinels import (
    BOUNDARY_ELLIPSIS,
    ELLIPSIS,
    FOUR_DOT_ELLIPSIS,
    SPACED_ELLIPSIS,
)

# " . . . " inside a sentence
_SPACED_RE = re.compile(r"(?:\s\.){3}\s")
# ". . . ." closing a line after a word
_FOUR_DOT_RE = re.compile(r"(?<=[a-z])(?:\.\s){3}\.(?=$)", re.MULTILINE)
# "word.... Next": three dots of ellipsis, the fourth is the sentence end
_BEFORE_PERIOD_RE = re.compile(r"(?<=\S)\.{3}(?=\.\s[A-Z])")
# "word... Next": the last dot doubles as the sentence end
_BEFORE_CAPITAL_RE = re.compile(r"\.\.\.(?=\s+[A-Z])")
_BARE_RE = re.compile(r"\.\.\.")

def protect_ellipses(text: str) -> str:
    """Replace ellipsis renderings with sentinels; order matters."""
    text = _SPACED_RE.sub(SPACED_ELLIPSIS, text)
    text = _FOUR_DOT_RE.sub(FOUR_DOT_ELLIPSIS, text)
    text = _BEFORE_PERIOD_RE.sub(ELLIPSIS, text)
    text = _BEFORE_CAPITAL_RE.sub(BOUNDARY_ELLIPSIS + ".", text)
    return _BARE_RE.sub(ELLIPSIS, text)
