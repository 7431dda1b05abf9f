"""Reserved sentinel codepoints standing in for punctuation during segmentation."""

import re
from typing import Dict

# Private Use Area block reserved for the pipeline.
RESERVED_FIRST = 0xE000
RESERVED_LAST = 0xE03F

# Shielded (non-boundary) forms of every terminal-class mark.
SHIELDED: Dict[str, str] = {
    ".": "\ue000",
    "!": "\ue001",
    "?": "\ue002",
    "。": "\ue003",
    "．": "\ue004",
    "！": "\ue005",
    "？": "\ue006",
    ";": "\ue007",
    ":": "\ue008",
    "،": "\ue009",  # Arabic comma
    "؟": "\ue00a",  # Arabic question mark
    "।": "\ue00b",  # Devanagari danda
    "|": "\ue00c",
    "։": "\ue00d",  # Armenian full stop
    "՜": "\ue00e",  # Armenian exclamation
    "።": "\ue00f",  # Ethiopic full stop
    "፧": "\ue010",  # Ethiopic question mark
    "။": "\ue011",  # Myanmar section
    "၏": "\ue012",  # Myanmar genitive
    "۔": "\ue013",  # Urdu full stop
}

SHIELDED_PERIOD = SHIELDED["."]
SHIELDED_EXCLAMATION = SHIELDED["!"]
SHIELDED_QUESTION = SHIELDED["?"]
SHIELDED_COLON = SHIELDED[":"]
SHIELDED_ARABIC_COMMA = SHIELDED["،"]

INLINE_PERIOD = "\ue020"         # period inside an email/URL-like token
NEWLINE = "\ue021"               # physical newline inside a line
END_OF_LINE = "\ue022"           # appended so trailing text forms a segment
ELLIPSIS = "\ue023"              # ...
SPACED_ELLIPSIS = "\ue024"       # " . . . "
FOUR_DOT_ELLIPSIS = "\ue025"     # ". . . ."
BOUNDARY_ELLIPSIS = "\ue026"     # ".." that precedes a literal boundary period
QUESTION_EXCLAMATION = "\ue027"  # ?!
EXCLAMATION_QUESTION = "\ue028"  # !?
DOUBLE_QUESTION = "\ue029"       # ??
DOUBLE_EXCLAMATION = "\ue02a"    # !!

# Separates physical lines; inserted by list guards and cleaners.
LINE_BREAK = "\r"

# Sentinels that still end a sentence.
BOUNDARY_SENTINELS = (
    END_OF_LINE,
    QUESTION_EXCLAMATION,
    EXCLAMATION_QUESTION,
    DOUBLE_QUESTION,
    DOUBLE_EXCLAMATION,
)

DECODE: Dict[str, str] = {
    **{sentinel: literal for literal, sentinel in SHIELDED.items()},
    INLINE_PERIOD: ".",
    NEWLINE: "\n",
    END_OF_LINE: "",
    ELLIPSIS: "...",
    SPACED_ELLIPSIS: " . . . ",
    FOUR_DOT_ELLIPSIS: ". . . .",
    BOUNDARY_ELLIPSIS: "..",
    QUESTION_EXCLAMATION: "?!",
    EXCLAMATION_QUESTION: "!?",
    DOUBLE_QUESTION: "??",
    DOUBLE_EXCLAMATION: "!!",
}

_DECODE_TABLE = {ord(sentinel): literal for sentinel, literal in DECODE.items()}
_SHIELD_TABLE = {ord(literal): sentinel for literal, sentinel in SHIELDED.items()}
_RESERVED_RE = re.compile(f"[{chr(RESERVED_FIRST)}-{chr(RESERVED_LAST)}]")


def shield(text: str) -> str:
    """Replace every terminal-class mark in ``text`` with its shielded sentinel."""
    return text.translate(_SHIELD_TABLE)


def decode(text: str) -> str:
    """Restore every sentinel in ``text`` to the literal text it replaced."""
    return text.translate(_DECODE_TABLE)


def count_reserved(text: str) -> int:
    return len(_RESERVED_RE.findall(text))


def strip_reserved(text: str) -> str:
    """Remove literal occurrences of reserved codepoints from raw input."""
    return _RESERVED_RE.sub("", text)
