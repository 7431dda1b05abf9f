"""Compound punctuation: ?! / !! runs and emphatic marks inside a clause."""

import re
from ..core.sentinels import (
    DOUBLE_EXCLAMATION,
    DOUBLE_QUESTION,
    EXCLAMATION_QUESTION,
    QUESTION_EXCLAMATION,
    SHIELDED_ARABIC_COMMA,
    SHIELDED_COLON,
    shield,
)
from ..profiles.schema import LanguageProfile

_DOUBLE_MARKS = (
    ("?!", QUESTION_EXCLAMATION),
    ("!?", EXCLAMATION_QUESTION),
    ("??", DOUBLE_QUESTION),
    ("!!", DOUBLE_EXCLAMATION),
)

_BEFORE_QUOTE_RE = re.compile(r"[?!](?=['\"”’])")
_BEFORE_LOWERCASE_RE = re.compile(r"[?!](?=,?\s([^\W\d_]))")
_NUMERIC_COLON_RE = re.compile(r"(?<=\d):(?=\d)")
_SERIAL_COMMA_RE = re.compile(r"،(?=\s\S+،)")

def collapse_double_marks(line: str) -> str:
    for marks, sentinel in _DOUBLE_MARKS:
        line = line.replace(marks, sentinel)
    return line

def shield_emphatic_marks(line: str) -> str:
    """'"Stop!" she said' / 'Wow! what a day': the mark does not end the sentence."""
    line = _BEFORE_QUOTE_RE.sub(lambda m: shield(m.group(0)), line)

    def replace(m):
        return shield(m.group(0)) if m.group(1).islower() else m.group(0)
    return _BEFORE_LOWERCASE_RE.sub(replace, line)

def normalize_compound_marks(line: str) -> str:
    return shield_emphatic_marks(collapse_double_marks(line))

def shield_separators(line: str, profile: LanguageProfile) -> str:
    """Clock-style colons and one-word series commas for profiles that split on them."""
    if profile.numeric_colons:
        line = _NUMERIC_COLON_RE.sub(SHIELDED_COLON, line)
    if profile.serial_commas:
        line = _SERIAL_COMMA_RE.sub(SHIELDED_ARABIC_COMMA, line)
    return line

def apply_compound_rules(line: str, profile: LanguageProfile) -> str:
    """Run the compound-mark pass (profiles that opt in) and separator shields."""
    if profile.compound_marks:
        line = normalize_compound_marks(line)
    return shield_separators(line, profile)
