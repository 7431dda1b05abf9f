"""Shield punctuation inside quoted/bracketed spans and inside exception tokens."""

import re
from functools import lru_cache
from typing import List, Sequence, Tuple
from ..core.sentinels import shield
from ..profiles.schema import LanguageProfile

# Precedence order matters: each pass sees the output of the previous one.
_LEADING_SPANS = [
    ("right_curly", re.compile(r"”(?:[^”\\]|\\.)*”")),
    ("curly", re.compile(r"“(?:[^”\\]|\\.)*”")),
    ("guillemets", re.compile(r"«(?:[^»\\]|\\.)*»")),
    ("double", re.compile(r'"(?:[^"\\]|\\.)*"')),
]
_LOW_QUOTE_SPANS = [
    ("low", re.compile(r"„(?:[^“\\]|\\.)*“")),
    ("double_comma", re.compile(r",,(?:[^“\\]|\\.)*“")),
]
_TRAILING_SPANS = [
    # an apostrophe followed by a letter does not close the span
    ("single", re.compile(r"(?<=\s)'(?:[^']|'[^\W\d_])*'")),
    ("corner", re.compile(r"「(?:[^「」\\]|\\.)*」")),
    ("parens", re.compile(r"\((?:[^()\\]|\\.)*\)")),
    ("fullwidth_parens", re.compile(r"（(?:[^（）\\]|\\.)*）")),
]

def span_patterns(low_quotes: bool = False) -> List[Tuple[str, "re.Pattern"]]:
    """Span matchers in the order they are applied."""
    return _LEADING_SPANS + (_LOW_QUOTE_SPANS if low_quotes else []) + _TRAILING_SPANS

def _shield_match(m) -> str:
    return shield(m.group(0))

def shield_exception_tokens(line: str, tokens: Sequence[str]) -> str:
    """Yahoo!, Yum!, !Kung: the exclamation mark belongs to the token."""
    for token in tokens:
        if token in line:
            line = line.replace(token, shield(token))
    return line

@lru_cache(maxsize=2)
def _patterns(low_quotes: bool):
    return tuple(p for _, p in span_patterns(low_quotes))

def shield_spans(line: str, profile: LanguageProfile) -> str:
    """
    Shield every terminal mark inside exception tokens and matched spans.

    Args:
        line: One physical line of the working buffer
        profile: Active language profile

    Returns:
        str: Line whose quoted/bracketed punctuation no longer splits
    """
    line = shield_exception_tokens(line, profile.literal_exclamations)
    for pattern in _patterns(profile.low_quotes):
        line = pattern.sub(_shield_match, line)
    return line
