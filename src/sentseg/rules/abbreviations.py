"""
Abbreviation and numeric disambiguation.

Every period that does not end a sentence (initials, abbreviations,
decimals, list numbers, dotted acronyms, degree marks) is replaced by the
shielded-period sentinel. Rules run in a fixed order; each one sees the
output of the one before it.
"""

import re
from functools import lru_cache
from typing import Sequence, Tuple
from ..core.sentinels import INLINE_PERIOD, SHIELDED_PERIOD
from ..core.types import Abbreviation
from ..profiles.schema import LanguageProfile

SP = SHIELDED_PERIOD

PRONOUN_EXCEPTIONS = ("I", "I'm", "I'll")

_POSSESSIVE_RE = re.compile(r"\.(?='s(?:\s|$))", re.MULTILINE)
_SINGLE_LETTER_RE = re.compile(r"(?<!\S)([^\W\d_])\.(?=\s)")
_NUMBER_RE = re.compile(r"(?<=\d)\.(?=\S)|\.(?=\d)")
_LIST_NUMBER_RE = re.compile(r"(^|\r)(\d{1,2})\.(?=\s\S|\))", re.MULTILINE)
_ORDINAL_RE = re.compile(r"(?:(?<=\s\d)|(?<=\s[1-9]\d)|(?<=-\d)|(?<=-[1-9]\d))\.(?=\s)")
_MULTI_PERIOD_RE = re.compile(r"\b[^\W\d_](?:\.[^\W\d_])+\.")
_TIME_OF_DAY_RE = re.compile(rf"(?<=[aApP]{SP}[mM]){SP}(?=\s[A-Z])")
_GEO_RE = re.compile(r"(?<=[^\W\d_]°)\.(?=\s*\d+)")
_INLINE_PERIOD_RE = re.compile(r"(?<=\w)\.(?=\w)")
_PLAIN_FOLLOW_RE = re.compile(r"[.:?,]|\s(?:\d|I\s|I'm|I'll)")

_ACRONYMS = (
    f"U{SP}S{SP}A", r"U\.S\.A",
    f"U{SP}S", r"U\.S",
    f"U{SP}K", r"U\.K",
    f"E{SP}U", r"E\.U",
    "I",
)

def shield_possessives(text: str) -> str:
    """JFK Jr.'s -> the period is never a boundary."""
    return _POSSESSIVE_RE.sub(SP, text)

def shield_initials(text: str, lowercase: bool = False) -> str:
    """A lone letter followed by a period and a space is an initial."""
    def replace(m):
        letter = m.group(1)
        if letter.isupper() or (lowercase and letter.islower()):
            return letter + SP
        return m.group(0)
    return _SINGLE_LETTER_RE.sub(replace, text)

def _should_shield(abbr: Abbreviation, rest: str, mode: str) -> bool:
    """Decide whether the period of ``abbr`` is shielded given the text after it."""
    if mode == "always":
        return True
    if mode == "before_space":
        return rest[:1].isspace()

    if abbr.is_prefix:
        return True
    if abbr.is_number:
        return re.match(r"\s\d|\s+\(", rest) is not None
    if _PLAIN_FOLLOW_RE.match(rest):
        return True
    return len(rest) > 1 and rest[0].isspace() and rest[1].islower()

def shield_abbreviations(text: str, abbreviations: Sequence[Abbreviation],
                         mode: str = "standard") -> str:
    """
    Shield the trailing period of known abbreviations.

    Args:
        text: Working buffer
        abbreviations: Lexicon entries for the active language
        mode: Profile abbreviation mode (standard|before_space|always)

    Returns:
        str: Buffer with non-boundary abbreviation periods shielded
    """
    lowered = text.lower()
    for abbr in abbreviations:
        if abbr.token not in lowered:
            continue
        pattern = re.compile(r"(?<!\S)(" + re.escape(abbr.token) + r")\.", re.IGNORECASE)

        def replace(m, abbr=abbr):
            if _should_shield(abbr, m.string[m.end():], mode):
                return m.group(1) + SP
            return m.group(0)

        text = pattern.sub(replace, text)
    return text

def shield_numbers(text: str, ordinals: bool = False) -> str:
    """Decimals, periods before digits, and 1-2 digit list markers at line start."""
    text = _NUMBER_RE.sub(SP, text)
    text = _LIST_NUMBER_RE.sub(lambda m: m.group(1) + m.group(2) + SP, text)
    if ordinals:
        text = _ORDINAL_RE.sub(SP, text)
    return text

def shield_multi_period(text: str) -> str:
    """U.S.A. / e.g. / J.C. -> every period shielded as one unit."""
    return _MULTI_PERIOD_RE.sub(lambda m: m.group(0).replace(".", SP), text)

def restore_time_of_day(text: str) -> str:
    """A shielded a.m./p.m. followed by a capitalized word ends its sentence."""
    return _TIME_OF_DAY_RE.sub(".", text)

@lru_cache(maxsize=32)
def _acronym_boundary_re(words: Tuple[str, ...]):
    alternatives = "|".join(re.escape(w) for w in words)
    return re.compile(
        r"(?<!\S)(" + "|".join(_ACRONYMS) + rf"){SP}(?=\s(?:{alternatives})\s)"
    )

def restore_acronym_boundaries(text: str, words: Sequence[str]) -> str:
    """'... the U.S. Why ...': the acronym's final period is a real boundary."""
    if not words:
        return text
    return _acronym_boundary_re(tuple(words)).sub(lambda m: m.group(1) + ".", text)

def shield_geo_coordinates(text: str) -> str:
    return _GEO_RE.sub(SP, text)

def shield_inline_periods(text: str) -> str:
    """Periods inside tokens such as emails and hostnames."""
    return _INLINE_PERIOD_RE.sub(INLINE_PERIOD, text)

def disambiguate(text: str, profile: LanguageProfile,
                 abbreviations: Sequence[Abbreviation] = ()) -> str:
    """
    Run every period-disambiguation rule in order.

    Args:
        text: Buffer after ellipsis protection
        profile: Active language profile
        abbreviations: Lexicon entries for the active language

    Returns:
        str: Buffer with every non-boundary period shielded
    """
    text = shield_possessives(text)
    text = shield_initials(text, lowercase=profile.lowercase_initials)
    text = shield_abbreviations(text, abbreviations, mode=profile.abbreviation_mode)
    text = shield_numbers(text, ordinals=profile.ordinal_numbers)
    text = shield_multi_period(text)
    text = restore_time_of_day(text)
    text = restore_acronym_boundaries(text, profile.boundary_words)
    return shield_geo_coordinates(text)
