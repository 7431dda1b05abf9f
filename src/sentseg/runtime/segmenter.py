"""Sentence segmentation pipeline: shield, split, restore."""

import re
from functools import lru_cache
from typing import List, Optional
from ..core.abc import AbbreviationLexicon, Cleaner, ListGuard, Logger, Meter
from ..core.sentinels import (
    DOUBLE_EXCLAMATION,
    DOUBLE_QUESTION,
    END_OF_LINE,
    EXCLAMATION_QUESTION,
    LINE_BREAK,
    NEWLINE,
    QUESTION_EXCLAMATION,
    count_reserved,
    decode,
    strip_reserved,
)
from ..lexicon.loader import YamlAbbreviationLexicon
from ..preprocess.cleaner import WhitespaceCleaner
from ..preprocess.lists import NumberedListGuard
from ..profiles.loader import default_profiles
from ..profiles.schema import LanguageProfile, ProfileTable
from ..rules.abbreviations import disambiguate, shield_inline_periods
from ..rules.compound import apply_compound_rules
from ..rules.ellipsis import protect_ellipses
from ..rules.spans import shield_spans

DEFAULT_LANGUAGE = "en"
MIN_SENTENCE_LENGTH = 2

CLOSERS = "\"'”’»」）)]"

# Whole bracketed/quoted span at the start of a segment that is followed by a capital.
_BRACKET_SENTENCES = (
    r"（[^）]*）(?=\s?[A-Z])",
    r"「[^」]*」(?=\s[A-Z])",
    r"\([^)]*\)(?=\s[A-Z])",
    r"'[^']*'(?=\s[A-Z])",
    r'"[^"]*"(?=\s[A-Z])',
    r"“[^”]*”(?=\s[A-Z])",
)

_QUOTED_BOUNDARY_RE = re.compile(r"(?<=[!?.][\"'“”’])\s(?=[A-Z])")
_NEWLINE_RUN_RE = re.compile(r"\s*\n\s*")
_SPACE_RUN_RE = re.compile(r"\s{3,}")
_RULE_RE = re.compile(r"_{3,}")

@lru_cache(maxsize=64)
def build_split_pattern(profile: LanguageProfile) -> "re.Pattern":
    """
    Compile the segment scanner for a profile.

    A segment runs from a non-space character to the first unshielded
    terminal, absorbing any terminals and closing quotes/brackets that follow.
    """
    boundaries = [END_OF_LINE]
    if profile.compound_marks:
        boundaries += [QUESTION_EXCLAMATION, EXCLAMATION_QUESTION, DOUBLE_QUESTION, DOUBLE_EXCLAMATION]
    if profile.newline_is_boundary:
        boundaries.append(NEWLINE)

    terminals = re.escape("".join(profile.terminals) + "".join(boundaries))
    closers = re.escape(CLOSERS)
    core = rf"\S.*?[{terminals}]+[{closers}]*"

    alternatives = list(_BRACKET_SENTENCES) if profile.bracket_sentences else []
    return re.compile("|".join(alternatives + [core]), re.DOTALL)

class Segmenter:
    """
    Rule-based sentence segmenter.

    Shields every punctuation mark that is not a sentence boundary behind a
    reversible sentinel, splits on what is left, then restores the text.
    """

    def __init__(self, language: Optional[str] = DEFAULT_LANGUAGE, doc_type: Optional[str] = None, *,
                 profiles: Optional[ProfileTable] = None,
                 lexicon: Optional[AbbreviationLexicon] = None,
                 cleaner: Optional[Cleaner] = None,
                 list_guard: Optional[ListGuard] = None,
                 logger: Optional[Logger] = None, meter: Optional[Meter] = None):
        """
        Initialize segmenter with language configuration and collaborators.

        Args:
            language: Two-letter language code; unknown codes use the default profile
            doc_type: Optional document-type hint forwarded to the cleaner
            profiles: Language profile table (packaged table if None)
            lexicon: Abbreviation lexicon (packaged YAML lexicons if None)
            cleaner: Optional text cleaner run before segmentation
            list_guard: Optional list-marker protector run after cleaning
            logger: Optional structured logger
            meter: Optional metrics collector
        """
        self.language = language or DEFAULT_LANGUAGE
        self.doc_type = doc_type
        self.profiles = profiles if profiles is not None else default_profiles()
        self.lexicon = lexicon if lexicon is not None else YamlAbbreviationLexicon()
        self.cleaner = cleaner
        self.list_guard = list_guard
        self.log = logger
        self.meter = meter

        self.profile = self.profiles.get(self.language)
        self.abbreviations = tuple(self.lexicon.entries(self.language))
        self._split_re = build_split_pattern(self.profile)

        if not self.profiles.has(self.language) and self.log:
            self.log.warn("unknown_language", language=self.language,
                          abbreviations=len(self.abbreviations))

    def segment(self, text: Optional[str]) -> List[str]:
        """
        Segment a text into an ordered list of sentences.

        Args:
            text: Input text; None and "" yield an empty list

        Returns:
            List[str]: Trimmed, non-empty sentences in original order
        """
        if not text:
            return []

        reserved = count_reserved(text)
        if reserved:
            text = strip_reserved(text)
            if self.log:
                self.log.warn("reserved_codepoints_removed", count=reserved)

        if self.cleaner:
            text = self.cleaner.clean(text, self.language, self.doc_type)
        if self.list_guard:
            text = self.list_guard.protect_markers(text)

        text = protect_ellipses(text)
        text = disambiguate(text, self.profile, self.abbreviations)

        sentences: List[str] = []
        for line in text.split(LINE_BREAK):
            if line:
                sentences.extend(self._segment_line(line))

        if self.meter:
            self.meter.inc("sentseg.segments", len(sentences), language=self.language)
            self.meter.observe("sentseg.sentences_per_call", float(len(sentences)), language=self.language)
        if self.log:
            self.log.info("segmentation_complete", language=self.language,
                          sentences=len(sentences), text_length=len(text))

        return sentences

    def _segment_line(self, line: str) -> List[str]:
        """Shield, split and rebuild one physical line."""
        line = shield_inline_periods(line.replace("\n", NEWLINE))

        if not any(t in line for t in self.profile.terminals):
            whole = decode(line).strip()
            return [whole] if whole else []

        if not line.endswith(self.profile.terminals):
            line += END_OF_LINE

        line = shield_spans(line, self.profile)
        line = apply_compound_rules(line, self.profile)

        sentences = []
        for candidate in self._split_re.findall(line):
            sentences.extend(self._build_sentences(candidate))
        return sentences

    def _build_sentences(self, candidate: str) -> List[str]:
        """Decode a candidate segment and drop degenerate fragments."""
        sentences = []
        for piece in _QUOTED_BOUNDARY_RE.split(decode(candidate)):
            piece = _NEWLINE_RUN_RE.sub(" ", piece)
            piece = _SPACE_RUN_RE.sub(" ", piece).strip()
            if len(piece) < MIN_SENTENCE_LENGTH or not _RULE_RE.sub("", piece).strip():
                if self.meter and piece:
                    self.meter.inc("sentseg.rejected_fragments", language=self.language)
                continue
            sentences.append(piece)
        return sentences

@lru_cache(maxsize=32)
def _shared_segmenter(language: str, doc_type: Optional[str], clean: bool) -> Segmenter:
    if not clean:
        return Segmenter(language=language, doc_type=doc_type)
    return Segmenter(language=language, doc_type=doc_type,
                     cleaner=WhitespaceCleaner(), list_guard=NumberedListGuard())

def shared_segmenter(language: Optional[str] = DEFAULT_LANGUAGE, doc_type: Optional[str] = None,
                     clean: bool = True) -> Segmenter:
    """
    Cached segmenter for the packaged configuration.

    Language codes are normalized first, so "EN", "en-US" and "en" share
    one instance; the cache holds at most 32 segmenters.
    """
    code = ProfileTable.normalize_code(language) or DEFAULT_LANGUAGE
    return _shared_segmenter(code, doc_type, clean)

def segment(text: Optional[str], language: Optional[str] = DEFAULT_LANGUAGE,
            doc_type: Optional[str] = None, clean: bool = True) -> List[str]:
    """
    Segment ``text`` with the packaged profiles and lexicons.

    Args:
        text: Input text; None and "" yield an empty list
        language: Two-letter language code
        doc_type: Document-type hint for the cleaner (e.g. "pdf")
        clean: Run the whitespace cleaner and list guard first

    Example:
        >>> segment("Dr. Smith went home. He left.")
        ['Dr. Smith went home.', 'He left.']
    """
    return shared_segmenter(language, doc_type, clean).segment(text)
