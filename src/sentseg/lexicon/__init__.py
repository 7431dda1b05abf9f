"""
Abbreviation lexicons: per-language abbreviation tokens tagged as plain,
title-prefix or numeric-unit, configured in YAML and validated with pydantic.
"""

from .loader import (
    LexiconLoadError,
    YamlAbbreviationLexicon,
    load_lexicon,
    load_lexicon_from_string,
    packaged_languages,
)
from .schema import AbbreviationGroups, LexiconFile

__all__ = [
    'AbbreviationGroups',
    'LexiconFile',
    'LexiconLoadError',
    'YamlAbbreviationLexicon',
    'load_lexicon',
    'load_lexicon_from_string',
    'packaged_languages',
]
