"""
Language profile table: terminal punctuation and rule toggles per language,
configured in YAML and validated with pydantic.
"""

from .loader import ProfileLoadError, default_profiles, load_profiles, load_profiles_from_string
from .schema import LanguageProfile, ProfileTable

__all__ = [
    'LanguageProfile',
    'ProfileLoadError',
    'ProfileTable',
    'default_profiles',
    'load_profiles',
    'load_profiles_from_string',
]
