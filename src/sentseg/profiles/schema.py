"""Pydantic schemas for the YAML language profile table."""

from pydantic import BaseModel, Field, model_validator
from typing import Any, Dict, List, Literal, Optional, Tuple
from ..core.sentinels import SHIELDED

class LanguageProfile(BaseModel):
    """Terminal punctuation and rule toggles for one language."""
    terminals: Tuple[str, ...] = Field(description="Characters that may end a sentence, in priority order")
    lowercase_initials: bool = Field(default=False,
                                     description="Shield a lone lowercase letter + period as an initial")
    compound_marks: bool = Field(default=False,
                                 description="Collapse ?! !? ?? !! and shield emphatic ? / ! inside clauses")
    newline_is_boundary: bool = Field(default=False,
                                      description="A newline inside a line ends a sentence")
    abbreviation_mode: Literal["standard", "before_space", "always"] = Field(
        default="standard",
        description="How lexicon abbreviations are shielded: standard|before_space|always")
    ordinal_numbers: bool = Field(default=False,
                                  description="Shield the period of ordinal numbers ('3. Mai')")
    low_quotes: bool = Field(default=False, description="Recognize „…“ and ,,…“ quotations")
    numeric_colons: bool = Field(default=False, description="Shield a colon between two digits")
    serial_commas: bool = Field(default=False,
                                description="Shield an Arabic comma that separates a one-word series")
    bracket_sentences: bool = Field(default=False,
                                    description="A leading bracketed span followed by a capital is a sentence")
    boundary_words: Tuple[str, ...] = Field(default=(),
                                            description="Words after U.S./U.K./E.U./I. that start a new sentence")
    literal_exclamations: Tuple[str, ...] = Field(default=(),
                                                  description="Tokens whose '!' is part of the token")

    class Config:
        extra = "forbid"  # Strict validation
        frozen = True

class ProfileTable(BaseModel):
    """Complete language profile table; languages inherit from the default entry."""
    version: int = Field(default=1, description="Profile table schema version")
    default: LanguageProfile = Field(description="Fallback profile for unknown languages")
    languages: Dict[str, LanguageProfile] = Field(default_factory=dict,
                                                  description="Per-language profiles keyed by code")

    class Config:
        extra = "forbid"  # Strict validation

    @model_validator(mode="before")
    @classmethod
    def _inherit_default(cls, data: Any) -> Any:
        """Fill every language entry's unspecified fields from the default entry."""
        if not isinstance(data, dict):
            return data
        base = data.get("default")
        if isinstance(base, LanguageProfile):
            base = base.model_dump()
        languages = data.get("languages")
        if not isinstance(base, dict) or not isinstance(languages, dict):
            return data

        merged = {}
        for code, overrides in languages.items():
            if overrides is None:
                overrides = {}
            elif isinstance(overrides, LanguageProfile):
                overrides = overrides.model_dump()
            merged[str(code).lower()] = {**base, **overrides} if isinstance(overrides, dict) else overrides
        return {**data, "languages": merged}

    @staticmethod
    def normalize_code(language: Optional[str]) -> str:
        """Reduce 'en-US' / 'pt_BR' / 'EN' to a lowercase primary subtag."""
        if not language:
            return ""
        return str(language).replace("_", "-").split("-")[0].strip().lower()

    def has(self, language: Optional[str]) -> bool:
        return self.normalize_code(language) in self.languages

    def get(self, language: Optional[str]) -> LanguageProfile:
        """Profile for a language code, falling back to the default profile."""
        return self.languages.get(self.normalize_code(language), self.default)

    @property
    def codes(self) -> List[str]:
        return sorted(self.languages)

    def validate_profiles(self) -> List[str]:
        """Validate profile configuration and return any issues."""
        issues = []

        profiles = [("default", self.default)] + sorted(self.languages.items())
        for code, profile in profiles:
            if not profile.terminals:
                issues.append(f"Profile '{code}' has no terminals")

            unknown = [t for t in profile.terminals if t not in SHIELDED]
            if unknown:
                issues.append(f"Profile '{code}' has terminals that cannot be shielded: {unknown}")

            duplicates = set([t for t in profile.terminals if profile.terminals.count(t) > 1])
            if duplicates:
                issues.append(f"Profile '{code}' has duplicate terminals: {duplicates}")

            blank = [w for w in profile.boundary_words + profile.literal_exclamations if not w.strip()]
            if blank:
                issues.append(f"Profile '{code}' has blank word entries")

        bad_codes = [c for c in self.languages if not (c.isalpha() and 2 <= len(c) <= 3)]
        if bad_codes:
            issues.append(f"Invalid language codes: {bad_codes}")

        return issues
