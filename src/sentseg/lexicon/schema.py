"""Pydantic schemas for YAML abbreviation lexicon files."""

from pydantic import BaseModel, Field
from typing import List, Tuple
from ..core.types import Abbreviation, PLAIN, PREFIX, NUMBER

class AbbreviationGroups(BaseModel):
    """Abbreviation tokens grouped by how their trailing period is treated."""
    prefix: List[str] = Field(default_factory=list,
                              description="Title-like abbreviations that precede a name (always shielded)")
    number: List[str] = Field(default_factory=list,
                              description="Abbreviations shielded only before a number or '('")
    plain: List[str] = Field(default_factory=list,
                             description="Abbreviations shielded unless a capitalized word follows")

    class Config:
        extra = "forbid"  # Strict validation

class LexiconFile(BaseModel):
    """One language's abbreviation lexicon."""
    version: int = Field(default=1, description="Lexicon schema version")
    language: str = Field(description="Two-letter language code")
    abbreviations: AbbreviationGroups = Field(description="Abbreviation groups")

    class Config:
        extra = "forbid"  # Strict validation

    def entries(self) -> Tuple[Abbreviation, ...]:
        """Flatten the groups into lexicon entries; prefix wins over number over plain."""
        seen = set()
        out = []
        for category, tokens in ((PREFIX, self.abbreviations.prefix),
                                 (NUMBER, self.abbreviations.number),
                                 (PLAIN, self.abbreviations.plain)):
            for token in tokens:
                key = token.strip().lower()
                if key in seen:
                    continue
                seen.add(key)
                out.append(Abbreviation(token=key, category=category))
        return tuple(out)

    def validate_entries(self) -> List[str]:
        """Validate lexicon content and return any issues."""
        issues = []

        code = self.language.strip().lower()
        if not (code.isalpha() and 2 <= len(code) <= 3):
            issues.append(f"Invalid language code: '{self.language}'")

        groups = {
            PREFIX: self.abbreviations.prefix,
            NUMBER: self.abbreviations.number,
            PLAIN: self.abbreviations.plain,
        }
        for category, tokens in groups.items():
            blank = [t for t in tokens if not t.strip()]
            if blank:
                issues.append(f"Blank tokens in '{category}'")

            dotted = [t for t in tokens if t.strip().endswith(".")]
            if dotted:
                issues.append(f"Tokens in '{category}' must not end with a period: {dotted}")

            lowered = [t.strip().lower() for t in tokens]
            duplicates = set([t for t in lowered if lowered.count(t) > 1])
            if duplicates:
                issues.append(f"Duplicate tokens in '{category}': {duplicates}")

        return issues
