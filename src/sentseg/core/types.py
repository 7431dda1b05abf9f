"""Data types shared across the segmentation pipeline."""

from dataclasses import dataclass

PLAIN = "plain"
PREFIX = "prefix"    # title-like abbreviation that always precedes a name ("Dr.")
NUMBER = "number"    # abbreviation that precedes a number ("No. 5", "pp. 10")

CATEGORIES = (PLAIN, PREFIX, NUMBER)

@dataclass(frozen=True)
class Abbreviation:
    """One lexicon entry: lowercase token without its trailing period."""
    token: str
    category: str = PLAIN

    @property
    def is_prefix(self) -> bool:
        return self.category == PREFIX

    @property
    def is_number(self) -> bool:
        return self.category == NUMBER
