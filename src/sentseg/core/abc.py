"""Protocol interfaces for collaborators injected into the segmenter."""

from typing import Protocol, Sequence, List, Optional, Any
from .types import Abbreviation

class Cleaner(Protocol):
    """Normalizes document-format artifacts and whitespace before segmentation."""

    def clean(self, text: str, language: str, doc_type: Optional[str] = None) -> str:
        """
        Clean raw text so the segmentation core can run on it.

        Args:
            text: Raw input text
            language: Two-letter language code
            doc_type: Optional document-type hint (e.g. "pdf")

        Returns:
            str: Cleaned text; line boundaries may be marked with "\\r"
        """
        ...

class ListGuard(Protocol):
    """Protects numbered/lettered outline markers from being mis-split."""

    def protect_markers(self, text: str) -> str:
        """
        Insert a line-break marker ("\\r") before outline markers.

        Args:
            text: Cleaned input text

        Returns:
            str: Text whose list items start on their own physical line
        """
        ...

class AbbreviationLexicon(Protocol):
    """Per-language abbreviation lookup service."""

    def entries(self, language: str) -> Sequence[Abbreviation]:
        """
        Return the abbreviations known for a language.

        Args:
            language: Two-letter language code

        Returns:
            Sequence[Abbreviation]: Entries in lexicon order; empty if unsupported
        """
        ...

class Segmenter(Protocol):
    """Anything that turns a text into an ordered list of sentences."""

    def segment(self, text: Optional[str]) -> List[str]:
        ...

class Logger(Protocol):
    """Optional structured logging interface."""

    def info(self, msg: str, **kv: Any) -> None:
        """Log info level message with optional key-value context."""
        ...

    def warn(self, msg: str, **kv: Any) -> None:
        """Log warning level message with optional key-value context."""
        ...

    def error(self, msg: str, **kv: Any) -> None:
        """Log error level message with optional key-value context."""
        ...

class Meter(Protocol):
    """Optional metrics collection interface."""

    def inc(self, name: str, amount: int = 1, **tags: str) -> None:
        """Increment a counter metric with optional tags."""
        ...

    def observe(self, name: str, value: float, **tags: str) -> None:
        """Record an observation metric with optional tags."""
        ...
