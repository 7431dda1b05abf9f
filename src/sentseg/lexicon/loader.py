"""YAML abbreviation lexicon loading and the packaged lexicon service."""

import yaml
from functools import lru_cache
from importlib import resources
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Tuple, Union
from ..core.types import Abbreviation
from .schema import LexiconFile

DATA_DIR = "data"

class LexiconLoadError(Exception):
    """Exception raised when lexicon loading or validation fails."""
    pass

def load_lexicon(path: Union[str, Path]) -> LexiconFile:
    """
    Load and validate an abbreviation lexicon from a YAML file.

    Args:
        path: Path to YAML lexicon file

    Returns:
        LexiconFile: Validated lexicon

    Raises:
        LexiconLoadError: If file cannot be read or the lexicon is invalid
    """
    path = Path(path)

    if not path.exists():
        raise LexiconLoadError(f"Lexicon file not found: {path}")

    try:
        with open(path, "r", encoding="utf-8") as f:
            content = f.read()
    except Exception as e:
        raise LexiconLoadError(f"Cannot read lexicon file {path}: {e}")

    return load_lexicon_from_string(content, source=str(path))

def load_lexicon_from_string(yaml_content: str, source: str = "YAML content") -> LexiconFile:
    """
    Load and validate an abbreviation lexicon from a YAML string.

    Args:
        yaml_content: YAML content as string
        source: Label used in error messages

    Returns:
        LexiconFile: Validated lexicon

    Raises:
        LexiconLoadError: If YAML is invalid or lexicon validation fails
    """
    try:
        data = yaml.safe_load(yaml_content)
    except yaml.YAMLError as e:
        raise LexiconLoadError(f"Invalid YAML in {source}: {e}")

    if not isinstance(data, dict):
        raise LexiconLoadError(f"Lexicon content must contain a YAML mapping, got {type(data)}")

    try:
        lexicon = LexiconFile.model_validate(data)
    except Exception as e:
        raise LexiconLoadError(f"Lexicon validation failed: {e}")

    # Run additional validation
    issues = lexicon.validate_entries()
    if issues:
        raise LexiconLoadError(f"Lexicon validation issues: {'; '.join(issues)}")

    return lexicon

@lru_cache(maxsize=None)
def packaged_lexicon(language: str) -> Optional[LexiconFile]:
    """The lexicon shipped with sentseg for a language, or None."""
    resource = resources.files(__package__).joinpath(DATA_DIR).joinpath(f"{language}.yaml")
    if not resource.is_file():
        return None
    return load_lexicon_from_string(resource.read_text(encoding="utf-8"), source=f"{language}.yaml")

@lru_cache(maxsize=1)
def _packaged_codes() -> Tuple[str, ...]:
    data = resources.files(__package__).joinpath(DATA_DIR)
    return tuple(sorted(p.name[:-len(".yaml")] for p in data.iterdir() if p.name.endswith(".yaml")))

def packaged_languages() -> List[str]:
    """Language codes that have a packaged lexicon."""
    return list(_packaged_codes())

class YamlAbbreviationLexicon:
    """
    Abbreviation lexicon backed by YAML files.

    Caller-supplied lexicons take precedence over the packaged ones; a language
    with neither yields no entries.
    """

    def __init__(self, lexicons: Optional[Iterable[LexiconFile]] = None, *,
                 include_packaged: bool = True):
        """
        Initialize the lexicon service.

        Args:
            lexicons: Extra validated lexicons, keyed by their language field
            include_packaged: Whether to fall back to the packaged YAML data
        """
        self.include_packaged = include_packaged
        self._custom: Dict[str, Tuple[Abbreviation, ...]] = {}
        for lexicon in lexicons or ():
            self.add(lexicon)

    @classmethod
    def from_files(cls, paths: Iterable[Union[str, Path]], *,
                   include_packaged: bool = True) -> "YamlAbbreviationLexicon":
        return cls([load_lexicon(p) for p in paths], include_packaged=include_packaged)

    def add(self, lexicon: LexiconFile) -> None:
        self._custom[lexicon.language.strip().lower()] = lexicon.entries()

    def languages(self) -> List[str]:
        codes = set(self._custom)
        if self.include_packaged:
            codes.update(packaged_languages())
        return sorted(codes)

    def entries(self, language: str) -> Tuple[Abbreviation, ...]:
        code = (language or "").replace("_", "-").split("-")[0].strip().lower()
        if code in self._custom:
            return self._custom[code]
        if self.include_packaged and code in _packaged_codes():
            lexicon = packaged_lexicon(code)
            if lexicon is not None:
                return lexicon.entries()
        return ()
