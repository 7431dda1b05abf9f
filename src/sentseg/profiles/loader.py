"""YAML language profile loading and validation."""

import yaml
from functools import lru_cache
from importlib import resources
from pathlib import Path
from typing import Union
from .schema import ProfileTable

DEFAULT_PROFILES_RESOURCE = "languages.yaml"

class ProfileLoadError(Exception):
    """Exception raised when profile loading or validation fails."""
    pass

def load_profiles(path: Union[str, Path]) -> ProfileTable:
    """
    Load and validate a language profile table from a YAML file.

    Args:
        path: Path to YAML profile file

    Returns:
        ProfileTable: Validated profile table

    Raises:
        ProfileLoadError: If file cannot be read or the table is invalid
    """
    path = Path(path)

    if not path.exists():
        raise ProfileLoadError(f"Profile file not found: {path}")

    try:
        with open(path, "r", encoding="utf-8") as f:
            content = f.read()
    except Exception as e:
        raise ProfileLoadError(f"Cannot read profile file {path}: {e}")

    return load_profiles_from_string(content, source=str(path))

def load_profiles_from_string(yaml_content: str, source: str = "YAML content") -> ProfileTable:
    """
    Load and validate a language profile table from a YAML string.

    Args:
        yaml_content: YAML content as string
        source: Label used in error messages

    Returns:
        ProfileTable: Validated profile table

    Raises:
        ProfileLoadError: If YAML is invalid or profile validation fails
    """
    try:
        data = yaml.safe_load(yaml_content)
    except yaml.YAMLError as e:
        raise ProfileLoadError(f"Invalid YAML in {source}: {e}")

    if not isinstance(data, dict):
        raise ProfileLoadError(f"Profile content must contain a YAML mapping, got {type(data)}")

    try:
        table = ProfileTable.model_validate(data)
    except Exception as e:
        raise ProfileLoadError(f"Profile validation failed: {e}")

    # Run additional validation
    issues = table.validate_profiles()
    if issues:
        raise ProfileLoadError(f"Profile validation issues: {'; '.join(issues)}")

    return table

@lru_cache(maxsize=1)
def default_profiles() -> ProfileTable:
    """The profile table packaged with sentseg, loaded once per process."""
    content = resources.files(__package__).joinpath(DEFAULT_PROFILES_RESOURCE).read_text(encoding="utf-8")
    return load_profiles_from_string(content, source=DEFAULT_PROFILES_RESOURCE)
