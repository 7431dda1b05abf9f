"""Test configuration and fixtures."""

import pytest
from pathlib import Path
import tempfile

from sentseg.profiles.loader import default_profiles, load_profiles_from_string
from sentseg.runtime.segmenter import Segmenter


@pytest.fixture
def sample_profiles_yaml():
    """Provide a small profile table YAML for testing."""
    return """
version: 1
default:
  terminals: [".", "!", "?"]
  compound_marks: true
  newline_is_boundary: true
  boundary_words: [The, We]
  literal_exclamations: ["Yahoo!"]
languages:
  en: {}
  el:
    terminals: [".", "!", ";", "?"]
    compound_marks: false
"""


@pytest.fixture
def sample_profiles(sample_profiles_yaml):
    """Provide a loaded profile table for testing."""
    return load_profiles_from_string(sample_profiles_yaml)


@pytest.fixture
def sample_lexicon_yaml():
    """Provide a small abbreviation lexicon YAML for testing."""
    return """
version: 1
language: en
abbreviations:
  prefix: [dr, mr]
  number: ["no", pp]
  plain: [etc, approx]
"""


@pytest.fixture
def temp_yaml_file():
    """Write YAML content to a temporary file; cleaned up after the test."""
    paths = []

    def _write(content: str) -> Path:
        with tempfile.NamedTemporaryFile(mode='w', suffix='.yaml', delete=False, encoding='utf-8') as f:
            f.write(content)
            paths.append(Path(f.name))
        return paths[-1]

    yield _write

    # Cleanup
    for path in paths:
        if path.exists():
            path.unlink()


@pytest.fixture
def profiles():
    """The packaged profile table."""
    return default_profiles()


@pytest.fixture
def english():
    """Provide an English segmenter with the packaged configuration."""
    return Segmenter(language="en")


class SimpleTestLogger:
    """Simple logger for testing that captures messages."""

    def __init__(self):
        self.messages = []

    def info(self, msg: str, **kv):
        self.messages.append(('info', msg, kv))

    def warn(self, msg: str, **kv):
        self.messages.append(('warn', msg, kv))

    def error(self, msg: str, **kv):
        self.messages.append(('error', msg, kv))

    def clear(self):
        """Clear captured messages."""
        self.messages.clear()


class SimpleTestMeter:
    """Simple meter for testing that captures counters and observations."""

    def __init__(self):
        self.counters = {}
        self.observations = []

    def inc(self, name: str, amount: int = 1, **tags):
        self.counters[name] = self.counters.get(name, 0) + amount

    def observe(self, name: str, value: float, **tags):
        self.observations.append((name, value, tags))


@pytest.fixture
def test_logger():
    """Provide a test logger that captures messages."""
    return SimpleTestLogger()


@pytest.fixture
def test_meter():
    """Provide a test meter that captures metrics."""
    return SimpleTestMeter()
