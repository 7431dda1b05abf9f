"""Test the command-line interface."""

import io
import json
from pathlib import Path

import sentseg.profiles
from sentseg.cli import main


PACKAGED_PROFILES = Path(sentseg.profiles.__file__).parent / "languages.yaml"


class TestSegmentCommand:
    """Test the segment command."""

    def test_segment_text_argument(self, capsys):
        """Test segmenting text given on the command line."""
        assert main(["segment", "Dr. Smith went home. He left."]) == 0

        out = capsys.readouterr().out
        assert out.splitlines() == ["Dr. Smith went home.", "He left."]

    def test_segment_json_output(self, capsys):
        """Test JSON output."""
        assert main(["segment", "--json", "One here. Two here."]) == 0

        assert json.loads(capsys.readouterr().out) == ["One here.", "Two here."]

    def test_segment_file(self, capsys, tmp_path):
        """Test segmenting a UTF-8 file."""
        path = tmp_path / "input.txt"
        path.write_text("你好。我很好。", encoding="utf-8")

        assert main(["segment", "-f", str(path), "-l", "zh"]) == 0
        assert capsys.readouterr().out.splitlines() == ["你好。", "我很好。"]

    def test_segment_stdin(self, capsys, monkeypatch):
        """Test segmenting text read from stdin."""
        monkeypatch.setattr("sys.stdin", io.StringIO("First one. Second one."))

        assert main(["segment"]) == 0
        assert capsys.readouterr().out.splitlines() == ["First one.", "Second one."]

    def test_segment_with_clean(self, capsys):
        """Test the cleaner and list guard."""
        assert main(["segment", "--clean", "Steps:\n1. Open it.\n2. Close it."]) == 0
        assert capsys.readouterr().out.splitlines() == ["Steps:", "1. Open it.", "2. Close it."]

    def test_segment_custom_lexicon(self, capsys, temp_yaml_file):
        """Test that a custom lexicon replaces the packaged one."""
        path = temp_yaml_file("""
version: 1
language: en
abbreviations:
  prefix: [capt]
""")

        assert main(["segment", "--lexicon", str(path), "Dr. Smith met Capt. Jones."]) == 0
        assert capsys.readouterr().out.splitlines() == ["Dr.", "Smith met Capt. Jones."]

    def test_segment_verbose_logs_to_stderr(self, capsys):
        """Test that --verbose logs pipeline events."""
        assert main(["segment", "-v", "One here."]) == 0
        assert "segmentation_complete" in capsys.readouterr().err

    def test_segment_missing_file(self, capsys, tmp_path):
        """Test a missing input file."""
        assert main(["segment", "-f", str(tmp_path / "missing.txt")]) == 1
        assert "Input file not found" in capsys.readouterr().err

    def test_segment_invalid_profiles(self, capsys, temp_yaml_file):
        """Test an invalid profile file."""
        path = temp_yaml_file("default:\n  terminals: []\n")

        assert main(["segment", "--profiles", str(path), "Hi."]) == 1
        assert "Configuration error" in capsys.readouterr().err


class TestValidateCommand:
    """Test the validate command."""

    def test_validate_packaged_profiles(self, capsys):
        """Test validating the packaged profile table."""
        assert main(["validate", str(PACKAGED_PROFILES)]) == 0

        out = capsys.readouterr().out
        assert "Profile validation successful" in out

    def test_validate_lexicon_detected(self, capsys, sample_lexicon_yaml, temp_yaml_file):
        """Test that a lexicon file is detected from its content."""
        assert main(["validate", "-v", str(temp_yaml_file(sample_lexicon_yaml))]) == 0

        out = capsys.readouterr().out
        assert "Lexicon validation successful" in out
        assert "dr. (prefix)" in out

    def test_validate_invalid_file(self, capsys, temp_yaml_file):
        """Test validating an invalid lexicon."""
        path = temp_yaml_file("language: en\nabbreviations:\n  plain: [etc.]\n")

        assert main(["validate", str(path)]) == 1
        assert "Validation failed" in capsys.readouterr().out

    def test_validate_missing_file(self, capsys, tmp_path):
        assert main(["validate", str(tmp_path / "missing.yaml")]) == 1
        assert "File not found" in capsys.readouterr().out


class TestOtherCommands:
    """Test languages, info, and the bare command."""

    def test_languages(self, capsys):
        assert main(["languages"]) == 0

        out = capsys.readouterr().out
        assert "   en:" in out
        assert "   hi:" in out

    def test_info(self, capsys):
        assert main(["info"]) == 0
        assert "sentseg CLI" in capsys.readouterr().out

    def test_no_command(self, capsys):
        assert main([]) == 1
