"""Test text cleaning and list-marker protection."""

from sentseg.core.sentinels import LINE_BREAK
from sentseg.preprocess.cleaner import WhitespaceCleaner
from sentseg.preprocess.lists import NumberedListGuard


class TestWhitespaceCleaner:
    """Test whitespace normalization."""

    def test_line_endings_and_spaces(self):
        """Test CRLF endings and runs of spaces and tabs."""
        cleaner = WhitespaceCleaner()
        assert cleaner.clean("Hello   world.\r\nBye.\t Now.") == "Hello world.\nBye. Now."

    def test_no_break_spaces(self):
        """Test that no-break spaces become plain spaces."""
        assert WhitespaceCleaner().clean("10\u00a0km away.") == "10 km away."

    def test_paragraph_breaks(self):
        """Test that blank lines become line breaks."""
        result = WhitespaceCleaner().clean("One.\n\n\nTwo.\n \nThree.")
        assert result == f"One.{LINE_BREAK}Two.{LINE_BREAK}Three."

    def test_pdf_wraps_are_joined(self):
        """Test hyphenated and soft line wraps in PDF text."""
        text = "This is a sen-\ntence that wraps\nacross lines.\n\nNew para."
        result = WhitespaceCleaner().clean(text, "en", "pdf")
        assert result == f"This is a sentence that wraps across lines.{LINE_BREAK}New para."

    def test_pdf_keeps_wrap_after_terminal(self):
        """Test that a newline after a terminal mark is kept."""
        result = WhitespaceCleaner().clean("First.\nSecond", "en", "pdf")
        assert result == "First.\nSecond"

    def test_non_pdf_keeps_wraps(self):
        """Test that wraps are only joined for PDF text."""
        assert WhitespaceCleaner().clean("wraps\nacross") == "wraps\nacross"

    def test_empty_text(self):
        assert WhitespaceCleaner().clean("") == ""


class TestNumberedListGuard:
    """Test list-marker protection."""

    def test_numbered_items(self):
        """Test numbered list items move to their own lines."""
        result = NumberedListGuard().protect_markers("Steps:\n1. Open.\n2) Close.")
        assert result == f"Steps:{LINE_BREAK}1. Open.{LINE_BREAK}2) Close."

    def test_lettered_and_bulleted_items(self):
        """Test lettered and bulleted items."""
        result = NumberedListGuard().protect_markers("Options:\na) red\n• blue\n  - green")
        assert result == f"Options:{LINE_BREAK}a) red{LINE_BREAK}• blue{LINE_BREAK}- green"

    def test_plain_lines_untouched(self):
        """Test that ordinary wrapped lines are not list items."""
        text = "It costs\n100 dollars."
        assert NumberedListGuard().protect_markers(text) == text

    def test_empty_text(self):
        assert NumberedListGuard().protect_markers("") == ""
