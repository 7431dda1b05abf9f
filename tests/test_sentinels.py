"""Test sentinel shielding and decoding."""

import pytest
from sentseg.core.sentinels import (
    BOUNDARY_SENTINELS,
    DECODE,
    END_OF_LINE,
    RESERVED_FIRST,
    RESERVED_LAST,
    SHIELDED,
    count_reserved,
    decode,
    shield,
    strip_reserved,
)


class TestSentinels:
    """Test the sentinel table."""

    def test_sentinels_are_reserved_codepoints(self):
        """Test every sentinel lies in the reserved block."""
        for sentinel in DECODE:
            assert len(sentinel) == 1
            assert RESERVED_FIRST <= ord(sentinel) <= RESERVED_LAST

    def test_sentinels_are_distinct(self):
        """Test that no two marks share a sentinel."""
        assert len(set(SHIELDED.values())) == len(SHIELDED)

    def test_boundary_sentinels_are_not_shielded_forms(self):
        assert not set(BOUNDARY_SENTINELS) & set(SHIELDED.values())

    @pytest.mark.parametrize("text", [
        "Dr. Smith!",
        "你好。",
        "Τι κάνεις;",
        "मैं हूँ।",
        "Բարեւ։",
    ])
    def test_shield_then_decode(self, text):
        """Test that decoding restores shielded text exactly."""
        shielded = shield(text)
        assert not any(mark in shielded for mark in SHIELDED)
        assert decode(shielded) == text

    def test_end_of_line_decodes_to_nothing(self):
        assert decode(f"Hello{END_OF_LINE}") == "Hello"

    def test_strip_reserved(self):
        """Test removal of literal reserved codepoints."""
        text = "a\ue000b\ue03fc"
        assert count_reserved(text) == 2
        assert strip_reserved(text) == "abc"
