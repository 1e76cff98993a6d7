"""Tests for material file line tokenization."""

import pytest
from pyseam.parsing.material.tokenizer import split_tokens, parse_number, leading_numbers


class TestSplitTokens:
    """Test field splitting."""

    def test_whitespace_separated(self):
        assert split_tokens(" 1011          ISOELASTIC               steel") == ["1011", "ISOELASTIC", "steel"]

    def test_comma_separated_with_empty_fields(self):
        """Consecutive commas do not produce empty tokens."""
        tokens = split_tokens(" 7.85e-6,2.07e8,8.0e7, 0.3, #1061,, panel_b")
        assert tokens == ["7.85e-6", "2.07e8", "8.0e7", "0.3", "#1061", "panel_b"]

    def test_tabs_and_mixed_delimiters(self):
        assert split_tokens("a\tb , c,,d  ") == ["a", "b", "c", "d"]

    def test_only_delimiters(self):
        assert split_tokens(" , ,, ") == []


class TestParseNumber:
    """Test numeric field recognition."""

    @pytest.mark.parametrize("token, expected", [
        ("7.85e-6", 7.85e-6),
        ("2.07E8", 2.07e8),
        ("343000.", 343000.0),
        ("-.5", -0.5),
        ("+3", 3.0),
        ("2", 2.0),
        ("1.5D3", 1500.0),
        ("1.5d-3", 1.5e-3),
    ])
    def test_numbers(self, token, expected):
        assert parse_number(token) == pytest.approx(expected)

    @pytest.mark.parametrize("token", ["#1061", "panel_b", "nan", "inf", "1e", "0.3abc", ".", "-"])
    def test_non_numbers(self, token):
        assert parse_number(token) is None


class TestLeadingNumbers:
    """Test left-to-right numeric consumption."""

    def test_stops_at_first_non_numeric(self):
        values, stop = leading_numbers(["1", "2", "x", "3"])
        assert values == [1.0, 2.0]
        assert stop == "x"

    def test_all_numeric(self):
        values, stop = leading_numbers(["1", "2.5"])
        assert values == [1.0, 2.5]
        assert stop is None

    def test_first_token_non_numeric(self):
        values, stop = leading_numbers(["steel", "1.0"])
        assert values == []
        assert stop == "steel"
