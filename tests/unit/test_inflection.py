"""
Tests for pluralize and ordinal_suffix.
"""

import pytest

from formatkit.utils.inflection import ordinal_suffix, pluralize


class TestPluralize:
    """pluralize"""

    def test_regular_plural(self) -> None:
        """Plain words get 's'"""
        assert pluralize("cat") == "cats"

    def test_possessive(self) -> None:
        """Possessive adds apostrophe-s"""
        assert pluralize("cat", True) == "cat's"
        assert pluralize("city", True) == "city's"

    def test_trailing_s_gets_apostrophe_only(self) -> None:
        """Words ending in s get a bare apostrophe in both modes"""
        assert pluralize("boss") == "boss'"
        assert pluralize("James", True) == "James'"
        assert pluralize("BOSS") == "BOSS'"

    def test_trailing_y_becomes_ies(self) -> None:
        """y -> ies"""
        assert pluralize("city") == "cities"
        assert pluralize("CITY") == "CITies"

    def test_whitespace_trimmed(self) -> None:
        """Surrounding whitespace is removed first"""
        assert pluralize("  dog ") == "dogs"

    @pytest.mark.parametrize("word", [None, 42, ["cat"], b"cat"])
    def test_non_string_gives_empty(self, word) -> None:
        """Non-string input returns an empty string"""
        assert pluralize(word) == ""

    def test_blank_string_gives_empty(self) -> None:
        """Nothing left after trimming returns an empty string"""
        assert pluralize("   ") == ""


class TestOrdinalSuffix:
    """ordinal_suffix"""

    @pytest.mark.parametrize(
        "number, expected",
        [
            (1, "1st"),
            (2, "2nd"),
            (3, "3rd"),
            (4, "4th"),
            (0, "0th"),
            (11, "11th"),
            (12, "12th"),
            (13, "13th"),
            (21, "21st"),
            (22, "22nd"),
            (23, "23rd"),
            (101, "101st"),
            (111, "111th"),
            (112, "112th"),
            (113, "113th"),
        ],
    )
    def test_suffixes(self, number: int, expected: str) -> None:
        """Last digit picks the suffix, except 11-13"""
        assert ordinal_suffix(number) == expected

    def test_other_inputs(self) -> None:
        """Text form of the input is used"""
        assert ordinal_suffix(1.0) == "1st"
        assert ordinal_suffix("7") == "7th"
        assert ordinal_suffix(-1) == "-1st"
