"""Tests for the template placeholder scanner."""
import pytest

from whatthecommit.models import Literal, NameCase, NameToken, NumberToken
from whatthecommit.template.scanner import normalize_range, parse_range_spec, scan


@pytest.mark.parametrize("spec,expected", [
    ("", (1, 999)),
    ("50", (1, 50)),
    (",", (1, 999)),
    (",5", (1, 5)),
    ("42,", (42, 999)),
    ("1,5", (1, 5)),
    ("007", (1, 7)),
])
def test_parse_range_spec_forms(spec, expected):
    assert parse_range_spec(spec) == expected


@pytest.mark.parametrize("spec", ["1,2,3", ",,", "a", "1 ", "-5", "1.5", "²"])
def test_parse_range_spec_rejects_invalid(spec):
    assert parse_range_spec(spec) is None


def test_inverted_range_is_widened():
    """A low bound above the high bound turns into [low, low * 2]."""
    assert parse_range_spec("10,5") == (10, 20)
    assert parse_range_spec("1000,") == (1000, 2000)
    assert normalize_range(7, 3) == (7, 14)
    assert normalize_range(3, 7) == (3, 7)


def test_zero_digit_spec_is_normalized():
    """XNUM0X parses to [1, 0] and is widened to [1, 2]."""
    assert parse_range_spec("0") == (1, 2)


def test_scan_plain_text():
    assert scan("Works on my machine") == [Literal("Works on my machine")]


def test_scan_empty_template():
    assert scan("") == []


def test_scan_name_tokens():
    segments = scan("XNAMEX and XLOWERNAMEX and XUPPERNAMEX")
    assert segments == [
        NameToken(NameCase.AS_IS, "XNAMEX"),
        Literal(" and "),
        NameToken(NameCase.LOWER, "XLOWERNAMEX"),
        Literal(" and "),
        NameToken(NameCase.UPPER, "XUPPERNAMEX"),
    ]


def test_scan_number_token():
    segments = scan("XNAMEX fixed XNUM50X bugs")
    assert segments == [
        NameToken(NameCase.AS_IS, "XNAMEX"),
        Literal(" fixed "),
        NumberToken(1, 50, "XNUM50X"),
        Literal(" bugs"),
    ]


def test_scan_adjacent_tokens():
    segments = scan("XNUMXXNAMEX")
    assert segments == [
        NumberToken(1, 999, "XNUMX"),
        NameToken(NameCase.AS_IS, "XNAMEX"),
    ]


def test_scan_unterminated_number_is_literal():
    assert scan("Fixed XNUM12 bugs") == [Literal("Fixed XNUM12 bugs")]


def test_scan_two_commas_is_literal():
    assert scan("XNUM1,2,3X issues") == [Literal("XNUM1,2,3X issues")]


def test_scan_invalid_spec_keeps_later_markers():
    """The closing X of a rejected number can still start a name marker."""
    segments = scan("XNUM12 XNAMEX")
    assert segments == [
        Literal("XNUM12 "),
        NameToken(NameCase.AS_IS, "XNAMEX"),
    ]


def test_scan_number_after_invalid_number():
    segments = scan("XNUMaX XNUM5X")
    assert segments == [
        Literal("XNUMaX "),
        NumberToken(1, 5, "XNUM5X"),
    ]


def test_scan_nearest_suffix_delimits_token():
    """The nearest X closes the token, even if it starts another prefix."""
    segments = scan("XNUM5XNUM6X")
    assert segments == [
        NumberToken(1, 5, "XNUM5X"),
        Literal("NUM6X"),
    ]


def test_scan_markers_are_case_sensitive():
    assert scan("xnamex XNameX xnum5x") == [Literal("xnamex XNameX xnum5x")]


def test_scan_partial_markers_are_literal():
    assert scan("XNAME XLOWER XUPPERNAME X") == [Literal("XNAME XLOWER XUPPERNAME X")]


def test_scan_leading_x_before_marker():
    segments = scan("XXNAMEX")
    assert segments == [Literal("X"), NameToken(NameCase.AS_IS, "XNAMEX")]


def test_scan_literal_spans_are_merged():
    segments = scan("a XNUM b")
    assert segments == [Literal("a XNUM b")]


def test_spec_with_too_many_digits_is_rejected():
    assert parse_range_spec("9" * 5000) is None
    assert parse_range_spec("1," + "9" * 5000) is None
    assert parse_range_spec("9" * 5000 + ",") is None


def test_scan_keeps_oversized_number_as_literal():
    template = "Fixed XNUM" + "9" * 5000 + "X bugs"
    assert scan(template) == [Literal(template)]
