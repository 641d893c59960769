"""
Parser Tests
============
Covers the ${var...} grammar and the mapping of each named group onto
ParsedMacro fields.
"""

from __future__ import annotations

import pytest

from timemacro.macros import MacroKind, MacroParseError, ParsedMacro, find_macros, parse_macro
from timemacro.macros.parser import MACRO_PATTERN


def parse(text: str) -> ParsedMacro:
    match = MACRO_PATTERN.search(text)
    assert match is not None, f"no macro in {text!r}"
    return parse_macro(match)


# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
# 1. Grammar
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

class TestGrammar:
    @pytest.mark.parametrize("name", ["DATE", "date", "hour", "day", "month", "timestamp", "week_of_year"])
    def test_recognised_names(self, name):
        assert MACRO_PATTERN.fullmatch("${%s}" % name)

    @pytest.mark.parametrize("text", [
        "${HOUR}",          # has a formatter, not part of the grammar
        "${Date}",
        "${dates}",
        "${year}",
        "$date",
        "{date}",
        "${date",
        "${ date}",
        "${date +1}",
        "${date+1d+1m}",    # suffix terms out of order
        "${date+1s+1h}",
        "${date+1x}",
        "${date+}",
        "${date++1}",
        "${date+٣}",   # non-ASCII digit
    ])
    def test_not_a_macro(self, text):
        assert MACRO_PATTERN.search(text) is None

    def test_all_terms_in_order(self):
        assert MACRO_PATTERN.fullmatch("${date-1+2m-3d+4h-5s}")

    def test_suffix_terms_without_primary(self):
        assert MACRO_PATTERN.fullmatch("${hour+2h-30s}")

    def test_matches_inside_text(self):
        text = "where ds = '${DATE-1}' and hr = ${hour}"
        assert [m.group(0) for m in MACRO_PATTERN.finditer(text)] == ["${DATE-1}", "${hour}"]


# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
# 2. parse_macro
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

class TestParseMacro:
    def test_bare(self):
        m = parse("${date}")
        assert m == ParsedMacro(kind=MacroKind.date, raw="${date}")

    def test_primary_offset(self):
        m = parse("${DATE+3}")
        assert m.kind is MacroKind.DATE
        assert m.offset == 3
        assert m.offset_month is None

    def test_negative_primary_offset(self):
        assert parse("${date-3}").offset == -3

    def test_every_field(self):
        m = parse("${date-1+2m-3d+4h-5s}")
        assert (m.offset, m.offset_month, m.offset_day, m.offset_hour, m.offset_second) == (-1, 2, -3, 4, -5)

    def test_suffix_only(self):
        m = parse("${date-1m}")
        assert m.offset is None
        assert m.offset_month == -1

    def test_primary_is_not_mistaken_for_suffix(self):
        m = parse("${date-3+1m+2d}")
        assert m.offset == -3
        assert m.offset_month == 1
        assert m.offset_day == 2

    def test_leading_zeros(self):
        assert parse("${day+007}").offset == 7

    def test_raw_preserved(self):
        assert parse("x ${month-1m} y").raw == "${month-1m}"

    def test_offset_wider_than_64_bits(self):
        with pytest.raises(MacroParseError) as info:
            parse("${date+99999999999999999999}")
        assert info.value.group == "offset"
        assert info.value.value == "+99999999999999999999"

    def test_suffix_wider_than_64_bits(self):
        with pytest.raises(MacroParseError) as info:
            parse("${date-99999999999999999999d}")
        assert info.value.group == "day"

    def test_64_bit_bounds_accepted(self):
        assert parse("${timestamp+9223372036854775807}").offset == 2 ** 63 - 1
        assert parse("${timestamp-9223372036854775808}").offset == -(2 ** 63)

    def test_parse_error_is_value_error(self):
        assert issubclass(MacroParseError, ValueError)


# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
# 3. find_macros
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

class TestFindMacros:
    def test_in_order(self):
        found = find_macros("${hour} ${DATE-1} ${timestamp}")
        assert [m.kind for m in found] == [MacroKind.hour, MacroKind.DATE, MacroKind.timestamp]

    def test_skips_malformed(self):
        found = find_macros("${date+99999999999999999999} ${day}")
        assert [m.raw for m in found] == ["${day}"]

    def test_empty(self):
        assert find_macros("") == []
        assert find_macros("no macros here") == []
