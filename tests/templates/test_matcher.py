"""
Tests for matching record text against format trees.
"""

import pytest

from tl1.exceptions import (
    ArityMismatch,
    LiteralMismatch,
    UnknownKeyword,
    UnknownNodeKind,
    UnterminatedQuotedSpan,
)
from tl1.parsing.grammar import parse_message_format
from tl1.structure.nodes import ColonSeparatedVariables, Literal, Variable
from tl1.templates.formatter import render
from tl1.templates.matcher import match, match_record

ALARM_DETAIL_FORMAT = (
    "<aid>,<aidtype>:<conddescr>,<aiddet>,<obsdbhvr>,<exptdbhvr>:<dgntype>,<tblislt>"
)


class TestLiterals:
    """Tests for literal matching."""

    def test_raises_on_mismatched_literal(self):
        """Test that a literal segment must match the record text."""
        root = parse_message_format("<from_aid>,<to_aid>::SERVICENAME=<service_name>")
        with pytest.raises(LiteralMismatch, match="does not match") as exc_info:
            match_record(root, "asdf,asdf:ASDF:")
        assert exc_info.value.expected == ""
        assert exc_info.value.actual == "ASDF"

    def test_ignores_matching_literals(self):
        """Test that matching literals add nothing to the record."""
        root = parse_message_format("<from_aid>,<to_aid>::SERVICENAME=<service_name>")
        assert match_record(root, "asdf,asdf::") == {"from_aid": "asdf", "to_aid": "asdf"}

    def test_literal_match_is_exact(self):
        """Test that literal comparison is case-sensitive."""
        with pytest.raises(LiteralMismatch):
            match(Literal("IS-NR"), "is-nr", {})


class TestVariables:
    """Tests for variable matching."""

    def test_strips_quotes(self):
        """Test that surrounding quotes are removed from a value."""
        assert match(Variable("descr"), '"XFP missing."', {}) == {"descr": "XFP missing."}

    def test_empty_value(self):
        """Test that an empty segment gives an empty value."""
        assert match(Variable("descr"), "", {}) == {"descr": ""}

    def test_accumulates_into_given_record(self):
        """Test that match() adds to and returns the record it was given."""
        record = {"existing": "1"}
        result = match(Variable("new"), "2", record)
        assert result is record
        assert record == {"existing": "1", "new": "2"}


class TestOrderedGroups:
    """Tests for colon and comma groups."""

    def test_escaped_quote_record(self):
        """Test matching an alarm record with empty trailing fields."""
        root = parse_message_format(ALARM_DETAIL_FORMAT)
        assert match_record(root, 'XFP-11-12-3,EQPT:"XFP missing.",,,:,') == {
            "aid": "XFP-11-12-3",
            "aidtype": "EQPT",
            "conddescr": "XFP missing.",
            "aiddet": "",
            "obsdbhvr": "",
            "exptdbhvr": "",
            "dgntype": "",
            "tblislt": "",
        }

    def test_quoted_delimiters(self):
        """Test that colons and commas inside quotes stay in the value."""
        root = parse_message_format(ALARM_DETAIL_FORMAT)
        record = match_record(root, 'A,B:"Loss, of: signal.",,,:,')
        assert record["conddescr"] == "Loss, of: signal."

    def test_trailing_empty_segments_preserved(self):
        """Test that trailing empty comma segments still count."""
        root = parse_message_format("<aid>:pst,sst")
        assert match_record(root, "MS-1:,") == {"aid": "MS-1", "pst": "", "sst": ""}

    def test_too_few_colon_segments(self):
        """Test that a short colon group raises ArityMismatch."""
        root = parse_message_format("<aid>:<type>:<pst>")
        with pytest.raises(ArityMismatch) as exc_info:
            match_record(root, "MS-1:BT7A51AR")
        assert (exc_info.value.expected, exc_info.value.actual) == (3, 2)

    def test_too_many_comma_segments(self):
        """Test that extra comma segments raise ArityMismatch."""
        root = parse_message_format("<aid>:<pst>,<sst>")
        with pytest.raises(ArityMismatch, match="','"):
            match_record(root, "MS-1:IS-NR,,EXTRA")

    def test_empty_text_against_comma_group(self):
        """Test that empty text does not satisfy a two-field comma group."""
        root = parse_message_format("<aid>:<pst>,<sst>")
        with pytest.raises(ArityMismatch):
            match_record(root, "MS-1:")

    def test_unterminated_quote(self):
        """Test that an unclosed quote in a record raises."""
        root = parse_message_format("<aid>:<descr>")
        with pytest.raises(UnterminatedQuotedSpan):
            match_record(root, 'MS-1:"oops')


class TestKeywordGroups:
    """Tests for keyword group matching."""

    def test_any_order(self):
        """Test that keyword pairs match in any order."""
        root = parse_message_format("<aid>:ID=<id>,C1=<c1>,C2=<c2>")
        record = match_record(root, "MS-1:C2=b,ID=7")
        assert record == {"aid": "MS-1", "c2": "b", "id": "7"}

    def test_quoted_values_with_delimiters(self):
        """Test that quoted keyword values may hold commas and '='."""
        root = parse_message_format("<aid>:NAME=<name>,FNAME=<fname>")
        record = match_record(root, 'MS-1:FNAME="Main, Shelf=7200",NAME=MS7200')
        assert record == {"aid": "MS-1", "fname": "Main, Shelf=7200", "name": "MS7200"}

    def test_empty_pairs_are_skipped(self):
        """Test that an empty pair after a trailing comma is ignored."""
        root = parse_message_format("<aid>:ID=<id>,USI=<usi>")
        assert match_record(root, "MS-1:USI=N/A,") == {"aid": "MS-1", "usi": "N/A"}

    def test_empty_segment(self):
        """Test that an empty keyword segment adds no fields."""
        root = parse_message_format("<aid>:ID=<id>")
        assert match_record(root, "MS-1:") == {"aid": "MS-1"}

    def test_unknown_keyword_raises(self):
        """Test that a keyword missing from the format raises UnknownKeyword."""
        root = parse_message_format("<aid>:ID=<id>,C1=<c1>")
        with pytest.raises(UnknownKeyword, match="'BOGUS'") as exc_info:
            match_record(root, "MS-1:BOGUS=1")
        assert exc_info.value.known == ("ID", "C1")

    def test_keyword_without_value(self):
        """Test that a bare keyword reads as an empty value."""
        root = parse_message_format("<aid>:ID=<id>")
        assert match_record(root, "MS-1:ID") == {"aid": "MS-1", "id": ""}


class TestRenderMatchInverse:
    """Tests that matching recovers the values used for rendering."""

    @pytest.mark.parametrize(
        "source, values",
        [
            ("<aid>:<type>", {"aid": "MS-1", "type": "BT7A51AR"}),
            (ALARM_DETAIL_FORMAT, {
                "aid": "XFP-1", "aidtype": "EQPT", "conddescr": '"a, b: c"',
                "aiddet": "", "obsdbhvr": "x", "exptdbhvr": "", "dgntype": "", "tblislt": "y",
            }),
            ("FIXED:<aid>:ID=<id>,C1=<c1>", {"aid": "MS-1", "id": "5", "c1": "z"}),
        ],
    )
    def test_inverse(self, source, values):
        """Test that matching rendered output gives back the rendered values."""
        root = parse_message_format(source)
        expected = {name: value.strip('"') for name, value in values.items()}
        assert match_record(root, render(root, values)) == expected


def test_foreign_object_raises():
    """Test that a non-node in the tree raises UnknownNodeKind."""
    with pytest.raises(UnknownNodeKind):
        match_record(ColonSeparatedVariables(object()), "x")
