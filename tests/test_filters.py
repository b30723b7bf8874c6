"""Tests for the position predicate parser and the record filter."""

import pytest

from vcfview.filters import (FilterCriteria, FilterField, Unconstrained, Exact, Range,
                             parse_position_filter, apply_filters)
from vcfview.records import Record


def rec(chrom, pos, ref, alt):
    return Record(chrom, pos, ".", ref, alt)


RECORDS = [
    rec("chr1", "100", "A", "G"),
    rec("chr1", "250", "A", "T"),
    rec("chr2", "100", "C", "G"),
]


@pytest.mark.parametrize("expression, expected", [
    ("100", Exact(100)),
    ("  100 ", Exact(100)),
    ("100-200", Range(100, 200)),
    (" 100 - 200 ", Range(100, 200)),
    ("150-150", Range(150, 150)),
    ("200-100", Unconstrained()),
    ("abc", Unconstrained()),
    ("", Unconstrained()),
    ("   ", Unconstrained()),
    ("100-200-300", Unconstrained()),
    ("-5", Unconstrained()),
    ("100-", Unconstrained()),
    ("1e3", Unconstrained()),
])
def test_parse_position_filter(expression, expected):
    assert parse_position_filter(expression) == expected


def test_range_rejects_inverted_bounds():
    with pytest.raises(ValueError):
        Range(5, 1)


def test_empty_criteria_is_identity():
    """With no criteria every record passes, in the original order."""
    assert apply_filters(RECORDS, FilterCriteria()) == RECORDS


def test_chromosome_substring_case_insensitive():
    result = apply_filters(RECORDS, FilterCriteria(chromosome="CHR1"))
    assert result == RECORDS[:2]

    result = apply_filters(RECORDS, FilterCriteria(chromosome="2"))
    assert result == [RECORDS[2]]


def test_allele_substrings():
    assert apply_filters(RECORDS, FilterCriteria(reference="c")) == [RECORDS[2]]
    assert apply_filters(RECORDS, FilterCriteria(alternate="g")) == [RECORDS[0], RECORDS[2]]
    assert apply_filters(RECORDS, FilterCriteria(reference="a", alternate="t")) == [RECORDS[1]]


def test_chromosome_and_range_end_to_end():
    criteria = FilterCriteria(chromosome="chr1", position="100-200")
    assert apply_filters(RECORDS, criteria) == [RECORDS[0]]


def test_exact_position():
    assert apply_filters(RECORDS, FilterCriteria(position="100")) == [RECORDS[0], RECORDS[2]]


def test_exact_position_is_textual():
    records = [rec("chr1", "0100", "A", "G"), rec("chr1", "100", "A", "G"), rec("chr1", "x", "A", "G")]
    assert apply_filters(records, FilterCriteria(position="100")) == [records[1]]
    # leading zeros in the criterion are canonicalised by parsing
    assert apply_filters(records, FilterCriteria(position="0100")) == [records[1]]


def test_range_skips_unparsable_positions():
    records = [rec("chr1", "abc", "A", "G"), rec("chr1", "150", "A", "G"), rec("chr1", "", "A", "G")]
    assert apply_filters(records, FilterCriteria(position="100-200")) == [records[1]]


def test_malformed_position_filter_passes_everything():
    assert apply_filters(RECORDS, FilterCriteria(position="200-100")) == RECORDS
    assert apply_filters(RECORDS, FilterCriteria(position="lots")) == RECORDS


def test_no_match_gives_empty():
    assert apply_filters(RECORDS, FilterCriteria(chromosome="chrY")) == []


def test_criteria_set_get_clear():
    criteria = FilterCriteria()
    assert criteria.is_empty()

    criteria.set(FilterField.POS, "1-2")
    criteria.set(FilterField.CHROM, "chr1")
    assert criteria.get(FilterField.POS) == "1-2"
    assert criteria.chromosome == "chr1"
    assert not criteria.is_empty()

    criteria.clear()
    assert criteria == FilterCriteria()
