# ============================================================================
# FILE: tests/unit/test_strict_parsers.py
# ============================================================================
"""
Unit tests for the fixed-layout 23andMe and AncestryDNA parsers
"""

import pytest

from genotype_ingestion.core.variant import VariantRecord
from genotype_ingestion.parsers import (
    AncestryDNAParser,
    TwentyThreeAndMeParser,
    parse_23andme,
    parse_ancestry,
    parse_position,
)


# ============================================================================
# POSITION PARSING
# ============================================================================

@pytest.mark.parametrize("value,expected", [
    ("11856378", 11856378),
    (" 42 ", 42),
    ("0", 0),
    ("-5", None),
    ("1_000", None),
    ("12.5", None),
    ("", None),
    ("abc", None),
])
def test_parse_position(value, expected):
    assert parse_position(value) == expected


# ============================================================================
# 23ANDME PARSER
# ============================================================================

def test_23andme_parses_valid_lines_in_order(sample_23andme_text):
    result = parse_23andme(sample_23andme_text)

    assert [r.rsid for r in result.records] == ["rs1801133", "rs4988235", "rs429358", "rs1815739"]
    assert result.records[0] == VariantRecord(
        rsid="rs1801133", chromosome="1", position=11856378, genotype="AG"
    )


def test_23andme_counts_invalid_lines(sample_23andme_text):
    result = parse_23andme(sample_23andme_text)

    # i3000001 (prefix) and rs7412 (position) are dropped; comments/blank not counted
    assert result.valid_lines == 4
    assert result.invalid_lines == 2
    assert len(result) == 4


def test_23andme_genotype_is_fourth_column():
    result = parse_23andme("rs1\t1\t5000\tT\n")
    assert result.records[0].genotype == "T"


def test_23andme_rejects_long_genotype():
    result = parse_23andme("rs1\t1\t5000\tAGT\nrs2\t1\t5001\t--\n")
    assert [r.rsid for r in result.records] == ["rs2"]
    assert result.invalid_lines == 1


def test_23andme_rejects_short_lines():
    result = parse_23andme("rs1\t1\t5000\n")
    assert result.records == []
    assert result.invalid_lines == 1


def test_23andme_keeps_raw_chromosome_field():
    result = parse_23andme("rs1\tchr7_alt\t5000\tAG\n")
    assert result.records[0].chromosome == "chr7_alt"


def test_23andme_handles_windows_line_endings():
    result = parse_23andme("rs1\t1\t5000\tAG\r\nrs2\t2\t6000\tCT\r\n")
    assert [r.genotype for r in result.records] == ["AG", "CT"]


def test_23andme_keeps_duplicates():
    result = parse_23andme("rs1\t1\t5000\tAG\nrs1\t1\t5000\tAG\n")
    assert len(result.records) == 2


def test_23andme_parse_line_directly():
    parser = TwentyThreeAndMeParser()
    assert parser.parse_line("x1\t1\t5000\tAG") is None
    assert parser.parse_line("rs1\t1\t5000\tAG").rsid == "rs1"


# ============================================================================
# ANCESTRYDNA PARSER
# ============================================================================

def test_ancestry_concatenates_alleles(sample_ancestry_text):
    result = parse_ancestry(sample_ancestry_text)

    assert [r.genotype for r in result.records] == ["AG", "GG", "CT"]
    assert result.records[2] == VariantRecord(
        rsid="rs3892097", chromosome="22", position=42524947, genotype="CT"
    )


def test_ancestry_column_header_counts_as_invalid(sample_ancestry_text):
    result = parse_ancestry(sample_ancestry_text)
    assert result.valid_lines == 3
    assert result.invalid_lines == 1


def test_ancestry_ignores_trailing_columns():
    result = parse_ancestry("rs1\t1\t5000\tA\tG\textra\tmore\n")
    assert result.records[0].genotype == "AG"


def test_ancestry_requires_five_columns():
    result = parse_ancestry("rs1\t1\t5000\tAG\n")
    assert result.records == []
    assert result.invalid_lines == 1


def test_ancestry_rejects_long_combined_genotype():
    result = parse_ancestry("rs1\t1\t5000\tAG\tT\n")
    assert result.records == []


def test_ancestry_rejects_unparseable_position():
    result = parse_ancestry("rs1\t1\t??\tA\tG\nrs2\t1\t6000\tC\tC\n")
    assert [r.rsid for r in result.records] == ["rs2"]


def test_parser_names():
    assert TwentyThreeAndMeParser().parse("").parser_name == "23andme"
    assert AncestryDNAParser().parse("").parser_name == "ancestrydna"
