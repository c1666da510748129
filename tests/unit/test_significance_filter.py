# ============================================================================
# FILE: tests/unit/test_significance_filter.py
# ============================================================================
"""
Unit tests for category-based significance filtering and the catalog
"""

import pytest

from genotype_ingestion.constants import (
    CATEGORY_VARIANTS,
    VARIANT_ANNOTATIONS,
    get_category_variants,
    resolve_category,
)
from genotype_ingestion.core.variant import VariantRecord
from genotype_ingestion.filters import (
    FilterOutcome,
    SignificanceFilter,
    filter_by_category,
    select_for_category,
)


# ============================================================================
# CATALOG
# ============================================================================

def test_every_category_variant_is_annotated():
    for category, rsids in CATEGORY_VARIANTS.items():
        missing = [rsid for rsid in rsids if rsid not in VARIANT_ANNOTATIONS]
        assert missing == [], f"{category} has unannotated variants: {missing}"


def test_catalog_is_read_only():
    with pytest.raises(TypeError):
        CATEGORY_VARIANTS["new"] = frozenset()
    with pytest.raises(TypeError):
        VARIANT_ANNOTATIONS["rs1"] = None


def test_resolve_category_aliases():
    assert resolve_category("methylation") == "methylation"
    assert resolve_category("disease_risk") == "diseaseRisk"
    assert resolve_category("unknown-category") is None
    assert resolve_category("") is None
    assert get_category_variants("unknown-category") == frozenset()


# ============================================================================
# FILTERING
# ============================================================================

def test_methylation_keeps_only_catalog_variants():
    records = [
        VariantRecord(rsid="rs1801133", chromosome="1", position=11856378, genotype="AG"),
        VariantRecord(rsid="rs9999999", chromosome="1", position=22222, genotype="CC"),
    ]
    filtered = filter_by_category(records, "methylation")

    assert filtered == [records[0]]


def test_matched_outcome(sample_records):
    result = select_for_category(sample_records, "nutrition")

    assert result.outcome == FilterOutcome.MATCHED
    assert result.is_fallback is False
    assert [r.rsid for r in result.records] == ["rs4988235"]
    assert "rs429358" in result.target_variants


def test_unknown_category_returns_first_twenty(many_records):
    result = select_for_category(many_records, "unknown-category")

    assert result.outcome == FilterOutcome.UNKNOWN_CATEGORY
    assert result.records == many_records[:20]


def test_configured_category_without_matches_returns_first_twenty(many_records):
    result = select_for_category(many_records, "carrier")

    assert result.outcome == FilterOutcome.NO_MATCHES
    assert result.is_fallback is True
    assert result.records == many_records[:20]


def test_both_fallbacks_look_identical_through_filter(many_records):
    assert filter_by_category(many_records, "carrier") == filter_by_category(many_records, "unknown-category")


def test_filter_preserves_order_and_duplicates():
    records = [
        VariantRecord(rsid="rs762551", chromosome="15", position=75041917, genotype="AA"),
        VariantRecord(rsid="rs1", chromosome="1", position=5000, genotype="CC"),
        VariantRecord(rsid="rs4244285", chromosome="10", position=96541616, genotype="GG"),
        VariantRecord(rsid="rs762551", chromosome="15", position=75041917, genotype="AA"),
    ]
    filtered = filter_by_category(records, "medication")

    assert [r.rsid for r in filtered] == ["rs762551", "rs4244285", "rs762551"]


def test_alias_category(sample_records):
    records = sample_records + [
        VariantRecord(rsid="rs10757278", chromosome="9", position=22124477, genotype="AG"),
    ]
    result = select_for_category(records, "disease_risk")

    assert result.outcome == FilterOutcome.MATCHED
    assert [r.rsid for r in result.records] == ["rs10757278"]


def test_custom_fallback_limit(many_records):
    significance_filter = SignificanceFilter(fallback_limit=5)
    assert significance_filter.filter(many_records, "nope") == many_records[:5]


def test_empty_input():
    result = select_for_category([], "methylation")
    assert result.records == []
    assert result.outcome == FilterOutcome.NO_MATCHES


def test_filter_returns_fresh_list(sample_records):
    filtered = filter_by_category(sample_records, "unknown")
    filtered.clear()
    assert len(sample_records) == 4
