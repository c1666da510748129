# ============================================================================
# src/genotype_ingestion/filters/__init__.py
# ============================================================================
from .significance_filter import (
    SignificanceFilter,
    CategoryFilterResult,
    FilterOutcome,
    filter_by_category,
    select_for_category,
)

__all__ = [
    "SignificanceFilter",
    "CategoryFilterResult",
    "FilterOutcome",
    "filter_by_category",
    "select_for_category",
]
