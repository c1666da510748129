# ============================================================================
# src/genotype_ingestion/filters/significance_filter.py
# ============================================================================
"""
Significance Filter

Selects the variants relevant to one report category.

- Category configured and present in the data → every matching record,
  input order, duplicates kept
- Category configured but none present → first N records
- Category unknown → first N records

The two fallback cases return the same list; CategoryFilterResult.outcome
tells them apart for callers that care.
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import FrozenSet, List, Optional, Sequence

from ..config import report_settings
from ..constants import get_category_variants, resolve_category
from ..core.variant import VariantRecord


class FilterOutcome(str, Enum):
    MATCHED = "matched"
    NO_MATCHES = "no_matches"
    UNKNOWN_CATEGORY = "unknown_category"


@dataclass
class CategoryFilterResult:
    category: str
    outcome: FilterOutcome
    records: List[VariantRecord] = field(default_factory=list)
    target_variants: FrozenSet[str] = frozenset()

    @property
    def is_fallback(self) -> bool:
        return self.outcome != FilterOutcome.MATCHED


class SignificanceFilter:
    """
    Category-based variant selection against the significance catalog.
    """

    def __init__(self, fallback_limit: Optional[int] = None):
        self.logger = logging.getLogger(__name__)
        if fallback_limit is None:
            fallback_limit = report_settings.CATEGORY_FALLBACK_LIMIT
        self.fallback_limit = fallback_limit

    def select(self, records: Sequence[VariantRecord], category: str) -> CategoryFilterResult:
        self.logger.info(f"Getting significant SNPs for category: {category}")

        targets = get_category_variants(category)
        if not targets:
            self.logger.info(
                f"No specific SNPs defined for category: {category}, "
                f"returning first {self.fallback_limit}",
                extra={"category": category, "filter_outcome": FilterOutcome.UNKNOWN_CATEGORY.value},
            )
            return CategoryFilterResult(
                category=category,
                outcome=FilterOutcome.UNKNOWN_CATEGORY,
                records=list(records[:self.fallback_limit]),
            )

        matched = [record for record in records if record.rsid in targets]
        self.logger.info(
            f"Found {len(matched)} significant SNPs for {resolve_category(category)} "
            f"out of {len(targets)} target SNPs",
            extra={
                "category": resolve_category(category),
                "filter_outcome": (FilterOutcome.MATCHED if matched else FilterOutcome.NO_MATCHES).value,
            },
        )

        if not matched:
            return CategoryFilterResult(
                category=category,
                outcome=FilterOutcome.NO_MATCHES,
                records=list(records[:self.fallback_limit]),
                target_variants=targets,
            )

        return CategoryFilterResult(
            category=category,
            outcome=FilterOutcome.MATCHED,
            records=matched,
            target_variants=targets,
        )

    def filter(self, records: Sequence[VariantRecord], category: str) -> List[VariantRecord]:
        return self.select(records, category).records


# ============================================================================
# CONVENIENCE FUNCTIONS
# ============================================================================

def select_for_category(records: Sequence[VariantRecord], category: str) -> CategoryFilterResult:
    return SignificanceFilter().select(records, category)


def filter_by_category(records: Sequence[VariantRecord], category: str) -> List[VariantRecord]:
    """Relevant subset of records for a report category."""
    return SignificanceFilter().filter(records, category)
