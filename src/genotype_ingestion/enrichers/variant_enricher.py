# ============================================================================
# src/genotype_ingestion/enrichers/variant_enricher.py
# ============================================================================
"""
Variant Enricher

Attaches catalog annotations (gene, significance tier, functional note) to
already-extracted records. It does NOT re-extract anything: it is a
lookup-and-attach step keyed by rsid that returns new records.
"""

import dataclasses
import logging
from typing import Iterable, List, Mapping, Optional

from ..constants import VARIANT_ANNOTATIONS, VariantAnnotation
from ..core.variant import VariantRecord


class VariantEnricher:
    """
    Enriches VariantRecords from an annotation table.

    Defaults to the built-in significance catalog; tests and callers with
    their own knowledge base can pass another mapping.
    """

    def __init__(self, annotations: Optional[Mapping[str, VariantAnnotation]] = None):
        self.logger = logging.getLogger(__name__)
        self.annotations = annotations if annotations is not None else VARIANT_ANNOTATIONS

    def enrich(self, record: VariantRecord) -> VariantRecord:
        annotation = self.annotations.get(record.rsid)
        if annotation is None:
            return record
        return dataclasses.replace(
            record,
            gene_name=annotation.gene,
            significance=annotation.significance,
            function=annotation.function,
        )

    def enrich_all(self, records: Iterable[VariantRecord]) -> List[VariantRecord]:
        enriched = [self.enrich(record) for record in records]
        known = sum(1 for record in enriched if record.is_enriched)
        self.logger.debug(f"Enriched {known} of {len(enriched)} variants from catalog")
        return enriched


# ============================================================================
# CONVENIENCE FUNCTIONS
# ============================================================================

def enrich_variant(record: VariantRecord) -> VariantRecord:
    return VariantEnricher().enrich(record)


def enrich_variants(records: Iterable[VariantRecord]) -> List[VariantRecord]:
    return VariantEnricher().enrich_all(records)
