# ============================================================================
# src/genotype_ingestion/enrichers/__init__.py
# ============================================================================
"""
Enrichers add catalog metadata to already-extracted variants.
"""

from .variant_enricher import VariantEnricher, enrich_variant, enrich_variants

__all__ = ["VariantEnricher", "enrich_variant", "enrich_variants"]
