# ============================================================================
# src/genotype_ingestion/constants/__init__.py
# ============================================================================
"""
Convenient imports for all constants
"""

from .genotype_formats import (
    GenotypeFormat,
    FORMAT_MARKERS,
    TWENTY_THREE_AND_ME_TABS,
    ANCESTRY_DNA_MIN_TABS,
    COMMENT_PREFIX,
    RSID_PATTERN,
    NUCLEOTIDES,
)
from .significance_catalog import (
    VariantAnnotation,
    CATEGORY_VARIANTS,
    CATEGORY_ALIASES,
    VARIANT_ANNOTATIONS,
    resolve_category,
    get_category_variants,
    lookup_annotation,
)
