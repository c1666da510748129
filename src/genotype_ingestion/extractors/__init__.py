# ============================================================================
# src/genotype_ingestion/extractors/__init__.py
# ============================================================================
"""
Extraction Package

- VariantExtractor: classify → strict parse → fallback
- FallbackExtractor: permissive, delimiter-agnostic scanner
"""

from .fallback_extractor import FallbackExtractor
from .variant_extractor import VariantExtractor, extract

__all__ = ["FallbackExtractor", "VariantExtractor", "extract"]
