# ============================================================================
# src/genotype_ingestion/__init__.py
# ============================================================================
"""
Genotype Ingestion Engine

Turns consumer genetic-testing exports (23andMe, AncestryDNA, or anything
that looks like them) into categorized variant records and prompt text for
report generation.

Usage:
    from genotype_ingestion import extract, filter_by_category, format_for_prompt

    records = extract(text)
    relevant = filter_by_category(records, "methylation")
    prompt_text = format_for_prompt(relevant, 20)
"""

from .constants import GenotypeFormat
from .core.variant import VariantRecord, ExtractionResult, ExtractionStrategy, ParseResult
from .classifiers.format_classifier import FormatClassifier, detect_format
from .extractors import VariantExtractor, FallbackExtractor, extract
from .filters import SignificanceFilter, CategoryFilterResult, FilterOutcome, filter_by_category, select_for_category
from .enrichers import VariantEnricher, enrich_variants
from .prompts import format_for_prompt, build_report_prompt, ReportType, NO_VARIANTS_SENTINEL
from .ingest import read_genetic_text
from .report_pipeline import ReportRequest, ReportRequestBuilder, build_report_request, build_search_request

__version__ = "0.1.0"

__all__ = [
    "GenotypeFormat",
    "VariantRecord",
    "ExtractionResult",
    "ExtractionStrategy",
    "ParseResult",
    "FormatClassifier",
    "detect_format",
    "VariantExtractor",
    "FallbackExtractor",
    "extract",
    "SignificanceFilter",
    "CategoryFilterResult",
    "FilterOutcome",
    "filter_by_category",
    "select_for_category",
    "VariantEnricher",
    "enrich_variants",
    "format_for_prompt",
    "build_report_prompt",
    "ReportType",
    "NO_VARIANTS_SENTINEL",
    "read_genetic_text",
    "ReportRequest",
    "ReportRequestBuilder",
    "build_report_request",
    "build_search_request",
]
