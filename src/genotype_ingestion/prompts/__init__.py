# ============================================================================
# src/genotype_ingestion/prompts/__init__.py
# ============================================================================
"""
Prompt building for the report-generation collaborator.
"""

from .variant_formatter import VariantPromptFormatter, format_for_prompt, NO_VARIANTS_SENTINEL
from .report_prompts import (
    DIRECT_ANSWER_QUERY,
    DIRECT_ANSWER_REQUIREMENTS,
    METADATA_TEMPLATE,
    ReportType,
    ReportPrompt,
    ReportTemplate,
    PromptTemplate,
    REPORT_TEMPLATES,
    DIRECT_ANSWER_RESPONSE_TYPE,
    resolve_report_type,
    build_report_prompt,
    QueryMode,
    QUERY_TEMPLATES,
    build_query_prompt,
)

__all__ = [
    "VariantPromptFormatter",
    "format_for_prompt",
    "NO_VARIANTS_SENTINEL",
    "ReportType",
    "ReportPrompt",
    "ReportTemplate",
    "PromptTemplate",
    "REPORT_TEMPLATES",
    "DIRECT_ANSWER_QUERY",
    "DIRECT_ANSWER_REQUIREMENTS",
    "METADATA_TEMPLATE",
    "DIRECT_ANSWER_RESPONSE_TYPE",
    "resolve_report_type",
    "build_report_prompt",
    "QueryMode",
    "QUERY_TEMPLATES",
    "build_query_prompt",
]
