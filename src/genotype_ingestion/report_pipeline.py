# ============================================================================
# src/genotype_ingestion/report_pipeline.py
# ============================================================================
"""
Report Request Pipeline

Composes the extraction stages into what the report-generation
collaborator needs for one language-model call:

raw text → extract → filter by category (or first N) → format → prompt

A question asked without any upload skips straight to a query-only prompt.

The model call itself happens outside this package.
"""

import logging
import random
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from .config import report_settings
from .core.variant import ExtractionResult, VariantRecord
from .extractors.variant_extractor import VariantExtractor
from .filters.significance_filter import FilterOutcome, SignificanceFilter
from .prompts.report_prompts import (
    DIRECT_ANSWER_RESPONSE_TYPE,
    QueryMode,
    ReportType,
    build_query_prompt,
    build_report_prompt,
)
from .prompts.variant_formatter import VariantPromptFormatter

logger = logging.getLogger(__name__)

NO_VARIANTS_MESSAGE = (
    "No SNPs could be extracted from the provided data. Please ensure you're "
    "uploading a valid genetic data file in 23andMe or AncestryDNA format."
)


@dataclass
class ReportRequest:
    """
    Everything the report collaborator needs, or a no-data message.

    Query-only requests (no upload) carry a query_mode and an empty extraction.
    """
    extraction: ExtractionResult
    relevant_variants: List[VariantRecord] = field(default_factory=list)
    report_type: Optional[ReportType] = None
    filter_outcome: Optional[FilterOutcome] = None
    variant_text: str = ""
    system_prompt: str = ""
    user_message: str = ""
    message: Optional[str] = None
    query_mode: Optional[QueryMode] = None

    @property
    def is_query_only(self) -> bool:
        return self.query_mode is not None

    @property
    def no_variants(self) -> bool:
        return not self.is_query_only and self.extraction.is_empty

    @property
    def total_variants(self) -> int:
        return len(self.extraction.records)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "no_variants": self.no_variants,
            "message": self.message,
            "report_type": self.report_type.value if self.report_type else None,
            "filter_outcome": self.filter_outcome.value if self.filter_outcome else None,
            "query_mode": self.query_mode.value if self.query_mode else None,
            "total_variants": self.total_variants,
            "relevant_variants": len(self.relevant_variants),
            "system_prompt": self.system_prompt,
            "user_message": self.user_message,
        }


class ReportRequestBuilder:

    def __init__(
        self,
        extractor: Optional[VariantExtractor] = None,
        significance_filter: Optional[SignificanceFilter] = None,
        formatter: Optional[VariantPromptFormatter] = None,
        rng: Optional[random.Random] = None
    ):
        self.logger = logging.getLogger(__name__)
        self.extractor = extractor or VariantExtractor(rng=rng)
        self.significance_filter = significance_filter or SignificanceFilter()
        self.formatter = formatter or VariantPromptFormatter()

    def build(
        self,
        text: Optional[str],
        report_type: Optional[str] = None,
        query: Optional[str] = None,
        custom_prompt: Optional[str] = None,
        custom_instructions: Optional[str] = None,
        response_type: Optional[str] = None,
        max_count: Optional[int] = None
    ) -> ReportRequest:
        """
        Build the report request for one upload.

        Without a report type the first UNFILTERED_VARIANT_LIMIT variants are
        used; with one, the significance filter picks them. A caller query
        replaces the template's default user message. With no text but a
        query, extraction is skipped and a general query prompt is built.
        """
        if not (text and text.strip()) and query:
            return self.build_query(query, QueryMode.GENERAL, response_type)

        extraction = self.extractor.extract_with_details(text)
        if extraction.is_empty:
            self.logger.info("No variants extracted; returning no-data message")
            return ReportRequest(extraction=extraction, message=NO_VARIANTS_MESSAGE)

        records = extraction.records
        filter_outcome = None
        if report_type:
            selection = self.significance_filter.select(records, report_type)
            relevant = selection.records
            filter_outcome = selection.outcome
        else:
            relevant = records[:report_settings.UNFILTERED_VARIANT_LIMIT]

        self.logger.info(f"Relevant SNPs count: {len(relevant)}")

        variant_text = self.formatter.format(relevant, max_count)
        direct_answer = response_type == DIRECT_ANSWER_RESPONSE_TYPE
        prompt = build_report_prompt(
            report_type,
            total_variants=len(records),
            relevant_variants=len(relevant),
            variant_text=variant_text,
            custom_prompt=custom_prompt,
            direct_answer=direct_answer,
            custom_instructions=custom_instructions,
        )

        user_message = query or prompt.user_query

        return ReportRequest(
            extraction=extraction,
            relevant_variants=relevant,
            report_type=prompt.report_type,
            filter_outcome=filter_outcome,
            variant_text=variant_text,
            system_prompt=prompt.system_prompt,
            user_message=user_message,
        )

    def build_query(
        self,
        query: str,
        mode: QueryMode = QueryMode.GENERAL,
        response_type: Optional[str] = None
    ) -> ReportRequest:
        """Request for a question asked without genetic data."""
        prompt = build_query_prompt(
            query,
            mode=mode,
            direct_answer=response_type == DIRECT_ANSWER_RESPONSE_TYPE,
        )
        self.logger.info(f"Building {mode.value} query request without genetic data")

        return ReportRequest(
            extraction=ExtractionResult(),
            system_prompt=prompt.system_prompt,
            user_message=prompt.user_query,
            query_mode=mode,
        )


def build_report_request(text: Optional[str], report_type: Optional[str] = None, **kwargs) -> ReportRequest:
    """Build a report request with default components."""
    rng = kwargs.pop("rng", None)
    return ReportRequestBuilder(rng=rng).build(text, report_type, **kwargs)


def build_search_request(query: str, response_type: Optional[str] = None) -> ReportRequest:
    """Build a standalone genetic search request (no upload involved)."""
    return ReportRequestBuilder().build_query(query, QueryMode.SEARCH, response_type)
