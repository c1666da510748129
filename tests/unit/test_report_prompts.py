# ============================================================================
# FILE: tests/unit/test_report_prompts.py
# ============================================================================
"""
Unit tests for report prompt templates and the report request pipeline
"""

import random

import pytest

from genotype_ingestion import build_report_request, build_search_request
from genotype_ingestion.filters import FilterOutcome
from genotype_ingestion.prompts import (
    DIRECT_ANSWER_QUERY,
    DIRECT_ANSWER_REQUIREMENTS,
    METADATA_TEMPLATE,
    QUERY_TEMPLATES,
    REPORT_TEMPLATES,
    QueryMode,
    ReportType,
    build_query_prompt,
    build_report_prompt,
    resolve_report_type,
)
from genotype_ingestion.report_pipeline import NO_VARIANTS_MESSAGE
from genotype_ingestion.utils.exceptions import PromptTemplateError


# ============================================================================
# TEMPLATES
# ============================================================================

def test_every_report_type_has_template():
    assert set(REPORT_TEMPLATES) == set(ReportType)


@pytest.mark.parametrize("name,expected", [
    ("methylation", ReportType.METHYLATION),
    ("diseaseRisk", ReportType.DISEASE_RISK),
    ("disease_risk", ReportType.DISEASE_RISK),
    ("summary", ReportType.SUMMARY),
    ("astrology", ReportType.GENERAL),
    (None, ReportType.GENERAL),
    ("", ReportType.GENERAL),
])
def test_resolve_report_type(name, expected):
    assert resolve_report_type(name) == expected


def test_missing_required_field_raises():
    with pytest.raises(PromptTemplateError) as exc_info:
        METADATA_TEMPLATE.format(total_variants=10)

    assert exc_info.value.template_name == "profile_metadata"
    assert exc_info.value.missing_fields == ["relevant_variants"]


def test_category_prompt_sections():
    prompt = build_report_prompt(
        "methylation",
        total_variants=600000,
        relevant_variants=2,
        variant_text="1. **rs1801133** (Chr 1, Pos 11856378): AG\n\n",
    )

    assert prompt.report_type == ReportType.METHYLATION
    assert "- Total SNPs in dataset: 600000" in prompt.system_prompt
    assert "- Relevant SNPs identified: 2" in prompt.system_prompt
    assert "KEY METHYLATION MARKERS:\n1. **rs1801133**" in prompt.system_prompt
    assert "CRITICAL GENES TO FOCUS ON:" in prompt.system_prompt
    assert "SPECIFIC SECTIONS TO INCLUDE:" in prompt.system_prompt
    assert "RESPONSE FORMAT REQUIREMENTS:" in prompt.system_prompt
    assert prompt.user_query == REPORT_TEMPLATES[ReportType.METHYLATION].user_query


def test_general_prompt_has_no_focus_genes():
    prompt = build_report_prompt(None, 10, 10, "text")

    assert prompt.report_type == ReportType.GENERAL
    assert "CRITICAL GENES TO FOCUS ON:" not in prompt.system_prompt


def test_custom_prompt_replaces_task():
    prompt = build_report_prompt(
        "nutrition", 100, 3, "variant block", custom_prompt="Only discuss lactose."
    )

    assert "KEY GENETIC MARKERS:\nvariant block" in prompt.system_prompt
    assert prompt.system_prompt.endswith("Only discuss lactose.")
    assert "TASK:" not in prompt.system_prompt


def test_direct_answer_appends_requirements():
    prompt = build_report_prompt("exercise", 100, 3, "variant block", direct_answer=True)

    assert prompt.system_prompt.endswith(DIRECT_ANSWER_REQUIREMENTS)
    assert prompt.user_query.startswith("Give me a direct, brief answer to this question: ")


def test_custom_instructions_imply_direct_answer():
    prompt = build_report_prompt("exercise", 100, 3, "block", custom_instructions="Be kind.")

    assert prompt.system_prompt.endswith(DIRECT_ANSWER_REQUIREMENTS + "Be kind.")


# ============================================================================
# REPORT REQUEST PIPELINE
# ============================================================================

def test_request_for_matched_category(sample_23andme_text):
    request = build_report_request(sample_23andme_text, "methylation")

    assert not request.no_variants
    assert request.total_variants == 4
    assert [r.rsid for r in request.relevant_variants] == ["rs1801133"]
    assert request.filter_outcome == FilterOutcome.MATCHED
    assert request.report_type == ReportType.METHYLATION
    assert "Gene: MTHFR" in request.variant_text
    assert request.variant_text in request.system_prompt
    assert request.user_message == REPORT_TEMPLATES[ReportType.METHYLATION].user_query


def test_request_without_report_type_uses_all(sample_23andme_text):
    request = build_report_request(sample_23andme_text)

    assert request.filter_outcome is None
    assert request.report_type == ReportType.GENERAL
    assert len(request.relevant_variants) == 4


def test_query_overrides_user_message(sample_23andme_text):
    request = build_report_request(sample_23andme_text, "nutrition", query="Can I drink milk?")
    assert request.user_message == "Can I drink milk?"


def test_direct_answer_keeps_caller_query(sample_23andme_text):
    request = build_report_request(
        sample_23andme_text, "nutrition", query="Can I drink milk?", response_type="direct_answer"
    )

    assert request.user_message == "Can I drink milk?"
    assert DIRECT_ANSWER_REQUIREMENTS in request.system_prompt


def test_direct_answer_without_query_wraps_default(sample_23andme_text):
    request = build_report_request(sample_23andme_text, "nutrition", response_type="direct_answer")

    default_query = REPORT_TEMPLATES[ReportType.NUTRITION].user_query
    assert request.user_message == DIRECT_ANSWER_QUERY.format(question=default_query)


def test_no_variants_message():
    text = "This upload contains no genotype data at all, only a long paragraph of prose. " * 3
    request = build_report_request(text, "methylation")

    assert request.no_variants
    assert request.message == NO_VARIANTS_MESSAGE
    assert request.system_prompt == ""
    assert request.to_dict()["no_variants"] is True


def test_seeded_pipeline_is_reproducible(padding_comment):
    text = padding_comment + "rs123 chr1 123456\nrs456 2 654321\n"

    first = build_report_request(text, rng=random.Random(7))
    second = build_report_request(text, rng=random.Random(7))

    assert first.variant_text == second.variant_text
    assert first.extraction.synthesized_genotypes == 2


# ============================================================================
# QUERY-ONLY REQUESTS
# ============================================================================

@pytest.mark.parametrize("text", ["", None, "   \n"])
def test_query_without_upload_skips_extraction(text):
    request = build_report_request(text, query="What does MTHFR do?")

    assert request.is_query_only
    assert not request.no_variants
    assert request.message is None
    assert request.query_mode == QueryMode.GENERAL
    assert "no genetic data has been provided" in request.system_prompt
    assert request.system_prompt == QUERY_TEMPLATES[QueryMode.GENERAL].format()
    assert request.user_message == "What does MTHFR do?"
    assert request.relevant_variants == []
    assert request.to_dict()["query_mode"] == "general"


def test_query_without_upload_direct_answer():
    request = build_report_request("", query="What does MTHFR do?", response_type="direct_answer")

    assert request.system_prompt.endswith(DIRECT_ANSWER_REQUIREMENTS)
    assert request.user_message == "What does MTHFR do?"


def test_empty_text_without_query_is_no_variants():
    request = build_report_request("")

    assert request.no_variants
    assert request.message == NO_VARIANTS_MESSAGE


def test_search_request():
    request = build_search_request("What is an SNP?")

    assert request.query_mode == QueryMode.SEARCH
    assert request.system_prompt.startswith("You are a genetic information assistant.")
    assert request.user_message == "What is an SNP?"


def test_search_request_direct_answer():
    request = build_search_request("What is an SNP?", response_type="direct_answer")

    assert "Provide direct, brief answers using plain language." in request.system_prompt
    assert request.user_message == DIRECT_ANSWER_QUERY.format(question="What is an SNP?")


def test_query_prompt_requires_query():
    with pytest.raises(PromptTemplateError) as exc_info:
        build_query_prompt("  ", QueryMode.SEARCH)

    assert exc_info.value.missing_fields == ["query"]
