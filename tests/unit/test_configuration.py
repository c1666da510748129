# ============================================================================
# FILE: tests/unit/test_configuration.py
# ============================================================================
"""
Unit tests for settings and logging configuration
"""

import json
import logging

import pytest
from pydantic import ValidationError

from genotype_ingestion.config import ExtractionSettings, LoggingSettings, ReportSettings
from genotype_ingestion.extractors import VariantExtractor
from genotype_ingestion.utils import (
    ConfigurationError,
    JsonFormatter,
    log_performance,
    setup_logging,
    setup_logging_from_settings,
)


# ============================================================================
# SETTINGS
# ============================================================================

def test_defaults():
    extraction = ExtractionSettings(_env_file=None)
    report = ReportSettings(_env_file=None)

    assert extraction.MIN_CONTENT_LENGTH == 100
    assert extraction.CLASSIFIER_SCAN_LINES == 50
    assert extraction.FALLBACK_MIN_POSITION == 1000
    assert extraction.SYNTHESIZE_MISSING_GENOTYPE is True
    assert report.CATEGORY_FALLBACK_LIMIT == 20
    assert report.PROMPT_MAX_VARIANTS == 20
    assert report.UNFILTERED_VARIANT_LIMIT == 50


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("MIN_CONTENT_LENGTH", "0")
    monkeypatch.setenv("SYNTHESIZE_MISSING_GENOTYPE", "false")
    monkeypatch.setenv("LOG_LEVEL", "debug")

    extraction = ExtractionSettings(_env_file=None)
    logging_settings = LoggingSettings(_env_file=None)

    assert extraction.MIN_CONTENT_LENGTH == 0
    assert extraction.SYNTHESIZE_MISSING_GENOTYPE is False
    assert logging_settings.LOG_LEVEL == "DEBUG"


def test_rejects_negative_length(monkeypatch):
    monkeypatch.setenv("MIN_CONTENT_LENGTH", "-1")
    with pytest.raises(ValidationError):
        ExtractionSettings(_env_file=None)


def test_rejects_unknown_log_level(monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "CHATTY")
    with pytest.raises(ValidationError):
        LoggingSettings(_env_file=None)


# ============================================================================
# LOGGING
# ============================================================================

def test_json_formatter():
    record = logging.LogRecord(
        name="genotype_ingestion.test",
        level=logging.WARNING,
        pathname=__file__,
        lineno=42,
        msg="Synthesized %d genotypes",
        args=(3,),
        exc_info=None,
    )

    data = json.loads(JsonFormatter().format(record))

    assert data["level"] == "WARNING"
    assert data["logger"] == "genotype_ingestion.test"
    assert data["message"] == "Synthesized 3 genotypes"
    assert "context" not in data


def test_json_formatter_carries_extraction_context():
    record = logging.makeLogRecord({
        "name": "genotype_ingestion.extractors",
        "levelname": "INFO",
        "msg": "Extracted 4 SNPs",
        "strategy": "strict",
        "detected_format": "23andme",
        "variant_count": 4,
        "unrelated": "ignored",
    })

    data = json.loads(JsonFormatter().format(record))

    assert data["context"] == {"detected_format": "23andme", "strategy": "strict", "variant_count": 4}


def test_extraction_logs_context(caplog, sample_23andme_text):
    with caplog.at_level(logging.INFO, logger="genotype_ingestion"):
        VariantExtractor().extract(sample_23andme_text)

    summary = [r for r in caplog.records if getattr(r, "strategy", None)]
    assert summary[-1].strategy == "strict"
    assert summary[-1].detected_format == "23andme"
    assert summary[-1].variant_count == 4


def test_log_performance_reraises(caplog):
    logger = logging.getLogger("genotype_ingestion.test")

    @log_performance(logger, "Failing step")
    def failing_step():
        raise ValueError("boom")

    with caplog.at_level(logging.ERROR, logger="genotype_ingestion.test"):
        with pytest.raises(ValueError):
            failing_step()

    assert "Failing step failed after" in caplog.text
    assert failing_step.__name__ == "failing_step"


def test_synthesized_genotypes_logged(caplog, rng, padding_comment):
    with caplog.at_level(logging.WARNING):
        VariantExtractor(rng=rng).extract(padding_comment + "rs123 chr1 123456\n")

    assert "synthesized" in caplog.text.lower()


def test_setup_logging_rejects_unknown_level():
    with pytest.raises(ConfigurationError):
        setup_logging("CHATTY")


def test_setup_logging_from_settings_applies_level():
    root = logging.getLogger()
    previous_level, previous_handlers = root.level, root.handlers[:]
    try:
        setup_logging_from_settings(LoggingSettings(_env_file=None, LOG_LEVEL="warning"))
        assert root.level == logging.WARNING
    finally:
        root.handlers[:] = previous_handlers
        root.setLevel(previous_level)
