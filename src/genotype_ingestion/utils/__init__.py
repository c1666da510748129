# ============================================================================
# src/genotype_ingestion/utils/__init__.py
# ============================================================================
"""
Utility modules for the genotype ingestion engine.
"""

from .exceptions import (
    GenotypeIngestionError,
    UploadError,
    InvalidFileFormatError,
    NoGeneticDataError,
    ConfigurationError,
    PromptTemplateError,
)

from .logging import (
    setup_logging,
    setup_logging_from_settings,
    JsonFormatter,
    log_performance,
    CONTEXT_FIELDS,
)

__all__ = [
    # Exceptions
    'GenotypeIngestionError',
    'UploadError',
    'InvalidFileFormatError',
    'NoGeneticDataError',
    'ConfigurationError',
    'PromptTemplateError',
    # Logging
    'setup_logging',
    'setup_logging_from_settings',
    'JsonFormatter',
    'log_performance',
    'CONTEXT_FIELDS',
]
