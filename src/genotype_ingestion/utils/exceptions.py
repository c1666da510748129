# ============================================================================
# src/genotype_ingestion/utils/exceptions.py
# ============================================================================
"""
Custom exceptions for the genotype ingestion engine.

Extraction itself never raises on malformed input (an empty result signals
absence). These are raised at the edges: reading uploads, building prompts,
loading configuration.
"""


class GenotypeIngestionError(Exception):
    """Base exception for all genotype ingestion errors."""
    pass


class UploadError(GenotypeIngestionError):
    """Error reading an uploaded genetic data file."""
    pass


class InvalidFileFormatError(UploadError):
    """Upload is not a readable text file or archive."""
    pass


class NoGeneticDataError(UploadError):
    """Archive contains no file that looks like genetic data."""
    def __init__(self, message: str, member_names=None):
        super().__init__(message)
        self.member_names = list(member_names or [])


class ConfigurationError(GenotypeIngestionError):
    """Invalid configuration."""
    pass


class PromptTemplateError(GenotypeIngestionError):
    """Prompt template could not be rendered."""
    def __init__(self, message: str, template_name: str, missing_fields=None):
        super().__init__(message)
        self.template_name = template_name
        self.missing_fields = list(missing_fields or [])
