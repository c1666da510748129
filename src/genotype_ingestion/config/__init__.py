# ============================================================================
# src/genotype_ingestion/config/__init__.py
# ============================================================================
"""
Convenient imports for all settings
"""

from .extraction_config import ExtractionSettings, extraction_settings
from .report_config import ReportSettings, report_settings
from .logging_config import LoggingSettings, logging_settings
