# ============================================================================
# src/genotype_ingestion/classifiers/__init__.py
# ============================================================================
from .format_classifier import FormatClassifier, detect_format

__all__ = ["FormatClassifier", "detect_format"]
