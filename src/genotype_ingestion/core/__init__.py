# ============================================================================
# src/genotype_ingestion/core/__init__.py
# ============================================================================
from .variant import VariantRecord, ParseResult, ExtractionResult, ExtractionStrategy
from .text_lines import is_data_line, iter_data_lines

__all__ = [
    "VariantRecord",
    "ParseResult",
    "ExtractionResult",
    "ExtractionStrategy",
    "is_data_line",
    "iter_data_lines",
]
