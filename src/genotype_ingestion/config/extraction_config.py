# ============================================================================
# src/genotype_ingestion/config/extraction_config.py
# ============================================================================
"""
Extraction Settings
- Input guard
- Format classification window
- Fallback extractor heuristics
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class ExtractionSettings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    MIN_CONTENT_LENGTH: int = Field(
        default=100,
        ge=0,
        description="Inputs shorter than this are rejected before classification"
    )
    CLASSIFIER_SCAN_LINES: int = Field(
        default=50,
        ge=1,
        description="Number of data lines inspected when guessing the format from tab counts"
    )
    FALLBACK_MIN_POSITION: int = Field(
        default=1000,
        ge=0,
        description="Fallback extractor only takes integer tokens strictly above this as positions"
    )
    SYNTHESIZE_MISSING_GENOTYPE: bool = Field(
        default=True,
        description="Fallback extractor invents a random placeholder genotype when none is found. "
                    "Records carrying one are flagged genotype_synthesized."
    )


extraction_settings = ExtractionSettings()
