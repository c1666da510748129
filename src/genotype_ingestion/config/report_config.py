# ============================================================================
# src/genotype_ingestion/config/report_config.py
# ============================================================================
"""
Report Settings
- Category filter fallback size
- Prompt variant limits
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class ReportSettings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    CATEGORY_FALLBACK_LIMIT: int = Field(
        default=20,
        ge=1,
        description="Variants returned when a category is unknown or none of its variants are present"
    )
    PROMPT_MAX_VARIANTS: int = Field(
        default=20,
        ge=1,
        description="Default number of variants rendered into a prompt"
    )
    UNFILTERED_VARIANT_LIMIT: int = Field(
        default=50,
        ge=1,
        description="Variants kept when a report is requested without a report type"
    )


report_settings = ReportSettings()
