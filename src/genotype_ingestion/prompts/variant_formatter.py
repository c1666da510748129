# ============================================================================
# src/genotype_ingestion/prompts/variant_formatter.py
# ============================================================================
"""
Variant Prompt Formatter

Renders variants as numbered text blocks for a language-model prompt:

    1. **rs1801133** (Chr 1, Pos 11856378): AG
       Gene: MTHFR
       Significance: High
       Function: Folate metabolism, methylation cycle

Records keep their input order; enrichment comes from the catalog.
"""

import logging
from typing import List, Optional, Sequence

from ..config import report_settings
from ..core.variant import VariantRecord
from ..enrichers.variant_enricher import VariantEnricher

NO_VARIANTS_SENTINEL = "No SNPs found in the provided data."


class VariantPromptFormatter:

    def __init__(self, enricher: Optional[VariantEnricher] = None):
        self.logger = logging.getLogger(__name__)
        self.enricher = enricher or VariantEnricher()

    def format(self, records: Sequence[VariantRecord], max_count: Optional[int] = None) -> str:
        """
        Render the first max_count records.

        Raises:
            ValueError: if max_count is negative
        """
        if max_count is None:
            max_count = report_settings.PROMPT_MAX_VARIANTS
        if max_count < 0:
            raise ValueError(f"max_count must be non-negative, got {max_count}")

        selected = self.enricher.enrich_all(records[:max_count])
        if not selected:
            return NO_VARIANTS_SENTINEL

        blocks = [self.format_block(index, record) for index, record in enumerate(selected, start=1)]

        self.logger.info(f"Formatted {len(selected)} SNPs for prompt")
        return "".join(blocks)

    def format_block(self, index: int, record: VariantRecord) -> str:
        lines = [
            f"{index}. **{record.rsid}** (Chr {record.chromosome}, Pos {record.position}): {record.genotype}"
        ]
        if record.gene_name:
            lines.append(f"   Gene: {record.gene_name}")
        if record.significance:
            lines.append(f"   Significance: {record.significance}")
        if record.function:
            lines.append(f"   Function: {record.function}")

        return "\n".join(lines) + "\n\n"


# ============================================================================
# CONVENIENCE FUNCTIONS
# ============================================================================

def format_for_prompt(records: Sequence[VariantRecord], max_count: Optional[int] = None) -> str:
    """Numbered, enriched variant text; sentinel line when records is empty."""
    return VariantPromptFormatter().format(records, max_count)
