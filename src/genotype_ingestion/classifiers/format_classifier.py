# ============================================================================
# src/genotype_ingestion/classifiers/format_classifier.py
# ============================================================================
"""
Genotype File Format Classifier

Decides which strict parser should read a raw-data export:

1. HEADER MARKERS (definitive)
   - 23andMe writes "# This data file generated by 23andMe"
   - AncestryDNA writes "#AncestryDNA raw data download"

2. RSID PRESENCE
   - No rs accession anywhere → UNKNOWN (extraction will come back empty)

3. COLUMN COUNT (heuristic)
   - Look at the first N data lines
   - Exactly 3 tabs → 23andMe (rsid, chromosome, position, genotype)
   - 4 or more tabs → AncestryDNA (rsid, chromosome, position, allele1, allele2)
   - First qualifying line decides

This is the FIRST step of extraction - the orchestrator routes on its answer.
"""

import logging
from typing import Optional

from ..config import extraction_settings
from ..constants import (
    GenotypeFormat,
    FORMAT_MARKERS,
    TWENTY_THREE_AND_ME_TABS,
    ANCESTRY_DNA_MIN_TABS,
    RSID_PATTERN,
)
from ..core.text_lines import iter_data_lines


class FormatClassifier:
    """
    Classifies raw genotype text into a GenotypeFormat.

    Pure function of the input text; safe to share between threads.
    """

    def __init__(self, scan_lines: Optional[int] = None):
        self.logger = logging.getLogger(__name__)
        if scan_lines is None:
            scan_lines = extraction_settings.CLASSIFIER_SCAN_LINES
        self.scan_lines = scan_lines

    def classify(self, text: str) -> GenotypeFormat:
        marker_format = self._classify_by_marker(text)
        if marker_format is not None:
            self.logger.debug(f"Detected {marker_format.value} format from header marker")
            return marker_format

        if not RSID_PATTERN.search(text):
            self.logger.debug("No rs identifiers in text; format unknown")
            return GenotypeFormat.UNKNOWN

        return self._classify_by_columns(text)

    def _classify_by_marker(self, text: str) -> Optional[GenotypeFormat]:
        for genotype_format, markers in FORMAT_MARKERS.items():
            if any(marker in text for marker in markers):
                return genotype_format
        return None

    def _classify_by_columns(self, text: str) -> GenotypeFormat:
        """
        Guess the layout from tab counts on the first data lines.
        """
        for index, line in enumerate(iter_data_lines(text)):
            if index >= self.scan_lines:
                break

            tab_count = line.count("\t")
            if tab_count == TWENTY_THREE_AND_ME_TABS:
                self.logger.debug(f"Probable 23andMe layout ({tab_count} tabs on data line {index + 1})")
                return GenotypeFormat.TWENTY_THREE_AND_ME
            if tab_count >= ANCESTRY_DNA_MIN_TABS:
                self.logger.debug(f"Probable AncestryDNA layout ({tab_count} tabs on data line {index + 1})")
                return GenotypeFormat.ANCESTRY_DNA

        self.logger.debug(f"No tab layout matched in first {self.scan_lines} data lines")
        return GenotypeFormat.UNKNOWN


# ============================================================================
# CONVENIENCE FUNCTIONS
# ============================================================================

def detect_format(text: str) -> GenotypeFormat:
    """Classify text with default settings."""
    return FormatClassifier().classify(text)
