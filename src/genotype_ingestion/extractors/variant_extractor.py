# ============================================================================
# src/genotype_ingestion/extractors/variant_extractor.py
# ============================================================================
"""
Variant Extraction Orchestrator

Coordinates the extraction pipeline:
1. Guard: reject short text or text without any rs accession
2. Classify the format
3. Known format → matching strict parser
   Unknown format → both strict parsers, keep the larger result
   (tie goes to 23andMe)
4. Empty result → fallback extractor on the same text

"No variants found" is an empty list, never an exception; the caller turns
it into a user-facing message.
"""

import logging
import random
from typing import List, Optional

from ..classifiers.format_classifier import FormatClassifier
from ..config import extraction_settings
from ..constants import GenotypeFormat, RSID_PATTERN
from ..core.variant import ExtractionResult, ExtractionStrategy, VariantRecord
from ..parsers import AncestryDNAParser, TwentyThreeAndMeParser
from ..utils.logging import log_performance
from .fallback_extractor import FallbackExtractor

logger = logging.getLogger(__name__)


class VariantExtractor:
    """
    Turns raw genotype text into an ordered list of VariantRecord.

    Holds no per-call state; one instance can serve concurrent callers.
    The random source only matters for the fallback path and can be
    injected to make extraction reproducible.
    """

    def __init__(
        self,
        rng: Optional[random.Random] = None,
        min_content_length: Optional[int] = None,
        classifier: Optional[FormatClassifier] = None,
        fallback: Optional[FallbackExtractor] = None
    ):
        self.logger = logging.getLogger(__name__)

        if min_content_length is None:
            min_content_length = extraction_settings.MIN_CONTENT_LENGTH
        self.min_content_length = min_content_length

        self.classifier = classifier or FormatClassifier()
        self.parsers = {
            GenotypeFormat.TWENTY_THREE_AND_ME: TwentyThreeAndMeParser(),
            GenotypeFormat.ANCESTRY_DNA: AncestryDNAParser(),
        }
        self.fallback = fallback or FallbackExtractor(rng=rng)

    def extract(self, text: str) -> List[VariantRecord]:
        return self.extract_with_details(text).records

    @log_performance(logger, "Variant extraction")
    def extract_with_details(self, text: str) -> ExtractionResult:
        rejection = self._check_input(text)
        if rejection:
            self.logger.warning(rejection)
            return ExtractionResult(rejection_reason=rejection)

        self.logger.info(f"Extracting SNPs from content of length {len(text)}")

        detected = self.classifier.classify(text)
        result = ExtractionResult(detected_format=detected)

        if detected in self.parsers:
            parsed = self.parsers[detected].parse(text)
            result.parser_counts[parsed.parser_name] = len(parsed)
            result.records = parsed.records
            result.strategy = ExtractionStrategy.STRICT
        else:
            self.logger.info("Unknown format; trying both strict parsers")
            first = self.parsers[GenotypeFormat.TWENTY_THREE_AND_ME].parse(text)
            second = self.parsers[GenotypeFormat.ANCESTRY_DNA].parse(text)
            result.parser_counts[first.parser_name] = len(first)
            result.parser_counts[second.parser_name] = len(second)
            # Tie goes to the 23andMe layout
            result.records = first.records if len(first) >= len(second) else second.records
            result.strategy = ExtractionStrategy.STRICT_BEST_OF

        if not result.records:
            self.logger.info("No SNPs found with standard parsing, trying fallback method")
            result.records = self.fallback.extract(text)
            result.strategy = ExtractionStrategy.FALLBACK

        self.logger.info(
            f"Extracted {len(result.records)} SNPs "
            f"(format={detected.value}, strategy={result.strategy.value})",
            extra={
                "detected_format": detected.value,
                "strategy": result.strategy.value,
                "variant_count": len(result.records),
                "synthesized_genotypes": result.synthesized_genotypes,
            },
        )
        return result

    def _check_input(self, text: str) -> Optional[str]:
        """Return a rejection reason, or None if the text is worth parsing."""
        if not isinstance(text, str):
            return f"Content is not text (got {type(text).__name__})"
        if len(text) < self.min_content_length:
            return f"Content is too short ({len(text)} < {self.min_content_length} characters)"
        if not RSID_PATTERN.search(text):
            return "No RS IDs found in content"
        return None


# ============================================================================
# CONVENIENCE FUNCTIONS
# ============================================================================

def extract(text: str, rng: Optional[random.Random] = None) -> List[VariantRecord]:
    """Extract variants from raw genotype text with default settings."""
    return VariantExtractor(rng=rng).extract(text)
