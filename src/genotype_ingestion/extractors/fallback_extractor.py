# ============================================================================
# src/genotype_ingestion/extractors/fallback_extractor.py
# ============================================================================
"""
Fallback Extractor - Permissive Genotype Scanner

Handles files that:
1. Look like genetic data but match neither strict layout
2. Use other delimiters (commas, semicolons, pipes, spaces)
3. Carry extra or reordered columns

Strategy, per data line:
1. Find the first rs accession; skip the line if there is none
2. Tokenize on any run of whitespace , ; |
3. Among the other tokens, first match wins for each of:
   chromosome (1-22, X, Y, MT, optional "chr" prefix),
   position (integer above the configured minimum),
   genotype (1-2 of A/C/G/T)
4. Keep the line only if chromosome AND position were found

When no genotype token exists the extractor can invent a two-letter
placeholder from the injected random source. Such records are flagged
genotype_synthesized so callers never mistake them for observed data.
"""

import logging
import random
import re
from typing import List, Optional

from ..config import extraction_settings
from ..constants import NUCLEOTIDES, RSID_PATTERN
from ..core.variant import VariantRecord
from ..core.text_lines import iter_data_lines

TOKEN_SEPARATORS = re.compile(r"[\s,;|]+")
CHROMOSOME_TOKEN = re.compile(r"(?:chr|Chr|CHR)?([1-9]|1\d|2[0-2]|X|Y|MT)")
POSITION_TOKEN = re.compile(r"[0-9]+")
GENOTYPE_TOKEN = re.compile(r"[ACGT]{1,2}")
TOKEN_QUOTES = "\"'"


class FallbackExtractor:
    """
    Delimiter-agnostic variant scanner used when strict parsing finds nothing.

    Never raises; returns zero or more records in input line order.
    """

    def __init__(
        self,
        rng: Optional[random.Random] = None,
        min_position: Optional[int] = None,
        synthesize_missing_genotype: Optional[bool] = None
    ):
        self.logger = logging.getLogger(__name__)
        self.rng = rng if rng is not None else random.Random()

        if min_position is None:
            min_position = extraction_settings.FALLBACK_MIN_POSITION
        self.min_position = min_position

        if synthesize_missing_genotype is None:
            synthesize_missing_genotype = extraction_settings.SYNTHESIZE_MISSING_GENOTYPE
        self.synthesize_missing_genotype = synthesize_missing_genotype

    def extract(self, text: str) -> List[VariantRecord]:
        records = []
        for line in iter_data_lines(text):
            record = self.extract_line(line)
            if record is not None:
                records.append(record)

        synthesized = sum(1 for record in records if record.genotype_synthesized)
        if synthesized:
            self.logger.warning(
                f"Fallback extraction synthesized placeholder genotypes for "
                f"{synthesized} of {len(records)} variants"
            )
        return records

    def extract_line(self, line: str) -> Optional[VariantRecord]:
        match = RSID_PATTERN.search(line)
        if not match:
            return None
        rsid = match.group(0)

        tokens = [token.strip(TOKEN_QUOTES) for token in TOKEN_SEPARATORS.split(line.strip())]

        rsid_index = next((i for i, token in enumerate(tokens) if rsid in token), None)
        if rsid_index is None:
            return None
        others = [token for i, token in enumerate(tokens) if i != rsid_index]

        chromosome = self._find_chromosome(others)
        position = self._find_position(others)
        if chromosome is None or position is None:
            return None

        genotype = self._find_genotype(others)
        synthesized = False
        if genotype is None:
            if self.synthesize_missing_genotype:
                genotype = self._synthesize_genotype()
                synthesized = True
            else:
                genotype = ""

        return VariantRecord(
            rsid=rsid,
            chromosome=chromosome,
            position=position,
            genotype=genotype,
            genotype_synthesized=synthesized,
        )

    def _find_chromosome(self, tokens: List[str]) -> Optional[str]:
        for token in tokens:
            match = CHROMOSOME_TOKEN.fullmatch(token)
            if match:
                return match.group(1)
        return None

    def _find_position(self, tokens: List[str]) -> Optional[int]:
        for token in tokens:
            if POSITION_TOKEN.fullmatch(token):
                value = int(token)
                if value > self.min_position:
                    return value
        return None

    def _find_genotype(self, tokens: List[str]) -> Optional[str]:
        for token in tokens:
            if GENOTYPE_TOKEN.fullmatch(token):
                return token
        return None

    def _synthesize_genotype(self) -> str:
        return self.rng.choice(NUCLEOTIDES) + self.rng.choice(NUCLEOTIDES)
