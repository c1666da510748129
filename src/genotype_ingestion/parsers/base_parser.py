# ============================================================================
# src/genotype_ingestion/parsers/base_parser.py
# ============================================================================
"""
Base Strict Parser Interface

Strict parsers read one fixed tab-separated column layout. A line that does
not conform is dropped and counted; parsing is best-effort over the whole
file and never raises for bad lines.
"""

import logging
import re
from abc import ABC, abstractmethod
from typing import List, Optional, Tuple

from ..constants import GenotypeFormat
from ..core.variant import ParseResult, VariantRecord
from ..core.text_lines import iter_data_lines

# Positions are plain base-10 digit strings (no sign, no separators)
POSITION_PATTERN = re.compile(r"[0-9]+")

RSID_PREFIX = "rs"
MAX_GENOTYPE_LENGTH = 2
FIELD_SEPARATOR = "\t"


def parse_position(value: str) -> Optional[int]:
    """Parse a position column, or None if it is not a non-negative integer."""
    value = value.strip()
    if not POSITION_PATTERN.fullmatch(value):
        return None
    return int(value)


class StrictGenotypeParser(ABC):
    """
    Base class for fixed-layout parsers.

    Subclasses declare the minimum column count and how to pull
    (rsid, chromosome, position, genotype) out of the split fields:
    - TwentyThreeAndMeParser: 4 columns, genotype in column 4
    - AncestryDNAParser: 5 columns, genotype = allele1 + allele2
    """

    def __init__(self):
        self.logger = logging.getLogger(self.__class__.__module__)

    @property
    @abstractmethod
    def genotype_format(self) -> GenotypeFormat:
        """Format this parser reads."""
        pass

    @property
    @abstractmethod
    def min_fields(self) -> int:
        """Minimum number of tab-separated fields on a data line."""
        pass

    @abstractmethod
    def _split_record(self, fields: List[str]) -> Tuple[str, str, str, str]:
        """Return raw (rsid, chromosome, position, genotype) strings."""
        pass

    def parse(self, text: str) -> ParseResult:
        """
        Parse every data line of text.

        Returns:
            ParseResult with accepted records in file order and
            valid/invalid line counters
        """
        result = ParseResult(parser_name=self.genotype_format.value)

        for line in iter_data_lines(text):
            record = self.parse_line(line)
            if record is None:
                result.invalid_lines += 1
                continue
            result.records.append(record)
            result.valid_lines += 1

        self.logger.debug(
            f"{self.genotype_format.value} parsing results: "
            f"{result.valid_lines} valid SNPs, {result.invalid_lines} invalid lines"
        )
        return result

    def parse_line(self, line: str) -> Optional[VariantRecord]:
        """
        Parse one data line.

        Accepted iff the line has enough fields, the rsid starts with 'rs',
        the genotype is at most 2 characters and the position parses.
        """
        fields = [part.strip() for part in line.split(FIELD_SEPARATOR)]
        if len(fields) < self.min_fields:
            return None

        rsid, chromosome, raw_position, genotype = self._split_record(fields)

        if not rsid.startswith(RSID_PREFIX) or len(genotype) > MAX_GENOTYPE_LENGTH:
            return None

        position = parse_position(raw_position)
        if position is None:
            return None

        return VariantRecord(
            rsid=rsid,
            chromosome=chromosome,
            position=position,
            genotype=genotype,
        )
