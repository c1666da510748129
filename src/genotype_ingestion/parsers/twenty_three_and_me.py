# ============================================================================
# src/genotype_ingestion/parsers/twenty_three_and_me.py
# ============================================================================
"""
23andMe raw data parser.

Layout: rsid <TAB> chromosome <TAB> position <TAB> genotype
"""

from typing import List, Tuple

from ..constants import GenotypeFormat
from ..core.variant import ParseResult
from .base_parser import StrictGenotypeParser


class TwentyThreeAndMeParser(StrictGenotypeParser):

    @property
    def genotype_format(self) -> GenotypeFormat:
        return GenotypeFormat.TWENTY_THREE_AND_ME

    @property
    def min_fields(self) -> int:
        return 4

    def _split_record(self, fields: List[str]) -> Tuple[str, str, str, str]:
        rsid, chromosome, position, genotype = fields[:4]
        return rsid, chromosome, position, genotype


def parse_23andme(text: str) -> ParseResult:
    return TwentyThreeAndMeParser().parse(text)
