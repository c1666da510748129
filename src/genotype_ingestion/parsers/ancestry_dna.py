# ============================================================================
# src/genotype_ingestion/parsers/ancestry_dna.py
# ============================================================================
"""
AncestryDNA raw data parser.

Layout: rsid <TAB> chromosome <TAB> position <TAB> allele1 <TAB> allele2
Trailing columns beyond the fifth are ignored. The genotype is the two
alleles concatenated.
"""

from typing import List, Tuple

from ..constants import GenotypeFormat
from ..core.variant import ParseResult
from .base_parser import StrictGenotypeParser


class AncestryDNAParser(StrictGenotypeParser):

    @property
    def genotype_format(self) -> GenotypeFormat:
        return GenotypeFormat.ANCESTRY_DNA

    @property
    def min_fields(self) -> int:
        return 5

    def _split_record(self, fields: List[str]) -> Tuple[str, str, str, str]:
        rsid, chromosome, position, allele1, allele2 = fields[:5]
        return rsid, chromosome, position, allele1 + allele2


def parse_ancestry(text: str) -> ParseResult:
    return AncestryDNAParser().parse(text)
