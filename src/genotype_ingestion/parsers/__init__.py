# ============================================================================
# src/genotype_ingestion/parsers/__init__.py
# ============================================================================
"""
Strict Parsers Package

Each parser reads one provider's fixed tab-separated layout:
- TwentyThreeAndMeParser: rsid, chromosome, position, genotype
- AncestryDNAParser: rsid, chromosome, position, allele1, allele2
"""

from .base_parser import StrictGenotypeParser, parse_position
from .twenty_three_and_me import TwentyThreeAndMeParser, parse_23andme
from .ancestry_dna import AncestryDNAParser, parse_ancestry

__all__ = [
    "StrictGenotypeParser",
    "parse_position",
    "TwentyThreeAndMeParser",
    "parse_23andme",
    "AncestryDNAParser",
    "parse_ancestry",
]
