# ============================================================================
# src/genotype_ingestion/utils/sample_data.py
# ============================================================================
"""
Sample genetic data for tests and demos.

Files start with catalog variants so category filtering has something to
find, then pad with synthetic rs10000000+ accessions.
"""

import random
from typing import List, Optional, Tuple

from ..constants import NUCLEOTIDES

TWENTY_THREE_AND_ME_HEADER = (
    "# This data file generated by 23andMe\n"
    "# rsid\tchromosome\tposition\tgenotype\n"
)

ANCESTRY_DNA_HEADER = (
    "#AncestryDNA raw data download\n"
    "rsid\tchromosome\tposition\tallele1\tallele2\n"
)

# (rsid, chromosome, position, possible genotypes)
COMMON_VARIANTS: List[Tuple[str, str, int, Tuple[str, ...]]] = [
    ("rs1801133", "1", 11856378, ("GG", "AG", "AA")),
    ("rs1801131", "1", 11854476, ("TT", "GT", "GG")),
    ("rs234706", "21", 44483184, ("AA", "AG", "GG")),
    ("rs1805087", "1", 237048500, ("AA", "AG", "GG")),
    ("rs4988235", "2", 136608646, ("GG", "AG", "AA")),
    ("rs429358", "19", 45411941, ("TT", "CT", "CC")),
    ("rs7412", "19", 45412079, ("CC", "CT", "TT")),
    ("rs1799983", "7", 150696111, ("GG", "GT", "TT")),
    ("rs1801282", "3", 12393125, ("CC", "CG", "GG")),
    ("rs1815739", "11", 66560624, ("CC", "CT", "TT")),
]


def _sample_rows(snp_count: int, rng: random.Random) -> List[Tuple[str, str, int, str]]:
    rows = [
        (rsid, chromosome, position, rng.choice(genotypes))
        for rsid, chromosome, position, genotypes in COMMON_VARIANTS[:snp_count]
    ]
    for i in range(max(0, snp_count - len(COMMON_VARIANTS))):
        rows.append((
            f"rs{10000000 + i}",
            str(rng.randint(1, 22)),
            rng.randint(1, 100000000),
            rng.choice(NUCLEOTIDES) + rng.choice(NUCLEOTIDES),
        ))
    return rows


def generate_sample_23andme_data(snp_count: int = 100, rng: Optional[random.Random] = None) -> str:
    """Generate a sample 23andMe-format file with snp_count data lines."""
    rng = rng or random.Random()
    output = TWENTY_THREE_AND_ME_HEADER
    for rsid, chromosome, position, genotype in _sample_rows(snp_count, rng):
        output += f"{rsid}\t{chromosome}\t{position}\t{genotype}\n"
    return output


def generate_sample_ancestry_data(snp_count: int = 100, rng: Optional[random.Random] = None) -> str:
    """Generate a sample AncestryDNA-format file with snp_count data lines."""
    rng = rng or random.Random()
    output = ANCESTRY_DNA_HEADER
    for rsid, chromosome, position, genotype in _sample_rows(snp_count, rng):
        output += f"{rsid}\t{chromosome}\t{position}\t{genotype[0]}\t{genotype[1]}\n"
    return output
