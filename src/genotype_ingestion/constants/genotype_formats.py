# ============================================================================
# src/genotype_ingestion/constants/genotype_formats.py
# ============================================================================
"""
Genotype File Formats
- Supported raw-data layouts for classification/routing
- Header markers that identify each layout
"""

import re
from enum import Enum


class GenotypeFormat(str, Enum):
    """
    Raw-data layouts the strict parsers understand.
    UNKNOWN routes to both strict parsers, then the fallback extractor.
    """
    TWENTY_THREE_AND_ME = "23andme"
    ANCESTRY_DNA = "ancestrydna"
    UNKNOWN = "unknown"


# Literal header lines written by each provider
FORMAT_MARKERS = {
    GenotypeFormat.TWENTY_THREE_AND_ME: ("# This data file generated by 23andMe",),
    GenotypeFormat.ANCESTRY_DNA: ("#AncestryDNA", "# AncestryDNA"),
}

# Number of tab separators on a data line
TWENTY_THREE_AND_ME_TABS = 3
ANCESTRY_DNA_MIN_TABS = 4

COMMENT_PREFIX = "#"

RSID_PATTERN = re.compile(r"rs\d+")

NUCLEOTIDES = ("A", "C", "G", "T")
