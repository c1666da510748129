# ============================================================================
# FILE: tests/conftest.py
# ============================================================================
"""
Pytest configuration and shared fixtures for testing.
"""

import random

import pytest

from genotype_ingestion.core.variant import VariantRecord


# Comment line long enough to lift short samples over the 100-character guard
PADDING_COMMENT = "# Raw genotype export prepared for unit tests. Lines starting with a hash are comments.\n"


@pytest.fixture
def padding_comment():
    return PADDING_COMMENT


@pytest.fixture
def rng():
    """Seeded random source so fallback genotypes are reproducible"""
    return random.Random(1234)


@pytest.fixture
def sample_23andme_text():
    """Small 23andMe export with header, comments and one malformed line"""
    return (
        "# This data file generated by 23andMe at: Mon Jan 01 00:00:00 2024\n"
        "#\n"
        "# rsid\tchromosome\tposition\tgenotype\n"
        "rs1801133\t1\t11856378\tAG\n"
        "rs4988235\t2\t136608646\tGG\n"
        "i3000001\t1\t82154\tII\n"
        "rs429358\t19\t45411941\tTT\n"
        "rs7412\t19\tnot-a-number\tCC\n"
        "\n"
        "rs1815739\t11\t66560624\tCT\n"
    )


@pytest.fixture
def sample_ancestry_text():
    """Small AncestryDNA export"""
    return (
        "#AncestryDNA raw data download\n"
        "#This file was generated by AncestryDNA at: 01/01/2024 00:00:00 UTC\n"
        "rsid\tchromosome\tposition\tallele1\tallele2\n"
        "rs1801133\t1\t11856378\tA\tG\n"
        "rs4988235\t2\t136608646\tG\tG\n"
        "rs3892097\t22\t42524947\tC\tT\n"
    )


@pytest.fixture
def sample_records():
    """Records in input order, one catalog hit per category of interest"""
    return [
        VariantRecord(rsid="rs9999999", chromosome="5", position=12345, genotype="CT"),
        VariantRecord(rsid="rs1801133", chromosome="1", position=11856378, genotype="AG"),
        VariantRecord(rsid="rs4988235", chromosome="2", position=136608646, genotype="GG"),
        VariantRecord(rsid="rs1815739", chromosome="11", position=66560624, genotype="CT"),
    ]


@pytest.fixture
def many_records():
    """25 uncatalogued records"""
    return [
        VariantRecord(rsid=f"rs{20000000 + i}", chromosome=str(i % 22 + 1), position=10000 + i, genotype="AA")
        for i in range(25)
    ]
