# ============================================================================
# src/genotype_ingestion/constants/significance_catalog.py
# ============================================================================
"""
Significance Catalog
- Report category → variants of interest
- Variant → gene, significance tier, functional note

Small illustrative lookup, not a genomic database. Built once at import and
exposed through read-only mappings.
"""

from dataclasses import dataclass
from types import MappingProxyType
from typing import FrozenSet, Mapping, Optional


@dataclass(frozen=True)
class VariantAnnotation:
    gene: str
    significance: str  # "High" | "Medium"
    function: str


CATEGORY_VARIANTS: Mapping[str, FrozenSet[str]] = MappingProxyType({
    "methylation": frozenset({"rs1801133", "rs1801131", "rs234706", "rs1805087"}),
    "carrier": frozenset({"rs113993960", "rs80338939", "rs28897696", "rs28897617"}),
    "nutrition": frozenset({"rs4988235", "rs429358", "rs7412", "rs1799983", "rs1801282"}),
    "exercise": frozenset({"rs1815739", "rs4253778", "rs1799752", "rs8192678"}),
    "medication": frozenset({"rs4244285", "rs1799853", "rs1057910", "rs762551", "rs3892097"}),
    "ancestry": frozenset({"rs16891982", "rs1426654", "rs3827760", "rs1229984", "rs2814778"}),
    "diseaseRisk": frozenset({"rs429358", "rs7412", "rs143383", "rs10757278", "rs4939827"}),
})

# Alternate spellings accepted for category names
CATEGORY_ALIASES: Mapping[str, str] = MappingProxyType({
    "disease_risk": "diseaseRisk",
    "disease-risk": "diseaseRisk",
})

VARIANT_ANNOTATIONS: Mapping[str, VariantAnnotation] = MappingProxyType({
    # Methylation
    "rs1801133": VariantAnnotation("MTHFR", "High", "Folate metabolism, methylation cycle"),
    "rs1801131": VariantAnnotation("MTHFR", "Medium", "Folate metabolism, methylation cycle"),
    "rs234706": VariantAnnotation("CBS", "Medium", "Homocysteine metabolism"),
    "rs1805087": VariantAnnotation("MTR", "Medium", "Methionine synthase, B12 metabolism"),

    # Carrier
    "rs113993960": VariantAnnotation("CFTR", "High", "Cystic fibrosis (F508del mutation)"),
    "rs80338939": VariantAnnotation("HEXA", "High", "Tay-Sachs disease"),
    "rs28897696": VariantAnnotation("ASPA", "High", "Canavan disease"),
    "rs28897617": VariantAnnotation("SMN1", "High", "Spinal muscular atrophy"),

    # Nutrition
    "rs4988235": VariantAnnotation("MCM6/LCT", "High", "Lactose tolerance/intolerance"),
    "rs429358": VariantAnnotation("APOE", "High", "Lipid metabolism, Alzheimer's risk"),
    "rs7412": VariantAnnotation("APOE", "High", "Lipid metabolism, Alzheimer's risk"),
    "rs1799983": VariantAnnotation("NOS3", "Medium", "Nitric oxide production, cardiovascular health"),
    "rs1801282": VariantAnnotation("PPARG", "Medium", "Insulin sensitivity, fat metabolism"),

    # Exercise
    "rs1815739": VariantAnnotation("ACTN3", "Medium", "Fast-twitch muscle fiber composition"),
    "rs4253778": VariantAnnotation("PPARA", "Medium", "Energy metabolism, endurance performance"),
    "rs1799752": VariantAnnotation("ACE", "Medium", "Blood pressure regulation, exercise response"),
    "rs8192678": VariantAnnotation("PPARGC1A", "Medium", "Mitochondrial biogenesis, endurance"),

    # Medication
    "rs4244285": VariantAnnotation("CYP2C19", "High", "Drug metabolism (poor metabolizer)"),
    "rs1799853": VariantAnnotation("CYP2C9", "High", "Drug metabolism (warfarin)"),
    "rs1057910": VariantAnnotation("CYP2C9", "High", "Drug metabolism (warfarin)"),
    "rs762551": VariantAnnotation("CYP1A2", "Medium", "Caffeine metabolism"),
    "rs3892097": VariantAnnotation("CYP2D6", "High", "Drug metabolism (antidepressants)"),

    # Ancestry
    "rs16891982": VariantAnnotation("SLC45A2", "Medium", "European/non-European ancestry"),
    "rs1426654": VariantAnnotation("SLC24A5", "Medium", "European/African ancestry"),
    "rs3827760": VariantAnnotation("EDAR", "Medium", "East Asian ancestry marker"),
    "rs1229984": VariantAnnotation("ADH1B", "Medium", "East Asian ancestry, alcohol metabolism"),
    "rs2814778": VariantAnnotation("DARC", "Medium", "African ancestry marker"),

    # Disease risk
    "rs143383": VariantAnnotation("GDF5", "Medium", "Osteoarthritis risk"),
    "rs10757278": VariantAnnotation("9p21 locus", "High", "Cardiovascular disease risk"),
    "rs4939827": VariantAnnotation("SMAD7", "Medium", "Colorectal cancer risk"),
})


def resolve_category(category: Optional[str]) -> Optional[str]:
    """Map a category name (or alias) to its catalog key, or None if unknown."""
    if not category:
        return None
    if category in CATEGORY_VARIANTS:
        return category
    return CATEGORY_ALIASES.get(category)


def get_category_variants(category: Optional[str]) -> FrozenSet[str]:
    """Variants of interest for a category; empty set when not configured."""
    key = resolve_category(category)
    if key is None:
        return frozenset()
    return CATEGORY_VARIANTS[key]


def lookup_annotation(rsid: str) -> Optional[VariantAnnotation]:
    return VARIANT_ANNOTATIONS.get(rsid)
