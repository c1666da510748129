# ============================================================================
# src/genotype_ingestion/core/variant.py
# ============================================================================
"""
Variant data model
- One genotype observation per VariantRecord
- Per-parse and per-extraction result containers
"""

from dataclasses import dataclass, field, asdict
from enum import Enum
from typing import Any, Dict, List, Optional

from ..constants import GenotypeFormat


@dataclass(frozen=True)
class VariantRecord:
    rsid: str
    chromosome: str
    position: int
    genotype: str

    # Set by the fallback extractor when the genotype is a random placeholder
    genotype_synthesized: bool = False

    # Enrichment (attached by enrichers.variant_enricher only)
    gene_name: Optional[str] = None
    significance: Optional[str] = None
    function: Optional[str] = None

    @property
    def is_enriched(self) -> bool:
        return self.gene_name is not None or self.significance is not None or self.function is not None

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary, dropping enrichment fields that were never set."""
        data = asdict(self)
        for key in ("gene_name", "significance", "function"):
            if data[key] is None:
                del data[key]
        return data


class ExtractionStrategy(str, Enum):
    """How the final variant list was produced"""
    STRICT = "strict"                  # format recognized, one parser ran
    STRICT_BEST_OF = "strict_best_of"  # format unknown, larger of both parsers
    FALLBACK = "fallback"              # strict parsing found nothing
    REJECTED = "rejected"              # input failed the length / rsid guard


@dataclass
class ParseResult:
    """Output of one strict parser run."""
    parser_name: str
    records: List[VariantRecord] = field(default_factory=list)
    valid_lines: int = 0
    invalid_lines: int = 0

    def __len__(self) -> int:
        return len(self.records)


@dataclass
class ExtractionResult:
    """
    Full outcome of an extraction call.

    Contains the records plus how they were found, for logging and
    user-facing "no data" messages.
    """
    records: List[VariantRecord] = field(default_factory=list)
    detected_format: GenotypeFormat = GenotypeFormat.UNKNOWN
    strategy: ExtractionStrategy = ExtractionStrategy.REJECTED
    parser_counts: Dict[str, int] = field(default_factory=dict)
    rejection_reason: Optional[str] = None

    @property
    def is_empty(self) -> bool:
        return not self.records

    @property
    def synthesized_genotypes(self) -> int:
        return sum(1 for record in self.records if record.genotype_synthesized)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "detected_format": self.detected_format.value,
            "strategy": self.strategy.value,
            "parser_counts": self.parser_counts,
            "rejection_reason": self.rejection_reason,
            "variant_count": len(self.records),
            "synthesized_genotypes": self.synthesized_genotypes,
            "variants": [record.to_dict() for record in self.records],
        }
