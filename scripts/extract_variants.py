#!/usr/bin/env python3
"""
Variant Extraction Script

Reads a raw genetic data export (text or ZIP), extracts variants and prints
them as prompt text, JSON, or a complete report prompt.

Usage:
    python scripts/extract_variants.py genome.txt
    python scripts/extract_variants.py genome.zip --category methylation
    python scripts/extract_variants.py genome.txt --json --seed 42
    python scripts/extract_variants.py genome.txt --prompt --category nutrition
    python scripts/extract_variants.py --query "What does MTHFR do?"
"""

import argparse
import json
import logging
import random
import sys
from pathlib import Path
from typing import List, Optional

from genotype_ingestion import (
    VariantExtractor,
    build_report_request,
    format_for_prompt,
    read_genetic_text,
    select_for_category,
)
from genotype_ingestion.config import logging_settings
from genotype_ingestion.utils import PromptTemplateError, UploadError, setup_logging, setup_logging_from_settings

EXIT_NO_VARIANTS = 1
EXIT_BAD_INPUT = 2

logger = logging.getLogger("extract_variants")


def non_negative_int(value: str) -> int:
    number = int(value)
    if number < 0:
        raise argparse.ArgumentTypeError(f"must be 0 or greater, got {number}")
    return number


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Extract SNP variants from a raw genetic data file")
    parser.add_argument("file", type=Path, nargs="?", help="Raw data file (.txt) or provider ZIP download")
    parser.add_argument("--category", help="Report category to filter by (e.g. methylation, nutrition)")
    parser.add_argument("--max-count", type=non_negative_int, default=None, help="Maximum variants to format")
    parser.add_argument("--query", help="Question for the report prompt; alone, builds a query-only prompt")
    parser.add_argument("--seed", type=int, default=None, help="Seed for fallback genotype placeholders")
    output = parser.add_mutually_exclusive_group()
    output.add_argument("--json", action="store_true", help="Print extraction result as JSON")
    output.add_argument("--prompt", action="store_true", help="Print the full report prompt")
    parser.add_argument("--verbose", "-v", action="store_true", help="Debug logging")
    args = parser.parse_args(argv)
    if args.file is None and not args.query:
        parser.error("a FILE or --query is required")
    return args


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    if args.verbose:
        setup_logging("DEBUG", log_file=logging_settings.LOG_FILE, format_json=logging_settings.LOG_JSON)
    else:
        setup_logging_from_settings()

    if args.file is None:
        try:
            request = build_report_request(None, args.category, query=args.query)
        except PromptTemplateError as e:
            logger.error(str(e))
            return EXIT_BAD_INPUT
        print(request.system_prompt)
        print()
        print(request.user_message)
        return 0

    try:
        text = read_genetic_text(args.file.read_bytes(), filename=args.file.name)
    except OSError as e:
        logger.error(f"Could not read {args.file}: {e}")
        return EXIT_BAD_INPUT
    except UploadError as e:
        logger.error(str(e))
        return EXIT_BAD_INPUT

    rng = random.Random(args.seed) if args.seed is not None else None

    if args.prompt:
        request = build_report_request(text, args.category, query=args.query, max_count=args.max_count, rng=rng)
        if request.no_variants:
            print(request.message)
            return EXIT_NO_VARIANTS
        print(request.system_prompt)
        print()
        print(request.user_message)
        return 0

    result = VariantExtractor(rng=rng).extract_with_details(text)
    if result.is_empty:
        print(result.rejection_reason or "No SNPs found in the provided data.")
        return EXIT_NO_VARIANTS

    records = result.records
    if args.category:
        selection = select_for_category(records, args.category)
        logger.info(f"Category {args.category}: {selection.outcome.value}")
        records = selection.records

    if args.json:
        payload = result.to_dict()
        payload["selected_count"] = len(records)
        payload["variants"] = [record.to_dict() for record in records]
        print(json.dumps(payload, indent=2))
    else:
        print(format_for_prompt(records, args.max_count))
    return 0


if __name__ == "__main__":
    sys.exit(main())
