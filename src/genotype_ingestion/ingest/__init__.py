# ============================================================================
# src/genotype_ingestion/ingest/__init__.py
# ============================================================================
from .upload_reader import read_genetic_text, is_zip_archive, looks_like_genetic_file, genetic_file_rank

__all__ = ["read_genetic_text", "is_zip_archive", "looks_like_genetic_file", "genetic_file_rank"]
