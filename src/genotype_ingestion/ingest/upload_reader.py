# ============================================================================
# src/genotype_ingestion/ingest/upload_reader.py
# ============================================================================
"""
Upload Reader

Turns an uploaded file's bytes into text for extraction:
- ZIP archives (as downloaded from 23andMe / AncestryDNA) are opened;
  provider-named members are tried before other .txt files and the first
  one containing an rs identifier is decoded
- Anything else is decoded as UTF-8
"""

import io
import logging
import re
import zipfile
from typing import Optional

from ..constants import RSID_PATTERN
from ..utils.exceptions import InvalidFileFormatError, NoGeneticDataError

logger = logging.getLogger(__name__)

ZIP_MAGIC = b"PK"

GENETIC_FILE_PATTERNS = [
    re.compile(r"genome.*\.txt$", re.IGNORECASE),
    re.compile(r"dna.*\.txt$", re.IGNORECASE),
    re.compile(r"genetic.*\.txt$", re.IGNORECASE),
    re.compile(r"ancestry.*\.txt$", re.IGNORECASE),
    re.compile(r"23andme.*\.txt$", re.IGNORECASE),
    re.compile(r".*_raw_data.*\.txt$", re.IGNORECASE),
]


def is_zip_archive(data: bytes) -> bool:
    return data[:2] == ZIP_MAGIC


def genetic_file_rank(name: str) -> Optional[int]:
    """
    Rank an archive member name: 0 for provider-style names, 1 for any other
    .txt file, None for members that are never opened.
    """
    basename = name.rsplit("/", 1)[-1]
    if any(pattern.search(basename) for pattern in GENETIC_FILE_PATTERNS):
        return 0
    if basename.lower().endswith(".txt"):
        return 1
    return None


def looks_like_genetic_file(name: str) -> bool:
    return genetic_file_rank(name) is not None


def decode_text(data: bytes) -> str:
    """Decode as UTF-8; undecodable bytes become U+FFFD rather than failing."""
    return data.decode("utf-8", errors="replace")


def read_genetic_text(data: bytes, filename: Optional[str] = None) -> str:
    """
    Read uploaded bytes as genetic data text.

    Args:
        data: Raw upload bytes (already decrypted)
        filename: Original file name, for log messages

    Returns:
        Decoded text

    Raises:
        InvalidFileFormatError: archive is corrupt
        NoGeneticDataError: archive holds no text file with rs identifiers
    """
    label = filename or "<upload>"

    if not is_zip_archive(data):
        text = decode_text(data)
        logger.info(f"Read {label} as text ({len(text)} characters)")
        return text

    logger.info(f"{label} appears to be a ZIP archive")
    return _read_from_archive(data, label)


def _read_from_archive(data: bytes, label: str) -> str:
    try:
        archive = zipfile.ZipFile(io.BytesIO(data))
    except zipfile.BadZipFile as e:
        raise InvalidFileFormatError(f"Could not extract the ZIP file {label}: {e}") from e

    with archive:
        members = [info for info in archive.infolist() if not info.is_dir()]
        member_names = [info.filename for info in members]
        logger.debug(f"Files in ZIP: {member_names}")

        # Provider-named files first, then other .txt files, archive order within each
        candidates = sorted(
            (rank, index, info)
            for index, info in enumerate(members)
            for rank in [genetic_file_rank(info.filename)]
            if rank is not None
        )

        for _, _, info in candidates:
            try:
                content = decode_text(archive.read(info))
            except (zipfile.BadZipFile, RuntimeError) as e:
                # RuntimeError covers encrypted members
                raise InvalidFileFormatError(
                    f"Could not read {info.filename} from {label}: {e}"
                ) from e

            if RSID_PATTERN.search(content):
                logger.info(
                    f"Genetic data found in {info.filename}, length: {len(content)} chars",
                    extra={"source": f"{label}:{info.filename}"},
                )
                return content

    raise NoGeneticDataError(
        f"No genetic data files found in {label}. "
        f"Please ensure the ZIP contains a 23andMe or AncestryDNA text file.",
        member_names=member_names,
    )
