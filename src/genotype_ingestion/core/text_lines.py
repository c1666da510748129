# ============================================================================
# src/genotype_ingestion/core/text_lines.py
# ============================================================================
"""
Line iteration shared by the classifier, parsers and fallback extractor.
"""

from typing import Iterator

from ..constants import COMMENT_PREFIX


def is_data_line(line: str) -> bool:
    """A data line is any line that is neither blank nor a '#' comment."""
    stripped = line.strip()
    return bool(stripped) and not stripped.startswith(COMMENT_PREFIX)


def iter_data_lines(text: str) -> Iterator[str]:
    """
    Yield non-comment, non-blank lines in file order.

    splitlines() handles \\n, \\r\\n and \\r endings, so Windows exports do not
    leave a trailing carriage return on the last field.
    """
    for line in text.splitlines():
        if is_data_line(line):
            yield line
