import logging
import re
from typing import List, Optional

logger = logging.getLogger("format_router")

NOISE_PATTERNS = [
    r"(?i)^bet id[:#]?\s*\w+",
    r"(?i)^transaction[:#]\s*\w+",
    r"(?i)^placed on[:]\s*.*",
    r"(?i)^page \d+ of \d+$",
]


def normalize_ocr_text(text: Optional[str]) -> str:
    # OCR engines hand back CRLF endings and tab-aligned columns.
    if not text:
        return ""
    return text.replace("\r", "").replace("\t", " ")


def split_lines(text: str) -> List[str]:
    return [l.strip() for l in re.split(r"\n+", text) if l.strip()]


def strip_noise_lines(lines: List[str]) -> List[str]:
    """Drop bet ids, timestamps and page footers that carry no wager data."""
    kept = [l for l in lines if not any(re.search(p, l) for p in NOISE_PATTERNS)]
    if len(kept) != len(lines):
        logger.debug(f"Dropped {len(lines) - len(kept)} noise lines.")
    return kept
