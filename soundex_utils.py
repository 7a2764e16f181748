# soundex_utils.py
import logging

logger = logging.getLogger(__name__)


def ascii_upper(text: str) -> str:
    """
    ascii-only projection of text: non-ascii characters dropped,
    letters uppercased, other ascii characters kept as-is.
    """
    kept = "".join(c for c in text if c.isascii())
    if len(kept) != len(text):
        logger.debug("dropped %d non-ascii chars", len(text) - len(kept))
    # str.upper on pure ascii only touches a-z
    return kept.upper()
