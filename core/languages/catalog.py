"""Catalog of recognized Wikipedia language codes.

Built once from the bundled wpcodes.txt table and never mutated afterwards,
so lookups need no synchronization.
"""

import logging
from functools import lru_cache
from pathlib import Path

logger = logging.getLogger(__name__)

CODES_FILE = Path(__file__).parent / "wpcodes.txt"


def _parse_codes(text: str) -> frozenset[str]:
    codes = set()
    for line in text.splitlines():
        line = line.strip()
        # skip empty lines and comments
        if not line or line.startswith("//"):
            continue
        codes.add(line)
    return frozenset(codes)


@lru_cache(maxsize=1)
def supported_codes() -> frozenset[str]:
    """Return the immutable set of supported language codes."""
    codes = _parse_codes(CODES_FILE.read_text(encoding="utf-8"))
    logger.debug(f"Loaded {len(codes)} language codes from {CODES_FILE.name}")
    return codes


def is_supported(code: str) -> bool:
    """Check whether a code names a known Wikipedia edition."""
    return code in supported_codes()


def is_unsupported(code: str) -> bool:
    """Negation of is_supported, for use as a filter predicate."""
    return not is_supported(code)
