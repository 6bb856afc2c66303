"""
Wikipedia language code catalog.

Usage:
    from core.languages import is_supported

    is_supported("lv")   # True
    is_supported("xx")   # False
"""

from .catalog import is_supported, is_unsupported, supported_codes

__all__ = [
    "is_supported",
    "is_unsupported",
    "supported_codes",
]
