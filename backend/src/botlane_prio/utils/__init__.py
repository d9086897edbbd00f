"""Utility modules for botlane_prio."""

from botlane_prio.utils.name_normalizer import (
    MANUAL_ALIASES,
    NameNormalizer,
    normalize_key,
)

__all__ = [
    "MANUAL_ALIASES",
    "NameNormalizer",
    "normalize_key",
]
