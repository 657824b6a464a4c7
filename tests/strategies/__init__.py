"""Hypothesis strategies for i18nbuild property-based testing.

Usage:
    from tests.strategies.localization import locale_tags, i18n_metadata
"""

from .localization import (
    file_paths,
    i18n_metadata,
    locale_tags,
    private_use_suffixes,
    translation_values,
)

__all__ = [
    "file_paths",
    "i18n_metadata",
    "locale_tags",
    "private_use_suffixes",
    "translation_values",
]
