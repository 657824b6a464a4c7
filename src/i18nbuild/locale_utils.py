"""Locale tag utilities for locale data lookup.

Centralizes the tag manipulation used when mapping a configured locale tag
onto a locale data file name: private-use scrubbing, primary subtag
extraction, and separator conversion (BCP-47 hyphens vs. POSIX underscores).

Python 3.13+.
"""

from __future__ import annotations

from i18nbuild.constants import PRIVATE_USE_SUBTAG_PATTERN

__all__ = [
    "locale_data_name",
    "primary_subtag",
    "scrub_private_use",
]


def scrub_private_use(locale: str) -> str:
    """Remove trailing private-use subtags from a locale tag.

    Args:
        locale: BCP-47 locale tag (e.g., "en-US-x-foo")

    Returns:
        Tag without the private-use suffix

    Example:
        >>> scrub_private_use("en-US-x-foo")
        'en-US'
        >>> scrub_private_use("de-x-a-b")
        'de'
        >>> scrub_private_use("fr-CA")
        'fr-CA'
    """
    return PRIVATE_USE_SUBTAG_PATTERN.sub("", locale)


def primary_subtag(locale: str) -> str:
    """Return the lower-cased language subtag (text before the first hyphen).

    Example:
        >>> primary_subtag("FR-ca")
        'fr'
    """
    return locale.split("-", 1)[0].lower()


def locale_data_name(locale: str, separator: str = "-") -> str:
    """Convert a BCP-47 tag to the base name used by a locale data package.

    Locale data packages differ only in the subtag separator: JavaScript
    runtimes publish "en-US.js" while Babel publishes "en_US.dat". Case is
    preserved because data file names use canonical casing.

    Args:
        locale: BCP-47 locale tag
        separator: Subtag separator used by the package's file names

    Returns:
        File base name without extension

    Example:
        >>> locale_data_name("zh-Hant-TW", "_")
        'zh_Hant_TW'
    """
    if separator == "-":
        return locale
    return locale.replace("-", separator)
