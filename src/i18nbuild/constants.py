"""Shared constants for i18nbuild.

This module provides centralized configuration constants used across the
option normalizer, the locale data locator, and the build configurator.
Placing constants here avoids circular imports and provides a single source
of truth.

Constants are grouped by domain:
- Locales: Default source locale and its locale data alias
- Locale data: Where locale metadata files are discovered
- Build options: Deprecated single-locale option names
- Output: Temporary output directory naming

Python 3.13+. Zero external dependencies.
"""

import re

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Locales
    "DEFAULT_SOURCE_LOCALE",
    "SOURCE_LOCALE_DATA_ALIAS",
    "PRIVATE_USE_SUBTAG_PATTERN",
    # Locale data
    "DEFAULT_LOCALE_DATA_PACKAGE",
    "DEFAULT_LOCALE_DATA_SUBDIRECTORY",
    "DEFAULT_LOCALE_DATA_EXTENSION",
    "DEFAULT_LOCALE_DATA_SEPARATOR",
    # Build options
    "DEPRECATED_I18N_OPTIONS",
    # Output
    "INLINE_OUTPUT_PREFIX",
]

# ============================================================================
# LOCALES
# ============================================================================

# Source locale assumed when a project declares none.
DEFAULT_SOURCE_LOCALE: str = "en-US"

# Locale data for the default source locale is published under this tag by
# locale data packages that have no plain en-US file.
SOURCE_LOCALE_DATA_ALIAS: str = "en-US-POSIX"

# Trailing private-use subtags ("-x-foo", "-x-foo-bar") carry no locale data.
PRIVATE_USE_SUBTAG_PATTERN: re.Pattern[str] = re.compile(r"-x(-[a-zA-Z0-9]{1,8})+$")

# ============================================================================
# LOCALE DATA
# ============================================================================

# Babel ships one pickled CLDR file per locale: babel/locale-data/en_US.dat
DEFAULT_LOCALE_DATA_PACKAGE: str = "babel"
DEFAULT_LOCALE_DATA_SUBDIRECTORY: str = "locale-data"
DEFAULT_LOCALE_DATA_EXTENSION: str = ".dat"
DEFAULT_LOCALE_DATA_SEPARATOR: str = "_"

# ============================================================================
# BUILD OPTIONS
# ============================================================================

# Single-locale options superseded by 'localize', in raw option spelling.
DEPRECATED_I18N_OPTIONS: tuple[str, ...] = ("i18nLocale", "i18nFormat", "i18nFile")

# ============================================================================
# OUTPUT
# ============================================================================

INLINE_OUTPUT_PREFIX: str = "i18nbuild-"
