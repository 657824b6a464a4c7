"""Locale data discovery.

Locale data (date, number, and plural formatting rules) ships inside a
runtime package as one file per locale. This module finds that package's
data directory for a project and resolves the file for a locale tag.

Lookup for a tag:
    1. Strip private-use subtags ("en-US-x-foo" -> "en-US")
    2. Look for <tag><extension> in the data directory
    3. For the default source locale only, retry with its published alias
    4. resolve_locale_data_path() then retries with the primary subtag

Python 3.13+.
"""

from __future__ import annotations

import logging
import sys
from dataclasses import dataclass
from importlib.machinery import PathFinder
from pathlib import Path
from typing import TYPE_CHECKING

from i18nbuild.constants import (
    DEFAULT_LOCALE_DATA_EXTENSION,
    DEFAULT_LOCALE_DATA_PACKAGE,
    DEFAULT_LOCALE_DATA_SEPARATOR,
    DEFAULT_LOCALE_DATA_SUBDIRECTORY,
    DEFAULT_SOURCE_LOCALE,
    SOURCE_LOCALE_DATA_ALIAS,
)
from i18nbuild.locale_utils import locale_data_name, primary_subtag, scrub_private_use

if TYPE_CHECKING:
    from i18nbuild.localization.types import LocaleTag

__all__ = [
    "DEFAULT_LOCALE_DATA_SOURCE",
    "LocaleDataResolution",
    "LocaleDataSource",
    "find_locale_data_base_path",
    "find_locale_data_path",
    "resolve_locale_data_path",
]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class LocaleDataSource:
    """Where locale data files live and how they are named.

    The default describes Babel: babel/locale-data/en_US.dat.

    Attributes:
        package: Importable package that ships the locale data
        subdirectory: Data directory relative to the package directory
        extension: File extension including the dot
        separator: Subtag separator used in file names

    Example:
        >>> source = LocaleDataSource("mycldr", "data/locales", ".json", "-")
        >>> source.file_name("fr-CA")
        'fr-CA.json'
    """

    package: str = DEFAULT_LOCALE_DATA_PACKAGE
    subdirectory: str = DEFAULT_LOCALE_DATA_SUBDIRECTORY
    extension: str = DEFAULT_LOCALE_DATA_EXTENSION
    separator: str = DEFAULT_LOCALE_DATA_SEPARATOR

    def file_name(self, locale: LocaleTag) -> str:
        """Return the data file name for a (scrubbed) locale tag."""
        return locale_data_name(locale, self.separator) + self.extension


DEFAULT_LOCALE_DATA_SOURCE = LocaleDataSource()


@dataclass(frozen=True, slots=True)
class LocaleDataResolution:
    """Outcome of resolve_locale_data_path().

    Attributes:
        path: Resolved data file, or None if none exists
        fallback_locale: Primary subtag used when the full tag had no data
    """

    path: str | None
    fallback_locale: LocaleTag | None = None

    @property
    def used_fallback(self) -> bool:
        """Check if the data was found only through the primary subtag."""
        return self.path is not None and self.fallback_locale is not None


def find_locale_data_base_path(
    project_root: str | Path,
    source: LocaleDataSource = DEFAULT_LOCALE_DATA_SOURCE,
) -> Path | None:
    """Find the locale data directory of the data package.

    The package is resolved from the project root first, then from the
    interpreter's import path.

    Args:
        project_root: Root directory of the project being built
        source: Locale data package description

    Returns:
        Existing data directory, or None if the package or its data
        directory cannot be found
    """
    search_path = [str(project_root), *sys.path]
    spec = PathFinder.find_spec(source.package, search_path)
    if spec is None or not spec.submodule_search_locations:
        logger.debug("Locale data package '%s' not found from %s", source.package, project_root)
        return None

    package_dir = Path(next(iter(spec.submodule_search_locations)))
    data_dir = package_dir / source.subdirectory
    if not data_dir.is_dir():
        logger.debug("Locale data directory missing: %s", data_dir)
        return None
    return data_dir


def find_locale_data_path(
    locale: LocaleTag,
    base_path: str | Path,
    source: LocaleDataSource = DEFAULT_LOCALE_DATA_SOURCE,
) -> str | None:
    """Find the data file for one locale tag.

    Private-use subtags are removed first. The default source locale falls
    back to its published alias; no other tag has an alias.

    Args:
        locale: Locale tag as configured
        base_path: Directory from find_locale_data_base_path()
        source: Locale data package description

    Returns:
        Path of the data file, or None

    Example:
        >>> find_locale_data_path("en-US-x-internal", "/site-packages/babel/locale-data")  # doctest: +SKIP
        '/site-packages/babel/locale-data/en_US.dat'
    """
    scrubbed = scrub_private_use(locale)
    data_path = Path(base_path) / source.file_name(scrubbed)
    if data_path.exists():
        return str(data_path)

    if scrubbed == DEFAULT_SOURCE_LOCALE:
        return find_locale_data_path(SOURCE_LOCALE_DATA_ALIAS, base_path, source)
    return None


def resolve_locale_data_path(
    locale: LocaleTag,
    base_path: str | Path,
    source: LocaleDataSource = DEFAULT_LOCALE_DATA_SOURCE,
) -> LocaleDataResolution:
    """Find the data file for a locale, falling back to its primary subtag.

    Args:
        locale: Locale tag as configured (e.g., 'fr-XX')
        base_path: Directory from find_locale_data_base_path()
        source: Locale data package description

    Returns:
        LocaleDataResolution; fallback_locale is set when the primary
        subtag was tried
    """
    data_path = find_locale_data_path(locale, base_path, source)
    if data_path is not None:
        return LocaleDataResolution(data_path)

    primary = primary_subtag(locale)
    if not primary:
        return LocaleDataResolution(None)

    return LocaleDataResolution(
        find_locale_data_path(primary, base_path, source),
        fallback_locale=primary,
    )
