"""Build-time localization configuration.

Provides the full configuration stack: type aliases, the locale registry
and its normalizer, locale data discovery, translation loading, and the
build configurator that ties them together.

Submodules:
    types        - PEP 695 type aliases (LocaleTag, MessageId, TranslationMap)
    options      - LocaleRegistry, create_i18n_options, merge_deprecated_i18n_options
    locale_data  - LocaleDataSource, find_locale_data_base_path, find_locale_data_path
    parsers      - Translation file format parsers (XLIFF 1.2/2.0, XTB, JSON, ARB)
    loading      - TranslationLoader protocol, FileTranslationLoader, LoadResult
    output       - InlineOutputDirectory (temporary inlined output)
    orchestrator - configure_i18n_build (build-level configuration)

Python 3.13+.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability

from i18nbuild.localization.loading import (
    FileTranslationLoader,
    LoadDiagnostics,
    LoadResult,
    TranslationLoader,
    create_translation_loader,
)
from i18nbuild.localization.locale_data import (
    DEFAULT_LOCALE_DATA_SOURCE,
    LocaleDataResolution,
    LocaleDataSource,
    find_locale_data_base_path,
    find_locale_data_path,
    resolve_locale_data_path,
)
from i18nbuild.localization.options import (
    LocaleEntry,
    LocaleRegistry,
    TranslationFileRef,
    create_i18n_options,
    merge_deprecated_i18n_options,
    parse_i18n_options,
)
from i18nbuild.localization.orchestrator import (
    BuilderContext,
    BuildLogger,
    BuildOptions,
    BuildTarget,
    I18nBuildResult,
    configure_i18n_build,
)
from i18nbuild.localization.output import InlineOutputDirectory
from i18nbuild.localization.parsers import ParsedTranslation
from i18nbuild.localization.types import LocaleTag, LocalizeOption, MessageId, TranslationMap

__all__ = [
    # Build configurator
    "configure_i18n_build",
    "BuilderContext",
    "BuildLogger",
    "BuildOptions",
    "BuildTarget",
    "I18nBuildResult",
    # Locale registry
    "LocaleEntry",
    "LocaleRegistry",
    "TranslationFileRef",
    "create_i18n_options",
    "parse_i18n_options",
    "merge_deprecated_i18n_options",
    # Locale data
    "DEFAULT_LOCALE_DATA_SOURCE",
    "LocaleDataResolution",
    "LocaleDataSource",
    "find_locale_data_base_path",
    "find_locale_data_path",
    "resolve_locale_data_path",
    # Translation loading
    "TranslationLoader",
    "FileTranslationLoader",
    "LoadDiagnostics",
    "LoadResult",
    "ParsedTranslation",
    "create_translation_loader",
    # Output
    "InlineOutputDirectory",
    # Type aliases for user code type annotations
    "LocaleTag",
    "LocalizeOption",
    "MessageId",
    "TranslationMap",
]
