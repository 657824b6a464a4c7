"""Locale registry model and project i18n option normalization.

Turns the loosely typed 'i18n' section of project metadata into a
LocaleRegistry, and folds the deprecated single-locale build options
('i18nLocale', 'i18nFile') into an existing registry.

Accepted metadata shapes:

    {"i18n": {
        "sourceLocale": "en-US" | {"code": "en-US", "baseHref": "/en/"},
        "locales": {
            "fr": "src/locale/messages.fr.xlf",
            "de": ["src/locale/a.de.xlf", "src/locale/b.de.xlf"],
            "es": {"translation": "src/locale/messages.es.json", "baseHref": "/es/"},
        },
    }}

Each pass takes the registry and returns it: create_i18n_options() builds
it, merge_deprecated_i18n_options() narrows it, and the build configurator
enriches it in place.

Python 3.13+.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from i18nbuild.constants import DEFAULT_SOURCE_LOCALE
from i18nbuild.diagnostics import (
    ErrorTemplate,
    I18nConflictError,
    I18nError,
    I18nSchemaError,
)

if TYPE_CHECKING:
    from i18nbuild.enums import TranslationFormat
    from i18nbuild.localization.types import LocaleTag, LocalizeOption, TranslationMap

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Model
    "LocaleEntry",
    "LocaleRegistry",
    "TranslationFileRef",
    # Normalizer
    "create_i18n_options",
    "parse_i18n_options",
    # Deprecated option reconciler
    "merge_deprecated_i18n_options",
]


@dataclass(slots=True)
class TranslationFileRef:
    """One translation file configured for a locale.

    Attributes:
        path: Workspace-relative path as written in project metadata
        format: Format detected by the translation loader (None until loaded)
        integrity: Content integrity token from the loader (None until loaded)
    """

    path: str
    format: TranslationFormat | None = None
    integrity: str | None = None


@dataclass(slots=True)
class LocaleEntry:
    """Configuration and resolved resources for one locale.

    Attributes:
        files: Translation files in declaration order (empty for the source locale)
        base_href: Base href override used when building this locale
        data_path: Resolved locale data file (None if not resolved or not found)
        translation: Merged translations of all files (None until loaded)
    """

    files: list[TranslationFileRef] = field(default_factory=list)
    base_href: str | None = None
    data_path: str | None = None
    translation: TranslationMap | None = None


@dataclass(slots=True)
class LocaleRegistry:
    """Canonical i18n configuration of one build invocation.

    Invariants:
        - locales always contains an entry for source_locale
        - inline_locales is a subset of locales' keys

    Attributes:
        source_locale: Locale the application source text is written in
        has_defined_source_locale: True only if the project declared it
        locales: Locale entries keyed by tag, source locale first
        inline_locales: Locales built as separate localized outputs
        flat_output: Output is not nested under a locale directory
            (set by the deprecated option reconciler)
        legacy_compat_locale: Single locale selected for the legacy
            compilation mode (None in the modern mode)
    """

    source_locale: LocaleTag = DEFAULT_SOURCE_LOCALE
    has_defined_source_locale: bool = False
    locales: dict[LocaleTag, LocaleEntry] = field(default_factory=dict)
    inline_locales: set[LocaleTag] = field(default_factory=set)
    flat_output: bool = False
    legacy_compat_locale: LocaleTag | None = None

    @property
    def should_inline(self) -> bool:
        """Check if any locale must be produced as a localized output."""
        return len(self.inline_locales) > 0

    def is_active(self, locale: LocaleTag) -> bool:
        """Check if a locale takes part in this build (source or inlined)."""
        return locale == self.source_locale or locale in self.inline_locales


def _normalize_translation_file_option(
    option: object,
    locale: LocaleTag,
    *,
    expect_object: bool,
) -> list[str]:
    """Normalize a translation spec to an ordered list of file paths.

    Args:
        option: Raw translation value (string or sequence of strings)
        locale: Locale tag, for the error message
        expect_object: Whether an object would also have been acceptable

    Raises:
        I18nSchemaError: If option is not a string or sequence of strings
    """
    if isinstance(option, str):
        return [option]
    if isinstance(option, (list, tuple)) and all(isinstance(item, str) for item in option):
        return list(option)
    raise I18nSchemaError(
        ErrorTemplate.translation_field_malformed(locale, expect_object=expect_object)
    )


def _read_source_locale(i18n: Mapping[str, object]) -> tuple[str | None, str | None]:
    """Extract (code, baseHref) from the 'sourceLocale' field."""
    raw = i18n.get("sourceLocale")
    if raw is None:
        return None, None
    if isinstance(raw, str):
        return raw, None
    if not isinstance(raw, Mapping):
        raise I18nSchemaError(ErrorTemplate.source_locale_malformed())

    code = raw.get("code")
    if not isinstance(code, str):
        raise I18nSchemaError(ErrorTemplate.source_locale_malformed())

    base_href = raw.get("baseHref")
    if base_href is not None and not isinstance(base_href, str):
        raise I18nSchemaError(ErrorTemplate.source_locale_base_href_malformed())
    return code, base_href


def create_i18n_options(
    metadata: Mapping[str, object],
    inline: LocalizeOption = None,
) -> LocaleRegistry:
    """Build the locale registry from raw project metadata.

    Args:
        metadata: Project metadata; only its optional 'i18n' field is read
        inline: The 'localize' option: None/False (nothing), True (every
            known locale), or a sequence of locale tags

    Returns:
        Fully populated LocaleRegistry

    Raises:
        I18nSchemaError: If any i18n field has an unsupported shape
        I18nConflictError: If the source locale also provides translations,
            or an inline locale is not defined for the project

    Example:
        >>> registry = create_i18n_options(
        ...     {"i18n": {"sourceLocale": "en-GB", "locales": {"fr": "messages.fr.xlf"}}},
        ...     inline=True,
        ... )
        >>> sorted(registry.inline_locales)
        ['en-GB', 'fr']
    """
    raw_i18n = metadata.get("i18n")
    if raw_i18n is not None and not isinstance(raw_i18n, Mapping):
        raise I18nSchemaError(ErrorTemplate.i18n_malformed())
    i18n_metadata: Mapping[str, object] = raw_i18n or {}

    registry = LocaleRegistry()

    source_locale, source_base_href = _read_source_locale(i18n_metadata)
    if source_locale is not None:
        registry.source_locale = source_locale
        registry.has_defined_source_locale = True

    registry.locales[registry.source_locale] = LocaleEntry(base_href=source_base_href)

    raw_locales = i18n_metadata.get("locales")
    if raw_locales is not None and not isinstance(raw_locales, Mapping):
        raise I18nSchemaError(ErrorTemplate.locales_malformed())

    for locale, value in (raw_locales or {}).items():
        base_href: str | None = None
        if isinstance(value, Mapping):
            files = _normalize_translation_file_option(
                value.get("translation"), locale, expect_object=False
            )
            # Non-string baseHref values inside a locale object are ignored
            if isinstance(value.get("baseHref"), str):
                base_href = value["baseHref"]
        else:
            files = _normalize_translation_file_option(value, locale, expect_object=True)

        if locale == registry.source_locale:
            raise I18nConflictError(ErrorTemplate.source_locale_has_translation(locale))

        registry.locales[locale] = LocaleEntry(
            files=[TranslationFileRef(path=path) for path in files],
            base_href=base_href,
        )

    if inline is True:
        registry.inline_locales.update(registry.locales)
    elif inline:
        for locale in inline:
            if locale not in registry.locales:
                raise I18nConflictError(ErrorTemplate.inline_locale_undefined(locale))
            registry.inline_locales.add(locale)

    return registry


def parse_i18n_options(
    metadata: Mapping[str, object],
    inline: LocalizeOption = None,
) -> tuple[LocaleRegistry | None, tuple[I18nError, ...]]:
    """Validate project i18n metadata without raising.

    Same rules as create_i18n_options(); failures are returned instead.

    Returns:
        Tuple of (registry, errors): (registry, ()) on success,
        (None, (error,)) on the first validation failure

    Example:
        >>> registry, errors = parse_i18n_options({"i18n": "en-US"})
        >>> registry is None, errors[0].code.name
        (True, 'I18N_MALFORMED')
    """
    try:
        return create_i18n_options(metadata, inline), ()
    except I18nError as e:
        return None, (e,)


def merge_deprecated_i18n_options(
    registry: LocaleRegistry,
    i18n_locale: LocaleTag | None,
    i18n_file: str | None,
) -> LocaleRegistry:
    """Fold the deprecated single-locale options into a registry.

    With a locale and a file, that locale is (re)defined with the single
    file. With a locale and no file, the locale becomes the source locale.
    Either way it becomes the only inlined locale and output is flat.

    Args:
        registry: Registry produced by create_i18n_options()
        i18n_locale: Deprecated 'i18nLocale' option
        i18n_file: Deprecated 'i18nFile' option

    Returns:
        The same registry, updated in place

    Raises:
        I18nConflictError: If i18n_file is given without i18n_locale
    """
    if i18n_file is not None and i18n_locale is None:
        raise I18nConflictError(ErrorTemplate.file_without_locale())

    if i18n_locale is not None:
        registry.inline_locales.clear()
        registry.inline_locales.add(i18n_locale)

        if i18n_file is not None:
            registry.locales[i18n_locale] = LocaleEntry(
                files=[TranslationFileRef(path=i18n_file)],
                base_href="",
            )
        else:
            # Without a file the locale is treated as the source locale
            registry.source_locale = i18n_locale
            registry.locales[i18n_locale] = LocaleEntry(base_href="")

        registry.flat_output = True

    return registry
