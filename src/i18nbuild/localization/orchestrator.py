"""Build-level i18n configuration.

Resolves the complete i18n configuration of one build invocation:

    1. Normalize project i18n metadata into a LocaleRegistry
    2. Reconcile the deprecated single-locale options with 'localize'
    3. Resolve locale data for every active locale
    4. Load and merge the translation files of every active locale
    5. Apply legacy compilation mode adjustments
    6. Redirect output to a temporary directory when locales are inlined

A locale is active if it is the source locale or marked for inlining;
other locales are skipped entirely. Locales and their files are processed
in declaration order, so duplicate-message warnings are reproducible and
the last file declaring a message wins.

Every fatal problem raises an I18nError subclass immediately; no partial
result is returned. Non-fatal problems go to the context logger.

Python 3.13+.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import TYPE_CHECKING, Protocol

from i18nbuild.compiler import CompilerOptions, read_compiler_config
from i18nbuild.constants import DEPRECATED_I18N_OPTIONS
from i18nbuild.diagnostics import (
    ErrorTemplate,
    I18nCapabilityError,
    I18nConfigurationError,
    I18nResourceError,
)
from i18nbuild.enums import Severity
from i18nbuild.localization.loading import create_translation_loader
from i18nbuild.localization.locale_data import (
    DEFAULT_LOCALE_DATA_SOURCE,
    LocaleDataSource,
    find_locale_data_base_path,
    resolve_locale_data_path,
)
from i18nbuild.localization.options import (
    LocaleEntry,
    LocaleRegistry,
    TranslationFileRef,
    create_i18n_options,
    merge_deprecated_i18n_options,
)
from i18nbuild.localization.output import InlineOutputDirectory

if TYPE_CHECKING:
    from i18nbuild.enums import TranslationFormat
    from i18nbuild.localization.loading import TranslationLoader
    from i18nbuild.localization.types import LocaleTag, LocalizeOption

__all__ = [
    "BuildLogger",
    "BuildOptions",
    "BuildTarget",
    "BuilderContext",
    "I18nBuildResult",
    "configure_i18n_build",
]

logger = logging.getLogger(__name__)

# Raw option name -> BuildOptions attribute
_DEPRECATED_FIELDS: dict[str, str] = {
    "i18nLocale": "i18n_locale",
    "i18nFormat": "i18n_format",
    "i18nFile": "i18n_file",
}

_OPTION_FIELDS: dict[str, str] = {
    "outputPath": "output_path",
    "tsConfig": "ts_config",
    "localize": "localize",
    **_DEPRECATED_FIELDS,
}


class BuildLogger(Protocol):
    """Sink for user-visible build warnings. logging.Logger satisfies it."""

    def warning(self, msg: str) -> None:
        """Report a non-fatal problem."""


@dataclass(frozen=True, slots=True)
class BuildTarget:
    """Identifies the build target being configured.

    Attributes:
        project: Project name in the workspace
        target: Target name (e.g., 'build')
        configuration: Optional configuration name (e.g., 'production')
    """

    project: str
    target: str = "build"
    configuration: str | None = None


def _default_build_logger() -> BuildLogger:
    return logging.getLogger("i18nbuild.build")


@dataclass(frozen=True, slots=True)
class BuilderContext:
    """Collaborators of one build invocation.

    Attributes:
        target: Target being built (required by configure_i18n_build)
        workspace_root: Workspace root; translation file paths are relative to it
        get_project_metadata: Returns raw project metadata for a target,
            with optional 'i18n' and 'root' fields
        logger: Receives build warnings
    """

    target: BuildTarget | None
    workspace_root: str | Path
    get_project_metadata: Callable[[BuildTarget], Mapping[str, object]]
    logger: BuildLogger = field(default_factory=_default_build_logger)


@dataclass(frozen=True, slots=True)
class BuildOptions:
    """Build options relevant to i18n, plus everything else passed through.

    Attributes:
        output_path: Build output directory
        ts_config: Compiler configuration file, relative to the workspace root
        localize: Locales to inline (None: unset, True: all, or a sequence)
        i18n_locale: Deprecated single-locale option
        i18n_file: Deprecated single translation file option
        i18n_format: Deprecated translation format option; set by the
            configurator for legacy message id support
        extra: Remaining raw options, untouched
    """

    output_path: str
    ts_config: str | None = None
    localize: LocalizeOption = None
    i18n_locale: LocaleTag | None = None
    i18n_file: str | None = None
    i18n_format: str | None = None
    extra: Mapping[str, object] = field(default_factory=dict)

    @classmethod
    def from_mapping(cls, raw: Mapping[str, object]) -> BuildOptions:
        """Create options from the raw camelCase mapping.

        Example:
            >>> BuildOptions.from_mapping({"outputPath": "dist", "localize": ["fr"]}).localize
            ('fr',)
        """
        values: dict[str, object] = {}
        extra: dict[str, object] = {}
        for key, value in raw.items():
            if key in _OPTION_FIELDS:
                values[_OPTION_FIELDS[key]] = value
            else:
                extra[key] = value

        localize = values.get("localize")
        if isinstance(localize, list):
            values["localize"] = tuple(localize)

        return cls(extra=extra, **values)  # type: ignore[arg-type]

    def to_mapping(self) -> dict[str, object]:
        """Return the raw camelCase mapping; unset options are omitted."""
        raw: dict[str, object] = dict(self.extra)
        for key, attr in _OPTION_FIELDS.items():
            value = getattr(self, attr)
            if value is not None:
                raw[key] = list(value) if isinstance(value, tuple) else value
        return raw


@dataclass(frozen=True, slots=True)
class I18nBuildResult:
    """Outcome of configure_i18n_build().

    Attributes:
        build_options: Finalized build options
        i18n: Resolved locale registry
        output_directory: Temporary output directory when locales are
            inlined, else None
    """

    build_options: BuildOptions
    i18n: LocaleRegistry
    output_directory: InlineOutputDirectory | None = None


def _is_multi_locale_request(localize: LocalizeOption) -> bool:
    if localize is True:
        return True
    return not isinstance(localize, bool) and localize is not None and len(localize) > 1


def _is_empty_request(localize: LocalizeOption) -> bool:
    if localize is False:
        return True
    return not isinstance(localize, bool) and localize is not None and len(localize) == 0


def _reconcile_deprecated_options(
    context: BuilderContext,
    options: BuildOptions,
    i18n: LocaleRegistry,
    compiler: CompilerOptions,
) -> BuildOptions:
    """Apply or discard the deprecated single-locale options."""
    if options.localize is None and compiler.modern_compilation:
        merge_deprecated_i18n_options(i18n, options.i18n_locale, options.i18n_file)
    elif options.localize is not None and not compiler.modern_compilation:
        if _is_multi_locale_request(options.localize):
            raise I18nCapabilityError(ErrorTemplate.multiple_locales_unsupported())

        for name in DEPRECATED_I18N_OPTIONS:
            if getattr(options, _DEPRECATED_FIELDS[name]) is not None:
                context.logger.warning(
                    f"Option 'localize' and deprecated '{name}' found.  Using 'localize'."
                )

        if _is_empty_request(options.localize):
            options = replace(options, i18n_file=None, i18n_locale=None, i18n_format=None)

    # The modern compilation mode never reads the deprecated options
    if compiler.modern_compilation:
        options = replace(options, i18n_file=None, i18n_locale=None, i18n_format=None)
    return options


def _resolve_locale_data(
    context: BuilderContext,
    locale: LocaleTag,
    entry: LocaleEntry,
    base_path: Path,
    source: LocaleDataSource,
) -> None:
    resolution = resolve_locale_data_path(locale, base_path, source)
    if resolution.used_fallback:
        context.logger.warning(
            f"Locale data for '{locale}' cannot be found.  "
            f"Using locale data for '{resolution.fallback_locale}'."
        )

    if resolution.path is None:
        context.logger.warning(
            f"Locale data for '{locale}' cannot be found.  "
            "No locale data will be included for this locale."
        )
        return

    entry.data_path = resolution.path
    logger.debug("Locale data for '%s': %s", locale, resolution.path)


def _merge_translation_file(
    context: BuilderContext,
    loader: TranslationLoader,
    locale: LocaleTag,
    entry: LocaleEntry,
    file: TranslationFileRef,
    used_formats: list[TranslationFormat],
    compiler: CompilerOptions,
) -> None:
    """Load one translation file and merge it into the locale's translations."""
    result = loader(Path(context.workspace_root) / file.path)

    for diagnostic in result.diagnostics.messages:
        if diagnostic.severity == Severity.ERROR:
            raise I18nResourceError(
                ErrorTemplate.translation_load_failed(file.path, diagnostic.message)
            )
        context.logger.warning(f"WARNING [{file.path}]: {diagnostic.message}")

    if result.locale is not None and result.locale != locale:
        context.logger.warning(
            f"WARNING [{file.path}]: File target locale ('{result.locale}') "
            f"does not match configured locale ('{locale}')"
        )

    if result.format is not None and result.format not in used_formats:
        used_formats.append(result.format)
    # Legacy message ids are computed per format, so formats cannot be mixed
    if len(used_formats) > 1 and compiler.legacy_message_id_format:
        raise I18nCapabilityError(ErrorTemplate.mixed_formats_unsupported(used_formats))

    file.format = result.format
    file.integrity = result.integrity

    if entry.translation is None:
        entry.translation = dict(result.translations)
        return

    for message_id, message in result.translations.items():
        if message_id in entry.translation:
            context.logger.warning(
                f"WARNING [{file.path}]: Duplicate translations for message "
                f"'{message_id}' when merging"
            )
        entry.translation[message_id] = message


def _apply_legacy_locale(
    i18n: LocaleRegistry,
    options: BuildOptions,
    locale: LocaleTag,
) -> BuildOptions:
    """Map the single inlined locale onto the deprecated options.

    The legacy compilation mode localizes through i18n_locale/i18n_file
    and writes into a locale-named output subdirectory, so nothing is left
    for the inlining stage.
    """
    legacy_locale = next(iter(i18n.inline_locales), locale)
    i18n.legacy_compat_locale = legacy_locale
    options = replace(options, i18n_locale=legacy_locale)

    if legacy_locale != i18n.source_locale:
        files = i18n.locales[legacy_locale].files
        if len(files) > 1:
            raise I18nCapabilityError(ErrorTemplate.multiple_files_unsupported(legacy_locale))
        options = replace(options, i18n_file=files[0].path)

    i18n.inline_locales.clear()
    return replace(options, output_path=str(Path(options.output_path) / legacy_locale))


def configure_i18n_build(
    context: BuilderContext,
    options: BuildOptions | Mapping[str, object],
    *,
    locale_data: LocaleDataSource = DEFAULT_LOCALE_DATA_SOURCE,
    loader_factory: Callable[[], TranslationLoader] = create_translation_loader,
) -> I18nBuildResult:
    """Resolve the i18n configuration of a build.

    Args:
        context: Build target, workspace root, metadata provider, and logger
        options: Build options, or the raw camelCase option mapping
        locale_data: Where locale data files are discovered
        loader_factory: Creates the translation loader; called at most once,
            on the first active locale with translation files

    Returns:
        I18nBuildResult with new build options (the input is not modified),
        the resolved registry, and the temporary output directory if any

    Raises:
        I18nConfigurationError: If the context has no target
        I18nSchemaError: If project i18n metadata is malformed
        I18nConflictError: If the configuration contradicts itself
        I18nCapabilityError: If the request is unsupported by the active
            compilation mode, or translation formats are mixed
        I18nResourceError: If the compiler configuration or locale data
            cannot be found, or a translation file fails to load

    Example:
        >>> context = BuilderContext(
        ...     target=BuildTarget("app"),
        ...     workspace_root="/work",
        ...     get_project_metadata=lambda target: {
        ...         "root": "",
        ...         "i18n": {"locales": {"fr": "src/locale/messages.fr.xlf"}},
        ...     },
        ... )
        >>> result = configure_i18n_build(context, {"outputPath": "dist", "localize": ["fr"]})  # doctest: +SKIP
        >>> result.i18n.locales["fr"].translation  # doctest: +SKIP
    """
    if context.target is None:
        raise I18nConfigurationError(ErrorTemplate.target_missing())

    build_options = (
        options if isinstance(options, BuildOptions) else BuildOptions.from_mapping(options)
    )

    compiler = read_compiler_config(build_options.ts_config, context.workspace_root)
    metadata = context.get_project_metadata(context.target)
    i18n = create_i18n_options(metadata, build_options.localize)

    build_options = _reconcile_deprecated_options(context, build_options, i18n, compiler)

    # Nothing to localize and no source locale to provide data for
    if not i18n.should_inline and not i18n.has_defined_source_locale:
        return I18nBuildResult(build_options, i18n)

    project_root_name = metadata.get("root")
    project_root = Path(context.workspace_root) / (
        project_root_name if isinstance(project_root_name, str) else ""
    )
    locale_data_base_path = find_locale_data_base_path(project_root, locale_data)
    if locale_data_base_path is None:
        raise I18nResourceError(ErrorTemplate.locale_data_unavailable(locale_data.package))

    loader: TranslationLoader | None = None
    used_formats: list[TranslationFormat] = []

    for locale, entry in list(i18n.locales.items()):
        if not i18n.is_active(locale):
            continue

        _resolve_locale_data(context, locale, entry, locale_data_base_path, locale_data)

        if not entry.files:
            continue

        if loader is None:
            loader = loader_factory()

        for file in entry.files:
            _merge_translation_file(context, loader, locale, entry, file, used_formats, compiler)

        logger.debug(
            "Merged %d translations for '%s' from %d file(s)",
            len(entry.translation or {}),
            locale,
            len(entry.files),
        )

        # Kept for legacy message id support, which needs the format
        if used_formats:
            build_options = replace(build_options, i18n_format=str(used_formats[0]))

        if not compiler.modern_compilation:
            build_options = _apply_legacy_locale(i18n, build_options, locale)

    output_directory: InlineOutputDirectory | None = None
    if i18n.should_inline:
        # Inlined output is split per locale by a later stage
        output_directory = InlineOutputDirectory()
        build_options = replace(build_options, output_path=str(output_directory.path))

    return I18nBuildResult(build_options, i18n, output_directory)
