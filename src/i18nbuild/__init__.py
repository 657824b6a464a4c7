"""i18nbuild - i18n option resolution for localized application builds.

Turns a project's declarative i18n metadata and the build options of one
invocation into a validated, fully resolved localization configuration:
which locales are built, where their locale data lives, and the merged
translations of each locale.

Public API:
    configure_i18n_build - Resolve the i18n configuration of a build
    create_i18n_options - Normalize project i18n metadata
    BuildOptions - Build options relevant to i18n
    BuilderContext - Target, workspace root, metadata provider, and logger
    LocaleRegistry - Resolved locale configuration

Exceptions:
    I18nError - Base exception class
    I18nSchemaError - Malformed project i18n metadata
    I18nConflictError - Self-contradicting configuration
    I18nCapabilityError - Request unsupported by the compilation mode
    I18nResourceError - Missing locale data, configuration, or translations
    I18nConfigurationError - Invalid builder invocation

Submodules:
    i18nbuild.localization - Registry, locale data, loading, and configurator
    i18nbuild.diagnostics - Error codes, templates, and formatting
    i18nbuild.compiler - Compiler configuration reader
"""

from .diagnostics import (
    I18nCapabilityError,
    I18nConfigurationError,
    I18nConflictError,
    I18nError,
    I18nResourceError,
    I18nSchemaError,
)
from .localization import (
    BuilderContext,
    BuildOptions,
    BuildTarget,
    I18nBuildResult,
    LocaleRegistry,
    configure_i18n_build,
    create_i18n_options,
)

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("i18nbuild")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "BuildOptions",
    "BuildTarget",
    "BuilderContext",
    "I18nBuildResult",
    "I18nCapabilityError",
    "I18nConfigurationError",
    "I18nConflictError",
    "I18nError",
    "I18nResourceError",
    "I18nSchemaError",
    "LocaleRegistry",
    "__version__",
    "configure_i18n_build",
    "create_i18n_options",
]
