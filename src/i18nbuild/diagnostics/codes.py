"""Diagnostic codes and data structures.

Defines error codes and diagnostic messages for build configuration and
translation loading.
Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum, StrEnum

from i18nbuild.enums import Severity

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "ErrorCategory",
]


class ErrorCategory(StrEnum):
    """Error categorization for I18nError.

    Categories:
        SCHEMA: Project i18n metadata has the wrong shape
        CONFLICT: Values are individually valid but contradict each other
        CAPABILITY: Requested localization is unsupported by the compilation mode
        RESOURCE: A file or directory the build depends on is unusable
        CONFIGURATION: The builder itself is misconfigured
    """

    SCHEMA = "schema"
    CONFLICT = "conflict"
    CAPABILITY = "capability"
    RESOURCE = "resource"
    CONFIGURATION = "configuration"


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        1000-1099: Schema errors (malformed project i18n metadata)
        1100-1199: Semantic conflicts
        1200-1299: Capability conflicts (legacy compilation mode)
        1300-1399: Resource errors
        1400-1499: Builder configuration errors
        2000-2099: Translation loader errors
        2100-2199: Translation loader warnings
    """

    # Schema errors (1000-1099)
    I18N_MALFORMED = 1001
    SOURCE_LOCALE_MALFORMED = 1002
    SOURCE_LOCALE_BASE_HREF_MALFORMED = 1003
    LOCALES_MALFORMED = 1004
    TRANSLATION_FIELD_MALFORMED = 1005

    # Semantic conflicts (1100-1199)
    SOURCE_LOCALE_HAS_TRANSLATION = 1101
    INLINE_LOCALE_UNDEFINED = 1102
    FILE_WITHOUT_LOCALE = 1103

    # Capability conflicts (1200-1299)
    MULTIPLE_LOCALES_UNSUPPORTED = 1201
    MULTIPLE_FILES_UNSUPPORTED = 1202
    MIXED_FORMATS_UNSUPPORTED = 1203

    # Resource errors (1300-1399)
    LOCALE_DATA_UNAVAILABLE = 1301
    TRANSLATION_LOAD_FAILED = 1302
    COMPILER_CONFIG_UNREADABLE = 1303

    # Builder configuration (1400-1499)
    TARGET_MISSING = 1401

    # Translation loader errors (2000-2099)
    TRANSLATION_FILE_UNREADABLE = 2001
    TRANSLATION_FORMAT_UNSUPPORTED = 2002
    TRANSLATION_CONTENT_INVALID = 2003
    TRANSLATION_UNIT_ID_MISSING = 2004

    # Translation loader warnings (2100-2199)
    TRANSLATION_TARGET_MISSING = 2101
    TRANSLATION_UNIT_DUPLICATE = 2102
    TRANSLATION_ELEMENT_UNKNOWN = 2103


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Provides rich error information for both humans and tools (build
    logs, IDE integrations).

    Attributes:
        code: Unique error code
        message: Human-readable single-sentence description
        hint: Suggestion for fixing the problem
        file_path: Translation or configuration file involved
        locale: Locale tag involved
        severity: Error severity level
    """

    code: DiagnosticCode
    message: str
    hint: str | None = None
    file_path: str | None = None
    locale: str | None = None
    severity: Severity = Severity.ERROR

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    @property
    def is_error(self) -> bool:
        """Check if this diagnostic aborts the build."""
        return self.severity == Severity.ERROR

    def format_error(self) -> str:
        """Format diagnostic like a compiler.

        Example output:
            error[LOCALE_DATA_UNAVAILABLE]: Unable to find locale data within 'babel'.
              = help: Install 'babel' in the project environment

        Returns:
            Formatted error message
        """
        from .formatter import DiagnosticFormatter  # noqa: PLC0415 - circular

        return DiagnosticFormatter().format(self)
