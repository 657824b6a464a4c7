"""i18nbuild exception hierarchy with structured diagnostics.

Every fatal configuration problem raises a subclass of I18nError carrying
the Diagnostic that describes it. The subclass is the error kind; the
diagnostic code pins down the exact case.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode, ErrorCategory

__all__ = [
    "I18nCapabilityError",
    "I18nConfigurationError",
    "I18nConflictError",
    "I18nError",
    "I18nResourceError",
    "I18nSchemaError",
]


class I18nError(Exception):
    """Base exception for all i18n build configuration errors.

    str(error) is the single-sentence diagnostic message. Use
    error.diagnostic.format_error() for the multi-line form.

    Attributes:
        diagnostic: Structured diagnostic information
    """

    category: ErrorCategory

    def __init__(self, diagnostic: Diagnostic) -> None:
        """Initialize I18nError.

        Args:
            diagnostic: Diagnostic describing the failure
        """
        super().__init__(diagnostic.message)
        self.diagnostic = diagnostic

    @property
    def code(self) -> DiagnosticCode:
        """Diagnostic code of this error."""
        return self.diagnostic.code


class I18nSchemaError(I18nError):
    """Project i18n metadata has the wrong shape.

    Examples:
    - 'i18n' is a string instead of an object
    - 'locales' maps a tag to a number
    """

    category = ErrorCategory.SCHEMA


class I18nConflictError(I18nError):
    """Configuration values contradict each other.

    Examples:
    - The source locale also declares translation files
    - 'localize' names a locale the project does not define
    - 'i18nFile' given without 'i18nLocale'
    """

    category = ErrorCategory.CONFLICT


class I18nCapabilityError(I18nError):
    """Requested localization is not supported by the active compilation mode."""

    category = ErrorCategory.CAPABILITY


class I18nResourceError(I18nError):
    """A file or directory the build depends on is missing or unusable."""

    category = ErrorCategory.RESOURCE


class I18nConfigurationError(I18nError):
    """The builder invocation itself is misconfigured."""

    category = ErrorCategory.CONFIGURATION
