"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from collections.abc import Iterable

from i18nbuild.enums import Severity

from .codes import Diagnostic, DiagnosticCode


class ErrorTemplate:
    """Centralized error message templates.

    All configuration and loader error messages are created here. Each
    method returns a Diagnostic; the caller picks the exception class.
    """

    # ------------------------------------------------------------------
    # Schema errors
    # ------------------------------------------------------------------

    @staticmethod
    def i18n_malformed() -> Diagnostic:
        """Project metadata 'i18n' field is not an object."""
        return Diagnostic(
            code=DiagnosticCode.I18N_MALFORMED,
            message="Project i18n field is malformed. Expected an object.",
        )

    @staticmethod
    def source_locale_malformed() -> Diagnostic:
        """'sourceLocale' is neither a string nor an object with a string code."""
        return Diagnostic(
            code=DiagnosticCode.SOURCE_LOCALE_MALFORMED,
            message="Project i18n sourceLocale field is malformed. Expected a string.",
            hint="Use a locale tag such as 'en-US' or an object like {'code': 'en-US'}",
        )

    @staticmethod
    def source_locale_base_href_malformed() -> Diagnostic:
        """'sourceLocale.baseHref' is present but not a string."""
        return Diagnostic(
            code=DiagnosticCode.SOURCE_LOCALE_BASE_HREF_MALFORMED,
            message="Project i18n sourceLocale baseHref field is malformed. Expected a string.",
        )

    @staticmethod
    def locales_malformed() -> Diagnostic:
        """'locales' is present but not an object."""
        return Diagnostic(
            code=DiagnosticCode.LOCALES_MALFORMED,
            message="Project i18n locales field is malformed. Expected an object.",
        )

    @staticmethod
    def translation_field_malformed(locale: str, *, expect_object: bool) -> Diagnostic:
        """A locale's translation value has an unsupported shape.

        Args:
            locale: Locale tag whose translation value is malformed
            expect_object: True when the raw locale value itself was checked
                (an object was acceptable there); False for the 'translation'
                field inside a locale object
        """
        expected = (
            "Expected a string, array of strings, or object."
            if expect_object
            else "Expected a string or array of strings."
        )
        return Diagnostic(
            code=DiagnosticCode.TRANSLATION_FIELD_MALFORMED,
            message=(
                f"Project i18n locales translation field value for '{locale}' "
                f"is malformed. {expected}"
            ),
            locale=locale,
        )

    # ------------------------------------------------------------------
    # Semantic conflicts
    # ------------------------------------------------------------------

    @staticmethod
    def source_locale_has_translation(locale: str) -> Diagnostic:
        """The source locale is also declared under 'locales'."""
        return Diagnostic(
            code=DiagnosticCode.SOURCE_LOCALE_HAS_TRANSLATION,
            message=(
                f"An i18n locale ('{locale}') cannot both be a source locale "
                "and provide a translation."
            ),
            hint="Remove the locale from 'locales' or choose a different 'sourceLocale'",
            locale=locale,
        )

    @staticmethod
    def inline_locale_undefined(locale: str) -> Diagnostic:
        """A locale requested through 'localize' is not configured."""
        return Diagnostic(
            code=DiagnosticCode.INLINE_LOCALE_UNDEFINED,
            message=f"Requested locale '{locale}' is not defined for the project.",
            hint="Add the locale to the project's i18n 'locales' or 'sourceLocale'",
            locale=locale,
        )

    @staticmethod
    def file_without_locale() -> Diagnostic:
        """Deprecated 'i18nFile' given without 'i18nLocale'."""
        return Diagnostic(
            code=DiagnosticCode.FILE_WITHOUT_LOCALE,
            message="Option 'i18nFile' cannot be used without the 'i18nLocale' option.",
        )

    # ------------------------------------------------------------------
    # Capability conflicts
    # ------------------------------------------------------------------

    @staticmethod
    def multiple_locales_unsupported() -> Diagnostic:
        """More than one locale requested under the legacy compilation mode."""
        return Diagnostic(
            code=DiagnosticCode.MULTIPLE_LOCALES_UNSUPPORTED,
            message=(
                "Localization with multiple locales in one build is not supported "
                "with the legacy compilation mode."
            ),
            hint="Request a single locale or enable the modern compilation mode",
        )

    @staticmethod
    def multiple_files_unsupported(locale: str) -> Diagnostic:
        """More than one translation file for the legacy-mode locale."""
        return Diagnostic(
            code=DiagnosticCode.MULTIPLE_FILES_UNSUPPORTED,
            message=(
                "Localization with the legacy compilation mode only supports "
                "using a single translation file per locale."
            ),
            locale=locale,
        )

    @staticmethod
    def mixed_formats_unsupported(formats: Iterable[str]) -> Diagnostic:
        """Translation files of different formats under legacy message ids."""
        return Diagnostic(
            code=DiagnosticCode.MIXED_FORMATS_UNSUPPORTED,
            message=(
                "Localization currently only supports using one type of translation "
                "file format for the entire application."
            ),
            hint=f"Formats in use: {', '.join(formats)}",
        )

    # ------------------------------------------------------------------
    # Resource errors
    # ------------------------------------------------------------------

    @staticmethod
    def locale_data_unavailable(package: str) -> Diagnostic:
        """Locale data base directory cannot be located."""
        return Diagnostic(
            code=DiagnosticCode.LOCALE_DATA_UNAVAILABLE,
            message=(
                f"Unable to find locale data within '{package}'. "
                f"Please ensure '{package}' is installed."
            ),
            hint=f"Install '{package}' in the project environment",
        )

    @staticmethod
    def translation_load_failed(file_path: str, message: str) -> Diagnostic:
        """The translation loader reported an error for a file."""
        return Diagnostic(
            code=DiagnosticCode.TRANSLATION_LOAD_FAILED,
            message=f"Error parsing translation file '{file_path}': {message}",
            file_path=file_path,
        )

    @staticmethod
    def compiler_config_unreadable(file_path: str, reason: str) -> Diagnostic:
        """The compiler configuration file cannot be read or parsed."""
        return Diagnostic(
            code=DiagnosticCode.COMPILER_CONFIG_UNREADABLE,
            message=f"Unable to read compiler configuration '{file_path}': {reason}",
            file_path=file_path,
        )

    # ------------------------------------------------------------------
    # Builder configuration
    # ------------------------------------------------------------------

    @staticmethod
    def target_missing() -> Diagnostic:
        """The builder context carries no target."""
        return Diagnostic(
            code=DiagnosticCode.TARGET_MISSING,
            message="The builder requires a target.",
        )

    # ------------------------------------------------------------------
    # Translation loader
    # ------------------------------------------------------------------

    @staticmethod
    def translation_file_unreadable(file_path: str, reason: str) -> Diagnostic:
        """The translation file cannot be read from disk."""
        return Diagnostic(
            code=DiagnosticCode.TRANSLATION_FILE_UNREADABLE,
            message=f"Unable to read translation file: {reason}",
            file_path=file_path,
        )

    @staticmethod
    def translation_format_unsupported(file_path: str, tried: Iterable[str]) -> Diagnostic:
        """No parser accepted the translation file."""
        return Diagnostic(
            code=DiagnosticCode.TRANSLATION_FORMAT_UNSUPPORTED,
            message=(
                f"Unsupported translation file format in {file_path}. "
                f"The following formats were tried: {', '.join(tried)}"
            ),
            file_path=file_path,
        )

    @staticmethod
    def translation_content_invalid(file_path: str, reason: str) -> Diagnostic:
        """The file matched a format but its content is malformed."""
        return Diagnostic(
            code=DiagnosticCode.TRANSLATION_CONTENT_INVALID,
            message=f"Invalid translation content: {reason}",
            file_path=file_path,
        )

    @staticmethod
    def translation_unit_id_missing(file_path: str, element: str) -> Diagnostic:
        """A translation unit has no id attribute."""
        return Diagnostic(
            code=DiagnosticCode.TRANSLATION_UNIT_ID_MISSING,
            message=f"Missing required \"id\" attribute on <{element}> element.",
            file_path=file_path,
        )

    @staticmethod
    def translation_target_missing(file_path: str, message_id: str) -> Diagnostic:
        """A translation unit has no target text; it is skipped."""
        return Diagnostic(
            code=DiagnosticCode.TRANSLATION_TARGET_MISSING,
            message=f"Missing target for translation unit '{message_id}'.",
            file_path=file_path,
            severity=Severity.WARNING,
        )

    @staticmethod
    def translation_unit_duplicate(file_path: str, message_id: str) -> Diagnostic:
        """A message id appears more than once in one file."""
        return Diagnostic(
            code=DiagnosticCode.TRANSLATION_UNIT_DUPLICATE,
            message=f"Duplicate translation unit '{message_id}'; the last one is used.",
            file_path=file_path,
            severity=Severity.WARNING,
        )

    @staticmethod
    def translation_element_unknown(file_path: str, element: str) -> Diagnostic:
        """An unrecognized inline element inside translated text is dropped."""
        return Diagnostic(
            code=DiagnosticCode.TRANSLATION_ELEMENT_UNKNOWN,
            message=f"Unknown inline element <{element}> ignored.",
            file_path=file_path,
            severity=Severity.WARNING,
        )
