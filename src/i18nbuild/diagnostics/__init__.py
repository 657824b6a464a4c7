"""Diagnostic system for i18n build configuration.

Provides structured error diagnostics with codes, hints, and file/locale
context, plus the exception hierarchy that carries them.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode, ErrorCategory
from .errors import (
    I18nCapabilityError,
    I18nConfigurationError,
    I18nConflictError,
    I18nError,
    I18nResourceError,
    I18nSchemaError,
)
from .formatter import DiagnosticFormatter, OutputFormat
from .templates import ErrorTemplate

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "DiagnosticFormatter",
    "ErrorCategory",
    "ErrorTemplate",
    "I18nCapabilityError",
    "I18nConfigurationError",
    "I18nConflictError",
    "I18nError",
    "I18nResourceError",
    "I18nSchemaError",
    "OutputFormat",
]
