"""Diagnostic formatting service.

Centralizes diagnostic output formatting with configurable options.
Python 3.13+. Zero external dependencies.
"""

import json
from collections.abc import Iterable
from dataclasses import dataclass
from enum import StrEnum

from i18nbuild.enums import Severity

from .codes import Diagnostic

__all__ = [
    "DiagnosticFormatter",
    "OutputFormat",
]


class OutputFormat(StrEnum):
    """Output format options for diagnostic formatting."""

    RUST = "rust"  # Compiler-style multi-line output (default)
    SIMPLE = "simple"  # Single-line format
    JSON = "json"  # JSON format for tooling integration


@dataclass(frozen=True, slots=True)
class DiagnosticFormatter:
    """Diagnostic formatting service.

    Attributes:
        output_format: Output style (rust, simple, json)
        color: Enable ANSI color codes (for terminal output)

    Example:
        >>> from i18nbuild.diagnostics import ErrorTemplate
        >>> diagnostic = ErrorTemplate.file_without_locale()
        >>> formatter = DiagnosticFormatter(output_format=OutputFormat.SIMPLE)
        >>> print(formatter.format(diagnostic))
        FILE_WITHOUT_LOCALE: Option 'i18nFile' cannot be used without the 'i18nLocale' option.
    """

    output_format: OutputFormat = OutputFormat.RUST
    color: bool = False

    def format(self, diagnostic: Diagnostic) -> str:
        """Format a single diagnostic."""
        match self.output_format:
            case OutputFormat.RUST:
                return self._format_rust(diagnostic)
            case OutputFormat.SIMPLE:
                return self._format_simple(diagnostic)
            case OutputFormat.JSON:
                return self._format_json(diagnostic)

    def format_all(self, diagnostics: Iterable[Diagnostic]) -> str:
        """Format multiple diagnostics separated by blank lines."""
        return "\n\n".join(self.format(d) for d in diagnostics)

    def _format_rust(self, diagnostic: Diagnostic) -> str:
        """Format diagnostic in compiler style.

        Example output:
            warning[TRANSLATION_TARGET_MISSING]: Missing target for unit 'abc'
              --> src/locale/messages.fr.xlf
              = locale: fr
        """
        severity = str(diagnostic.severity)

        if self.color:
            if diagnostic.severity == Severity.ERROR:
                severity = f"\033[1;31m{severity}\033[0m"  # Bold red
            else:
                severity = f"\033[1;33m{severity}\033[0m"  # Bold yellow

        parts = [f"{severity}[{diagnostic.code.name}]: {diagnostic.message}"]

        if diagnostic.file_path:
            parts.append(f"  --> {diagnostic.file_path}")

        if diagnostic.locale:
            parts.append(f"  = locale: {diagnostic.locale}")

        if diagnostic.hint:
            parts.append(f"  = help: {diagnostic.hint}")

        return "\n".join(parts)

    def _format_simple(self, diagnostic: Diagnostic) -> str:
        return f"{diagnostic.code.name}: {diagnostic.message}"

    def _format_json(self, diagnostic: Diagnostic) -> str:
        data: dict[str, str | int] = {
            "code": diagnostic.code.name,
            "code_value": diagnostic.code.value,
            "message": diagnostic.message,
            "severity": str(diagnostic.severity),
        }

        if diagnostic.file_path:
            data["file_path"] = diagnostic.file_path

        if diagnostic.locale:
            data["locale"] = diagnostic.locale

        if diagnostic.hint:
            data["hint"] = diagnostic.hint

        return json.dumps(data, ensure_ascii=False)
