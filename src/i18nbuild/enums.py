"""Enumerations for i18nbuild type-safe constants.

Uses StrEnum (Python 3.11+) for automatic string conversion.
StrEnum members are strings themselves, eliminating boilerplate __str__ methods.

Python 3.13+.
"""

from enum import StrEnum


class TranslationFormat(StrEnum):
    """Translation file format detected by the translation loader.

    StrEnum provides automatic string conversion: str(TranslationFormat.XLIFF1) == "xlf"
    """

    XLIFF1 = "xlf"
    """XLIFF 1.2: <xliff version="1.2"><file><body><trans-unit>"""

    XLIFF2 = "xlf2"
    """XLIFF 2.0: <xliff version="2.0"><file><unit><segment>"""

    XTB = "xtb"
    """XML translation bundle: <translationbundle><translation>"""

    JSON = "json"
    """Simple JSON: {"locale": "fr", "translations": {...}}"""

    ARB = "arb"
    """Application Resource Bundle: {"@@locale": "fr", "id": "..."}"""


class Severity(StrEnum):
    """Severity of a diagnostic produced while loading or configuring."""

    ERROR = "error"
    WARNING = "warning"


__all__ = [
    "Severity",
    "TranslationFormat",
]
