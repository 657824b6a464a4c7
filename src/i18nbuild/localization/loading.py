"""Translation file loading infrastructure.

Provides the protocol the build configurator uses to load translation
files, the result and diagnostics structures it returns, and a default
disk-based implementation that detects the file format.

Components:
    TranslationLoader - Protocol: loader(path) -> LoadResult
    LoadDiagnostics - Error/warning messages collected while loading
    LoadResult - Immutable outcome of loading one file
    FileTranslationLoader - Default loader over DEFAULT_PARSERS
    create_translation_loader - Factory used by the build configurator

Python 3.13+.
"""

from __future__ import annotations

import base64
import hashlib
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING, Protocol

from i18nbuild.diagnostics import Diagnostic, ErrorTemplate
from i18nbuild.enums import Severity
from i18nbuild.localization.parsers import DEFAULT_PARSERS

if TYPE_CHECKING:
    from i18nbuild.enums import TranslationFormat
    from i18nbuild.localization.parsers import ParsedTranslation, TranslationParser
    from i18nbuild.localization.types import LocaleTag, MessageId

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Protocol
    "TranslationLoader",
    # Result types
    "LoadDiagnostics",
    "LoadResult",
    # Concrete loader
    "FileTranslationLoader",
    "create_translation_loader",
    "compute_integrity",
]

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class LoadDiagnostics:
    """Messages reported while loading one translation file.

    Attributes:
        messages: Diagnostics in the order they were reported
    """

    messages: list[Diagnostic] = field(default_factory=list)

    def add(self, diagnostic: Diagnostic) -> None:
        """Record a diagnostic."""
        self.messages.append(diagnostic)

    @property
    def has_errors(self) -> bool:
        """Check if any message has error severity."""
        return any(d.severity == Severity.ERROR for d in self.messages)

    def get_errors(self) -> tuple[Diagnostic, ...]:
        """Get all error messages."""
        return tuple(d for d in self.messages if d.severity == Severity.ERROR)

    def get_warnings(self) -> tuple[Diagnostic, ...]:
        """Get all warning messages."""
        return tuple(d for d in self.messages if d.severity == Severity.WARNING)


@dataclass(frozen=True, slots=True)
class LoadResult:
    """Result of loading a single translation file.

    Attributes:
        locale: Locale declared inside the file (None if it declares none)
        translations: Translations keyed by message id
        format: Detected format (None if no parser accepted the file)
        integrity: Content integrity token ("sha256-<base64>")
        diagnostics: Errors and warnings reported while loading
    """

    locale: LocaleTag | None
    translations: dict[MessageId, ParsedTranslation]
    format: TranslationFormat | None
    integrity: str
    diagnostics: LoadDiagnostics


class TranslationLoader(Protocol):
    """Protocol for loading translation files.

    A loader is created once per build and called for every translation
    file. Problems are reported through LoadResult.diagnostics rather
    than raised; the caller decides which are fatal.

    Example:
        >>> def fake_loader(path: str | Path) -> LoadResult:
        ...     return LoadResult("fr", {}, TranslationFormat.JSON, "sha256-", LoadDiagnostics())
    """

    def __call__(self, path: str | Path) -> LoadResult:
        """Load one translation file.

        Args:
            path: Absolute or working-directory-relative file path

        Returns:
            LoadResult for the file
        """


def compute_integrity(content: bytes) -> str:
    """Return the subresource-integrity style token for file content.

    Example:
        >>> compute_integrity(b"")
        'sha256-47DEQpj8HBSa+/TImW+5JCeuQeRkm5NMpJWZG3hSuFU='
    """
    digest = hashlib.sha256(content).digest()
    return "sha256-" + base64.b64encode(digest).decode("ascii")


@dataclass(frozen=True, slots=True)
class FileTranslationLoader:
    """Disk-based translation loader with format detection.

    Parsers are tried in order; the first whose analyze() accepts the file
    parses it.

    Attributes:
        parsers: Format parsers in detection order
    """

    parsers: tuple[TranslationParser, ...] = DEFAULT_PARSERS

    def __call__(self, path: str | Path) -> LoadResult:
        file_path = str(path)
        diagnostics = LoadDiagnostics()

        try:
            content = Path(path).read_bytes()
        except OSError as e:
            diagnostics.add(ErrorTemplate.translation_file_unreadable(file_path, str(e)))
            return LoadResult(None, {}, None, "", diagnostics)

        integrity = compute_integrity(content)
        try:
            # utf-8-sig drops a leading byte order mark if present
            text = content.decode("utf-8-sig")
        except UnicodeDecodeError as e:
            diagnostics.add(ErrorTemplate.translation_file_unreadable(file_path, str(e)))
            return LoadResult(None, {}, None, integrity, diagnostics)

        for parser in self.parsers:
            hint = parser.analyze(file_path, text)
            if hint is None:
                continue
            bundle = parser.parse(file_path, hint, diagnostics)
            logger.debug(
                "Loaded %d translations from %s as %s",
                len(bundle.translations),
                file_path,
                parser.format,
            )
            return LoadResult(
                bundle.locale, bundle.translations, parser.format, integrity, diagnostics
            )

        diagnostics.add(
            ErrorTemplate.translation_format_unsupported(
                file_path, [str(parser.format) for parser in self.parsers]
            )
        )
        return LoadResult(None, {}, None, integrity, diagnostics)


def create_translation_loader() -> TranslationLoader:
    """Create the default translation loader.

    The build configurator calls this lazily, at most once per build.
    """
    logger.debug("Creating translation loader")
    return FileTranslationLoader()
