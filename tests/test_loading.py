"""Tests for the disk-based translation loader.

Covers format detection on real files, integrity tokens, and the error
diagnostics reported for unreadable, undecodable, and unrecognized files.

Python 3.13+.
"""

from __future__ import annotations

import base64
import hashlib
from pathlib import Path

from i18nbuild.diagnostics import DiagnosticCode
from i18nbuild.enums import Severity, TranslationFormat
from i18nbuild.localization import (
    FileTranslationLoader,
    LoadDiagnostics,
    LoadResult,
    create_translation_loader,
)
from i18nbuild.localization.loading import compute_integrity
from tests.helpers.build import error_diagnostic, warning_diagnostic

XLIFF1 = (
    '<xliff version="1.2" xmlns="urn:oasis:names:tc:xliff:document:1.2">'
    '<file target-language="fr"><body>'
    '<trans-unit id="greeting"><target>Bonjour</target></trans-unit>'
    "</body></file></xliff>"
)


class TestComputeIntegrity:
    """Subresource-integrity style tokens."""

    def test_empty_content(self) -> None:
        """The token is the base64 SHA-256 digest with a sha256- prefix."""
        assert compute_integrity(b"") == "sha256-47DEQpj8HBSa+/TImW+5JCeuQeRkm5NMpJWZG3hSuFU="

    def test_matches_hashlib(self) -> None:
        """The digest covers the raw file bytes."""
        content = XLIFF1.encode("utf-8")
        expected = base64.b64encode(hashlib.sha256(content).digest()).decode("ascii")

        assert compute_integrity(content) == f"sha256-{expected}"


class TestLoadDiagnostics:
    """Severity filtering of collected diagnostics."""

    def test_errors_and_warnings_are_separated(self) -> None:
        """get_errors and get_warnings split by severity, keeping order."""
        warning = warning_diagnostic("a.xlf", "x")
        error = error_diagnostic("a.xlf", "broken")
        diagnostics = LoadDiagnostics()
        diagnostics.add(warning)
        diagnostics.add(error)

        assert diagnostics.messages == [warning, error]
        assert diagnostics.get_errors() == (error,)
        assert diagnostics.get_warnings() == (warning,)
        assert diagnostics.has_errors is True

    def test_empty(self) -> None:
        """No messages means no errors."""
        assert LoadDiagnostics().has_errors is False


class TestFileTranslationLoader:
    """Loading translation files from disk."""

    def test_loads_xliff(self, tmp_path: Path) -> None:
        """A recognized file yields locale, translations, format, and integrity."""
        path = tmp_path / "messages.fr.xlf"
        path.write_text(XLIFF1, encoding="utf-8")

        result = FileTranslationLoader()(path)

        assert isinstance(result, LoadResult)
        assert result.locale == "fr"
        assert result.translations["greeting"].text == "Bonjour"
        assert result.format == TranslationFormat.XLIFF1
        assert result.integrity == compute_integrity(path.read_bytes())
        assert result.diagnostics.messages == []

    def test_accepts_string_path(self, tmp_path: Path) -> None:
        """Paths may be given as strings."""
        path = tmp_path / "messages.json"
        path.write_text('{"locale": "de", "translations": {"a": "A"}}', encoding="utf-8")

        result = create_translation_loader()(str(path))

        assert result.format == TranslationFormat.JSON
        assert result.locale == "de"

    def test_byte_order_mark_is_ignored(self, tmp_path: Path) -> None:
        """A UTF-8 byte order mark does not break detection."""
        path = tmp_path / "app_fr.arb"
        path.write_bytes(b"\xef\xbb\xbf" + b'{"@@locale": "fr", "a": "A"}')

        result = FileTranslationLoader()(path)

        assert result.format == TranslationFormat.ARB
        assert result.integrity == compute_integrity(path.read_bytes())

    def test_missing_file(self, tmp_path: Path) -> None:
        """An unreadable file is an error with no format or integrity."""
        result = FileTranslationLoader()(tmp_path / "missing.xlf")

        assert result.format is None
        assert result.integrity == ""
        assert result.translations == {}
        errors = result.diagnostics.get_errors()
        assert len(errors) == 1
        assert errors[0].code == DiagnosticCode.TRANSLATION_FILE_UNREADABLE
        assert errors[0].severity == Severity.ERROR

    def test_undecodable_file(self, tmp_path: Path) -> None:
        """Content that is not UTF-8 is an error."""
        path = tmp_path / "messages.xlf"
        path.write_bytes(b"\xff\xfe\xfa")

        result = FileTranslationLoader()(path)

        assert result.format is None
        assert result.diagnostics.get_errors()[0].code == (
            DiagnosticCode.TRANSLATION_FILE_UNREADABLE
        )

    def test_unsupported_format(self, tmp_path: Path) -> None:
        """A file no parser accepts lists the formats tried."""
        path = tmp_path / "messages.po"
        path.write_text('msgid "a"\nmsgstr "b"\n', encoding="utf-8")

        result = FileTranslationLoader()(path)

        assert result.format is None
        assert result.integrity == compute_integrity(path.read_bytes())
        error = result.diagnostics.get_errors()[0]
        assert error.code == DiagnosticCode.TRANSLATION_FORMAT_UNSUPPORTED
        assert error.message == (
            f"Unsupported translation file format in {path}. "
            "The following formats were tried: xlf, xlf2, xtb, json, arb"
        )

    def test_custom_parser_chain(self, tmp_path: Path) -> None:
        """Only the configured parsers are tried."""
        path = tmp_path / "messages.fr.xlf"
        path.write_text(XLIFF1, encoding="utf-8")

        result = FileTranslationLoader(parsers=())(path)

        assert result.format is None
        assert result.diagnostics.has_errors is True
