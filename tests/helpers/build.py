"""Test doubles for the build configurator.

Provides:
- RecordingLogger: BuildLogger that keeps every warning
- FakeTranslationLoader: TranslationLoader serving canned LoadResults
- make_context: BuilderContext over an in-memory project metadata mapping
- write_fake_locale_data_package: importable package with locale data files
- CountingLoaderFactory: loader factory counting its calls
- write_compiler_config: compiler configuration file with capability flags

Python 3.13+.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING

from i18nbuild.diagnostics import ErrorTemplate
from i18nbuild.enums import TranslationFormat
from i18nbuild.localization import (
    BuilderContext,
    BuildTarget,
    LoadDiagnostics,
    LoadResult,
    LocaleDataSource,
)
from i18nbuild.localization.parsers import parse_translation

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping

    from i18nbuild.diagnostics import Diagnostic

FAKE_LOCALE_DATA_PACKAGE = "fake_locale_data"

FAKE_LOCALE_DATA_SOURCE = LocaleDataSource(
    package=FAKE_LOCALE_DATA_PACKAGE,
    subdirectory="locales/global",
    extension=".js",
    separator="-",
)


@dataclass
class RecordingLogger:
    """BuildLogger that records warnings in order."""

    warnings: list[str] = field(default_factory=list)

    def warning(self, msg: str) -> None:
        self.warnings.append(msg)


@dataclass
class FakeTranslationLoader:
    """TranslationLoader returning canned results keyed by file name.

    Attributes:
        results: LoadResult per file name (Path(path).name)
        calls: Paths requested, in order
    """

    results: dict[str, LoadResult]
    calls: list[Path] = field(default_factory=list)

    def __call__(self, path: str | Path) -> LoadResult:
        self.calls.append(Path(path))
        return self.results[Path(path).name]


def load_result(
    locale: str | None,
    messages: Mapping[str, str],
    *,
    format: TranslationFormat = TranslationFormat.XLIFF1,  # noqa: A002 - mirrors LoadResult
    integrity: str = "sha256-test",
    diagnostics: Iterable[Diagnostic] = (),
) -> LoadResult:
    """Build a LoadResult from plain message texts."""
    return LoadResult(
        locale=locale,
        translations={key: parse_translation(text) for key, text in messages.items()},
        format=format,
        integrity=integrity,
        diagnostics=LoadDiagnostics(list(diagnostics)),
    )


def warning_diagnostic(file_path: str, message_id: str) -> Diagnostic:
    """A loader warning, as reported for a unit without a target."""
    return ErrorTemplate.translation_target_missing(file_path, message_id)


def error_diagnostic(file_path: str, reason: str) -> Diagnostic:
    """A loader error, as reported for malformed content."""
    return ErrorTemplate.translation_content_invalid(file_path, reason)


def write_fake_locale_data_package(
    project_root: Path,
    locales: Iterable[str] = ("en-US-POSIX", "fr", "fr-CA", "de"),
) -> Path:
    """Create an importable package under project_root shipping locale data.

    Returns:
        The locale data directory
    """
    package_dir = project_root / FAKE_LOCALE_DATA_PACKAGE
    data_dir = package_dir / "locales" / "global"
    data_dir.mkdir(parents=True)
    (package_dir / "__init__.py").write_text("", encoding="utf-8")
    for locale in locales:
        (data_dir / f"{locale}.js").write_text("export default [];\n", encoding="utf-8")
    return data_dir


def make_context(
    workspace_root: Path,
    metadata: Mapping[str, object],
    logger: RecordingLogger | None = None,
    *,
    target: BuildTarget | None = BuildTarget("app"),
) -> BuilderContext:
    """BuilderContext returning fixed project metadata."""
    return BuilderContext(
        target=target,
        workspace_root=workspace_root,
        get_project_metadata=lambda _target: metadata,
        logger=logger if logger is not None else RecordingLogger(),
    )


@dataclass
class CountingLoaderFactory:
    """Loader factory that hands out one loader and counts the calls."""

    loader: FakeTranslationLoader
    calls: int = 0

    def __call__(self) -> FakeTranslationLoader:
        self.calls += 1
        return self.loader


def write_compiler_config(workspace_root: Path, **angular_options: object) -> str:
    """Write tsconfig.json with the given angularCompilerOptions.

    Returns:
        The workspace-relative configuration path
    """
    (workspace_root / "tsconfig.json").write_text(
        json.dumps({"angularCompilerOptions": angular_options}), encoding="utf-8"
    )
    return "tsconfig.json"
