"""Compiler configuration reader.

Reads the capability flags the i18n configuration depends on from a compiler
configuration (tsconfig-style JSON; comments and trailing commas allowed):

    {
        "extends": "./tsconfig.base.json",
        "compilerOptions": {...},
        "angularCompilerOptions": {
            "enableIvy": true,
            "enableI18nLegacyMessageIdFormat": false
        }
    }

'extends' chains are followed relative to the extending file; values in
the extending file override the base. Both option sections are merged,
the compiler-specific section last.

Python 3.13+.
"""

from __future__ import annotations

import json
import logging
import re
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from pathlib import Path

from i18nbuild.diagnostics import ErrorTemplate, I18nResourceError

__all__ = [
    "CompilerOptions",
    "read_compiler_config",
    "strip_jsonc",
]

logger = logging.getLogger(__name__)

_OPTION_SECTIONS = ("compilerOptions", "angularCompilerOptions")

# String literals are matched first so comment markers inside them survive
_JSONC_COMMENT = re.compile(r'"(?:[^"\\]|\\.)*"|//[^\n]*|/\*.*?\*/', re.DOTALL)
_JSONC_TRAILING_COMMA = re.compile(r'"(?:[^"\\]|\\.)*"|,(?=\s*[}\]])')


@dataclass(frozen=True, slots=True)
class CompilerOptions:
    """Compiler capability flags relevant to localization.

    Attributes:
        modern_compilation: Modern (multi-locale inlining) compilation mode
            is active. False selects the legacy single-locale mode.
        legacy_message_id_format: Legacy message ids are generated; they
            depend on the translation file format, so all files must share one.
    """

    modern_compilation: bool = True
    legacy_message_id_format: bool = True

    @classmethod
    def from_mapping(cls, options: Mapping[str, object]) -> CompilerOptions:
        """Build flags from merged raw compiler options; only explicit false disables."""
        return cls(
            modern_compilation=options.get("enableIvy") is not False,
            legacy_message_id_format=options.get("enableI18nLegacyMessageIdFormat") is not False,
        )


def _keep_strings(replacement: str) -> Callable[[re.Match[str]], str]:
    def substitute(match: re.Match[str]) -> str:
        token = match.group()
        return token if token.startswith('"') else replacement

    return substitute


def strip_jsonc(text: str) -> str:
    """Reduce JSON-with-comments to plain JSON.

    Removes '//' and '/* */' comments and trailing commas before a closing
    brace or bracket. String literals are left untouched.

    Example:
        >>> strip_jsonc('{"a": "//x", /* c */ "b": [1,],}')
        '{"a": "//x",   "b": [1]}'
    """
    text = _JSONC_COMMENT.sub(_keep_strings(" "), text)
    return _JSONC_TRAILING_COMMA.sub(_keep_strings(""), text)


def _load_config_file(path: Path) -> dict[str, object]:
    try:
        data = json.loads(strip_jsonc(path.read_text(encoding="utf-8")))
    except (OSError, ValueError) as e:
        raise I18nResourceError(
            ErrorTemplate.compiler_config_unreadable(str(path), str(e))
        ) from e
    if not isinstance(data, dict):
        raise I18nResourceError(
            ErrorTemplate.compiler_config_unreadable(str(path), "expected a JSON object")
        )
    return data


def _collect_options(path: Path, seen: set[Path]) -> dict[str, object]:
    """Merge option sections of path and its 'extends' chain, base first."""
    resolved = path.resolve()
    if resolved in seen:
        raise I18nResourceError(
            ErrorTemplate.compiler_config_unreadable(str(path), "circular 'extends' chain")
        )
    seen.add(resolved)

    data = _load_config_file(resolved)
    merged: dict[str, object] = {}

    extends = data.get("extends")
    if isinstance(extends, str):
        base = resolved.parent / extends
        # "./tsconfig.base" names "./tsconfig.base.json"
        if base.suffix != ".json":
            base = base.with_name(base.name + ".json")
        merged.update(_collect_options(base, seen))

    for section in _OPTION_SECTIONS:
        options = data.get(section)
        if isinstance(options, Mapping):
            merged.update(options)
    return merged


def read_compiler_config(
    config_path: str | Path | None,
    workspace_root: str | Path,
) -> CompilerOptions:
    """Read compiler capability flags.

    Args:
        config_path: Compiler configuration file, relative to workspace_root
            or absolute; None yields the defaults
        workspace_root: Workspace root directory

    Returns:
        CompilerOptions

    Raises:
        I18nResourceError: If a file in the chain cannot be read, is not a
            JSON object, or the 'extends' chain is circular
    """
    if config_path is None:
        return CompilerOptions()

    path = Path(workspace_root) / config_path
    options = CompilerOptions.from_mapping(_collect_options(path, set()))
    logger.debug("Compiler options from %s: %s", path, options)
    return options
