"""Type aliases for the localization domain.

Provides semantic type aliases used throughout the localization package
and by user code when annotating build configuration call sites.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING, TypeAlias

if TYPE_CHECKING:
    from i18nbuild.localization.parsers import ParsedTranslation

__all__ = [
    "LocaleTag",
    "LocalizeOption",
    "MessageId",
    "TranslationMap",
]

LocaleTag: TypeAlias = str
"""BCP-47 locale tag (e.g., 'en-US', 'fr', 'zh-Hant-TW')."""

MessageId: TypeAlias = str
"""Stable identifier of one translatable unit of source text."""

TranslationMap: TypeAlias = dict[MessageId, "ParsedTranslation"]
"""Merged translations for one locale, keyed by message id."""

LocalizeOption: TypeAlias = bool | Sequence[LocaleTag] | None
"""The 'localize' build option: unset, inline everything, or explicit locales."""
