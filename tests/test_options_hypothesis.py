"""Hypothesis property-based tests for i18n metadata normalization.

Validates registry invariants over generated project metadata and the
locale tag helpers used for locale data lookup.

Python 3.13+.
"""

from __future__ import annotations

import pytest
from hypothesis import event, given, settings
from hypothesis import strategies as st

from i18nbuild.locale_utils import locale_data_name, primary_subtag, scrub_private_use
from i18nbuild.localization import create_i18n_options, merge_deprecated_i18n_options
from tests.strategies.localization import (
    file_paths,
    i18n_metadata,
    locale_tags,
    private_use_suffixes,
)


def _expected_paths(value: object) -> list[str]:
    if isinstance(value, dict):
        value = value["translation"]
    return [value] if isinstance(value, str) else list(value)  # type: ignore[call-overload]


class TestRegistryProperties:
    """Invariants of every registry built from valid metadata."""

    @given(metadata=i18n_metadata())
    def test_source_locale_is_first_and_has_no_files(self, metadata: dict[str, object]) -> None:
        """The source locale entry exists, comes first, and declares no files."""
        registry = create_i18n_options(metadata)

        assert next(iter(registry.locales)) == registry.source_locale
        assert registry.locales[registry.source_locale].files == []

    @given(metadata=i18n_metadata())
    def test_defined_source_locale_flag(self, metadata: dict[str, object]) -> None:
        """has_defined_source_locale is True exactly when sourceLocale is declared."""
        registry = create_i18n_options(metadata)
        i18n = metadata["i18n"]
        assert isinstance(i18n, dict)

        assert registry.has_defined_source_locale is ("sourceLocale" in i18n)

    @given(metadata=i18n_metadata())
    def test_files_follow_declaration(self, metadata: dict[str, object]) -> None:
        """Every declared locale keeps its files in declaration order."""
        registry = create_i18n_options(metadata)
        i18n = metadata["i18n"]
        assert isinstance(i18n, dict)
        locales = i18n["locales"]
        event(f"locale_count={len(locales)}")

        assert set(registry.locales) == {registry.source_locale, *locales}
        for locale, value in locales.items():
            paths = [file.path for file in registry.locales[locale].files]
            assert paths == _expected_paths(value)

    @given(metadata=i18n_metadata())
    def test_inline_all_selects_every_locale(self, metadata: dict[str, object]) -> None:
        """localize=True inlines exactly the known locales."""
        registry = create_i18n_options(metadata, True)

        assert registry.inline_locales == set(registry.locales)

    @given(metadata=i18n_metadata(), data=st.data())
    def test_inline_subset_is_preserved(
        self, metadata: dict[str, object], data: st.DataObject
    ) -> None:
        """An explicit request inlines exactly the requested locales."""
        known = create_i18n_options(metadata).locales
        requested = data.draw(st.lists(st.sampled_from(sorted(known)), unique=True))

        registry = create_i18n_options(metadata, requested)

        assert registry.inline_locales == set(requested)
        assert registry.inline_locales <= set(registry.locales)

    @given(metadata=i18n_metadata(), locale=locale_tags(), path=file_paths())
    def test_deprecated_locale_is_sole_inline_locale(
        self, metadata: dict[str, object], locale: str, path: str
    ) -> None:
        """The deprecated locale option always becomes the only inlined locale."""
        registry = merge_deprecated_i18n_options(
            create_i18n_options(metadata, True), locale, path
        )

        assert registry.inline_locales == {locale}
        assert registry.flat_output is True
        assert [file.path for file in registry.locales[locale].files] == [path]


class TestLocaleTagProperties:
    """Locale tag helpers."""

    @given(tag=locale_tags(), suffix=private_use_suffixes())
    def test_scrub_removes_private_use_suffix(self, tag: str, suffix: str) -> None:
        """Private-use subtags are removed and the rest of the tag is kept."""
        assert scrub_private_use(tag + suffix) == tag

    @given(tag=locale_tags())
    def test_scrub_is_identity_without_private_use(self, tag: str) -> None:
        """Tags without private-use subtags are unchanged."""
        assert scrub_private_use(tag) == tag

    @given(tag=locale_tags())
    def test_primary_subtag_is_lowercase_prefix(self, tag: str) -> None:
        """The primary subtag is the lower-cased text before the first hyphen."""
        primary = primary_subtag(tag)

        assert primary == primary.lower()
        assert tag.lower().startswith(primary)
        assert "-" not in primary

    @given(tag=locale_tags())
    def test_data_name_round_trips_separator(self, tag: str) -> None:
        """Converting to underscores and back restores the tag."""
        assert locale_data_name(tag, "_").replace("_", "-") == tag
        assert locale_data_name(tag) == tag


@pytest.mark.fuzz
class TestRegistryIntensive:
    """Long-running registry checks; run with: pytest -m fuzz."""

    @given(metadata=i18n_metadata(), locale=locale_tags(), path=file_paths())
    @settings(max_examples=5000)
    def test_merge_keeps_other_locales(
        self, metadata: dict[str, object], locale: str, path: str
    ) -> None:
        """Merging the deprecated options leaves every other locale untouched."""
        registry = create_i18n_options(metadata, True)
        source_locale = registry.source_locale
        before = dict(registry.locales)
        merged = merge_deprecated_i18n_options(registry, locale, path)

        assert merged.source_locale == source_locale
        for name, entry in before.items():
            if name != locale:
                assert merged.locales[name] is entry
