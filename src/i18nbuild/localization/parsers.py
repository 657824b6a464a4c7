"""Translation file format parsers.

Each parser recognizes one translation file format and extracts
message id -> translated text. Detection is two-phase, so a format's
quick check can hand its partial work to the parse step:

    hint = parser.analyze(path, contents)   # None: not this format
    bundle = parser.parse(path, hint, diagnostics)

Placeholders inside translated text are rendered as {$NAME} and their
names collected in order, for every format.

Supported formats:
    xlf   - XLIFF 1.2 (<trans-unit id><target>, <x id="PH"/>)
    xlf2  - XLIFF 2.0 (<unit id><segment><target>, <ph equiv="PH"/>, <pc>)
    xtb   - XML translation bundle (<translation id>, <ph name="PH"/>)
    json  - {"locale": "fr", "translations": {"id": "Bonjour {$NAME}"}}
    arb   - {"@@locale": "fr", "id": "Bonjour {$NAME}", "@id": {...}}

Python 3.13+.
"""

from __future__ import annotations

import json
import re
import xml.etree.ElementTree as ET
from dataclasses import dataclass, field
from pathlib import PurePath
from typing import TYPE_CHECKING, Protocol

from i18nbuild.diagnostics import ErrorTemplate
from i18nbuild.enums import TranslationFormat

if TYPE_CHECKING:
    from i18nbuild.localization.loading import LoadDiagnostics
    from i18nbuild.localization.types import LocaleTag, MessageId

__all__ = [
    "DEFAULT_PARSERS",
    "ArbParser",
    "ParsedBundle",
    "ParsedTranslation",
    "SimpleJsonParser",
    "TranslationParser",
    "XtbParser",
    "Xliff1Parser",
    "Xliff2Parser",
    "parse_translation",
]

_PLACEHOLDER_PATTERN = re.compile(r"\{\$([^}]+)\}")


@dataclass(frozen=True, slots=True)
class ParsedTranslation:
    """Translated text of one message.

    Attributes:
        text: Translation with placeholders rendered as {$NAME}
        placeholder_names: Placeholder names in order of appearance
    """

    text: str
    placeholder_names: tuple[str, ...] = ()


def parse_translation(text: str) -> ParsedTranslation:
    """Build a ParsedTranslation from text using {$NAME} placeholder markers.

    Example:
        >>> parse_translation("Hello {$NAME}!").placeholder_names
        ('NAME',)
    """
    return ParsedTranslation(text, tuple(_PLACEHOLDER_PATTERN.findall(text)))


@dataclass(slots=True)
class ParsedBundle:
    """Everything a parser extracted from one file.

    Attributes:
        locale: Locale the file declares for its translations (None if absent)
        translations: Translations keyed by message id
    """

    locale: LocaleTag | None = None
    translations: dict[MessageId, ParsedTranslation] = field(default_factory=dict)

    def add(
        self,
        message_id: MessageId,
        translation: ParsedTranslation,
        file_path: str,
        diagnostics: LoadDiagnostics,
    ) -> None:
        """Add a translation; a repeated id in the same file wins with a warning."""
        if message_id in self.translations:
            diagnostics.add(ErrorTemplate.translation_unit_duplicate(file_path, message_id))
        self.translations[message_id] = translation


class TranslationParser(Protocol):
    """Protocol for translation file parsers."""

    format: TranslationFormat

    def analyze(self, file_path: str, contents: str) -> object | None:
        """Return a parse hint if the file is in this format, else None."""

    def parse(self, file_path: str, hint: object, diagnostics: LoadDiagnostics) -> ParsedBundle:
        """Extract translations; problems are recorded in diagnostics."""


# ============================================================================
# XML FORMATS
# ============================================================================


def _local_name(tag: str) -> str:
    """Strip an XML namespace: '{urn:...}trans-unit' -> 'trans-unit'."""
    return tag.rsplit("}", 1)[-1]


def _has_extension(file_path: str, *extensions: str) -> bool:
    return PurePath(file_path).suffix.lower() in extensions


def _parse_xml(file_path: str, contents: str, diagnostics: LoadDiagnostics) -> ET.Element | None:
    try:
        return ET.fromstring(contents)  # noqa: S314 - local project files
    except ET.ParseError as e:
        diagnostics.add(ErrorTemplate.translation_content_invalid(file_path, str(e)))
        return None


def _children(element: ET.Element, name: str) -> list[ET.Element]:
    return [child for child in element if _local_name(child.tag) == name]


def _descendants(element: ET.Element, name: str) -> list[ET.Element]:
    return [node for node in element.iter() if _local_name(node.tag) == name]


@dataclass(slots=True)
class _MessageRenderer:
    """Render mixed XML content to text with {$NAME} placeholders.

    placeholders maps an element name to the attribute holding the
    placeholder name. paired maps an element name to the attributes
    holding the start and end placeholder names; its children are rendered
    between them.
    """

    file_path: str
    diagnostics: LoadDiagnostics
    placeholders: dict[str, str]
    paired: dict[str, tuple[str, str]] = field(default_factory=dict)
    _parts: list[str] = field(default_factory=list, init=False, repr=False)
    _names: list[str] = field(default_factory=list, init=False, repr=False)

    def render(self, element: ET.Element) -> ParsedTranslation:
        self._parts = []
        self._names = []
        self._visit_content(element)
        return ParsedTranslation("".join(self._parts), tuple(self._names))

    def _placeholder(self, name: str | None) -> None:
        if name:
            self._parts.append(f"{{${name}}}")
            self._names.append(name)

    def _visit_content(self, element: ET.Element) -> None:
        if element.text:
            self._parts.append(element.text)
        for child in element:
            self._visit_element(child)
            if child.tail:
                self._parts.append(child.tail)

    def _visit_element(self, element: ET.Element) -> None:
        name = _local_name(element.tag)
        if name in self.placeholders:
            self._placeholder(element.get(self.placeholders[name]))
        elif name in self.paired:
            start, end = self.paired[name]
            self._placeholder(element.get(start))
            self._visit_content(element)
            self._placeholder(element.get(end))
        else:
            self.diagnostics.add(ErrorTemplate.translation_element_unknown(self.file_path, name))
            self._visit_content(element)


_XLIFF1_ROOT = re.compile(r"<xliff\b[^>]*\bversion\s*=\s*[\"']1\.2[\"']")
_XLIFF2_ROOT = re.compile(r"<xliff\b[^>]*\bversion\s*=\s*[\"']2\.0[\"']")
_XTB_ROOT = re.compile(r"<translationbundle\b")


@dataclass(frozen=True, slots=True)
class Xliff1Parser:
    """XLIFF 1.2 translation files."""

    format: TranslationFormat = TranslationFormat.XLIFF1

    def analyze(self, file_path: str, contents: str) -> object | None:
        if _has_extension(file_path, ".xlf", ".xliff") and _XLIFF1_ROOT.search(contents):
            return contents
        return None

    def parse(self, file_path: str, hint: object, diagnostics: LoadDiagnostics) -> ParsedBundle:
        bundle = ParsedBundle()
        root = _parse_xml(file_path, str(hint), diagnostics)
        if root is None:
            return bundle

        files = _descendants(root, "file")
        if files:
            bundle.locale = files[0].get("target-language")

        renderer = _MessageRenderer(file_path, diagnostics, placeholders={"x": "id"})
        for unit in _descendants(root, "trans-unit"):
            message_id = unit.get("id")
            if message_id is None:
                diagnostics.add(ErrorTemplate.translation_unit_id_missing(file_path, "trans-unit"))
                continue
            targets = _children(unit, "target")
            if not targets:
                diagnostics.add(ErrorTemplate.translation_target_missing(file_path, message_id))
                continue
            bundle.add(message_id, renderer.render(targets[0]), file_path, diagnostics)
        return bundle


@dataclass(frozen=True, slots=True)
class Xliff2Parser:
    """XLIFF 2.0 translation files."""

    format: TranslationFormat = TranslationFormat.XLIFF2

    def analyze(self, file_path: str, contents: str) -> object | None:
        if _has_extension(file_path, ".xlf", ".xliff") and _XLIFF2_ROOT.search(contents):
            return contents
        return None

    def parse(self, file_path: str, hint: object, diagnostics: LoadDiagnostics) -> ParsedBundle:
        bundle = ParsedBundle()
        root = _parse_xml(file_path, str(hint), diagnostics)
        if root is None:
            return bundle

        bundle.locale = root.get("trgLang")

        renderer = _MessageRenderer(
            file_path,
            diagnostics,
            placeholders={"ph": "equiv"},
            paired={"pc": ("equivStart", "equivEnd")},
        )
        for unit in _descendants(root, "unit"):
            message_id = unit.get("id")
            if message_id is None:
                diagnostics.add(ErrorTemplate.translation_unit_id_missing(file_path, "unit"))
                continue
            targets = [
                target
                for segment in _children(unit, "segment")
                for target in _children(segment, "target")
            ]
            if not targets:
                diagnostics.add(ErrorTemplate.translation_target_missing(file_path, message_id))
                continue
            # Multiple segments form one message
            rendered = [renderer.render(target) for target in targets]
            translation = ParsedTranslation(
                "".join(part.text for part in rendered),
                tuple(name for part in rendered for name in part.placeholder_names),
            )
            bundle.add(message_id, translation, file_path, diagnostics)
        return bundle


@dataclass(frozen=True, slots=True)
class XtbParser:
    """XML translation bundle files."""

    format: TranslationFormat = TranslationFormat.XTB

    def analyze(self, file_path: str, contents: str) -> object | None:
        if _has_extension(file_path, ".xtb", ".xmb") and _XTB_ROOT.search(contents):
            return contents
        return None

    def parse(self, file_path: str, hint: object, diagnostics: LoadDiagnostics) -> ParsedBundle:
        bundle = ParsedBundle()
        root = _parse_xml(file_path, str(hint), diagnostics)
        if root is None:
            return bundle

        bundle.locale = root.get("lang")

        renderer = _MessageRenderer(file_path, diagnostics, placeholders={"ph": "name"})
        for translation in _descendants(root, "translation"):
            message_id = translation.get("id")
            if message_id is None:
                diagnostics.add(
                    ErrorTemplate.translation_unit_id_missing(file_path, "translation")
                )
                continue
            bundle.add(message_id, renderer.render(translation), file_path, diagnostics)
        return bundle


# ============================================================================
# JSON FORMATS
# ============================================================================


def _load_json_object(contents: str) -> dict[str, object] | None:
    try:
        data = json.loads(contents)
    except ValueError:
        return None
    return data if isinstance(data, dict) else None


@dataclass(frozen=True, slots=True)
class SimpleJsonParser:
    """Simple JSON translation files."""

    format: TranslationFormat = TranslationFormat.JSON

    def analyze(self, file_path: str, contents: str) -> object | None:
        if not _has_extension(file_path, ".json"):
            return None
        data = _load_json_object(contents)
        if data is None or not isinstance(data.get("translations"), dict):
            return None
        return data

    def parse(self, file_path: str, hint: object, diagnostics: LoadDiagnostics) -> ParsedBundle:
        bundle = ParsedBundle()
        if not isinstance(hint, dict):
            return bundle
        locale = hint.get("locale")
        bundle.locale = locale if isinstance(locale, str) else None

        for message_id, text in hint["translations"].items():
            if not isinstance(text, str):
                diagnostics.add(
                    ErrorTemplate.translation_content_invalid(
                        file_path, f"translation for '{message_id}' is not a string"
                    )
                )
                continue
            bundle.add(message_id, parse_translation(text), file_path, diagnostics)
        return bundle


@dataclass(frozen=True, slots=True)
class ArbParser:
    """Application Resource Bundle files."""

    format: TranslationFormat = TranslationFormat.ARB

    def analyze(self, file_path: str, contents: str) -> object | None:
        if not _has_extension(file_path, ".arb", ".json"):
            return None
        data = _load_json_object(contents)
        if data is None or "@@locale" not in data:
            return None
        return data

    def parse(self, file_path: str, hint: object, diagnostics: LoadDiagnostics) -> ParsedBundle:
        bundle = ParsedBundle()
        if not isinstance(hint, dict):
            return bundle
        locale = hint.get("@@locale")
        bundle.locale = locale if isinstance(locale, str) else None

        for message_id, text in hint.items():
            if message_id.startswith("@"):
                continue
            if not isinstance(text, str):
                diagnostics.add(
                    ErrorTemplate.translation_content_invalid(
                        file_path, f"translation for '{message_id}' is not a string"
                    )
                )
                continue
            bundle.add(message_id, parse_translation(text), file_path, diagnostics)
        return bundle


# Detection order; the first parser whose analyze() accepts the file wins
DEFAULT_PARSERS: tuple[TranslationParser, ...] = (
    Xliff1Parser(),
    Xliff2Parser(),
    XtbParser(),
    SimpleJsonParser(),
    ArbParser(),
)
