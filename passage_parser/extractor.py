"""
passage_parser/extractor.py — ekstrakcja fragmentu Pisma do Markdownu.

Architektura:
  raw_html → parse_document() → BeautifulSoup
  → classify_units() → [HeaderUnit | VerseUnit] w kolejności dokumentu
  → step() (maszyna stanów numeracji) → emisje (header / verse / text)
  → _render_lines() / _render_paragraphs() → Markdown
  → ExtractionResult(title, version_tag, passage_markdown, anomalies)

Gramatyka wyjścia (domyślne FormatOptions):
  ## <nagłówek>
  ###### v<numer>
  <tekst wersetu>

Kluczowe funkcje publiczne:
  extract(raw_html, options) -> ExtractionResult
"""

from __future__ import annotations

import re
from typing import Iterable, Literal

from bs4 import BeautifulSoup, ParserRejectedMarkup, Tag

from data_model.passage import (
    Anomaly,
    ExtractionResult,
    FormatOptions,
    HeaderUnit,
    StructuralUnit,
    VerseNumberState,
    VerseUnit,
)
from passage_parser.errors import FatalParseError
from passage_parser.notes import note_sections
from passage_parser.text_cleaner import clean

# ---------------------------------------------------------------------------
# Stałe
# ---------------------------------------------------------------------------

# Tekst wersetów w treści fragmentu + spany tytułów sekcji (h3 .text).
_UNIT_SELECTOR = ".passage-content .text, h3 .text"
_VERSENUM_SELECTOR = ".versenum"

# Znacznik przekładu szukamy tylko w kontenerze fragmentu; poza nim bywają
# klasy ogólne strony (np. "version-title").
_VERSION_SCOPE_SELECTOR = ".passage-text, .passage-content"
_VERSION_CLASS_RE = re.compile(r"^version-([A-Za-z0-9][A-Za-z0-9-]*)$")

# Numer wersetu: "7", także zakres "16-17" (niektóre przekłady łączą wersety).
_VERSE_NUMBER_RE = re.compile(r"\d+(?:[-–]\d+)?")

NO_TITLE = "No title found"
UNKNOWN_VERSION = "Unknown version"
IMPLICIT_FIRST_VERSE = "1"

# ---------------------------------------------------------------------------
# Typy wewnętrzne
# ---------------------------------------------------------------------------

_EmissionKind = Literal["header", "verse", "text"]
type Emission = tuple[_EmissionKind, str]


# ---------------------------------------------------------------------------
# Publiczne API
# ---------------------------------------------------------------------------

def extract(raw_html: str, options: FormatOptions | None = None) -> ExtractionResult:
    """
    Parsuje dokument HTML fragmentu i zwraca ExtractionResult.

    Rzuca FatalParseError tylko gdy wejścia nie da się sparsować jako HTML;
    brak tytułu / wersji przekładu kończy się wartością domyślną i wpisem
    w `anomalies`.
    """
    opts = options or FormatOptions()
    soup = parse_document(raw_html)

    anomalies: list[Anomaly] = []
    units = classify_units(soup, anomalies)

    markdown = assemble(units, opts)
    sections = note_sections(soup, opts)
    if sections:
        markdown = "\n\n".join(part for part in (markdown, *sections) if part)

    title = find_title(units)
    if title is None:
        title = NO_TITLE
        anomalies.append(Anomaly.MISSING_TITLE)

    version_tag = find_version_tag(soup)
    if version_tag is None:
        version_tag = UNKNOWN_VERSION
        anomalies.append(Anomaly.MISSING_VERSION)

    return ExtractionResult(
        title=title,
        version_tag=version_tag,
        passage_markdown=markdown.strip(),
        anomalies=tuple(anomalies),
    )


def parse_document(raw_html: str, source: str | None = None) -> BeautifulSoup:
    """Parsuje cały dokument; FatalParseError gdy to w ogóle nie jest HTML."""
    if not isinstance(raw_html, str):
        raise FatalParseError(
            f"Oczekiwano tekstu HTML, otrzymano {type(raw_html).__name__}", source
        )
    if not raw_html.strip():
        raise FatalParseError("Pusty dokument HTML", source)

    try:
        soup = BeautifulSoup(raw_html, "html.parser")
    except ParserRejectedMarkup as e:
        raise FatalParseError(f"Parser odrzucił dokument: {e}", source) from e

    if soup.find() is None:
        raise FatalParseError("Dokument nie zawiera żadnego elementu HTML", source)
    return soup


def classify_units(
    soup: BeautifulSoup,
    anomalies: list[Anomaly] | None = None,
) -> list[StructuralUnit]:
    """
    Wybiera węzły strukturalne i klasyfikuje je jako HeaderUnit | VerseUnit.

    Nagłówek: <span class="text"> bezpośrednio w <h3>.
    Werset: każdy inny węzeł .text; numer z zagnieżdżonego .versenum,
    o ile jest liczbą (inaczej traktowany jak brak numeru + AMBIGUOUS_VERSE_MARKER).
    """
    units: list[StructuralUnit] = []
    for node in soup.select(_UNIT_SELECTOR):
        inner_html = node.decode_contents()
        if node.name == "span" and node.parent is not None and node.parent.name == "h3":
            units.append(HeaderUnit(inner_html))
            continue
        units.append(VerseUnit(inner_html, _verse_marker(node, anomalies)))
    return units


def step(
    unit: StructuralUnit,
    state: VerseNumberState,
    options: FormatOptions | None = None,
) -> tuple[VerseNumberState, list[Emission]]:
    """
    Jedno przejście maszyny stanów numeracji.

    Zwraca nowy stan i emisje dla jednostki; nie ma stanu poza argumentami,
    więc sekcję można testować w izolacji.
    """
    opts = options or FormatOptions()

    if isinstance(unit, HeaderUnit):
        return (
            VerseNumberState.AWAITING_FIRST_VERSE_NUMBER,
            [("header", clean(unit.inner_html, opts))],
        )

    text = clean(unit.inner_html, opts)

    if unit.verse_number is not None:
        text = strip_leading_number(text, unit.verse_number)
        return VerseNumberState.NUMBERS_RESOLVED, [("verse", unit.verse_number), ("text", text)]

    if state is VerseNumberState.AWAITING_FIRST_VERSE_NUMBER:
        return VerseNumberState.NUMBERS_RESOLVED, [("verse", IMPLICIT_FIRST_VERSE), ("text", text)]

    # kontynuacja poprzedniego wersetu (np. kolejna linia poezji); stan resetuje
    # tylko nagłówek, więc pierwsza jednostka nowego rozdziału bez nagłówka
    # (sam span.chapternum, bez .versenum) też dokleja się do poprzedniego wersetu
    return state, [("text", text)]


def assemble(units: Iterable[StructuralUnit], options: FormatOptions | None = None) -> str:
    """Przepuszcza jednostki przez step() i składa Markdown."""
    opts = options or FormatOptions()
    state = VerseNumberState.AWAITING_FIRST_VERSE_NUMBER
    emissions: list[Emission] = []
    for unit in units:
        state, emitted = step(unit, state, opts)
        emissions.extend(emitted)

    if opts.newline:
        return _render_lines(emissions, opts)
    return _render_paragraphs(emissions, opts)


def strip_leading_number(text: str, verse_number: str) -> str:
    """Usuwa numer wersetu z początku tekstu ("2 In the…" → "In the…"), ale nie "20"."""
    pattern = rf"^{re.escape(verse_number)}(?!\d)\s*"
    return re.sub(pattern, "", text, count=1)


def find_title(units: Iterable[StructuralUnit]) -> str | None:
    """Oczyszczony tekst pierwszego nagłówka; None gdy brak (lub pusty)."""
    header = next((u for u in units if isinstance(u, HeaderUnit)), None)
    if header is None:
        return None
    return clean(header.inner_html) or None


def find_version_tag(soup: BeautifulSoup) -> str | None:
    """
    Skrót przekładu z klasy "version-XXX" (np. NKJV, NVI-PT).

    Pierwszy element z taką klasą w kontenerze .passage-text / .passage-content
    (sam kontener lub jego potomek); None gdy kontenera albo klasy brak.
    """
    for root in soup.select(_VERSION_SCOPE_SELECTOR):
        for el in [root, *root.find_all(class_=_VERSION_CLASS_RE)]:
            for cls in el.get("class") or []:
                m = _VERSION_CLASS_RE.match(cls)
                if m:
                    return m.group(1)
    return None


# ---------------------------------------------------------------------------
# Pomocnicze
# ---------------------------------------------------------------------------

def _verse_marker(node: Tag, anomalies: list[Anomaly] | None) -> str | None:
    marker = node.select_one(_VERSENUM_SELECTOR)
    if marker is None:
        return None
    number = marker.get_text().strip()
    if not number:
        return None
    if _VERSE_NUMBER_RE.fullmatch(number):
        return number
    if anomalies is not None:
        anomalies.append(Anomaly.AMBIGUOUS_VERSE_MARKER)
    return None


def _render_lines(emissions: list[Emission], opts: FormatOptions) -> str:
    """Tryb domyślny: nagłówki i numery wersetów w osobnych liniach, poprzedzone pustą linią."""
    lines: list[str] = []
    for kind, value in emissions:
        if kind == "header":
            if opts.headers:
                lines += ["", f"## {value}"]
        elif kind == "verse":
            if opts.numbering:
                lines += ["", f"###### v{value}"]
        elif value:
            lines.append(value)
    return "\n".join(lines).strip()


def _render_paragraphs(emissions: list[Emission], opts: FormatOptions) -> str:
    """Tryb bez nowych linii: jeden akapit na sekcję, numery jako <sup>n</sup>."""
    blocks: list[str] = []
    paragraph: list[str] = []

    def flush() -> None:
        if paragraph:
            blocks.append(" ".join(paragraph))
            paragraph.clear()

    for kind, value in emissions:
        if kind == "header":
            flush()
            if opts.headers:
                blocks.append(f"## {value}")
        elif kind == "verse":
            if opts.numbering:
                paragraph.append(f"<sup>{value}</sup>")
        elif value:
            paragraph.append(value)
    flush()
    return "\n\n".join(blocks).strip()
