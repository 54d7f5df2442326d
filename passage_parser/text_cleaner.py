"""
passage_parser/text_cleaner.py — oczyszczanie wewnętrznego HTML jednej jednostki.

Co usuwamy:
  - przypisy i odsyłacze (<sup>: footnote, crossreference, versenum)
  - dekoracyjny numer rozdziału (span.chapternum)
  - wszystkie pozostałe tagi (zostaje sam tekst w kolejności dokumentu)

Co zachowujemy:
  - kursywę (<i>, <em>) jako *tekst*
  - opcjonalnie: słowa Jezusa (.woj) jako **tekst**, znaczniki [^a] / [^cr-A]

Format wyjściowy: jedna linia plain text, białe znaki zwinięte do spacji.
"""

from __future__ import annotations

import re

from bs4 import BeautifulSoup, Tag

from data_model.passage import FormatOptions

# ---------------------------------------------------------------------------
# Stałe
# ---------------------------------------------------------------------------

# Selektory adnotacji usuwanych w całości (węzeł + potomkowie).
_ANNOTATION_SELECTOR = "sup, span.chapternum"

_FOOTNOTE_SELECTOR = "sup.footnote"
_CROSSREF_SELECTOR = "sup.crossreference"
_WOJ_SELECTOR = ".woj"
_EMPHASIS_TAGS = ["i", "em"]

_WHITESPACE_RE = re.compile(r"\s+")
_LABEL_STRIP_RE = re.compile(r"[^A-Za-z0-9]+")

_DEFAULT_OPTIONS = FormatOptions()


# ---------------------------------------------------------------------------
# Publiczne API
# ---------------------------------------------------------------------------

def clean(inner_html: str, options: FormatOptions | None = None) -> str:
    """
    Zamienia wewnętrzny HTML jednostki na NormalizedText.

    Kolejność kroków ma znaczenie, każdy pracuje na wyniku poprzedniego:
      1. parsowanie fragmentu (html.parser, tolerancyjnie)
      2. opcjonalne przepisanie przypisów/odsyłaczy na znaczniki Markdown
      3. usunięcie <sup> i span.chapternum
      4. .woj → **…** (opcjonalnie), <i>/<em> → *…*
      5. serializacja do tekstu
      6. zwinięcie białych znaków i przycięcie
    """
    if not inner_html or not inner_html.strip():
        return ""

    opts = options or _DEFAULT_OPTIONS
    fragment = BeautifulSoup(inner_html, "html.parser")

    if opts.footnotes:
        for sup in fragment.select(_FOOTNOTE_SELECTOR):
            sup.replace_with(f"[^{marker_label(sup)}]")
    if opts.crossrefs:
        for sup in fragment.select(_CROSSREF_SELECTOR):
            sup.replace_with(f"[^cr-{marker_label(sup)}]")

    for tag in fragment.select(_ANNOTATION_SELECTOR):
        # zagnieżdżony <sup> mógł już zniknąć razem z rodzicem
        if not tag.decomposed:
            tag.decompose()

    if opts.bold_words:
        for woj in fragment.select(_WOJ_SELECTOR):
            _wrap(woj, "**")

    for tag in fragment.find_all(_EMPHASIS_TAGS):
        text = tag.get_text()
        # pusta kursywa dałaby "**", czyli pogrubienie
        tag.replace_with(f"*{text}*" if text.strip() else text)

    return normalize_whitespace(fragment.get_text())


def normalize_whitespace(text: str) -> str:
    return _WHITESPACE_RE.sub(" ", text).strip()


def marker_label(sup: Tag) -> str:
    """
    Etykieta przypisu/odsyłacza z widocznego tekstu znacznika: "[a]" → "a", "(A)" → "A".

    Fallback: końcówka identyfikatora z data-fn / data-cr ("#fen-NKJV-1a" → "1a").
    """
    label = _LABEL_STRIP_RE.sub("", sup.get_text())
    if label:
        return label
    ref = sup.get("data-fn") or sup.get("data-cr") or ""
    if isinstance(ref, list):
        ref = " ".join(ref)
    return _LABEL_STRIP_RE.sub("", ref.rsplit("-", 1)[-1]) or "note"


# ---------------------------------------------------------------------------
# Pomocnicze
# ---------------------------------------------------------------------------

def _wrap(tag: Tag, marker: str) -> None:
    """Otacza zawartość tagu znacznikiem i zdejmuje sam tag (dzieci zostają)."""
    tag.insert_before(marker)
    tag.insert_after(marker)
    tag.unwrap()
