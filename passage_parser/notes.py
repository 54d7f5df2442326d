"""
passage_parser/notes.py — sekcje dodatkowe: przypisy, odsyłacze, copyright.

Przypisy i odsyłacze są dołączane tylko wtedy, gdy odpowiedni znacznik
występuje w treści fragmentu (mapowanie data-fn / data-cr → etykieta);
pozycje listy bez znacznika w tekście są pomijane.
"""

from __future__ import annotations

from bs4 import BeautifulSoup, Tag

from data_model.passage import FormatOptions
from passage_parser.text_cleaner import clean, marker_label, normalize_whitespace

_PASSAGE_SELECTOR = ".passage-content"
_FOOTNOTE_ITEMS = ".footnotes li[id]"
_CROSSREF_ITEMS = ".crossrefs li[id]"
_COPYRIGHT_SELECTOR = ".publisher-info-bottom, .copyright-table"

FOOTNOTES_HEADER = "### Footnotes"
CROSSREFS_HEADER = "### Cross references"


def note_sections(soup: BeautifulSoup, options: FormatOptions) -> list[str]:
    """Zwraca gotowe bloki Markdown w kolejności: przypisy, odsyłacze, copyright."""
    sections: list[str] = []
    if options.footnotes:
        block = footnotes_block(soup)
        if block:
            sections.append(block)
    if options.crossrefs:
        block = crossrefs_block(soup)
        if block:
            sections.append(block)
    if options.copyright:
        notice = copyright_notice(soup)
        if notice:
            sections.append(f"---\n\n{notice}")
    return sections


def footnotes_block(soup: BeautifulSoup) -> str:
    labels = _marker_labels(soup, "sup.footnote", "data-fn")
    lines: list[str] = []
    for item in soup.select(_FOOTNOTE_ITEMS):
        label = labels.get(item["id"])
        if label is None:
            continue
        note_el = item.select_one(".footnote-text")
        if note_el is not None:
            ref = _first_link_text(item)
            note = clean(note_el.decode_contents())
            text = f"{ref} {note}" if ref else note
        else:
            text = clean(item.decode_contents())
        lines.append(f"[^{label}]: {text}")
    if not lines:
        return ""
    return "\n".join([FOOTNOTES_HEADER, "", *lines])


def crossrefs_block(soup: BeautifulSoup) -> str:
    labels = _marker_labels(soup, "sup.crossreference", "data-cr")
    lines: list[str] = []
    for item in soup.select(_CROSSREF_ITEMS):
        label = labels.get(item["id"])
        if label is None:
            continue
        refs = [
            normalize_whitespace(a.get("data-bibleref") or a.get_text())
            for a in item.select("a.crossref-link")
        ]
        if not refs:
            continue
        lines.append(f"[^cr-{label}]: " + "; ".join(refs))
    if not lines:
        return ""
    return "\n".join([CROSSREFS_HEADER, "", *lines])


def copyright_notice(soup: BeautifulSoup) -> str:
    block = soup.select_one(_COPYRIGHT_SELECTOR)
    if block is None:
        return ""
    return block.get_text(" ", strip=True)


# ---------------------------------------------------------------------------
# Pomocnicze
# ---------------------------------------------------------------------------

def _marker_labels(soup: BeautifulSoup, selector: str, ref_attr: str) -> dict[str, str]:
    """id pozycji listy (bez '#') → etykieta znacznika z treści fragmentu."""
    scope = soup.select(_PASSAGE_SELECTOR) or [soup]
    labels: dict[str, str] = {}
    for root in scope:
        for sup in root.select(selector):
            ref = sup.get(ref_attr)
            if isinstance(ref, str) and ref.strip("#"):
                labels.setdefault(ref.lstrip("#"), marker_label(sup))
    return labels


def _first_link_text(item: Tag) -> str:
    link = item.find("a")
    return normalize_whitespace(link.get_text()) if link is not None else ""
