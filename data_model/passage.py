"""
data_model/passage.py — model fragmentu Pisma (passage) i jego jednostek.

RawDocument trafia do ekstraktora raz na uruchomienie; ekstraktor dzieli go
na jednostki strukturalne (HeaderUnit | VerseUnit) w kolejności dokumentu
i zwraca ExtractionResult z gotowym Markdownem.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum


@dataclass(frozen=True, slots=True)
class RawDocument:
    html: str
    source: str          # URL albo ścieżka pliku, tylko do diagnostyki


@dataclass(frozen=True, slots=True)
class HeaderUnit:
    """Nagłówek sekcji (np. "Genesis 1" albo tytuł perykopy)."""

    inner_html: str


@dataclass(frozen=True, slots=True)
class VerseUnit:
    """
    Tekst (części) wersetu.

    verse_number to dosłowny numer z zagnieżdżonego znacznika .versenum;
    None gdy źródło go pominęło (pierwszy werset rozdziału) albo gdy
    jednostka jest kontynuacją poprzedniego wersetu.
    """

    inner_html: str
    verse_number: str | None = None


# Jednostki w kolejności dokumentu; kolejność jest jedynym sygnałem sekwencji.
type StructuralUnit = HeaderUnit | VerseUnit


class VerseNumberState(StrEnum):
    """Stan numeracji w obrębie jednej sekcji (resetowany przez nagłówek)."""

    AWAITING_FIRST_VERSE_NUMBER = "awaiting_first_verse_number"
    NUMBERS_RESOLVED            = "numbers_resolved"


class Anomaly(StrEnum):
    """Odstępstwa od oczekiwanego znacznikowania, rozwiązane wartością domyślną."""

    MISSING_TITLE          = "W_MISSING_TITLE"
    MISSING_VERSION        = "W_MISSING_VERSION"
    AMBIGUOUS_VERSE_MARKER = "W_AMBIGUOUS_VERSE_MARKER"


@dataclass(frozen=True, slots=True)
class FormatOptions:
    """
    Przełączniki formatu wyjścia.

    Wartości domyślne dają dokładnie gramatykę:
      ## <nagłówek> / ###### v<numer> / tekst
    """

    headers: bool = True       # False: bez linii "## …" (reset numeracji zostaje)
    numbering: bool = True     # False: bez linii "###### v…"
    newline: bool = True       # False: jedna linia na sekcję, numery jako <sup>n</sup>
    bold_words: bool = False   # .woj → **tekst**
    footnotes: bool = False    # [^a] w tekście + sekcja "### Footnotes"
    crossrefs: bool = False    # [^cr-A] w tekście + sekcja "### Cross references"
    copyright: bool = False    # blok wydawcy na końcu, po "---"


@dataclass(frozen=True, slots=True)
class ExtractionResult:
    title: str
    version_tag: str
    passage_markdown: str
    anomalies: tuple[Anomaly, ...] = ()
