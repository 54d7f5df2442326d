"""
passage_parser — konwersja HTML fragmentu Pisma do Markdownu.

Użycie:
  from passage_parser import extract, clean, FatalParseError

Moduły:
  text_cleaner — clean(): wewnętrzny HTML jednostki → NormalizedText
  extractor    — extract(): dokument → ExtractionResult (maszyna stanów numeracji)
  notes        — sekcje przypisów, odsyłaczy i copyright
  fetch        — pobieranie z BibleGateway / odczyt pliku
  errors       — PassageError, FatalParseError
"""

from .errors import FatalParseError, PassageError
from .extractor import (
    NO_TITLE,
    UNKNOWN_VERSION,
    assemble,
    classify_units,
    extract,
    parse_document,
    step,
)
from .fetch import fetch_passage, read_passage_file
from .text_cleaner import clean

__all__ = [
    # errors
    "PassageError",
    "FatalParseError",
    # extractor
    "NO_TITLE",
    "UNKNOWN_VERSION",
    "extract",
    "parse_document",
    "classify_units",
    "step",
    "assemble",
    # fetch
    "fetch_passage",
    "read_passage_file",
    # text_cleaner
    "clean",
]
