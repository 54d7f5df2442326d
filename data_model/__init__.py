"""
data_model — struktury danych bg2md.

Użycie:
  from data_model import RawDocument, HeaderUnit, VerseUnit, ExtractionResult, ...

Moduły:
  passage — RawDocument, HeaderUnit, VerseUnit, StructuralUnit,
            VerseNumberState, Anomaly, FormatOptions, ExtractionResult
"""

from .passage import (
    RawDocument,
    HeaderUnit,
    VerseUnit,
    StructuralUnit,
    VerseNumberState,
    Anomaly,
    FormatOptions,
    ExtractionResult,
)

__all__ = [
    "RawDocument",
    "HeaderUnit",
    "VerseUnit",
    "StructuralUnit",
    "VerseNumberState",
    "Anomaly",
    "FormatOptions",
    "ExtractionResult",
]
