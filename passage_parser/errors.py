"""passage_parser/errors.py — wyjątki ekstraktora fragmentów."""

from __future__ import annotations


class PassageError(Exception):
    """Bazowy wyjątek pakietu passage_parser."""


class FatalParseError(PassageError):
    """
    Wejścia nie da się zinterpretować jako HTML (puste, nie-tekst,
    odrzucone przez parser albo bez żadnego elementu).

    Nie jest odzyskiwany wewnątrz ekstraktora; brak metadanych i
    niejednoznaczne numery wersetów to nie błędy, tylko Anomaly.
    """

    def __init__(self, message: str, source: str | None = None) -> None:
        super().__init__(message)
        self.source = source

    def __str__(self) -> str:
        base = super().__str__()
        return f"{base} ({self.source})" if self.source else base
