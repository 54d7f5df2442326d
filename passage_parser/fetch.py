"""passage_parser/fetch.py — pobieranie HTML fragmentu (BibleGateway lub plik lokalny)."""

from __future__ import annotations

from pathlib import Path

import requests

from data_model.passage import RawDocument

DEFAULT_BASE_URL = "https://www.biblegateway.com/passage/"
DEFAULT_TIMEOUT: tuple[float, float] = (30.0, 10.0)  # (connect, read)

_HEADERS = {
    "User-Agent": (
        "Mozilla/5.0 (Windows NT 10.0; Win64; x64) "
        "AppleWebKit/537.36 (KHTML, like Gecko) "
        "Chrome/120.0.0.0 Safari/537.36"
    )
}


def fetch_passage(
    reference: str,
    version: str,
    *,
    base_url: str = DEFAULT_BASE_URL,
    timeout: tuple[float, float] = DEFAULT_TIMEOUT,
) -> RawDocument:
    """
    Pobiera wersję do druku fragmentu (interface=print) dla danej referencji.

    Błędy HTTP (raise_for_status) i sieci propagują jako wyjątki requests.
    """
    params = {"search": reference, "version": version, "interface": "print"}
    resp = requests.get(base_url, params=params, timeout=timeout, headers=_HEADERS)
    resp.raise_for_status()
    resp.encoding = resp.apparent_encoding or "utf-8"
    return RawDocument(html=resp.text, source=resp.url or base_url)


def read_passage_file(path: str | Path) -> RawDocument:
    """Czyta lokalny zrzut strony (UTF-8); OSError propaguje do wywołującego."""
    file_path = Path(path)
    return RawDocument(html=file_path.read_text(encoding="utf-8"), source=str(file_path))
