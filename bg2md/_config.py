"""
Konfiguracja bg2md — zmienne środowiskowe (opcjonalnie z pliku .env).

Zmienne:
  BG2MD_VERSION        domyślny przekład (NKJV)
  BG2MD_BASE_URL       adres strony fragmentu BibleGateway
  BG2MD_OPEN_TIMEOUT   timeout połączenia w sekundach (30)
  BG2MD_READ_TIMEOUT   timeout odczytu w sekundach (10)
"""

from __future__ import annotations

import os
import pathlib
from dataclasses import dataclass

from dotenv import load_dotenv

from passage_parser.fetch import DEFAULT_BASE_URL

DEFAULT_VERSION = "NKJV"

_ENV_FILE = pathlib.Path(__file__).resolve().parent.parent / ".env"


@dataclass(frozen=True, slots=True)
class Settings:
    version: str
    base_url: str
    open_timeout: float
    read_timeout: float

    @property
    def timeout(self) -> tuple[float, float]:
        return (self.open_timeout, self.read_timeout)


def load_settings(env_file: pathlib.Path | None = _ENV_FILE) -> Settings:
    """Wczytuje .env (bez nadpisywania istniejących zmiennych) i buduje Settings."""
    if env_file is not None:
        load_dotenv(env_file, override=False)
    return Settings(
        version      = os.getenv("BG2MD_VERSION",  DEFAULT_VERSION),
        base_url     = os.getenv("BG2MD_BASE_URL", DEFAULT_BASE_URL),
        open_timeout = _float_env("BG2MD_OPEN_TIMEOUT", 30.0),
        read_timeout = _float_env("BG2MD_READ_TIMEOUT", 10.0),
    )


def _float_env(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return float(raw)
    except ValueError:
        raise ValueError(f"{name} musi być liczbą sekund, otrzymano {raw!r}") from None
