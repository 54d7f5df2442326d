"""Komenda: bg2md passage — pobiera fragment Pisma i wypisuje go jako Markdown."""

from __future__ import annotations

import argparse
import re

import requests
from rich.console import Console
from rich.table import Table
from rich.text import Text
from rich import box
from rich.markup import escape

from bg2md._config import load_settings
from data_model.passage import ExtractionResult, FormatOptions, HeaderUnit, RawDocument, StructuralUnit
from passage_parser import (
    FatalParseError,
    classify_units,
    extract,
    fetch_passage,
    parse_document,
    read_passage_file,
)
from passage_parser.text_cleaner import clean

console = Console(stderr=True)

_ANSI_RE = re.compile(r"\x1b\[([;\d]+)?m")


# ---------------------------------------------------------------------------
# Pobieranie
# ---------------------------------------------------------------------------

def _load_document(args: argparse.Namespace) -> RawDocument:
    if args.file:
        if args.verbose:
            console.print(f"[dim]Plik lokalny:[/dim] {args.file}")
        try:
            return read_passage_file(args.file)
        except OSError as e:
            console.print(f"[red]Nie można odczytać pliku:[/red] {e}")
            raise SystemExit(1)

    settings = load_settings()
    version = (args.bible_version or settings.version).upper()
    if args.verbose:
        console.print(
            f"Pobieranie [bold]{args.reference}[/bold] ([cyan]{version}[/cyan]) "
            f"z {settings.base_url} …"
        )
    try:
        return fetch_passage(
            args.reference,
            version,
            base_url=settings.base_url,
            timeout=settings.timeout,
        )
    except requests.HTTPError as e:
        code = e.response.status_code if e.response is not None else "?"
        console.print(f"[red]Błąd: serwer zwrócił kod HTTP {code}[/red]")
        raise SystemExit(1)
    except requests.RequestException as e:
        console.print(f"[red]Błąd pobierania:[/red] {e}")
        raise SystemExit(1)


# ---------------------------------------------------------------------------
# Wyświetlanie w terminalu
# ---------------------------------------------------------------------------

def _show_table(units: list[StructuralUnit]) -> None:
    if not units:
        console.print("[yellow]Brak jednostek strukturalnych.[/yellow]")
        return

    table = Table(
        box=box.SIMPLE_HEAD,
        show_header=True,
        header_style="bold white",
        row_styles=["", "dim"],
        expand=False,
    )
    table.add_column("#",     justify="right", no_wrap=True, style="dim")
    table.add_column("TYP",   no_wrap=True, style="bold cyan")
    table.add_column("NUMER", justify="right", no_wrap=True)
    table.add_column("TEKST", no_wrap=False, max_width=70)

    for idx, unit in enumerate(units, start=1):
        if isinstance(unit, HeaderUnit):
            kind, number = "header", "-"
        else:
            kind, number = "verse", unit.verse_number or "-"
        # nawiasy kwadratowe w tekście wersetu to nie znaczniki rich
        table.add_row(str(idx), kind, number, Text(clean(unit.inner_html)[:120]))

    console.print()
    console.print(table)
    console.print(f"  [dim]{len(units)} jednostek[/dim]\n")


def _report(result: ExtractionResult, source: str) -> None:
    console.print(f"[dim]Źródło:[/dim] {escape(source)}")
    console.print(f"[dim]Tytuł:[/dim] {escape(result.title)}  [dim]Przekład:[/dim] {escape(result.version_tag)}")
    for anomaly in result.anomalies:
        console.print(f"[yellow]Uwaga:[/yellow] {anomaly}")
    console.print("[dim]Sformatowany fragment:[/dim]")
    console.print(result.passage_markdown, markup=False, highlight=False)


def remove_ansi_codes(text: str) -> str:
    return _ANSI_RE.sub("", text)


# ---------------------------------------------------------------------------
# Główna logika komendy
# ---------------------------------------------------------------------------

def _options(args: argparse.Namespace) -> FormatOptions:
    return FormatOptions(
        headers=args.headers,
        numbering=args.numbering,
        newline=args.newline,
        bold_words=args.boldwords,
        footnotes=args.footnotes,
        crossrefs=args.crossrefs,
        copyright=args.copyright,
    )


def run(args: argparse.Namespace) -> None:
    if not args.reference and not args.file:
        console.print("[red]Błąd: podaj referencję (np. \"John 3:16\") albo --file.[/red]")
        raise SystemExit(1)

    raw = _load_document(args)

    try:
        result = extract(raw.html, _options(args))
    except FatalParseError as e:
        console.print(f"[red]Błąd parsowania {raw.source}:[/red] {e}")
        raise SystemExit(1)

    if args.show:
        _show_table(classify_units(parse_document(raw.html, raw.source)))

    if args.verbose:
        _report(result, raw.source)

    print(remove_ansi_codes(result.passage_markdown))


# ---------------------------------------------------------------------------
# Rejestracja parsera
# ---------------------------------------------------------------------------

def add_parser(subparsers: argparse._SubParsersAction) -> None:  # type: ignore[type-arg]
    p = subparsers.add_parser(
        "passage",
        help="Pobiera fragment z BibleGateway (lub pliku) i wypisuje Markdown.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        description="""
Pobiera fragment Pisma (wersja do druku BibleGateway) albo czyta lokalny zrzut
strony i wypisuje go jako Markdown:

  ## <nagłówek>
  ###### v<numer>
  <tekst wersetu>

Przykłady:
  bg2md passage "John 3:16-18"
  bg2md passage "Psalm 23" -v ESV --footnotes
  bg2md passage --file genesis1.html --show -i
        """,
    )
    p.add_argument(
        "reference",
        metavar="REFERENCJA",
        nargs="?",
        default=None,
        help="Referencja fragmentu, np. \"Genesis 1\" (pomijana przy --file).",
    )
    p.add_argument(
        "-b", "--boldwords",
        action="store_true",
        help="Słowa Jezusa pogrubione (**…**).",
    )
    p.add_argument(
        "-c", "--copyright",
        action="store_true",
        help="Dołącz informację o prawach autorskich przekładu.",
    )
    p.add_argument(
        "-e", "--headers",
        action="store_false",
        help="Pomiń nagłówki sekcji (## …).",
    )
    p.add_argument(
        "-f", "--footnotes",
        action="store_true",
        help="Dołącz przypisy ([^a] + sekcja \"### Footnotes\").",
    )
    p.add_argument(
        "-i", "--info",
        dest="verbose",
        action="store_true",
        help="Wypisuj informacje diagnostyczne na stderr.",
    )
    p.add_argument(
        "-l", "--newline",
        action="store_false",
        help="Bez nowych linii: jeden akapit na sekcję, numery jako <sup>n</sup>.",
    )
    p.add_argument(
        "-n", "--numbering",
        action="store_false",
        help="Pomiń numery wersetów (###### v…).",
    )
    p.add_argument(
        "-r", "--crossrefs",
        action="store_true",
        help="Dołącz odsyłacze ([^cr-A] + sekcja \"### Cross references\").",
    )
    p.add_argument(
        "-t", "--file",
        metavar="PLIK",
        default=None,
        help="Użyj lokalnego pliku HTML zamiast pobierania.",
    )
    p.add_argument(
        "-v", "--bible-version",
        metavar="PRZEKŁAD",
        default=None,
        help="Przekład (domyślnie: BG2MD_VERSION albo NKJV).",
    )
    p.add_argument(
        "--show",
        action="store_true",
        help="Wyświetl tabelę jednostek strukturalnych na stderr.",
    )
    p.set_defaults(func=run)
