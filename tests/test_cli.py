from __future__ import annotations

import pytest

from bg2md.cli import main
from bg2md.commands.passage import remove_ansi_codes
from conftest import GENESIS_HTML, GENESIS_MARKDOWN
from data_model.passage import RawDocument


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    for name in ("BG2MD_VERSION", "BG2MD_BASE_URL", "BG2MD_OPEN_TIMEOUT", "BG2MD_READ_TIMEOUT"):
        monkeypatch.delenv(name, raising=False)


def test_local_file_prints_markdown(genesis_file, capsys):
    main(["passage", "--file", str(genesis_file)])
    assert capsys.readouterr().out == GENESIS_MARKDOWN + "\n"


def test_numbering_flag_disables_verse_lines(genesis_file, capsys):
    main(["passage", "-t", str(genesis_file), "-n"])
    out = capsys.readouterr().out
    assert "######" not in out
    assert "In the beginning" in out


def test_verbose_reports_metadata_on_stderr(genesis_file, capsys):
    main(["passage", "--file", str(genesis_file), "-i"])
    captured = capsys.readouterr()
    assert captured.out == GENESIS_MARKDOWN + "\n"
    assert "The History of Creation" in captured.err
    assert "NKJV" in captured.err


def test_show_prints_unit_table(genesis_file, capsys):
    main(["passage", "--file", str(genesis_file), "--show"])
    err = capsys.readouterr().err
    assert "header" in err
    assert "verse" in err


def test_fetch_uses_reference_and_version(monkeypatch, capsys):
    calls = {}

    def fake_fetch(reference, version, *, base_url, timeout):
        calls.update(reference=reference, version=version, timeout=timeout)
        return RawDocument(html=GENESIS_HTML, source="https://example.test/passage")

    monkeypatch.setattr("bg2md.commands.passage.fetch_passage", fake_fetch)
    main(["passage", "Genesis 1", "-v", "esv"])

    assert calls == {"reference": "Genesis 1", "version": "ESV", "timeout": (30.0, 10.0)}
    assert capsys.readouterr().out == GENESIS_MARKDOWN + "\n"


def test_missing_reference_exits_with_error(capsys):
    with pytest.raises(SystemExit) as excinfo:
        main(["passage"])
    assert excinfo.value.code == 1
    assert "Błąd" in capsys.readouterr().err


def test_http_error_exits_with_status_code(monkeypatch, capsys):
    import requests

    class _NotFound:
        status_code = 404
        url = "https://example.test"
        apparent_encoding = "utf-8"
        text = ""

        def raise_for_status(self):
            raise requests.HTTPError("404", response=self)

    monkeypatch.setattr("passage_parser.fetch.requests.get", lambda *a, **kw: _NotFound())
    with pytest.raises(SystemExit) as excinfo:
        main(["passage", "Hezekiah 1"])
    assert excinfo.value.code == 1
    assert "404" in capsys.readouterr().err


def test_empty_file_is_fatal(tmp_path, capsys):
    empty = tmp_path / "empty.html"
    empty.write_text("", encoding="utf-8")
    with pytest.raises(SystemExit) as excinfo:
        main(["passage", "--file", str(empty)])
    assert excinfo.value.code == 1
    assert capsys.readouterr().out == ""


def test_remove_ansi_codes():
    assert remove_ansi_codes("\x1b[31mred\x1b[0m text") == "red text"
