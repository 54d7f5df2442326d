from __future__ import annotations

from bs4 import BeautifulSoup

from data_model.passage import FormatOptions
from passage_parser.text_cleaner import clean, marker_label


def test_plain_text_is_a_fixed_point():
    text = "In the beginning God created the heavens and the earth."
    assert clean(text) == text
    once = clean("darkness <i>was</i> on the face")
    assert clean(once) == once


def test_superscript_annotation_text_is_removed():
    out = clean('Grace<sup class="crossreference">(<a href="#cen-B">B</a>)</sup> to you')
    assert out == "Grace to you"
    assert "B" not in out


def test_footnote_letter_never_leaks():
    out = clean('peace from God<sup class="footnote">[<a href="#fen-1a">a</a>]</sup> our Father')
    assert out == "peace from God our Father"


def test_nested_superscripts_are_removed_together():
    assert clean('<sup class="versenum">1<sup>x</sup></sup>text') == "text"


def test_chapter_number_label_is_removed():
    assert clean('<span class="chapternum">3 </span>Now the serpent') == "Now the serpent"


def test_italics_become_single_asterisks():
    assert clean("<i>word</i>") == "*word*"
    assert clean("darkness <em>was</em> on the deep") == "darkness *was* on the deep"


def test_empty_italics_do_not_produce_bold_marker():
    assert clean("a<i></i>b") == "ab"


def test_whitespace_is_collapsed_and_trimmed():
    assert clean("  In the\n\n  beginning \t God  ") == "In the beginning God"


def test_empty_fragment_yields_empty_string():
    assert clean("") == ""
    assert clean("   \n ") == ""


def test_malformed_fragment_is_tolerated():
    assert clean("<i>unclosed emphasis") == "*unclosed emphasis*"


def test_words_of_jesus_bold_only_when_enabled():
    html = '<span class="woj">I am the <i>way</i></span>'
    assert clean(html) == "I am the *way*"
    assert clean(html, FormatOptions(bold_words=True)) == "**I am the *way***"


def test_footnote_marker_kept_when_enabled():
    html = 'earth.<sup class="footnote" data-fn="#fen-NKJV-1a">[<a href="#fen-NKJV-1a">a</a>]</sup>'
    assert clean(html, FormatOptions(footnotes=True)) == "earth.[^a]"
    assert clean(html) == "earth."


def test_crossref_marker_kept_when_enabled():
    html = 'deep.<sup class="crossreference" data-cr="#cen-NKJV-2A">(<a>A</a>)</sup>'
    assert clean(html, FormatOptions(crossrefs=True)) == "deep.[^cr-A]"


def test_marker_label_falls_back_to_reference_id():
    sup = BeautifulSoup('<sup class="footnote" data-fn="#fen-NKJV-1a"></sup>', "html.parser").sup
    assert marker_label(sup) == "1a"
