"""Wspólne fixture'y: zrzuty stron BibleGateway (wersja do druku)."""

from __future__ import annotations

import pytest

GENESIS_HTML = """
<html><body>
<div class="passage-text">
<div class="passage-content passage-class-0">
<div class="version-NKJV result-text-style-normal text-html">
<h3><span id="en-NKJV-1" class="text Gen-1-1">The History of Creation</span></h3>
<p class="chapter-1"><span class="text Gen-1-1"><span class="chapternum">1 </span>In the beginning God created the heavens and the earth.<sup data-fn="#fen-NKJV-1a" class="footnote">[<a href="#fen-NKJV-1a" title="See footnote a">a</a>]</sup></span>
<span id="en-NKJV-2" class="text Gen-1-2"><sup class="versenum">2 </sup>The earth was without form, and void; and darkness <i>was</i> on the face of the deep.<sup class="crossreference" data-cr="#cen-NKJV-2A">(<a href="#cen-NKJV-2A" title="See cross-reference A">A</a>)</sup></span></p>
<div class="footnotes">
<h4>Footnotes</h4>
<ol><li id="fen-NKJV-1a"><a href="#en-NKJV-1" title="Go to Genesis 1:1">Genesis 1:1</a> <span class="footnote-text">Or <i>In the beginning of</i></span></li>
<li id="fen-NKJV-9z"><a href="#en-NKJV-9" title="Go to Genesis 1:9">Genesis 1:9</a> <span class="footnote-text">Not in this passage</span></li></ol>
</div>
<div class="crossrefs hidden">
<h4>Cross references</h4>
<ol><li id="cen-NKJV-2A"><a href="#en-NKJV-2" title="Go to Genesis 1:2">Genesis 1:2</a> : <a class="crossref-link" href="/passage/?search=Jeremiah+4:23" data-bibleref="Jer. 4:23">Jer. 4:23</a>; <a class="crossref-link" href="/passage/?search=Isaiah+45:18" data-bibleref="Is. 45:18">Is. 45:18</a></li></ol>
</div>
</div>
</div>
<div class="publisher-info-bottom with-single"><strong><a href="/versions/">New King James Version</a></strong> (NKJV)<p>Scripture taken from the New King James Version®. Copyright © 1982 by Thomas Nelson. Used by permission. All rights reserved.</p></div>
</div>
</body></html>
"""

GENESIS_MARKDOWN = (
    "## The History of Creation\n"
    "\n"
    "###### v1\n"
    "In the beginning God created the heavens and the earth.\n"
    "\n"
    "###### v2\n"
    "The earth was without form, and void; and darkness *was* on the face of the deep."
)

PSALMS_HTML = """
<div class="passage-content">
<div class="version-ESV">
<h3><span class="text Ps-23-1">The LORD Is My Shepherd</span></h3>
<div class="poetry"><p class="line"><span class="text Ps-23-1"><span class="chapternum">23 </span>The LORD is my shepherd;</span><br>
<span class="text Ps-23-1">I shall not want.</span><br>
<span class="text Ps-23-2"><sup class="versenum">2 </sup>He makes me lie down in green pastures.</span></p></div>
<h3><span class="text Ps-24-1">The King of Glory</span></h3>
<p><span class="text Ps-24-1"><span class="chapternum">24 </span>The earth is the LORD’s</span></p>
</div>
</div>
"""

PSALMS_MARKDOWN = (
    "## The LORD Is My Shepherd\n"
    "\n"
    "###### v1\n"
    "The LORD is my shepherd;\n"
    "I shall not want.\n"
    "\n"
    "###### v2\n"
    "He makes me lie down in green pastures.\n"
    "\n"
    "## The King of Glory\n"
    "\n"
    "###### v1\n"
    "The earth is the LORD’s"
)


@pytest.fixture
def genesis_html() -> str:
    return GENESIS_HTML


@pytest.fixture
def psalms_html() -> str:
    return PSALMS_HTML


@pytest.fixture
def genesis_file(tmp_path):
    path = tmp_path / "genesis1.html"
    path.write_text(GENESIS_HTML, encoding="utf-8")
    return path
