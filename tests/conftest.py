from __future__ import annotations

from bs4 import BeautifulSoup
from bs4.element import Tag
import pytest


def make_tag(html: str) -> Tag:
    """Parse a fragment and return its first element."""
    return BeautifulSoup(html, "html.parser").find()


@pytest.fixture
def article_html() -> str:
    return """
<div class="mw-parser-output">
  <div class="shortdescription nomobile">English mathematician</div>
  <style>.mw-parser-output .hatnote{font-style:italic}</style>
  <div role="note" class="hatnote navigation-not-searchable">For other uses, see Ada.</div>
  <table class="infobox biography vcard"><tr><th>Born</th><td>10 December 1815</td></tr></table>
  <p><b>Ada Lovelace</b> was an English <a href="/wiki/Mathematician">mathematician</a>.<sup class="reference">[1]</sup></p>
  <div id="toc" class="toc"><h2>Contents</h2><ul><li>1 Early life</li></ul></div>
  <div class="mw-heading mw-heading2"><h2 id="Early_life">Early life</h2><span class="mw-editsection">[<a href="#">edit</a>]</span></div>
  <figure typeof="mw:File/Thumb"><img src="ada.jpg"><figcaption>Portrait</figcaption></figure>
  <p>Born in London.</p>
  <div class="mw-heading mw-heading3"><h3 id="Family">Family</h3></div>
  <ul><li>Lord Byron</li><li>Anne Isabella Milbanke</li></ul>
  <div class="mw-heading mw-heading2"><h2 id="Works">Works</h2></div>
  <table class="wikitable"><tr><th>Year</th><th>Work</th></tr><tr><td>1843</td><td>Notes</td></tr></table>
  <table class="layout"><tr><td><h3>Not a section</h3></td></tr></table>
  <div role="navigation" class="navbox"><h3>Related</h3></div>
</div>
"""
