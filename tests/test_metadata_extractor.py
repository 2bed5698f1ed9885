# tests/test_metadata_extractor.py
import pytest

from models.meme import ImageRef, SocialPostItem, TextItem
from services.memes.metadata_extractor import extract_meme, parse_views

URL = "https://knowyourmeme.com/memes/doge"


def _page(header: str = "", body: str = "", aside: str = "") -> str:
    return f"""
    <html><body>
    <article class="entry">
      <div class="desktop-only"><header class="rel">{header}</header></div>
      <div class="desktop-only"><header class="rel"><section class="info"><h1>Mobile copy</h1></section></header></div>
      <div class="c">
        <section class="bodycopy">{body}</section>
        <aside class="right">{aside}</aside>
      </div>
    </article>
    </body></html>
    """


HEADER = """
  <a href="https://i.kym-cdn.com/entries/icons/original/doge.jpg" alt="Doge"><img src="thumb.jpg" alt="thumb"></a>
  <section class="info"><h1> Doge </h1></section>
  <section>
    <div class="cols">
      <aside class="stats"><dl><dd class="views"><a href="#">1,234,567</a></dd></dl></aside>
    </div>
  </section>
"""

BODY = """
  <h2>About</h2>
  <p>Doge is a slang term[1] for dog.</p>
  <h2>Spread</h2>
  <blockquote class="twitter-tweet">wow <a href="https://twitter.com/doge/status/99?lang=en">link</a></blockquote>
  <h2>Search Interest</h2>
  <iframe class="google-trends-iframe" data-src="https://trends.google.com/embed?q=doge"></iframe>
"""

ASIDE = """
  <dl>
    <dt>Status</dt><dd>Confirmed</dd>
    <dt>Type:</dt><dd><a href="/types/animal">Animal</a>, <a href="/types/image-macro">Image Macro</a></dd>
    <dt>Year</dt><dd><a href="/years/2010">2010</a> <a href="/years/2013">2013</a></dd>
    <dt>Origin</dt><dd> Tumblr </dd>
    <dt>Region</dt><dd><a href="/regions/japan">Japan</a></dd>
  </dl>
  <dl id="entry_tags"><dt>Tags</dt><dd><a>shiba inu</a>, <a>dog</a>, <a>dog</a></dd></dl>
"""


# -------------------------------------------------------------------
# 1️⃣  Full page
# -------------------------------------------------------------------
def test_full_page_extraction():
    details = extract_meme(_page(HEADER, BODY, ASIDE), URL)

    assert details.title == "Doge"
    assert details.link == URL
    assert details.image == ImageRef(url="https://i.kym-cdn.com/entries/icons/original/doge.jpg", alt="Doge")
    assert details.views == 1234567
    assert [s.title for s in details.sections] == ["About", "Spread"]
    assert details.sections[0].contents == [TextItem(html="Doge is a slang term for dog.")]
    assert details.sections[1].contents == [SocialPostItem(url="https://x.com/doge/status/99")]
    assert details.trends_url == "https://trends.google.com/embed?q=doge"
    assert details.types == ["Animal", "Image Macro"]
    assert details.year == "2010"
    assert details.origin == "Tumblr"
    assert details.region == "Japan"
    assert details.tags == ["shiba inu", "dog", "dog"]


def test_hero_alt_falls_back_to_inner_image():
    header = '<a href="https://i.kym-cdn.com/hero.png"><img src="t.png" alt="inner alt"></a>'
    details = extract_meme(_page(header=header), URL)
    assert details.image == ImageRef(url="https://i.kym-cdn.com/hero.png", alt="inner alt")


# -------------------------------------------------------------------
# 2️⃣  View counter – "no value" is not zero
# -------------------------------------------------------------------
@pytest.mark.parametrize(
    "text,expected",
    [("1,234,567", 1234567), ("0", 0), (" 42 ", 42), ("", None), ("n/a", None), ("1.5", None), ("1,234²", None)],
)
def test_parse_views(text, expected):
    assert parse_views(text) == expected


def test_missing_view_counter_is_none():
    details = extract_meme(_page(header='<section class="info"><h1>T</h1></section>'), URL)
    assert details.views is None


# -------------------------------------------------------------------
# 3️⃣  Missing regions degrade field by field
# -------------------------------------------------------------------
def test_missing_aside_keeps_the_rest():
    details = extract_meme(_page(HEADER, BODY, aside=""), URL)
    assert details.title == "Doge"
    assert len(details.sections) == 2
    assert details.types == []
    assert (details.year, details.origin, details.region) == ("", "", "")
    assert details.tags == []


def test_label_must_match_exactly():
    aside = "<dl><dt>Type</dt><dd><a>Animal</a></dd><dt>Year:</dt><dd><a>2010</a></dd></dl>"
    details = extract_meme(_page(aside=aside), URL)
    assert details.types == []
    assert details.year == ""


def test_page_without_article_gives_empty_record():
    details = extract_meme("<html><body><p>Not found</p></body></html>", URL)
    assert details.link == URL
    assert details.title == ""
    assert details.image == ImageRef()
    assert details.views is None
    assert details.sections == []
    assert details.trends_url == ""
    assert details.tags == []


def test_no_trends_widget_gives_empty_string():
    details = extract_meme(_page(HEADER, "<h2>About</h2><p>x</p>"), URL)
    assert details.trends_url == ""


def test_unparseable_view_counter_keeps_the_rest():
    header = HEADER.replace("1,234,567", "1,234²")
    details = extract_meme(_page(header, BODY, ASIDE), URL)
    assert details.views is None
    assert details.title == "Doge"
    assert len(details.sections) == 2
