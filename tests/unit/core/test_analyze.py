"""Unit tests for core/analyze.py"""

import pytest

from mdindex.core.analyze import (
    analyze_content,
    count_words,
    extract_headers,
    extract_links,
    reading_time,
    split_sentences,
    to_plain_text,
)


# --- extract_links ---

def test_extract_links_markdown():
    """Markdown links are reported once with their display text."""
    links = extract_links("Visit [site](http://example.com).")
    assert [(l.type, l.text, l.url) for l in links] == [("markdown", "site", "http://example.com")]


def test_extract_links_order_markdown_html_then_bare():
    """Markdown links come first, then HTML anchors, then bare URLs."""
    body = (
        "See https://bare.example.com first, "
        '<a href="https://html.example.com">html</a> then '
        "[md](https://md.example.com)."
    )
    links = extract_links(body)
    assert [l.type for l in links] == ["markdown", "html", "url"]
    assert [l.url for l in links] == [
        "https://md.example.com", "https://html.example.com", "https://bare.example.com",
    ]


def test_extract_links_html_strips_inner_tags():
    links = extract_links('<a class="x" href="https://example.com/api"><b>the</b> API</a>')
    assert links[0].type == "html"
    assert links[0].text == "the API"
    assert links[0].url == "https://example.com/api"


def test_extract_links_no_duplicate_of_markdown_or_html_urls():
    """URLs inside markdown or HTML links are not captured again as bare URLs."""
    body = '[a](https://a.example.com) <a href="https://b.example.com">https://b.example.com</a>'
    links = extract_links(body)
    assert [l.url for l in links] == ["https://a.example.com", "https://b.example.com"]


def test_extract_links_bare_url_trailing_punctuation():
    links = extract_links("Docs live at https://example.com/docs. Ask at http://example.com/faq?")
    assert [l.url for l in links] == ["https://example.com/docs", "http://example.com/faq"]
    assert all(l.type == "url" and l.text == l.url for l in links)


def test_extract_links_bare_urls_in_html_text_and_quotes():
    """Only a `(` or `[` right before a URL, or an enclosing link, hides it."""
    body = '<p>https://example.com/docs</p> and "https://q.example.com" with key=https://k.example.com'
    links = extract_links(body)
    assert [(l.type, l.url) for l in links] == [
        ("url", "https://example.com/docs"),
        ("url", "https://q.example.com"),
        ("url", "https://k.example.com"),
    ]


def test_extract_links_bracketed_urls_not_bare():
    assert extract_links("(https://p.example.com) [https://b.example.com]") == []


def test_extract_links_drops_empty_urls():
    assert extract_links("[empty]() [blank](   ) <a href=\"\">none</a>") == []


def test_extract_links_ignores_images():
    links = extract_links("![alt](https://example.com/pic.png)")
    assert links == []


# --- extract_headers ---

def test_extract_headers_levels_and_trim():
    body = "# One\n\n## Two  \n###### Six\nnot # a header\n####### seven"
    assert extract_headers(body) == ["One", "Two", "Six"]


def test_extract_headers_requires_space():
    assert extract_headers("#hashtag\n#\nnext line") == []


def test_extract_headers_drops_empty():
    assert extract_headers("#   \n## \t\n# Real") == ["Real"]


# --- to_plain_text ---

def test_to_plain_text_strips_syntax():
    body = "# Title\n\nSome **bold** and _em_ and `code`.\n\n![img](a.png)\n\n[link](http://x.com) <br/>end"
    assert to_plain_text(body) == "Title Some bold and em and code. link end"


def test_to_plain_text_is_idempotent(rich_doc):
    once = to_plain_text(rich_doc)
    assert to_plain_text(once) == once


@pytest.mark.parametrize("body", [
    "# Title\n\n**bold** _em_ `code`",
    "<div><p>Para <b>one</b></p></div>",
    "[a](http://x.com) and ![img](p.png) and [b](/rel)",
    "a < b and c > d",
    "line one\n\n\n   line two\t\tend",
])
def test_to_plain_text_is_idempotent_cases(body):
    once = to_plain_text(body)
    assert to_plain_text(once) == once


def test_to_plain_text_emphasis_between_link_parts():
    """Marks stripped after link replacement can join `[a]` and `(b)` into a new link."""
    once = to_plain_text("see [a]_(b)")
    assert once == "see [a](b)"
    assert to_plain_text(once) == "see a"


def test_to_plain_text_no_markdown_left():
    text = to_plain_text("## Hi\n\nVisit [site](http://example.com).")
    assert not set("#[]*`_") & set(text)


# --- count_words / reading_time ---

@pytest.mark.parametrize("text,expected", [
    ("", 0),
    ("one", 1),
    ("one two  three", 3),
])
def test_count_words(text, expected):
    assert count_words(text) == expected


@pytest.mark.parametrize("words,minutes", [
    (0, 0), (1, 1), (199, 1), (200, 1), (201, 2), (400, 2),
])
def test_reading_time(words, minutes):
    assert reading_time(words) == minutes


# --- split_sentences ---

@pytest.mark.parametrize("text,expected", [
    ("One. Two! Three?", ["One.", "Two!", "Three?"]),
    ("Wait... what?!", ["Wait...", "what?!"]),
    ("First. trailing words", ["First.", "trailing words"]),
    ("no punctuation at all", ["no punctuation at all"]),
    ("", []),
])
def test_split_sentences(text, expected):
    assert split_sentences(text) == expected


# --- analyze_content ---

def test_analyze_content_fields():
    body = "\n# Hi\n\nVisit [site](http://example.com).\n"
    analysis = analyze_content(body)
    assert analysis.raw_content == "# Hi\n\nVisit [site](http://example.com)."
    assert analysis.plain_text == "Hi Visit site."
    assert analysis.headers == ["Hi"]
    assert analysis.word_count == 3
    assert analysis.reading_time == 1


def test_analyze_content_empty_body():
    analysis = analyze_content("   \n")
    assert analysis.plain_text == ""
    assert analysis.word_count == 0
    assert analysis.reading_time == 0
    assert analysis.links == []


def test_analyze_content_is_deterministic(rich_doc):
    assert analyze_content(rich_doc) == analyze_content(rich_doc)


def test_analyze_content_serializes_camel_case():
    data = analyze_content("Hello.").to_dict()
    assert set(data) == {"rawContent", "plainText", "links", "headers", "wordCount", "readingTime"}
