"""Regex-based body analysis: links, headers, plain text, word counts, sentences"""

import math
import re

from mdindex.core.models import ContentAnalysis, Link


WORDS_PER_MINUTE = 200

IMAGE_RE     = re.compile(r'!\[[^\]]*\]\([^)]*\)')
HTML_TAG_RE  = re.compile(r'<[^>]+>')
MD_LINK_RE   = re.compile(r'(?<!!)\[([^\]]+)\]\(([^)]*)\)')
LINK_TEXT_RE = re.compile(r'\[([^\]]*)\]\([^)]*\)')
MD_SYNTAX_RE = re.compile(r'[#*`_]')
HTML_LINK_RE = re.compile(
    r'<a\s[^>]*?href\s*=\s*["\']([^"\']*)["\'][^>]*>(.*?)</a\s*>', re.IGNORECASE | re.DOTALL,
)
BARE_URL_RE  = re.compile(r'(?<![(\[])https?://[^\s<>()\[\]"\']+')
HEADER_RE    = re.compile(r'^#{1,6}[ \t]+(.+)$', re.MULTILINE)
SENTENCE_RE  = re.compile(r'[^.!?]+[.!?]+|[^.!?]+$')

_URL_TRAILING = '.,;:!?'


def extract_links(body: str) -> list[Link]:
    """Return markdown links, then HTML anchors, then bare URLs, each in source order.

    Entries whose URL is empty or whitespace are dropped.
    """
    md_matches = list(MD_LINK_RE.finditer(body))
    html_matches = list(HTML_LINK_RE.finditer(body))
    links = [
        Link(type="markdown", text=m.group(1).strip(), url=m.group(2).strip())
        for m in md_matches
    ]
    links += [
        Link(type="html", text=HTML_TAG_RE.sub('', m.group(2)).strip(), url=m.group(1).strip())
        for m in html_matches
    ]
    # URLs inside an already matched link (an href or anchor text) are not bare.
    taken = [m.span() for m in md_matches + html_matches]
    for m in BARE_URL_RE.finditer(body):
        if any(start <= m.start() < end for start, end in taken):
            continue
        url = m.group(0).rstrip(_URL_TRAILING)
        links.append(Link(type="url", text=url, url=url))
    return [link for link in links if link.url]


def extract_headers(body: str) -> list[str]:
    """Return ATX heading texts (`#` to `######`) in document order."""
    headers = (h.strip() for h in HEADER_RE.findall(body))
    return [h for h in headers if h]


def to_plain_text(body: str) -> str:
    """Strip images, HTML, link targets, and emphasis marks; collapse whitespace.

    Step order is significant: images go before links so `![alt](src)`
    never degrades to `!alt`. Because emphasis marks are stripped after
    links, `[a]_(b)` comes out as `[a](b)`; a second pass reduces it to `a`.
    """
    text = IMAGE_RE.sub('', body)
    text = HTML_TAG_RE.sub('', text)
    text = LINK_TEXT_RE.sub(r'\1', text)
    text = MD_SYNTAX_RE.sub('', text)
    text = re.sub(r'\n+', ' ', text)
    text = re.sub(r'\s+', ' ', text)
    return text.strip()


def count_words(plain_text: str) -> int:
    """Whitespace-delimited token count; 0 for empty text."""
    return len(plain_text.split())


def reading_time(word_count: int) -> int:
    """Minutes to read word_count words at WORDS_PER_MINUTE, rounded up."""
    return math.ceil(word_count / WORDS_PER_MINUTE)


def split_sentences(plain_text: str) -> list[str]:
    """Split on runs of `.`, `!`, `?`, keeping the punctuation.

    Trailing text without terminal punctuation becomes the last chunk.
    """
    return [s.strip() for s in SENTENCE_RE.findall(plain_text) if s.strip()]


def analyze_content(body: str) -> ContentAnalysis:
    """Derive the ContentAnalysis of a document body."""
    plain_text = to_plain_text(body)
    word_count = count_words(plain_text)
    return ContentAnalysis(
        raw_content=body.strip(),
        plain_text=plain_text,
        links=extract_links(body),
        headers=extract_headers(body),
        word_count=word_count,
        reading_time=reading_time(word_count),
    )
