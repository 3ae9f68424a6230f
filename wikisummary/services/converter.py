#!/usr/bin/env python
#
#
# -----------------------------------------------------------------------------
"""
Summary converter
=================
Turns a short snippet of wikitext (an edit summary or a change-tag label)
into HTML that is safe to drop straight into a page.

Supported syntax
----------------
http://example.com / www.example.com      — bare external links
[http://example.com Label]                — masked external links (opt-in)
/* Section */                             — leading section marker
[[Page]]  /  [[Page|Text]]  /  [[:Page]]  — internal wiki links

The input is decoded and split into a list of spans.  Each pass only looks
at the literal spans left by the previous one, so markup produced by one
pass is never picked up again by a later one.  Literal text is escaped
exactly once, when the spans are joined back together.
"""
# -----------------------------------------------------------------------------

from __future__ import annotations

import html
import logging
import re
from collections.abc import Callable
from dataclasses import dataclass
from typing import Optional, Union

log = logging.getLogger(__name__)

PageUrlResolver = Callable[[str], str]


# -----------------------------------------------------------------------------
# Patterns
# -----------------------------------------------------------------------------

# ASCII punctuation, i.e. POSIX [:punct:]
_PUNCT = r"""!"#$%&'()*+,\-./:;<=>?@\[\\\]^_`{|}~"""

# One capture group only: the whole URL.  Keep every other group non-capturing.
_URL_PATTERN = (
    r"\b((?:[\w-]+://?|www[.])[^\s()<>]+"
    r"(?:\([\w\d]+\)|(?:[^" + _PUNCT + r"\s]|/)))"
)

_URL_RE         = re.compile(_URL_PATTERN, re.DOTALL)
_MASKED_LINK_RE = re.compile(r"\[" + _URL_PATTERN + r" ([^\]]+)\]", re.DOTALL)
_SECTION_RE     = re.compile(r"^/\* (.*?) \*/")
_WIKILINK_RE    = re.compile(r"\[\[:?(.*?)\]\]")

# Complete entities only; html.unescape() alone also takes "&copy2020" or "&region"
_ENTITY_RE = re.compile(r"&(?:#[0-9]+|#[xX][0-9a-fA-F]+|[A-Za-z][A-Za-z0-9]*);")


# -----------------------------------------------------------------------------
# Spans
# -----------------------------------------------------------------------------

def _text(value: str) -> str:
    """Escape body text; quotes are left alone (ENT_NOQUOTES)."""
    return html.escape(value, quote=False)


def _attr(value: str) -> str:
    return html.escape(value, quote=True)


def _decode_entities(value: str) -> str:
    return _ENTITY_RE.sub(lambda m: html.unescape(m.group(0)), value)


@dataclass(frozen=True)
class Literal:
    text: str

    def to_html(self) -> str:
        return _text(self.text)


@dataclass(frozen=True)
class ExternalLink:
    url: str
    label: str

    def to_html(self) -> str:
        return (
            f'<a target="_blank" rel="nofollow" href="{_attr(self.url)}">'
            f'{_text(self.label)}</a>'
        )


@dataclass(frozen=True)
class SectionLink:
    page_url: str
    title: str

    def to_html(self) -> str:
        # Section anchors need underscores to land on the heading
        anchor = _attr(self.title.replace(" ", "_"))
        return (
            f'<a target="_blank" href="{_attr(self.page_url)}#{anchor}">'
            f'<em class="text-muted">→{_text(self.title)}:</em></a> '
        )


@dataclass(frozen=True)
class WikiLink:
    url: str
    label: str

    def to_html(self) -> str:
        return f'<a target="_blank" href="{_attr(self.url)}">{_text(self.label)}</a>'


Span = Union[Literal, ExternalLink, SectionLink, WikiLink]


# -----------------------------------------------------------------------------

def _split_literals(
    spans: list[Span],
    pattern: re.Pattern,
    make: Callable[[re.Match], Optional[Span]],
) -> list[Span]:
    """
    Run *pattern* over every literal span and swap each match for the span
    returned by *make*.  A ``None`` from *make* leaves the match as text.
    """
    out: list[Span] = []
    for span in spans:
        if not isinstance(span, Literal):
            out.append(span)
            continue
        pos = 0
        for m in pattern.finditer(span.text):
            replacement = make(m)
            if replacement is None:
                continue
            if m.start() > pos:
                out.append(Literal(span.text[pos:m.start()]))
            out.append(replacement)
            pos = m.end()
        if pos < len(span.text):
            out.append(Literal(span.text[pos:]))
    return out


# -----------------------------------------------------------------------------
# Passes
# -----------------------------------------------------------------------------

def _masked_link(m: re.Match) -> Optional[ExternalLink]:
    url, label = m.group(1), m.group(2)
    # A label that is itself a URL is not turned into link text
    if _URL_RE.search(label):
        log.debug("Masked link left as text, label looks like a URL: %r", label)
        return None
    return ExternalLink(url, label)


def _bare_link(m: re.Match) -> ExternalLink:
    return ExternalLink(m.group(1), m.group(1))


def _section(spans: list[Span], resolve_page_url: PageUrlResolver, page_title: str) -> list[Span]:
    """Link the leading /* Section */ marker; any later marker stays as text."""
    if not spans or not isinstance(spans[0], Literal):
        return spans
    text = spans[0].text
    m = _SECTION_RE.match(text)
    if not m:
        return spans
    head: list[Span] = [SectionLink(resolve_page_url(page_title), m.group(1))]
    if m.end() < len(text):
        head.append(Literal(text[m.end():]))
    return head + spans[1:]


def normalize_title(path: str) -> str:
    """Page title as used in URLs: first letter upper-cased, spaces as underscores."""
    path = path.replace(" ", "_")
    first = path[:1].upper()
    # Keep characters like "ß" whose upper case is more than one letter
    if len(first) != 1:
        return path
    return first + path[1:]


def _wikilinks(spans: list[Span], resolve_page_url: PageUrlResolver) -> list[Span]:
    """
    Convert [[...]] links one at a time until none are left.  Each round
    swaps exactly one construct for a WikiLink span, so N links take N rounds.
    """
    spans = list(spans)
    rounds = 0
    while True:
        for i, span in enumerate(spans):
            if isinstance(span, Literal):
                m = _WIKILINK_RE.search(span.text)
                if m:
                    break
        else:
            break

        path, sep, label = m.group(1).partition("|")
        link = WikiLink(resolve_page_url(normalize_title(path)), label if sep and label else path)

        text = span.text
        pieces: list[Span] = []
        if m.start():
            pieces.append(Literal(text[:m.start()]))
        pieces.append(link)
        if m.end() < len(text):
            pieces.append(Literal(text[m.end():]))
        spans[i:i + 1] = pieces
        rounds += 1

    if rounds:
        log.debug("Converted %d wiki link(s)", rounds)
    return spans


# -----------------------------------------------------------------------------
# Public API
# -----------------------------------------------------------------------------

def tokenize(
    text: str,
    include_external_links: bool,
    resolve_page_url: PageUrlResolver,
    page_title: str = "",
) -> list[Span]:
    """Split *text* into typed spans.  ``convert()`` is this plus rendering."""
    if not text:
        return []

    spans: list[Span] = [Literal(_decode_entities(text))]

    spans = _section(spans, resolve_page_url, page_title)
    if include_external_links:
        spans = _split_literals(spans, _MASKED_LINK_RE, _masked_link)
    spans = _split_literals(spans, _URL_RE, _bare_link)
    spans = _wikilinks(spans, resolve_page_url)
    return spans


def convert(
    text: str,
    include_external_links: bool,
    resolve_page_url: PageUrlResolver,
    page_title: str = "",
) -> str:
    """
    Convert a wikitext snippet into safe HTML.

    *resolve_page_url* maps a normalized page title to its URL on the wiki.
    It is called for every [[link]] and, with *page_title*, for a leading
    /* section */ marker.  Whatever it raises is passed on to the caller.
    Malformed markup never raises; it simply stays as escaped text.
    """
    return "".join(span.to_html() for span in tokenize(
        text, include_external_links, resolve_page_url, page_title,
    ))


# -----------------------------------------------------------------------------
