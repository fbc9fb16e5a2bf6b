#!/usr/bin/env python
#
#
# -----------------------------------------------------------------------------
"""
HTML sanitizer
==============
Allow-list cleaning of rendered article HTML before it is embedded in a page.

- script-capable elements (script, style, iframe, svg, forms, ...) are removed
  together with their content
- any other unknown element is unwrapped, keeping its text
- only allow-listed attributes survive; ``on*`` handlers never do
- ``href`` / ``src`` keep relative URLs and http(s) / mailto only
- comments, doctypes and processing instructions are dropped

``get_sanitizer()`` hands out the process-wide instance, built exactly once
even when first called from several threads at the same time.
"""
# -----------------------------------------------------------------------------

from __future__ import annotations

import logging
import re
import threading
import warnings
from typing import Optional

from bs4 import BeautifulSoup, FeatureNotFound, MarkupResemblesLocatorWarning
from bs4.element import PreformattedString, Tag

from lorewiki.core.config import get_settings
from lorewiki.core.exceptions import SanitizerUnavailableError

log = logging.getLogger(__name__)

# Article fragments are never file names or URLs to fetch
warnings.filterwarnings("ignore", category=MarkupResemblesLocatorWarning)


# -----------------------------------------------------------------------------
# Allow-lists
# -----------------------------------------------------------------------------

_DROP_TAGS = frozenset({
    "script", "style", "iframe", "object", "embed", "noscript", "template",
    "svg", "math", "form", "input", "button", "textarea", "select", "link",
    "meta", "base", "frame", "frameset", "applet",
})

_ALLOWED_TAGS = frozenset({
    "a", "abbr", "b", "blockquote", "br", "caption", "code", "dd", "del",
    "div", "dl", "dt", "em", "figcaption", "figure",
    "h1", "h2", "h3", "h4", "h5", "h6",
    "hr", "i", "img", "ins", "kbd", "li", "mark", "ol", "p", "pre", "q", "s",
    "small", "span", "strong", "sub", "sup",
    "table", "tbody", "td", "tfoot", "th", "thead", "tr", "u", "ul",
})

_GLOBAL_ATTRS = frozenset({"class", "title"})

_HEADING_ATTRS = frozenset({"id"})
_CELL_ATTRS    = frozenset({"colspan", "rowspan", "align"})

_ALLOWED_ATTRS: dict[str, frozenset[str]] = {
    "a":   frozenset({"href", "target", "rel"}),
    "img": frozenset({"src", "alt", "width", "height", "loading"}),
    "ol":  frozenset({"start"}),
    "td":  _CELL_ATTRS,
    "th":  _CELL_ATTRS,
    **{f"h{n}": _HEADING_ATTRS for n in range(1, 7)},
}

_URL_ATTRS    = frozenset({"href", "src"})
_SAFE_SCHEMES = frozenset({"http", "https", "mailto"})

_SCHEME_RE = re.compile(r"^([a-z][a-z0-9+.\-]*):")
# Browsers ignore these inside a scheme: "java\tscript:" still runs
_IGNORED_URL_CHARS_RE = re.compile(r"[\x00-\x20\x7f]+")


def _is_safe_url(value: str | list[str]) -> bool:
    if isinstance(value, list):
        value = " ".join(value)
    compact = _IGNORED_URL_CHARS_RE.sub("", value).lower()
    m = _SCHEME_RE.match(compact)
    if not m:
        return True     # relative path, fragment or protocol-relative
    return m.group(1) in _SAFE_SCHEMES


# -----------------------------------------------------------------------------
# Sanitizer
# -----------------------------------------------------------------------------

class HtmlSanitizer:
    """Stateless allow-list sanitizer; one instance can serve every caller."""

    def __init__(self, parser: str = "html.parser") -> None:
        try:
            BeautifulSoup("", parser)
        except FeatureNotFound as exc:
            raise SanitizerUnavailableError(
                f"HTML tree builder '{parser}' is not installed"
            ) from exc
        self.parser = parser

    def sanitize(self, html: str) -> str:
        if not html:
            return ""
        soup = BeautifulSoup(html, self.parser)

        for node in soup.find_all(string=lambda s: isinstance(s, PreformattedString)):
            node.extract()

        while True:
            tag = soup.find(list(_DROP_TAGS))
            if tag is None:
                break
            tag.decompose()

        for tag in soup.find_all(True):
            if tag.name not in _ALLOWED_TAGS:
                tag.unwrap()
                continue
            self._clean_attrs(tag)

        return str(soup)

    @staticmethod
    def _clean_attrs(tag: Tag) -> None:
        allowed = _GLOBAL_ATTRS | _ALLOWED_ATTRS.get(tag.name, frozenset())
        for name in list(tag.attrs):
            if name not in allowed:
                del tag.attrs[name]
            elif name in _URL_ATTRS and not _is_safe_url(tag.attrs[name]):
                del tag.attrs[name]
        if "target" in tag.attrs:
            tag.attrs["rel"] = "noopener noreferrer"


# -----------------------------------------------------------------------------
# Process-wide instance
# -----------------------------------------------------------------------------

_sanitizer: Optional[HtmlSanitizer] = None
_sanitizer_lock = threading.Lock()


def get_sanitizer() -> HtmlSanitizer:
    """Return the shared sanitizer, building it on first use.

    Raises SanitizerUnavailableError if the configured tree builder is
    missing; the next call tries again.
    """
    global _sanitizer
    if _sanitizer is None:
        with _sanitizer_lock:
            if _sanitizer is None:
                parser = get_settings().html_parser
                try:
                    _sanitizer = HtmlSanitizer(parser)
                except SanitizerUnavailableError:
                    log.error("HTML sanitizer unavailable (tree builder: %s)", parser)
                    raise
                log.info("HTML sanitizer ready (tree builder: %s)", parser)
    return _sanitizer


def reset_sanitizer() -> None:
    """Forget the shared instance so the next get_sanitizer() rebuilds it."""
    global _sanitizer
    with _sanitizer_lock:
        _sanitizer = None


# -----------------------------------------------------------------------------
