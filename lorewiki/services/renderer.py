#!/usr/bin/env python
#
#
# -----------------------------------------------------------------------------
"""
Markup renderer
===============
Renders article wiki markup to sanitized HTML.

Pipeline
--------
1. ``normalize_markup()`` rewrites wiki syntax into Markdown
2. mistune converts it (tables, strikethrough, bare URLs, hard line breaks)
   with site-specific rules:
     - ``wiki:`` links   → ``<a href="/wiki/<target>" class="internal-link">``
     - any other link    → ``class="external-link"`` opening in a new tab
     - headings          → ``id`` slug matching the table of contents
     - fenced code       → Pygments highlighting
3. the shared ``HtmlSanitizer`` strips anything executable

Raw HTML in the source is passed through step 2 and cleaned in step 3.
"""
# -----------------------------------------------------------------------------

from __future__ import annotations

import html as _html
import re
from functools import lru_cache
from typing import Optional
from urllib.parse import quote, unquote

import mistune
from mistune.plugins.formatting import strikethrough
from mistune.plugins.table import table
from mistune.plugins.url import url
from pygments import highlight
from pygments.formatters import HtmlFormatter
from pygments.lexers import TextLexer, get_lexer_by_name
from pygments.util import ClassNotFound

from .markup import WIKI_SCHEME, ensure_text, normalize_markup, slugify_heading
from .sanitizer import HtmlSanitizer, get_sanitizer


# Bump whenever output for the same markup changes, so callers caching
# rendered HTML per revision know to re-render.
RENDERER_VERSION = 1

# Shown in place of a preview when rendering blows up
PREVIEW_ERROR_HTML = '<div class="render-error">Error generating preview</div>'

_STRIP_TAGS_RE = re.compile(r"<[^>]+>")


# -----------------------------------------------------------------------------
# Code highlighting
# -----------------------------------------------------------------------------

def _highlight_code(code: str, lang: str) -> str:
    """Highlight *code* using Pygments; unknown languages render as plain text."""
    try:
        lexer = get_lexer_by_name(lang.strip(), stripall=True) if lang.strip() else TextLexer()
    except ClassNotFound:
        lexer = TextLexer()
    formatter = HtmlFormatter(nowrap=False, cssclass="highlight")
    return highlight(code, lexer, formatter)


# -----------------------------------------------------------------------------
# Markdown renderer via mistune
# -----------------------------------------------------------------------------

def _encode_target(target: str) -> str:
    """Percent-encode an article title the way encodeURIComponent does."""
    return quote(target, safe="!~*'()")


class _WikiRenderer(mistune.HTMLRenderer):

    def link(self, text: str, url: str, title: Optional[str] = None) -> str:
        if url.startswith(WIKI_SCHEME):
            target = unquote(url[len(WIKI_SCHEME):])
            return f'<a href="/wiki/{_encode_target(target)}" class="internal-link">{text}</a>'
        title_attr = f' title="{_html.escape(title)}"' if title else ""
        return (
            f'<a href="{self.safe_url(url)}"{title_attr} target="_blank" '
            f'rel="noopener noreferrer" class="external-link">{text}</a>'
        )

    def heading(self, text: str, level: int, **attrs) -> str:
        slug = slugify_heading(_html.unescape(_STRIP_TAGS_RE.sub("", text)))
        id_attr = f' id="{_html.escape(slug)}"' if slug else ""
        return f"<h{level}{id_attr}>{text}</h{level}>\n"

    def codespan(self, code: str) -> str:
        return f"<code>{_html.escape(code)}</code>"

    def block_code(self, code: str, **kwargs) -> str:
        info = kwargs.get("info") or ""
        lang = info.split()[0] if info else ""
        if lang:
            return _highlight_code(code, lang)
        return f"<pre><code>{_html.escape(code)}</code></pre>\n"


@lru_cache
def _get_md_renderer() -> mistune.Markdown:
    return mistune.create_markdown(
        renderer=_WikiRenderer(escape=False),
        hard_wrap=True,
        plugins=[table, strikethrough, url],
    )


# -----------------------------------------------------------------------------
# Public render function
# -----------------------------------------------------------------------------

def render_markup(content: str, sanitizer: Optional[HtmlSanitizer] = None) -> str:
    """
    Render wiki markup *content* to sanitized HTML.

    Parameters
    ----------
    content   : raw article markup; must be ``str``
    sanitizer : sanitizer to clean the output with; defaults to the shared
                instance from ``get_sanitizer()``

    Raises TypeError for non-string content and SanitizerUnavailableError
    when no sanitizer can be built.  Malformed markup never raises.
    """
    ensure_text(content)
    if not content:
        return ""
    if sanitizer is None:
        sanitizer = get_sanitizer()

    raw_html = _get_md_renderer()(normalize_markup(content))
    return sanitizer.sanitize(raw_html)


# -----------------------------------------------------------------------------
