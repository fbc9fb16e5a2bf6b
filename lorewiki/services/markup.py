#!/usr/bin/env python
#
#
# -----------------------------------------------------------------------------
"""
Wiki markup normalizer
======================
Rewrites the site's wiki syntax into plain Markdown before HTML conversion.

Supported syntax
----------------
[[Page Title]]  /  [[Page Title|Display Text]]   — internal links
[https://example.com Display]  /  [https://x]    — external links
'''bold'''  /  ''italic''  /  '''''bold-italic'''''
= H1 =  /  == H2 ==  / ... / ====== H6 ======     — whole-line headings

Everything else is already Markdown and passes through unchanged.  Internal
links become ``[Label](wiki:<percent-encoded target>)``; the renderer turns
the ``wiki:`` scheme into ``/wiki/...`` anchors.

Also home to the editor helpers: toolbar snippets and the new-article body.
"""
# -----------------------------------------------------------------------------

from __future__ import annotations

import re
from urllib.parse import quote


WIKI_SCHEME = "wiki:"


# -----------------------------------------------------------------------------
# Input contract
# -----------------------------------------------------------------------------

def ensure_text(value: object, what: str = "markup") -> str:
    """Reject anything that is not a ``str`` instead of coercing it."""
    if not isinstance(value, str):
        raise TypeError(f"{what} must be str, not {type(value).__name__}")
    return value


# -----------------------------------------------------------------------------
# Slug helper
# -----------------------------------------------------------------------------

_WS_RE = re.compile(r"\s+")


def slugify_heading(title: str) -> str:
    """Lowercase *title* and collapse whitespace runs into single hyphens.

    Punctuation and non-ASCII characters pass through untouched and duplicate
    titles share a slug; existing in-page anchors depend on exactly this.
    """
    return _WS_RE.sub("-", title.strip().lower())


# -----------------------------------------------------------------------------
# Link rewriting
# -----------------------------------------------------------------------------

# [[Target]] / [[Target|Label]] — target stops at the first pipe
_WIKILINK_RE = re.compile(r"\[\[([^\[\]|]*)(?:\|([^\[\]]*))?\]\]")

# [scheme://url Label] / [scheme://url] — not followed by "(", "[" or ":"
# so Markdown inline links, reference links and definitions are left alone
_EXTLINK_RE = re.compile(
    r"(?<!\[)\[(\w+://[^\s\[\]<>]+)(?:[ \t]+([^\[\]\n]+?))?[ \t]*\](?![(\[:])"
)


def _wikilink_to_md(m: re.Match) -> str:
    target = m.group(1).strip()
    if not target:
        return m.group(0)
    label = (m.group(2) or "").strip() or target
    return f"[{label}]({WIKI_SCHEME}{quote(target, safe='')})"


def _extlink_to_md(m: re.Match) -> str:
    url   = m.group(1)
    label = (m.group(2) or url).strip()
    return f"[{label}](<{url}>)"


def normalize_links(text: str) -> str:
    """Rewrite wiki link tokens into Markdown links.

    Malformed tokens (``[[``, ``[[]]``, ``[[|Label]]``) stay literal, and
    running this on its own output changes nothing.
    """
    ensure_text(text)
    text = _WIKILINK_RE.sub(_wikilink_to_md, text)
    return _EXTLINK_RE.sub(_extlink_to_md, text)


# -----------------------------------------------------------------------------
# Emphasis and headings
# -----------------------------------------------------------------------------

_BOLD_ITALIC_RE = re.compile(r"'{5}(.+?)'{5}")
_BOLD_RE        = re.compile(r"'{3}(.+?)'{3}")
_ITALIC_RE      = re.compile(r"'{2}(.+?)'{2}")

# Opening and closing runs must be the same length; "== A ===" stays literal
_HEADING_RE = re.compile(
    r"^(={1,6})(?!=)[ \t]*(.+?)[ \t]*(?<!=)\1[ \t]*$",
    re.MULTILINE,
)


def _heading_to_md(m: re.Match) -> str:
    return f"{'#' * len(m.group(1))} {m.group(2)}"


# ```lang ... ``` / ~~~ ... ~~~ — closed by a run of the same character at
# least as long as the opener, or by the end of the text
_FENCE_RE = re.compile(
    r"^(?P<fence>(?P<ch>[`~])(?P=ch){2,})[^`\n]*\n"
    r".*?(?:^(?P=fence)(?P=ch)*[ \t]*$|\Z)",
    re.MULTILINE | re.DOTALL,
)

# `code` / ``code with ` inside`` — single line only
_CODESPAN_RE = re.compile(r"(?<!`)(`+)(?!`).+?(?<!`)\1(?!`)")


def _split_code(pattern: re.Pattern, text: str, fn) -> str:
    """Apply *fn* to the stretches of *text* between *pattern* matches."""
    parts: list[str] = []
    pos = 0
    for m in pattern.finditer(text):
        parts.append(fn(text[pos:m.start()]))
        parts.append(m.group(0))
        pos = m.end()
    parts.append(fn(text[pos:]))
    return "".join(parts)


def _normalize_inline(text: str) -> str:
    text = normalize_links(text)
    text = _BOLD_ITALIC_RE.sub(r"***\1***", text)
    text = _BOLD_RE.sub(r"**\1**", text)
    return _ITALIC_RE.sub(r"*\1*", text)


def _normalize_prose(text: str) -> str:
    # Headings only rewrite the "=" runs, so code spans in titles survive
    text = _HEADING_RE.sub(_heading_to_md, text)
    return _split_code(_CODESPAN_RE, text, _normalize_inline)


def normalize_markup(text: str) -> str:
    """Rewrite all wiki-specific syntax in *text* into Markdown.

    Line endings are normalised to ``\\n``.  Fenced code blocks and inline
    code spans are copied through untouched.
    """
    ensure_text(text)
    text = text.replace("\r\n", "\n").replace("\r", "\n")
    return _split_code(_FENCE_RE, text, _normalize_prose)


# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
# Editor helpers
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

# kind → (template, placeholder used when nothing is selected)
_SNIPPETS: dict[str, tuple[str, str]] = {
    "bold":         ("'''{}'''",                  ""),
    "italic":       ("''{}''",                    ""),
    "link":         ("[[{}]]",                    ""),
    "externalLink": ("[https://example.com {}]",  "link text"),
    "heading":      ("== {} ==",                  "Heading"),
    "subheading":   ("=== {} ===",                "Subheading"),
    "image":        ("[[File:{}|thumb|Caption]]", "example.jpg"),
    "list":         ("* {}",                      ""),
}

SNIPPET_KINDS = tuple(_SNIPPETS)


def insert_markup(kind: str, selection: str = "") -> str:
    """Return the markup the editor toolbar inserts for *kind* around *selection*.

    Unknown kinds return the selection unchanged.
    """
    ensure_text(selection, "selection")
    if kind not in _SNIPPETS:
        return selection
    template, placeholder = _SNIPPETS[kind]
    return template.format(selection or placeholder)


def new_article_template(title: str) -> str:
    """Default body for a freshly created article."""
    ensure_text(title, "title")
    return (
        f"== Introduction ==\nBrief introduction to {title}.\n\n"
        f"== History ==\nHistorical background of {title}.\n\n"
        f"== Characteristics ==\nDetails about {title}."
    )


# -----------------------------------------------------------------------------
