#!/usr/bin/env python
#
#
# -----------------------------------------------------------------------------
"""Tests for wiki markup normalization and the editor helpers."""
# -----------------------------------------------------------------------------

from __future__ import annotations

import pytest

from lorewiki.services.headings import extract_headings
from lorewiki.services.markup import (
    SNIPPET_KINDS,
    insert_markup, new_article_template,
    normalize_links, normalize_markup, slugify_heading,
)


# =============================================================================
# Internal links
# =============================================================================

def test_wikilink_becomes_markdown_link():
    assert normalize_links("[[Foo]]") == "[Foo](wiki:Foo)"


def test_wikilink_with_label():
    assert normalize_links("[[Foo|Bar]]") == "[Bar](wiki:Foo)"


def test_wikilink_target_is_percent_encoded():
    assert normalize_links("[[Test Page]]") == "[Test Page](wiki:Test%20Page)"


def test_wikilink_empty_label_falls_back_to_target():
    assert normalize_links("[[Foo|]]") == "[Foo](wiki:Foo)"


def test_wikilink_label_keeps_later_pipes():
    out = normalize_links("[[File:example.jpg|thumb|Caption]]")
    assert out == "[thumb|Caption](wiki:File%3Aexample.jpg)"


def test_wikilink_inside_text():
    out = normalize_links("See [[Foo]] and [[Bar|the bar]].")
    assert out == "See [Foo](wiki:Foo) and [the bar](wiki:Bar)."


@pytest.mark.parametrize("text", [
    "[[]]",
    "[[ ]]",
    "[[|Label]]",
    "[[Unclosed link",
    "Unopened]] link",
    "no links at all",
    "",
])
def test_malformed_wikilinks_pass_through(text):
    assert normalize_links(text) == text


# =============================================================================
# External links
# =============================================================================

def test_external_link_with_label():
    assert normalize_links("[https://x.com ext]") == "[ext](<https://x.com>)"


def test_external_link_without_label():
    assert normalize_links("[https://x.com]") == "[https://x.com](<https://x.com>)"


def test_markdown_links_are_left_alone():
    text = "[text](http://example.com) and [http://example.com](http://example.com)"
    assert normalize_links(text) == text


def test_link_normalization_is_idempotent():
    once = normalize_links("See [[Foo]], [[Bar|baz]] and [https://x.com ext].")
    assert normalize_links(once) == once


# =============================================================================
# Emphasis and headings
# =============================================================================

def test_bold():
    assert normalize_markup("'''world'''") == "**world**"


def test_italic():
    assert normalize_markup("''it''") == "*it*"


def test_bold_italic():
    assert normalize_markup("'''''both'''''") == "***both***"


def test_apostrophe_is_untouched():
    assert normalize_markup("It's Eldoria's crown") == "It's Eldoria's crown"


def test_section_heading():
    assert normalize_markup("== Intro ==") == "## Intro"


def test_subsection_heading():
    assert normalize_markup("=== Sub ===") == "### Sub"


def test_heading_between_lines():
    assert normalize_markup("text\n== H ==\nmore") == "text\n## H\nmore"


def test_unbalanced_heading_stays_literal():
    assert normalize_markup("== A ===") == "== A ==="


def test_mid_line_delimiters_are_not_headings():
    assert normalize_markup("a == b ==") == "a == b =="


def test_fenced_code_is_not_normalized():
    text = "'''bold'''\n```python\ndef f():\n    '''doc'''\n    return [[1]]\n```\n== After =="
    out = normalize_markup(text)
    assert out.startswith("**bold**\n```python\n")
    assert "    '''doc'''\n    return [[1]]\n```" in out
    assert out.endswith("## After")


def test_fence_closed_by_longer_run():
    out = normalize_markup("```\n'''doc'''\n````\n''after''")
    assert out == "```\n'''doc'''\n````\n*after*"


def test_unclosed_fence_runs_to_end():
    text = "''before''\n~~~\n'''doc'''\n[[Foo]]"
    assert normalize_markup(text) == "*before*\n~~~\n'''doc'''\n[[Foo]]"


def test_inline_triple_backticks_are_not_a_fence():
    out = normalize_markup("```x``` and '''bold'''")
    assert out == "```x``` and **bold**"


def test_code_span_is_not_normalized():
    out = normalize_markup("Write `'''bold'''` for '''bold'''")
    assert out == "Write `'''bold'''` for **bold**"


def test_double_backtick_code_span_is_not_normalized():
    out = normalize_markup("Use ``[[Foo]] ` ''x''`` here")
    assert out == "Use ``[[Foo]] ` ''x''`` here"


def test_heading_with_code_span():
    assert normalize_markup("== The `''` rule ==") == "## The `''` rule"


def test_crlf_line_endings():
    text = "== Early Life ==\r\nText '''bold'''\r\n=== Youth ===\rMore"
    assert normalize_markup(text) == "## Early Life\nText **bold**\n### Youth\nMore"


def test_crlf_fence():
    out = normalize_markup("```\r\n'''doc'''\r\n```\r\n''x''")
    assert out == "```\n'''doc'''\n```\n*x*"


def test_markup_normalization_is_idempotent():
    src = "== Lore ==\nHello '''world''', ''again''. [[Test Page]] [https://x.com ext]"
    once = normalize_markup(src)
    assert normalize_markup(once) == once


# =============================================================================
# Input contract
# =============================================================================

@pytest.mark.parametrize("bad", [None, b"[[Foo]]", 42])
def test_non_string_input_is_rejected(bad):
    with pytest.raises(TypeError):
        normalize_links(bad)
    with pytest.raises(TypeError):
        normalize_markup(bad)


# =============================================================================
# Slugs
# =============================================================================

def test_slug_lowercases_and_hyphenates():
    assert slugify_heading("  Hello   World ") == "hello-world"


def test_slug_keeps_punctuation():
    assert slugify_heading("C++ & Python") == "c++-&-python"


def test_slug_keeps_non_ascii():
    assert slugify_heading("Ünïcode Title") == "ünïcode-title"


# =============================================================================
# Editor helpers
# =============================================================================

@pytest.mark.parametrize("kind, selection, expected", [
    ("bold",         "x",    "'''x'''"),
    ("italic",       "x",    "''x''"),
    ("link",         "Foo",  "[[Foo]]"),
    ("externalLink", "",     "[https://example.com link text]"),
    ("externalLink", "site", "[https://example.com site]"),
    ("heading",      "",     "== Heading =="),
    ("subheading",   "Sub",  "=== Sub ==="),
    ("image",        "",     "[[File:example.jpg|thumb|Caption]]"),
    ("list",         "item", "* item"),
])
def test_insert_markup(kind, selection, expected):
    assert insert_markup(kind, selection) == expected


def test_insert_markup_unknown_kind_returns_selection():
    assert insert_markup("marquee", "sel") == "sel"


def test_snippet_kinds():
    assert "bold" in SNIPPET_KINDS
    assert len(SNIPPET_KINDS) == 8


def test_new_article_template_sections():
    body = new_article_template("Eldoria")
    assert "Brief introduction to Eldoria." in body
    titles = [h.title for h in extract_headings(body)]
    assert titles == ["Introduction", "History", "Characteristics"]
