from lorewiki.services.headings import Heading, extract_headings
from lorewiki.services.markup import (
    SNIPPET_KINDS,
    insert_markup, new_article_template,
    normalize_links, normalize_markup, slugify_heading,
)
from lorewiki.services.renderer import PREVIEW_ERROR_HTML, RENDERER_VERSION, render_markup
from lorewiki.services.sanitizer import HtmlSanitizer, get_sanitizer, reset_sanitizer

__all__ = [
    "Heading", "extract_headings",
    "SNIPPET_KINDS",
    "insert_markup", "new_article_template",
    "normalize_links", "normalize_markup", "slugify_heading",
    "PREVIEW_ERROR_HTML", "RENDERER_VERSION", "render_markup",
    "HtmlSanitizer", "get_sanitizer", "reset_sanitizer",
]
