#!/usr/bin/env python
#
#
# -----------------------------------------------------------------------------
"""
Heading extractor
=================
Builds the two-level table of contents for an article from its raw markup.

  == Section ==        → level 2, top-level entry
  === Subsection ===   → level 3, nested under the enclosing section

Two passes: the document is first cut into level-2 sections, then each
section's slice is scanned for level-3 delimiters on its own.  Level-3
headings that appear before the first level-2 heading belong to no section
and are dropped.
"""
# -----------------------------------------------------------------------------

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Any

from .markup import ensure_text, slugify_heading


# -----------------------------------------------------------------------------

# Exactly two / three "=" on each side: "=== x ===" never reads as level 2.
# Titles stay on one line.
_H2_RE = re.compile(r"(?<!=)==(?!=)[ \t]*(.+?)[ \t]*(?<!=)==(?!=)")
_H3_RE = re.compile(r"(?<!=)===(?!=)[ \t]*(.+?)[ \t]*(?<!=)===(?!=)")


# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class Heading:
    title: str
    id: str
    level: int
    subheadings: tuple[Heading, ...] = field(default_factory=tuple)

    def as_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {"title": self.title, "id": self.id, "level": self.level}
        if self.level == 2:
            data["subheadings"] = [sub.as_dict() for sub in self.subheadings]
        return data


# -----------------------------------------------------------------------------

def _scan(pattern: re.Pattern, text: str) -> list[tuple[str, int, int]]:
    """Return (trimmed title, start, end) for every delimiter match with a title."""
    spans = []
    for m in pattern.finditer(text):
        title = m.group(1).strip()
        if title:
            spans.append((title, m.start(), m.end()))
    return spans


def extract_headings(text: str) -> list[Heading]:
    """Return the level-2 headings of *text* in document order, each carrying
    its level-3 subheadings in document order.

    Empty or headingless text yields ``[]``.
    """
    ensure_text(text)
    sections = _scan(_H2_RE, text)
    headings: list[Heading] = []

    for i, (title, _, body_start) in enumerate(sections):
        body_end = sections[i + 1][1] if i + 1 < len(sections) else len(text)
        subheadings = tuple(
            Heading(title=sub, id=slugify_heading(sub), level=3)
            for sub, _, _ in _scan(_H3_RE, text[body_start:body_end])
        )
        headings.append(
            Heading(title=title, id=slugify_heading(title), level=2, subheadings=subheadings)
        )

    return headings


# -----------------------------------------------------------------------------
