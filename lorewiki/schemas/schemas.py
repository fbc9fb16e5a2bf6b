#!/usr/bin/env python
#
#
# -----------------------------------------------------------------------------
"""
Pydantic v2 schemas for request validation and response serialisation.
"""
# -----------------------------------------------------------------------------

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator

from lorewiki.core.config import get_settings


# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
# Rendering
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

class MarkupRequest(BaseModel):
    content: str = ""

    @field_validator("content")
    @classmethod
    def content_not_too_long(cls, v: str) -> str:
        limit = get_settings().max_content_length
        if len(v) > limit:
            raise ValueError(f"Content is too long (max {limit:,} characters)")
        return v


# -----------------------------------------------------------------------------

class SubheadingResponse(BaseModel):
    title: str
    id: str
    level: int


class HeadingResponse(SubheadingResponse):
    subheadings: list[SubheadingResponse] = []


# -----------------------------------------------------------------------------

class RenderResponse(BaseModel):
    html: str
    headings: list[HeadingResponse] = []
    renderer_version: int
    error: bool = False


# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
# Editor helpers
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

class SnippetRequest(BaseModel):
    kind: str = Field(..., min_length=1, max_length=32)
    selection: str = Field(default="", max_length=10_000)


# -----------------------------------------------------------------------------

class SnippetResponse(BaseModel):
    kind: str
    markup: str


# -----------------------------------------------------------------------------

class TemplateResponse(BaseModel):
    title: str
    content: str


# -----------------------------------------------------------------------------
