#!/usr/bin/env python
#
#
# -----------------------------------------------------------------------------
"""
Editor helper endpoints
=======================
POST /api/v1/markup/insert            — markup for a toolbar button
GET  /api/v1/markup/template?title=   — starting body for a new article
"""
# -----------------------------------------------------------------------------

from __future__ import annotations

from fastapi import APIRouter, Query

from lorewiki.schemas import SnippetRequest, SnippetResponse, TemplateResponse
from lorewiki.services.markup import insert_markup, new_article_template


# -----------------------------------------------------------------------------

router = APIRouter(prefix="/markup", tags=["markup"])

# Same characters article titles may not contain
_TITLE_PATTERN = r"^[^#<>\[\]|{}/:?]+$"


# -----------------------------------------------------------------------------

@router.post("/insert", response_model=SnippetResponse)
async def insert(data: SnippetRequest):
    return SnippetResponse(kind=data.kind, markup=insert_markup(data.kind, data.selection))


@router.get("/template", response_model=TemplateResponse)
async def template(
    title: str = Query(..., min_length=1, max_length=100, pattern=_TITLE_PATTERN),
):
    return TemplateResponse(title=title, content=new_article_template(title))


# -----------------------------------------------------------------------------
