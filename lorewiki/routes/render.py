#!/usr/bin/env python
#
#
# -----------------------------------------------------------------------------
"""
Render endpoints — edit preview and article view.

POST /api/v1/render      {content}      → sanitized HTML + table of contents
GET  /api/v1/render?content=...         → same, for quick previews
POST /api/v1/headings    {content}      → table of contents only
"""
# -----------------------------------------------------------------------------

from __future__ import annotations

import logging

from fastapi import APIRouter, HTTPException, Query, status
from fastapi.concurrency import run_in_threadpool

from lorewiki.core.config import get_settings
from lorewiki.core.exceptions import SanitizerUnavailableError
from lorewiki.schemas import HeadingResponse, MarkupRequest, RenderResponse
from lorewiki.services.headings import extract_headings
from lorewiki.services.renderer import PREVIEW_ERROR_HTML, RENDERER_VERSION, render_markup

log = logging.getLogger(__name__)


# -----------------------------------------------------------------------------

router = APIRouter(tags=["render"])


# -----------------------------------------------------------------------------

async def _render(content: str) -> RenderResponse:
    try:
        html = await run_in_threadpool(render_markup, content)
    except SanitizerUnavailableError as exc:
        log.error("Refusing to render without a sanitizer: %s", exc)
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="HTML sanitizer unavailable",
        ) from exc
    except Exception:
        log.exception("Preview rendering failed")
        return RenderResponse(html=PREVIEW_ERROR_HTML, renderer_version=RENDERER_VERSION, error=True)

    headings = [h.as_dict() for h in extract_headings(content)]
    return RenderResponse(html=html, headings=headings, renderer_version=RENDERER_VERSION)


# -----------------------------------------------------------------------------

@router.post("/render", response_model=RenderResponse)
async def render_content(data: MarkupRequest):
    """Render markup for the article view or the editor's preview pane."""
    return await _render(data.content)


@router.get("/render", response_model=RenderResponse)
async def render_preview(
    content: str = Query(default="", max_length=get_settings().max_content_length),
):
    """Return rendered HTML for a snippet of markup — used by the live editor preview."""
    return await _render(content)


# -----------------------------------------------------------------------------

@router.post("/headings", response_model=list[HeadingResponse])
async def headings(data: MarkupRequest):
    return [h.as_dict() for h in extract_headings(data.content)]


# -----------------------------------------------------------------------------
