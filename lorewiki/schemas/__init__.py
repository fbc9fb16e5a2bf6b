from lorewiki.schemas.schemas import (
    MarkupRequest,
    HeadingResponse, SubheadingResponse, RenderResponse,
    SnippetRequest, SnippetResponse, TemplateResponse,
)

__all__ = [
    "MarkupRequest",
    "HeadingResponse", "SubheadingResponse", "RenderResponse",
    "SnippetRequest", "SnippetResponse", "TemplateResponse",
]
