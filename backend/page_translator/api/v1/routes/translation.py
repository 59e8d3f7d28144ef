"""Translation API routes."""

import logging

from fastapi import APIRouter, Depends, Request
from fastapi.responses import StreamingResponse

from page_translator.api.dependencies import get_translation_pipeline
from page_translator.config import settings
from page_translator.core.translation.languages import list_languages
from page_translator.core.translation.pipeline import TranslationPipeline
from page_translator.models.schemas import (
    ErrorResponse,
    TranslatePageRequest,
    TranslateSectionRequest,
    TranslateSectionResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post(
    "/translation/page",
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def translate_page(
    body: TranslatePageRequest,
    request: Request,
    pipeline: TranslationPipeline = Depends(get_translation_pipeline),
):
    """Translate every section of a page with streaming progress updates.

    Returns a Server-Sent Events stream. Each frame is ``data: <JSON>``
    with ``type`` one of ``progress``, ``complete`` or ``error``; exactly
    one ``complete`` or ``error`` frame ends the stream.
    """
    # Reject bad input before the stream starts so it gets a plain 400
    pipeline.validate_page_request(body.sections, body.target_language)

    async def client_gone() -> bool:
        return await request.is_disconnected()

    async def event_generator():
        """Generate SSE frames from the run."""
        async for event in pipeline.translate_page_stream(
            body.sections,
            body.target_language,
            model=body.model,
            is_cancelled=client_gone,
        ):
            yield event.to_sse()
            if event.is_terminal:
                break

    return StreamingResponse(
        event_generator(),
        media_type="text/event-stream",
        headers={
            "Cache-Control": "no-cache",
            "Connection": "keep-alive",
            "X-Accel-Buffering": "no",
        },
    )


@router.post(
    "/translation/section",
    response_model=TranslateSectionResponse,
    responses={
        400: {"model": ErrorResponse},
        402: {"model": ErrorResponse},
        429: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
)
async def translate_section(
    body: TranslateSectionRequest,
    pipeline: TranslationPipeline = Depends(get_translation_pipeline),
) -> TranslateSectionResponse:
    """Re-translate a single section.

    Errors are returned as ``{"error": message}`` with the matching status.
    """
    section = await pipeline.translate_section(
        body.section,
        body.target_language,
        model=body.model,
    )
    return TranslateSectionResponse(section=section)


@router.get("/translation/languages")
async def get_languages():
    """List target languages and selectable models."""
    return {
        "languages": list_languages(),
        "models": settings.available_models,
        "default_model": settings.default_model,
    }
