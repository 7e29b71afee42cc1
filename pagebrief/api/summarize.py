from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, Request

from pagebrief.core.config import AppSettings, get_settings
from pagebrief.models import ErrorResponse, SummarizeRequest, SummarizeResponse
from pagebrief.services.summarization import (
    InvalidRequestError,
    ProviderCallError,
    translate_provider_error,
)
from pagebrief.services.summarizer import SummaryService

from .errors import error_response

logger = logging.getLogger(__name__)

router = APIRouter()


def get_summarizer(request: Request) -> SummaryService:
    # Built once in the lifespan and kept on app.state
    return request.app.state.summarizer


@router.post(
    "/api/summarize",
    response_model=SummarizeResponse,
    responses={
        400: {"model": ErrorResponse},
        401: {"model": ErrorResponse},
        403: {"model": ErrorResponse},
        429: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
        503: {"model": ErrorResponse},
    },
)
async def summarize(
    payload: SummarizeRequest,
    summarizer: SummaryService = Depends(get_summarizer),
    settings: AppSettings = Depends(get_settings),
):
    provider = payload.provider or settings.summarization.default_provider
    logger.info(
        "Summarization request received",
        extra={"provider": provider, "content_chars": len(payload.content or "")},
    )

    try:
        result = await summarizer.summarize(payload.content, provider, payload.model)
    except InvalidRequestError as exc:
        return error_response(400, str(exc))
    except ProviderCallError as exc:
        translated = translate_provider_error(exc.provider, exc.original)
        logger.warning(
            "Summarization failed",
            extra={
                "provider": exc.provider.value,
                "error_kind": translated.kind.value,
                "status_code": translated.status_code,
            },
        )
        return error_response(translated.status_code, translated.message)
    except Exception as exc:
        logger.error("Error in summarization", exc_info=True)
        return error_response(
            500, f"Unexpected error: {exc}. Please try again or contact support."
        )

    return SummarizeResponse(
        summary=result.summary_text,
        provider=result.provider_used,
        model=result.model_used,
    )
