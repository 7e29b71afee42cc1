from __future__ import annotations

import logging
from typing import Optional

from fastapi import APIRouter, Depends, File, UploadFile
from fastapi.concurrency import run_in_threadpool

from pagebrief.core.config import AppSettings, get_settings
from pagebrief.extractors import ExtractionError, PdfExtractor, UrlExtractor
from pagebrief.models import ErrorResponse, ExtractedContent, ExtractUrlRequest

from .errors import error_response

logger = logging.getLogger(__name__)

router = APIRouter()

_ERROR_RESPONSES = {400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}}


@router.post(
    "/api/extract-url",
    response_model=ExtractedContent,
    response_model_exclude_none=True,
    responses=_ERROR_RESPONSES,
)
def extract_url(
    payload: ExtractUrlRequest,
    settings: AppSettings = Depends(get_settings),
):
    url = (payload.url or "").strip()
    if not url:
        return error_response(400, "URL is required")

    try:
        return UrlExtractor(settings.extraction).extract(url)
    except ExtractionError as exc:
        logger.error(
            "Error extracting URL",
            extra={"url": url, "status_code": exc.status_code},
            exc_info=exc.status_code >= 500,
        )
        return error_response(exc.status_code, str(exc))
    except Exception as exc:
        logger.error("Error extracting URL", extra={"url": url}, exc_info=True)
        return error_response(500, str(exc) or "Failed to extract content from URL")


@router.post(
    "/api/extract-pdf",
    response_model=ExtractedContent,
    response_model_exclude_none=True,
    responses=_ERROR_RESPONSES,
)
async def extract_pdf(
    file: Optional[UploadFile] = File(default=None),
    settings: AppSettings = Depends(get_settings),
):
    if file is None:
        return error_response(400, "No file provided")

    data = await file.read()
    filename = file.filename or "document.pdf"
    extractor = PdfExtractor(settings.extraction)

    try:
        return await run_in_threadpool(extractor.extract, data, filename)
    except ExtractionError as exc:
        logger.error(
            "Error extracting PDF",
            extra={"upload_name": filename, "status_code": exc.status_code},
            exc_info=exc.status_code >= 500,
        )
        return error_response(exc.status_code, str(exc))
    except Exception as exc:
        logger.error("Error extracting PDF", extra={"upload_name": filename}, exc_info=True)
        return error_response(500, str(exc) or "Failed to extract content from PDF")
