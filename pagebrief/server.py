from contextlib import asynccontextmanager
import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError

from pagebrief import __version__
from pagebrief.api import router as api_router
from pagebrief.api.errors import error_response
from pagebrief.core.config import AppSettings, get_settings
from pagebrief.core.logging import setup_logging
from pagebrief.services.providers import ProviderFactory
from pagebrief.services.summarization import WordChunker
from pagebrief.services.summarizer import SummaryService
from pagebrief.web import router as web_router


settings = get_settings()
setup_logging(settings.log_level)
logger = logging.getLogger(__name__)


def build_summarizer(settings: AppSettings) -> SummaryService:
    """Assemble SummaryService with providers built from configuration."""
    providers = ProviderFactory(settings.summarization).create_all()
    chunker = WordChunker(max_length=settings.summarization.chunk_size)
    return SummaryService(
        providers=providers,
        chunker=chunker,
        settings=settings.summarization,
    )


@asynccontextmanager
async def lifespan_context(app: FastAPI):
    # Startup
    logger.info("Initializing summarization service components")
    app.state.summarizer = build_summarizer(settings)
    logger.info(
        "SummaryService initialized",
        extra={"default_provider": settings.summarization.default_provider},
    )
    yield


app = FastAPI(title="pagebrief", version=__version__, lifespan=lifespan_context)

app.include_router(api_router)
app.include_router(web_router)


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    # Keep the {"error": ...} body for requests rejected before reaching a route
    errors = exc.errors()
    first = errors[0] if errors else {}
    location = ".".join(
        part for part in first.get("loc", ()) if isinstance(part, str) and part != "body"
    )
    detail = first.get("msg", "malformed body")
    message = f"Invalid request: {location}: {detail}" if location else f"Invalid request: {detail}"
    logger.warning(
        "Request validation failed",
        extra={"path": request.url.path, "error_count": len(errors)},
    )
    return error_response(400, message)


if __name__ == "__main__":
    import os

    import uvicorn

    uvicorn.run(
        "pagebrief.server:app",
        host="0.0.0.0",
        port=int(os.getenv("PORT", "8080")),
        reload=os.getenv("ENVIRONMENT", "production") == "development",
    )
