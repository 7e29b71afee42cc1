from __future__ import annotations

from pathlib import Path

from fastapi import APIRouter
from fastapi.responses import HTMLResponse

from pagebrief.core.config import get_settings


router = APIRouter()


@router.get("/", response_class=HTMLResponse)
def ui_page():
    settings = get_settings()
    template_path = Path(__file__).with_name("templates") / "ui.html"
    html = template_path.read_text(encoding="utf-8").replace(
        "DEFAULT_PROVIDER", settings.summarization.default_provider
    )
    return HTMLResponse(content=html)
