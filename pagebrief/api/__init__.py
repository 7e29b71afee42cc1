from fastapi import APIRouter

from .extract import router as extract_router
from .misc import router as misc_router
from .providers import router as providers_router
from .summarize import router as summarize_router


router = APIRouter()
router.include_router(misc_router)
router.include_router(summarize_router)
router.include_router(extract_router)
router.include_router(providers_router)
