from fastapi import APIRouter

router = APIRouter(tags=["health"])

_OK = {"status": "ok"}


@router.get("/health")
@router.get("/healthz")
def health():
    """Liveness check; answers without touching any provider."""
    return _OK
