from fastapi.responses import JSONResponse


def error_response(status_code: int, message: str) -> JSONResponse:
    """JSON error body shared by every API route: ``{"error": message}``."""
    return JSONResponse(status_code=status_code, content={"error": message})
