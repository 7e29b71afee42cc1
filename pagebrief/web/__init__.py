from .ui import router  # noqa: F401
