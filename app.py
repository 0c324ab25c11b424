# ASGI entrypoint shim; the application lives in backend.main
from backend.main import app  # noqa: F401
