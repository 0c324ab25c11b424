"""Static asset hosting with single-page-app fallback."""
from __future__ import annotations

import logging
from pathlib import Path

from fastapi import APIRouter
from fastapi.responses import FileResponse

from backend.config import get_settings

router = APIRouter()
logger = logging.getLogger(__name__)


def resolve_asset(static_dir: Path, requested: str) -> Path:
    """Map a request path to a file under ``static_dir``.

    Returns the entry document when the path is empty, missing, a directory,
    unusable as a filesystem name, or escapes ``static_dir``.
    """
    index = static_dir / "index.html"
    if not requested:
        return index
    try:
        candidate = (static_dir / requested).resolve()
        if not candidate.is_relative_to(static_dir) or not candidate.is_file():
            return index
    except (OSError, ValueError):
        # over-long names, embedded NUL bytes
        return index
    return candidate


@router.get("/{full_path:path}", include_in_schema=False)
async def serve_frontend(full_path: str):
    """Serve a static asset, or the SPA entry document for client-side routes."""
    settings = get_settings()
    asset = resolve_asset(settings.static_dir, full_path)
    logger.debug("Serving %s for /%s", asset, full_path)
    return FileResponse(asset)
