"""
Single-page front end served for any GET no API route claimed
"""
from pathlib import Path
from typing import Optional

from fastapi import APIRouter
from fastapi.responses import FileResponse, JSONResponse

from hallbooking.core.config import settings

router = APIRouter()


def resolve_static_file(static_dir: Path, requested: str) -> Optional[Path]:
    """
    File to serve for a request path, or None.

    Existing files under static_dir are served as-is; anything else falls
    back to index.html so client-side routes load the app. Paths escaping
    static_dir never resolve.
    """
    root = static_dir.resolve()
    if not root.is_dir():
        return None

    if requested:
        candidate = (root / requested).resolve()
        if candidate.is_relative_to(root) and candidate.is_file():
            return candidate

    index = root / "index.html"
    if index.is_file():
        return index
    return None


@router.get("/{full_path:path}", include_in_schema=False)
async def serve_frontend(full_path: str):
    target = resolve_static_file(Path(settings.STATIC_DIR), full_path)
    if target is None:
        return JSONResponse(status_code=404, content={"message": "Not found"})
    return FileResponse(target)
