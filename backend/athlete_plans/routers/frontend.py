"""
Catch-all routes: unknown API paths and the single-page frontend.

Must be included after every other router so that real endpoints win.
"""

from __future__ import annotations

from pathlib import Path

from fastapi import APIRouter, HTTPException, Request, status
from fastapi.responses import FileResponse

router = APIRouter(include_in_schema=False)

INDEX_DOCUMENT = "index.html"
ALL_METHODS = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"]
STATIC_METHODS = {"GET", "HEAD"}


def resolve_public_path(public_dir: Path, relative: str) -> Path | None:
    """Resolve ``relative`` under ``public_dir``; ``None`` if it escapes it or cannot be resolved."""
    root = public_dir.resolve()
    try:
        candidate = (root / relative.lstrip("/")).resolve()
    except (OSError, ValueError):
        return None
    if candidate != root and root not in candidate.parents:
        return None
    return candidate


def _is_file(path: Path) -> bool:
    # Names the OS refuses (e.g. too long) are treated as missing.
    try:
        return path.is_file()
    except (OSError, ValueError):
        return False


@router.api_route("/api", methods=ALL_METHODS)
@router.api_route("/api/{rest:path}", methods=ALL_METHODS)
async def api_not_found(request: Request):
    raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Not found")


@router.api_route("/{full_path:path}", methods=ALL_METHODS)
async def serve_frontend(full_path: str, request: Request) -> FileResponse:
    public_dir = Path(request.app.state.settings.public_dir)
    target = resolve_public_path(public_dir, full_path)
    if target is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Not found")
    if request.method in STATIC_METHODS and _is_file(target):
        return FileResponse(target)

    index = public_dir / INDEX_DOCUMENT
    if not _is_file(index):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Not found")
    return FileResponse(index, media_type="text/html")
