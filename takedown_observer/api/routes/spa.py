"""
SPA shell routes.

The client decides which view to show from the path, so the host only has to
hand out the same shell for every path the client knows. Unknown paths are
404s here as well, including anything under /api/ (the accounts API lives on
its own service).
"""

from pathlib import Path

from fastapi import APIRouter, Depends, HTTPException, Request, status
from fastapi.responses import FileResponse

from takedown_observer.app_shell.config import Settings, get_settings

router = APIRouter()

SPA_ROUTES = ("/", "/dashboard", "/about", "/related-work")


def get_index_path(settings: Settings = Depends(get_settings)) -> Path:
    return settings.static_dir / "index.html"


def serve_shell(request: Request, index: Path = Depends(get_index_path)) -> FileResponse:
    if not index.is_file():
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"No app shell for {request.url.path}",
        )
    return FileResponse(index, media_type="text/html")


for _path in SPA_ROUTES:
    router.add_api_route(_path, serve_shell, methods=["GET"], include_in_schema=False)
