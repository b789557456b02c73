"""Static frontend served for every path outside /api/."""

import os
from pathlib import Path
from typing import Protocol, Union

from starlette.exceptions import HTTPException
from starlette.requests import Request
from starlette.responses import FileResponse, PlainTextResponse, Response
from starlette.staticfiles import StaticFiles

from oran_gateway.config import log


class AssetService(Protocol):
    async def fetch(self, request: Request) -> Response: ...


class StaticAssetService:
    """
    Serves files from a directory, `/` mapping to index.html.

    With spa_fallback, unknown paths get index.html instead of a 404 so a
    client-side router can take over.
    """

    def __init__(self, directory: Union[str, Path], spa_fallback: bool = False):
        self.directory = Path(directory)
        self.spa_fallback = spa_fallback
        if not self.directory.is_dir():
            log.warning(f"Asset directory {self.directory} does not exist; every asset request will 404")
        self._files = StaticFiles(directory=str(self.directory), html=True, check_dir=False)

    async def fetch(self, request: Request) -> Response:
        path = self._files.get_path(request.scope)
        try:
            return await self._files.get_response(path, request.scope)
        except HTTPException as e:
            if e.status_code == 405:
                return PlainTextResponse("Method not allowed", status_code=405)
            if e.status_code == 404 and self.spa_fallback:
                index = self.directory / "index.html"
                if os.path.isfile(index):
                    return FileResponse(index)
            return PlainTextResponse("Not found", status_code=e.status_code)
