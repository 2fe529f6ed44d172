"""FastAPI application entrypoint for cemdoc service mode."""

from __future__ import annotations

import asyncio
from typing import Any, Callable, Dict, Optional

from fastapi import Depends, FastAPI
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from ..config import ConfigError, RenderOptions
from ..converter import Converter
from ..render.document import ManifestError


class RenderRequest(BaseModel):
    manifest: Dict[str, Any]
    heading_offset: int = 0
    private: Optional[str] = None


class RenderResponse(BaseModel):
    markdown: str


class HealthResponse(BaseModel):
    status: str


def _default_converter() -> Converter:
    return Converter()


def create_app(
    converter_factory: Callable[[], Converter] = _default_converter,
) -> FastAPI:
    """Create the FastAPI application exposing manifest rendering."""
    app = FastAPI(title="cemdoc Service", version="0.1.0")

    async def get_converter() -> Converter:
        return converter_factory()

    @app.get("/health", response_model=HealthResponse)
    async def health() -> HealthResponse:
        return HealthResponse(status="ok")

    @app.post("/render", response_model=RenderResponse)
    async def render(
        payload: RenderRequest,
        converter: Converter = Depends(get_converter),
    ) -> RenderResponse:
        options = RenderOptions(heading_offset=payload.heading_offset, private=payload.private)

        def _run_render() -> str:
            return converter.render(payload.manifest, options)

        loop = asyncio.get_running_loop()
        markdown = await loop.run_in_executor(None, _run_render)
        return RenderResponse(markdown=markdown)

    @app.exception_handler(ManifestError)
    async def manifest_error_handler(_: Any, exc: ManifestError) -> JSONResponse:
        return JSONResponse(status_code=400, content={"detail": str(exc)})

    @app.exception_handler(ConfigError)
    async def config_error_handler(_: Any, exc: ConfigError) -> JSONResponse:
        return JSONResponse(status_code=400, content={"detail": str(exc)})

    return app


def run_service(
    host: str = "127.0.0.1", port: int = 8000
) -> None:  # pragma: no cover - integration path
    try:
        import uvicorn
    except ModuleNotFoundError as exc:
        raise RuntimeError(
            "uvicorn is required to run the service. Install it with `pip install cemdoc[service]`."
        ) from exc

    app = create_app()
    uvicorn.run(app, host=host, port=port)
