"""
CarCheck FastAPI application entry point.
"""

import logging
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import FileResponse, JSONResponse

from carcheck.api.routes import health, vehicles
from carcheck.config import Settings, get_settings
from carcheck.errors import CarCheckError, InvalidPlateError
from carcheck.utils.plates import validate_plate

logger = logging.getLogger(__name__)


def configure_logging(settings: Settings) -> None:
    logging.basicConfig(
        level=logging.DEBUG if settings.debug else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build the proxy app around one explicit Settings instance."""
    settings = settings or get_settings()
    configure_logging(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info(f"Starting {settings.service_name} (full reports via {settings.full_report_provider})")
        yield
        logger.info(f"Shutting down {settings.service_name}...")

    app = FastAPI(
        title=settings.api_title,
        version=settings.api_version,
        debug=settings.debug,
        lifespan=lifespan,
    )
    app.state.settings = settings

    # CORS for the local Vite dev client
    app.add_middleware(
        CORSMiddleware,
        allow_origins=[settings.cors_origin],
        allow_methods=["GET"],
        allow_headers=["*"],
    )

    @app.exception_handler(CarCheckError)
    async def carcheck_error_handler(request: Request, exc: CarCheckError):
        return JSONResponse(status_code=exc.status_code, content=exc.to_dict())

    app.include_router(health.router)
    app.include_router(vehicles.router)

    _mount_client(app, Path(settings.static_dir))
    return app


def _mount_client(app: FastAPI, static_dir: Path) -> None:
    """Serve the built report client, falling back to index.html for client routes."""
    static_root = static_dir.resolve()

    @app.get("/{full_path:path}", include_in_schema=False)
    async def client(full_path: str):
        if full_path in ("api/check", "api/full"):
            raise InvalidPlateError(validate_plate(""), details=f"/{full_path}")
        if full_path == "api" or full_path.startswith("api/"):
            return JSONResponse(status_code=404, content={"error": "Not found", "details": f"/{full_path}"})

        candidate = (static_root / full_path).resolve()
        if full_path and candidate.is_file() and candidate.is_relative_to(static_root):
            return FileResponse(candidate)

        index = static_root / "index.html"
        if index.is_file():
            return FileResponse(index)
        return JSONResponse(status_code=404, content={"error": "Client build not found", "details": str(static_root)})


app = create_app()
