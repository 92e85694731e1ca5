import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from pacrecords.core.config import load_settings
from pacrecords.infrastructure import JsonFileRecordExtractor, configure_record_extractor
from pacrecords.routes import records

logger = logging.getLogger(__name__)


def create_app() -> FastAPI:
    settings = load_settings()
    app = FastAPI(title="PAC Records API", version="0.1.0")

    if settings.records_file:
        configure_record_extractor(JsonFileRecordExtractor(settings.records_file))
        logger.info("serving records from %s", settings.records_file)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(settings.cors_origins),
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(records.router, prefix="/api")

    @app.get("/health")
    async def health() -> dict:
        return {"status": "ok", "server": settings.server}

    @app.get("/", include_in_schema=False)
    async def root() -> JSONResponse:
        """Provide a lightweight landing page for container checks."""
        return JSONResponse(
            {
                "message": "PAC Records API",
                "docs": "/docs",
                "health": "/health",
            }
        )

    return app


app = create_app()
