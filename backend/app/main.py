"""FastAPI app factory."""

from __future__ import annotations

import logging

from dotenv import load_dotenv
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app.config import settings
from app.engine.errors import InvalidParameter

load_dotenv()

logging.basicConfig(
    level=getattr(logging, settings.thalia_log_level.upper(), logging.INFO),
    format="%(asctime)s %(name)s %(levelname)s %(message)s",
)

logger = logging.getLogger(__name__)


async def _invalid_parameter(request: Request, exc: InvalidParameter) -> JSONResponse:
    logger.info("Rejected %s %s: %s", request.method, request.url.path, exc)
    return JSONResponse(
        status_code=422,
        content={
            "detail": {
                "parameter": exc.parameter,
                "value": str(exc.value),
                "message": exc.message,
            }
        },
    )


def create_app() -> FastAPI:
    app = FastAPI(
        title="Thalia",
        description="Curvature engine for crochet stitch schedules and node layouts from a single K",
        version="0.1.0",
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(InvalidParameter, _invalid_parameter)

    from app.api.router import api_router

    app.include_router(api_router)

    return app


app = create_app()
