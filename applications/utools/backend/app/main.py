"""FastAPI application entry point."""

import logging
import time
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.requests import Request
from fastapi.responses import PlainTextResponse

from app.api.api_router import api_router
from app.core.config import settings
from app.core.errors import register_error_handlers

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)
logger = logging.getLogger("u-tools")


def create_app() -> FastAPI:
    app = FastAPI(
        title=f"{settings.app_name} API",
        version=settings.app_version,
        description="A collection of small utilities accessible via REST API",
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_error_handlers(app)
    app.include_router(api_router, prefix=settings.api_prefix)

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        start = time.perf_counter()
        response = await call_next(request)
        elapsed_ms = (time.perf_counter() - start) * 1000
        logger.info(
            "request",
            extra={
                "method": request.method,
                "path": request.url.path,
                "status_code": response.status_code,
                "elapsed_ms": round(elapsed_ms, 2),
            },
        )
        return response

    @app.get("/health", tags=["Health"])
    def health_check() -> dict:
        logger.info("health_check")
        return {
            "status": "ok",
            "version": settings.app_version,
            "env": settings.env,
        }

    @app.get("/", response_class=PlainTextResponse, tags=["Health"])
    def root() -> str:
        logger.info("root")
        return f"{settings.app_name} API"

    return app


app = create_app()
