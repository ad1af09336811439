import logging

import uvicorn
from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app.config import settings
from app.api.v1 import calculator
from app.core.logging import RequestLoggingMiddleware, setup_logging

from engine.solar import SolarEngineError

logger = logging.getLogger(__name__)


async def solar_engine_error_handler(request: Request, exc: SolarEngineError) -> JSONResponse:
    field = getattr(exc, "field", None)
    logger.warning(
        "Calculation rejected on %s: %s",
        request.url.path,
        exc,
        extra={"error": type(exc).__name__, "field": field},
    )
    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content={"detail": str(exc), "error": type(exc).__name__, "field": field},
    )


def create_app() -> FastAPI:
    setup_logging(json_format=settings.log_json)

    application = FastAPI(
        title=settings.app_name,
        version=settings.version,
    )

    application.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origin_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    application.add_middleware(RequestLoggingMiddleware)

    application.add_exception_handler(SolarEngineError, solar_engine_error_handler)

    application.include_router(
        calculator.router, prefix="/api/v1/calculator", tags=["calculator"]
    )

    @application.get("/health")
    async def health_check() -> dict:
        return {"status": "ok", "version": settings.version}

    return application


app = create_app()


def run() -> None:
    """Serve the calculator API with uvicorn."""
    uvicorn.run(
        "app.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug and settings.environment == "development",
    )


if __name__ == "__main__":
    run()
