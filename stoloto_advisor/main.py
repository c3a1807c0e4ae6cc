"""FastAPI application entry point."""

import asyncio
import sys
import time
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from loguru import logger

from stoloto_advisor.config import settings

# Configure loguru
logger.remove()
logger.add(sys.stderr, level="DEBUG" if settings.DEBUG else "INFO")
if settings.LOG_FILE:
    logger.add(settings.LOG_FILE, rotation="10 MB", retention="7 days", level="INFO")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan: startup and shutdown."""
    logger.info("Starting {} ({}) ...", settings.APP_NAME, settings.APP_ENV)
    logger.info("Using StolotoAPI at {}", settings.STOLOTO_API_URL)

    yield

    logger.info("Application shutdown complete")


app = FastAPI(
    title=settings.APP_NAME,
    version="1.0.0",
    description="Персональный подбор лотерей Столото",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
    allow_headers=["Accept", "Authorization", "Content-Type", "X-CSRF-Token"],
    max_age=300,
)


@app.middleware("http")
async def log_and_time_requests(request: Request, call_next):
    """Log each request and bound it by REQUEST_TIMEOUT_SECONDS."""
    start = time.perf_counter()
    try:
        response = await asyncio.wait_for(
            call_next(request), timeout=settings.REQUEST_TIMEOUT_SECONDS,
        )
    except asyncio.TimeoutError:
        logger.error(
            "[{}] {} timed out after {}s",
            request.method, request.url.path, settings.REQUEST_TIMEOUT_SECONDS,
        )
        return JSONResponse(status_code=504, content={"error": "Request timed out"})

    elapsed_ms = (time.perf_counter() - start) * 1000
    logger.info(
        "[{}] {} - {} - {:.1f}ms",
        request.method, request.url.path, response.status_code, elapsed_ms,
    )
    return response


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    logger.warning("Invalid request to {}: {}", request.url.path, exc.errors())
    return JSONResponse(
        status_code=400,
        content={"error": "Invalid request", "details": jsonable_errors(exc)},
    )


@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception):
    logger.exception("Unhandled error on {} {}", request.method, request.url.path)
    return JSONResponse(status_code=500, content={"error": "Internal server error"})


def jsonable_errors(exc: RequestValidationError) -> list[dict]:
    """Validation errors reduced to location and message."""
    return [
        {"loc": [str(part) for part in err.get("loc", ())], "msg": err.get("msg", "")}
        for err in exc.errors()
    ]


# Include API routers
from stoloto_advisor.api.v1.router import api_router  # noqa: E402
app.include_router(api_router, prefix="/api/v1")


@app.get("/health", include_in_schema=False)
async def health():
    return {"status": "ok", "service": settings.APP_NAME}


def run():
    """Run the API with uvicorn."""
    import uvicorn

    uvicorn.run("stoloto_advisor.main:app", host=settings.HOST, port=settings.PORT, reload=settings.DEBUG)
