import logging
import logging.config
import os

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded

from app.routers.meta import limiter, router as meta_router

LOG_LEVEL_ENV = "LOG_LEVEL"

_LOG_FORMAT = '{"time": "%(asctime)s", "level": "%(levelname)s", "logger": "%(name)s", "message": "%(message)s"}'


def build_logging_config(level: str = "INFO") -> dict:
    """Return the ``dictConfig`` schema: one console handler, JSON-style lines."""
    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {"json": {"format": _LOG_FORMAT}},
        "handlers": {
            "console": {"class": "logging.StreamHandler", "formatter": "json"},
        },
        "root": {"level": level.upper(), "handlers": ["console"]},
    }


logging.config.dictConfig(build_logging_config(os.environ.get(LOG_LEVEL_ENV, "INFO")))

logger = logging.getLogger(__name__)

app = FastAPI(
    title="Metaforge – SEO Meta Tag API",
    description=(
        "Merges page SEO data with the site's configured defaults and custom "
        "meta entries, and returns the page's meta tags as JSON or HTML."
    ),
    version="1.0.0",
)

app.state.limiter = limiter
app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)


@app.exception_handler(Exception)
async def unhandled_error(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled exception while generating meta for %s", request.url.path)
    return JSONResponse(status_code=500, content={"detail": "An unexpected error occurred."})


app.include_router(meta_router)


@app.get("/", summary="Health check")
async def root() -> dict:
    return {"service": "metaforge", "status": "ok"}
