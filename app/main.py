# app/main.py
import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app.core.config import settings
from app.core.errors import LeaderboardError
from app.core.logging import configure_logging
from app.api import routes_contest, routes_games
from app.middleware.cache_log import CacheHeaderLogMiddleware

configure_logging(settings.LOG_LEVEL)
settings.validate_at_startup()

logger = logging.getLogger(__name__)

app = FastAPI(title=settings.APP_NAME)
app.add_middleware(CacheHeaderLogMiddleware)

ALLOWED_ORIGINS = settings.CORS_ORIGINS
logger.info("CORS allow_origins = %s", ALLOWED_ORIGINS)

app.add_middleware(
    CORSMiddleware,
    allow_origins=ALLOWED_ORIGINS,
    allow_origin_regex=r"^https?://(localhost|127\.0\.0\.1):3000$",
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
    max_age=600,
)


# Generic failure envelope: {"error": "<message>"}
@app.exception_handler(LeaderboardError)
async def _leaderboard_error(request: Request, exc: LeaderboardError):
    if exc.retryable:
        logger.warning("%s %s failed upstream: %s", request.method, request.url.path, exc.message)
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


@app.exception_handler(RequestValidationError)
async def _validation_error(request: Request, exc: RequestValidationError):
    errs = exc.errors()
    first = errs[0] if errs else {}
    where = ".".join(str(p) for p in first.get("loc", ()) if p != "body")
    msg = first.get("msg", "invalid request")
    return JSONResponse(
        status_code=400,
        content={"error": f"Missing or invalid parameter {where}: {msg}" if where else msg},
    )


# Routers
app.include_router(routes_contest.router)
app.include_router(routes_games.router)


@app.get("/health")
def health():
    return {"ok": True, "env": settings.APP_ENV}
