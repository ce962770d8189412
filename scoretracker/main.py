import logging
import time

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from scoretracker.api.endpoints import championships as championship_endpoints
from scoretracker.api.endpoints import players as player_endpoints
from scoretracker.api.endpoints import matches as match_endpoints
from scoretracker.core.config import settings
from scoretracker.core.database import init_db, wait_for_database
from scoretracker.core.logging import configure_logging

configure_logging()
logger = logging.getLogger("scoretracker")

app = FastAPI(title="Score Tracker API")

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS", "HEAD", "PATCH"],
    allow_headers=["*"],
    allow_credentials=False,
    max_age=12 * 60 * 60,
)

@app.middleware("http")
async def log_requests(request: Request, call_next):
    start = time.perf_counter()
    response = await call_next(request)
    elapsed_ms = (time.perf_counter() - start) * 1000
    logger.info("%s %s -> %d (%.1f ms)", request.method, request.url.path, response.status_code, elapsed_ms)
    return response

# Include routers
app.include_router(championship_endpoints.router, prefix="/api/championships", tags=["Championships"])
app.include_router(player_endpoints.router, prefix="/api/players", tags=["Players"])
app.include_router(match_endpoints.router, prefix="/api/matches", tags=["Matches"])


@app.on_event("startup")
async def startup_event():
    wait_for_database()
    init_db()
    logger.info("Application startup complete")


@app.get("/api/health")
async def health_check():
    return {"status": "ok"}
