"""
FastAPI app assembly: logging, middleware, error handlers and router wiring.
"""
import logging
import os
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

# Configure logging
LOG_LEVEL_NAME = os.getenv("LOG_LEVEL", "INFO").upper()
LOG_LEVEL = getattr(logging, LOG_LEVEL_NAME, logging.INFO)
logging.basicConfig(level=LOG_LEVEL)
logger = logging.getLogger(__name__)
logger.setLevel(LOG_LEVEL)
logger.info("app_startup: log_level=%s", LOG_LEVEL_NAME)

from jobboard.api.errors import register_error_handlers
from jobboard.api.candidates import router as candidates_router
from jobboard.api.companies import router as companies_router
from jobboard.api.jobs import router as jobs_router

# Database schema is managed by Alembic migrations.

app = FastAPI(
    title="Job Board Service",
    description="API for managing candidates, companies, job postings and job applications.",
    version="1.0.0",
)

DEFAULT_ORIGINS = [
    "http://localhost",
    "http://localhost:3000",
    "http://localhost:8000",
]


def _cors_origins() -> list[str]:
    raw = os.getenv("CORS_ALLOW_ORIGINS", "")
    origins = [o.strip() for o in raw.split(",") if o.strip()]
    return origins or DEFAULT_ORIGINS


app.add_middleware(
    CORSMiddleware,
    allow_origins=_cors_origins(),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_error_handlers(app)

app.include_router(candidates_router)
app.include_router(companies_router)
app.include_router(jobs_router)


@app.get("/health")
def health_check():
    return {"status": "ok", "service": "jobboard-service"}
