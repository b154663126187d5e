"""
App assembly entry point.

Re-exports the FastAPI `app` from `jobboard.api.main` so the service can be
started with ``uvicorn app:app``.
"""

from jobboard.api.main import app  # noqa: F401
