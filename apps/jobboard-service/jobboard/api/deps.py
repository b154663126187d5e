"""
API dependency helpers.

Shared path parameter types for the resource routers.
"""
from typing import Annotated
from fastapi import Path

from jobboard.db.schemas.base import MAX_ID

# Anything outside the INTEGER column range can never match a row
ResourceId = Annotated[int, Path(ge=1, le=MAX_ID)]
