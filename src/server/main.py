"""FastAPI application for ideagraph."""

from __future__ import annotations

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from ideagraph.utils.logging_config import get_logger
from server.routers import mindmap_router, revisions_router
from server.server_config import APP_TITLE, CORS_ALLOW_ORIGINS

logger = get_logger(__name__)

app = FastAPI(title=APP_TITLE)

app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ALLOW_ORIGINS,
    allow_methods=["GET", "POST"],
    allow_headers=["*"],
)

app.include_router(mindmap_router)
app.include_router(revisions_router)


@app.get("/health")
async def health_check() -> dict[str, str]:
    """Health check endpoint."""
    return {"status": "ok"}
