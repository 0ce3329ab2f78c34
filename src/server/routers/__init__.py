"""API routers."""

from server.routers.mindmap import router as mindmap_router
from server.routers.revisions import router as revisions_router

__all__ = ["mindmap_router", "revisions_router"]
