"""API routers."""

from server.routers.docs import router as docs_router

__all__ = ["docs_router"]
