"""FastAPI application for the docs API."""

from __future__ import annotations

from fastapi import FastAPI

from server.routers import docs_router

app = FastAPI(
    title="docsnav",
    description="Serve the documentation navigation index and the Markdown it was built from.",
)
app.include_router(docs_router)
