"""
Top‑level router for version 1 of the API.

Existing bookshelf clients call ``/books`` without a version prefix,
so the application mounts this router at the root.
"""

from fastapi import APIRouter

from .endpoints import books, health

router = APIRouter()

router.include_router(books.router, prefix="/books", tags=["books"])
router.include_router(health.router, prefix="/health", tags=["health"])
