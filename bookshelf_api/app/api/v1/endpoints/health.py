"""
Liveness endpoint used by container health checks.
"""

from fastapi import APIRouter, Depends

from bookshelf_api.app.api.v1.endpoints.books import get_book_service
from bookshelf_api.app.schemas.response import success
from bookshelf_api.app.services.book_service import BookService

router = APIRouter()


@router.get("")
async def health(service: BookService = Depends(get_book_service)) -> dict:
    """Report that the API is up and how many books it holds."""
    return success(data={"books": len(service.store)})
