"""
Book endpoints.

These routes expose the CRUD API for the bookshelf.  Every response,
successful or not, uses the ``{status, message, data}`` envelope.
Handlers only translate between HTTP and :class:`BookService`: they
parse query flags, call the service and map ``BookStoreError``
subclasses to ``fail`` responses with a localized message.
"""

from typing import Any, Optional

from fastapi import APIRouter, Body, Depends, Query, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse

from bookshelf_api.app.core.errors import BookStoreError
from bookshelf_api.app.core.messages import get_message
from bookshelf_api.app.schemas.response import fail, success
from bookshelf_api.app.services.book_service import BookService

router = APIRouter()


def get_book_service(request: Request) -> BookService:
    """Dependency returning the service bound to the running app."""
    return request.app.state.book_service


def get_locale(request: Request) -> str:
    """Dependency returning the configured message locale."""
    return request.app.state.settings.message_locale


def _flag(value: Optional[str]) -> Optional[bool]:
    # Query flags are "1" for true; any other value means false.
    if value is None:
        return None
    return value == "1"


def _fail_response(action: str, error: BookStoreError, locale: str) -> JSONResponse:
    return JSONResponse(
        status_code=error.status_code,
        content=fail(get_message(action, error.kind, locale)),
    )


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_book(
    payload: Any = Body(None),
    service: BookService = Depends(get_book_service),
    locale: str = Depends(get_locale),
) -> JSONResponse:
    """Add a book.

    Answers 201 with the new ``bookId``, or 400 when the name is
    missing, a typed field is invalid or ``readPage`` exceeds
    ``pageCount``.
    """
    try:
        book = service.create_book(payload)
    except BookStoreError as e:
        return _fail_response("create", e, locale)
    return JSONResponse(
        status_code=status.HTTP_201_CREATED,
        content=success(
            message=get_message("create", "success", locale),
            data={"bookId": book.id},
        ),
    )


@router.get("")
async def list_books(
    reading: Optional[str] = Query(None, description="1 for books being read, 0 for the rest"),
    finished: Optional[str] = Query(None, description="1 for finished books, 0 for the rest"),
    name: Optional[str] = Query(None, description="Case-insensitive text contained in the name"),
    service: BookService = Depends(get_book_service),
) -> JSONResponse:
    """List books as ``{id, name, publisher}``, optionally filtered.

    - **reading**: filter on the ``reading`` flag.
    - **finished**: filter on the ``finished`` flag.
    - **name**: substring match on the name, ignoring case.

    Filters given together must all match.
    """
    books = service.list_books(reading=_flag(reading), finished=_flag(finished), name=name)
    return JSONResponse(
        status_code=status.HTTP_200_OK,
        content=success(data={"books": jsonable_encoder(books)}),
    )


@router.get("/{book_id}")
async def get_book(
    book_id: str,
    service: BookService = Depends(get_book_service),
    locale: str = Depends(get_locale),
) -> JSONResponse:
    """Retrieve a single book by its ID, or 404 if it does not exist."""
    try:
        book = service.get_book(book_id)
    except BookStoreError as e:
        return _fail_response("get", e, locale)
    return JSONResponse(
        status_code=status.HTTP_200_OK,
        content=success(data={"book": jsonable_encoder(book)}),
    )


@router.put("/{book_id}")
async def update_book(
    book_id: str,
    payload: Any = Body(None),
    service: BookService = Depends(get_book_service),
    locale: str = Depends(get_locale),
) -> JSONResponse:
    """Update a book.

    The body is validated like on creation before the book is looked
    up; 400 on an invalid body, 404 when the id is unknown.
    """
    try:
        service.update_book(book_id, payload)
    except BookStoreError as e:
        return _fail_response("update", e, locale)
    return JSONResponse(
        status_code=status.HTTP_200_OK,
        content=success(message=get_message("update", "success", locale)),
    )


@router.delete("/{book_id}")
async def delete_book(
    book_id: str,
    service: BookService = Depends(get_book_service),
    locale: str = Depends(get_locale),
) -> JSONResponse:
    """Delete a book, or 404 if it does not exist."""
    try:
        service.delete_book(book_id)
    except BookStoreError as e:
        return _fail_response("delete", e, locale)
    return JSONResponse(
        status_code=status.HTTP_200_OK,
        content=success(message=get_message("delete", "success", locale)),
    )
