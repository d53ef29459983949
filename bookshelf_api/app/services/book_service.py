"""
Business logic for the bookshelf.

The ``BookService`` validates incoming payloads, derives the computed
fields of a book (``finished`` and the timestamps) and routes every
change through a :class:`BookStore`.  Failures are reported by raising
a :class:`BookStoreError` subclass; the API layer turns those into
``fail`` envelopes.
"""

from __future__ import annotations

import logging
import secrets
import string
from datetime import datetime, timezone
from typing import Any, List, Optional

from pydantic import ValidationError

from ..core.errors import (
    BookNotFoundError,
    InvalidPayloadError,
    MissingNameError,
    ReadPageExceedsPageCountError,
)
from ..core.store import BookStore
from ..schemas.book import Book, BookPayload, BookSummary

ID_ALPHABET = string.ascii_letters + string.digits + "_-"


def generate_book_id(length: int = 16) -> str:
    """Return a random URL‑safe identifier of ``length`` characters."""
    return "".join(secrets.choice(ID_ALPHABET) for _ in range(length))


def utc_timestamp() -> str:
    """Current UTC time as ISO‑8601 with milliseconds, e.g. ``2024-05-01T10:00:00.000Z``."""
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


class BookService:
    """Service for managing the books held in one store."""

    def __init__(self, store: Optional[BookStore] = None, id_length: int = 16) -> None:
        self.store = store if store is not None else BookStore()
        self.id_length = id_length

    @staticmethod
    def validate_payload(payload: Any) -> BookPayload:
        """Check a create/update body and return it as a ``BookPayload``.

        Checks run in a fixed order: a missing or blank ``name`` is
        reported first, then type errors on the typed fields, then
        ``readPage`` exceeding ``pageCount``.
        """
        if not isinstance(payload, dict):
            raise InvalidPayloadError("Request body must be a JSON object")
        name = payload.get("name")
        if name is None or (isinstance(name, str) and not name.strip()):
            raise MissingNameError()
        try:
            data = BookPayload.model_validate(payload)
        except ValidationError as e:
            detail = "; ".join(
                f"{'.'.join(str(part) for part in err['loc'])}: {err['msg']}" for err in e.errors()
            )
            raise InvalidPayloadError(detail) from e
        if data.readPage > data.pageCount:
            raise ReadPageExceedsPageCountError()
        return data

    def create_book(self, payload: Any) -> Book:
        """Validate ``payload`` and append a new book to the store."""
        logger = logging.getLogger(__name__)
        try:
            data = self.validate_payload(payload)
        except (MissingNameError, InvalidPayloadError, ReadPageExceedsPageCountError) as e:
            logger.warning("Rejected new book: %s", e.kind)
            raise
        now = utc_timestamp()
        book = Book(
            id=generate_book_id(self.id_length),
            name=data.name,
            **data.extras(),
            finished=data.pageCount == data.readPage,
            pageCount=data.pageCount,
            readPage=data.readPage,
            insertedAt=now,
            updatedAt=now,
        )
        self.store.add(book)
        logger.info("Created book %s '%s'", book.id, book.name)
        return book

    def list_books(
        self,
        reading: Optional[bool] = None,
        finished: Optional[bool] = None,
        name: Optional[str] = None,
    ) -> List[BookSummary]:
        """Return the ``{id, name, publisher}`` projection of matching books.

        - ``reading``: keep books whose stored ``reading`` equals this value.
        - ``finished``: keep books whose ``finished`` flag equals this value.
        - ``name``: keep books whose name contains this text, ignoring case.

        Filters left as ``None`` are not applied; the others must all
        match.  Insertion order is preserved.
        """
        books = self.store.list()
        if reading is not None:
            books = [b for b in books if getattr(b, "reading", None) is reading]
        if finished is not None:
            books = [b for b in books if b.finished is finished]
        if name is not None:
            needle = name.lower()
            books = [b for b in books if needle in b.name.lower()]
        return [
            BookSummary(id=b.id, name=b.name, publisher=getattr(b, "publisher", None))
            for b in books
        ]

    def get_book(self, book_id: str) -> Book:
        """Return the full record of a book or raise ``BookNotFoundError``."""
        book = self.store.get(book_id)
        if book is None:
            raise BookNotFoundError(book_id)
        return book

    def update_book(self, book_id: str, payload: Any) -> Book:
        """Replace the typed fields of a book and merge its extras.

        The payload is validated before the lookup, so an invalid body
        is reported as such even when the id does not exist.  ``id`` and
        ``insertedAt`` are never changed.
        """
        logger = logging.getLogger(__name__)
        try:
            data = self.validate_payload(payload)
        except (MissingNameError, InvalidPayloadError, ReadPageExceedsPageCountError) as e:
            logger.warning("Rejected update of book %s: %s", book_id, e.kind)
            raise
        updated_at = utc_timestamp()

        def apply(current: Book) -> Book:
            fields = current.model_dump()
            fields.update(data.extras())
            fields.update(
                name=data.name,
                pageCount=data.pageCount,
                readPage=data.readPage,
                finished=data.pageCount == data.readPage,
                updatedAt=updated_at,
            )
            return Book(**fields)

        book = self.store.update(book_id, apply)
        if book is None:
            logger.warning("Update of unknown book %s", book_id)
            raise BookNotFoundError(book_id)
        logger.info("Updated book %s", book_id)
        return book

    def delete_book(self, book_id: str) -> None:
        """Remove a book from the store or raise ``BookNotFoundError``."""
        logger = logging.getLogger(__name__)
        if not self.store.remove(book_id):
            logger.warning("Delete of unknown book %s", book_id)
            raise BookNotFoundError(book_id)
        logger.info("Deleted book %s", book_id)
