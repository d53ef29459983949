"""
Domain errors raised by the book service.

Every error carries a ``kind`` (a stable identifier used to pick the
response message) and the HTTP ``status_code`` the API layer should
answer with.  All of them are caller input errors; none is fatal to
the process.
"""

from typing import Optional


class BookStoreError(Exception):
    """Base class for errors reported back to the API client."""

    kind = "BookStoreError"
    status_code = 400

    def __init__(self, detail: Optional[str] = None) -> None:
        super().__init__(detail or self.kind)
        self.detail = detail


class MissingNameError(BookStoreError):
    """The payload has no usable ``name``."""

    kind = "MissingName"


class InvalidPayloadError(BookStoreError):
    """The payload is not an object or a typed field has the wrong type."""

    kind = "InvalidPayload"


class ReadPageExceedsPageCountError(BookStoreError):
    """``readPage`` is greater than ``pageCount``."""

    kind = "ReadPageExceedsPageCount"


class BookNotFoundError(BookStoreError):
    """No book with the requested id exists."""

    kind = "NotFound"
    status_code = 404

    def __init__(self, book_id: str) -> None:
        super().__init__(f"Book {book_id} does not exist")
        self.book_id = book_id
