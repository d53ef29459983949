"""
In‑memory book collection.

``BookStore`` owns the ordered list of books for one application
instance.  Entries are appended on create, replaced in place on
update and removed on delete, so insertion order is always preserved.
Nothing is persisted: the collection lives as long as the store
object does.

Every method takes the store's lock for its whole duration, reads
included.  The async handlers all run on the event loop, so the lock
matters for synchronous callers and for services shared between
threads, where it keeps each operation atomic, the read‑modify‑write
in ``update`` included.
"""

import threading
from typing import Callable, List, Optional

from ..schemas.book import Book


class BookStore:
    """Thread‑safe ordered collection of :class:`Book` records."""

    def __init__(self) -> None:
        self._books: List[Book] = []
        self._lock = threading.Lock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._books)

    def add(self, book: Book) -> None:
        """Append ``book`` to the end of the collection."""
        with self._lock:
            self._books.append(book.model_copy(deep=True))

    def list(self) -> List[Book]:
        """Return a snapshot of all books in insertion order."""
        with self._lock:
            return [book.model_copy(deep=True) for book in self._books]

    def get(self, book_id: str) -> Optional[Book]:
        """Return a copy of the book with ``book_id`` or ``None``."""
        with self._lock:
            index = self._index_of(book_id)
            if index is None:
                return None
            return self._books[index].model_copy(deep=True)

    def update(self, book_id: str, apply: Callable[[Book], Book]) -> Optional[Book]:
        """Replace the book with ``book_id`` by ``apply(current)``.

        The lookup and the replacement happen under one lock
        acquisition.  Returns the new record, or ``None`` when no book
        has that id (``apply`` is not called in that case).
        """
        with self._lock:
            index = self._index_of(book_id)
            if index is None:
                return None
            updated = apply(self._books[index].model_copy(deep=True))
            self._books[index] = updated
            return updated.model_copy(deep=True)

    def remove(self, book_id: str) -> bool:
        """Delete the book with ``book_id``.

        Returns ``True`` if a record was removed, ``False`` otherwise.
        """
        with self._lock:
            index = self._index_of(book_id)
            if index is None:
                return False
            del self._books[index]
            return True

    def clear(self) -> None:
        with self._lock:
            self._books.clear()

    def _index_of(self, book_id: str) -> Optional[int]:
        # Caller must hold the lock.
        for index, book in enumerate(self._books):
            if book.id == book_id:
                return index
        return None
