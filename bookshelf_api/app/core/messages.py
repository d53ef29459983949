"""
Human‑readable response messages.

Messages are looked up by locale, action (``create``, ``update``,
``get``, ``delete``) and outcome, where the outcome is either
``"success"`` or the ``kind`` of a :class:`BookStoreError`.  The
``id`` (Indonesian) catalogue is the default and is what existing
bookshelf clients expect byte for byte.
"""

from typing import Dict, Tuple

DEFAULT_LOCALE = "id"

MESSAGES: Dict[str, Dict[Tuple[str, str], str]] = {
    "id": {
        ("create", "success"): "Buku berhasil ditambahkan",
        ("create", "MissingName"): "Gagal menambahkan buku. Mohon isi nama buku",
        ("create", "ReadPageExceedsPageCount"): (
            "Gagal menambahkan buku. readPage tidak boleh lebih besar dari pageCount"
        ),
        ("create", "InvalidPayload"): "Gagal menambahkan buku. Data buku tidak valid",
        ("get", "NotFound"): "Buku tidak ditemukan",
        ("update", "success"): "Buku berhasil diperbarui",
        ("update", "MissingName"): "Gagal memperbarui buku. Mohon isi nama buku",
        ("update", "ReadPageExceedsPageCount"): (
            "Gagal memperbarui buku. readPage tidak boleh lebih besar dari pageCount"
        ),
        ("update", "InvalidPayload"): "Gagal memperbarui buku. Data buku tidak valid",
        ("update", "NotFound"): "Gagal memperbarui buku. Id tidak ditemukan",
        ("delete", "success"): "Buku berhasil dihapus",
        ("delete", "NotFound"): "Buku gagal dihapus. Id tidak ditemukan",
    },
    "en": {
        ("create", "success"): "Book added successfully",
        ("create", "MissingName"): "Failed to add book. Please provide the book name",
        ("create", "ReadPageExceedsPageCount"): (
            "Failed to add book. readPage must not be greater than pageCount"
        ),
        ("create", "InvalidPayload"): "Failed to add book. Invalid book data",
        ("get", "NotFound"): "Book not found",
        ("update", "success"): "Book updated successfully",
        ("update", "MissingName"): "Failed to update book. Please provide the book name",
        ("update", "ReadPageExceedsPageCount"): (
            "Failed to update book. readPage must not be greater than pageCount"
        ),
        ("update", "InvalidPayload"): "Failed to update book. Invalid book data",
        ("update", "NotFound"): "Failed to update book. Id not found",
        ("delete", "success"): "Book deleted successfully",
        ("delete", "NotFound"): "Failed to delete book. Id not found",
    },
}


def get_message(action: str, outcome: str, locale: str = DEFAULT_LOCALE) -> str:
    """Return the message for ``action``/``outcome`` in ``locale``.

    Unknown locales fall back to :data:`DEFAULT_LOCALE`.  An unknown
    action/outcome pair raises ``KeyError``; every pair the API can
    produce is listed in the catalogues above.
    """
    catalogue = MESSAGES.get(locale) or MESSAGES[DEFAULT_LOCALE]
    return catalogue[(action, outcome)]
