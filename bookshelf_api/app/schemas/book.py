"""
Pydantic models for book data.

``BookPayload`` is the body accepted by create and update requests: a
fixed set of typed fields plus any number of free‑form extras (for
example ``publisher``, ``author`` or ``reading``) which are passed
through unvalidated.  ``Book`` is the stored record and ``BookSummary``
the projection returned by the list endpoint.
"""

from typing import Any, Dict, Optional

from pydantic import BaseModel, Field

# Fields the server manages itself; callers cannot set them as extras.
RESERVED_FIELDS = frozenset({"id", "finished", "insertedAt", "updatedAt"})


class BookPayload(BaseModel):
    """Schema for the body of create and update requests."""

    name: str = Field(..., min_length=1, example="Kolor Langit")
    pageCount: int = Field(..., ge=0, strict=True, example=320)
    readPage: int = Field(..., ge=0, strict=True, example=25)

    model_config = {
        "extra": "allow",
    }

    def extras(self) -> Dict[str, Any]:
        """Return the caller‑supplied extra fields, reserved names removed."""
        return {
            key: value
            for key, value in (self.model_extra or {}).items()
            if key not in RESERVED_FIELDS
        }


class Book(BaseModel):
    """Schema for a stored book, including pass‑through extras."""

    id: str
    name: str
    pageCount: int
    readPage: int
    finished: bool
    insertedAt: str
    updatedAt: str

    model_config = {
        "extra": "allow",
    }


class BookSummary(BaseModel):
    """Projection of a book returned by ``GET /books``."""

    id: str
    name: str
    publisher: Optional[Any] = None
