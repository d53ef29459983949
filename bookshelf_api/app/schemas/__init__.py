"""
Pydantic schema definitions for API payloads.

Schemas are kept separate from the store so the API representation of
a book is decoupled from how the collection holds it.
"""
