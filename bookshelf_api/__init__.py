"""
Top‑level package for the Bookshelf API.

All functionality lives in submodules under ``app``; run the service
with ``uvicorn bookshelf_api.app.main:app`` or ``python run.py``.
"""

__all__ = []
