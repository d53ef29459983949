"""
Application package initializer.

This package contains the main entrypoint for the API and its
submodules: ``core`` (settings, logging, errors, messages and the
store), ``schemas``, ``services`` and the versioned ``api`` routers.
"""

from .main import app, create_app  # noqa: F401
