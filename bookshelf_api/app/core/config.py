"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields so the
API starts without any configuration at all; override them via the
environment when deploying.
"""

import os
from dataclasses import dataclass
from typing import List


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Bookshelf API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    debug: bool = os.getenv("DEBUG", "false").lower() in {"1", "true", "yes"}
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    log_file: str = os.getenv("LOG_FILE", "")

    # Bind address used by ``run.py``.
    host: str = os.getenv("HOST", "localhost")
    port: int = int(os.getenv("PORT", "9000"))

    # Comma‑separated list of allowed CORS origins.  ``*`` allows any
    # origin, which is what browser front‑ends of the bookshelf expect.
    cors_origins: str = os.getenv("CORS_ORIGINS", "*")

    # Length of the random identifiers assigned to new books.
    book_id_length: int = int(os.getenv("BOOK_ID_LENGTH", "16"))

    # Message catalogue used for response messages (``id`` or ``en``).
    message_locale: str = os.getenv("MESSAGE_LOCALE", "id")

    @property
    def cors_origin_list(self) -> List[str]:
        """Return ``cors_origins`` split into a list, empty items dropped."""
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Because the dataclass
# computes values at class creation time, environment variables should
# be set before importing this module.
settings = Settings()
