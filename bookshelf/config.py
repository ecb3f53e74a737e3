# bookshelf/config.py
"""Application settings.

Values come from environment variables prefixed with ``BOOKSHELF_`` (or a
``.env`` file in the working directory). Unknown keys are ignored.
"""

from typing import List

from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Runtime configuration for the book catalog service."""

    app_name: str = "Bookshelf API"
    host: str = "localhost"
    port: int = 9000
    # Everything is allowed by default; restrict in deployment if needed.
    cors_origins: List[str] = Field(default_factory=lambda: ["*"])
    log_level: str = "INFO"
    reload: bool = False

    model_config = {
        "env_prefix": "BOOKSHELF_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,
        "extra": "ignore",
    }


settings = Settings()
