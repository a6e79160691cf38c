from pathlib import Path
from typing import Optional

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables.

    All settings can be overridden via environment variables with the FUNDA_ prefix.
    Example: FUNDA_API_KEY=... FUNDA_PAGE_SIZE=50
    """
    model_config = {"env_prefix": "FUNDA_"}

    # API configuration
    api_key: str = ""
    base_url: str = "https://mobile.funda.io/api/v1"
    user_agent: str = "Funda/2.17.0 (com.funda.two; build:80; Android 25) okhttp/3.5.0"
    timeout: float = 30.0  # seconds per request

    # Search configuration
    page_size: int = 25
    max_tree_depth: int = 64  # deepest detail line nesting accepted

    # Logging configuration
    log_level: str = "INFO"
    log_file: Optional[Path] = None


settings = Settings()
