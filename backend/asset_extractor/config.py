from pydantic_settings import BaseSettings
from functools import lru_cache
import os


class Settings(BaseSettings):
    # Fetch defaults
    user_agent: str = (
        "Mozilla/5.0 (Windows NT 10.0; Win64; x64) "
        "AppleWebKit/537.36 (KHTML, like Gecko) "
        "Chrome/91.0.4472.124 Safari/537.36"
    )
    fetch_timeout: float = 30.0  # seconds

    # Headless render (only used when render_js is on)
    render_js: bool = False
    page_load_timeout: int = 15000  # milliseconds
    viewport_width: int = 1920
    viewport_height: int = 1080

    # Result limits
    max_buttons: int = 6
    max_templates: int = 4

    class Config:
        # Look for .env in the repo root (two levels up from backend/asset_extractor/)
        _env_path = os.path.join(os.path.dirname(__file__), "..", "..", ".env")
        env_file = _env_path if os.path.exists(_env_path) else None
        env_file_encoding = "utf-8"
        extra = "ignore"


@lru_cache()
def get_settings():
    return Settings()
