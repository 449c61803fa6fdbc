# memoapp/shared/config.py
from pydantic import BaseModel
import os

GEMINI_API_KEY_ENV = "GEMINI_API_KEY"

class Settings(BaseModel):
    ENV: str = os.getenv("ENV", "dev")
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

    # storage
    DB_URL: str | None = os.getenv("MEMO_DB_URL")

    # summarization provider
    GEMINI_MODEL: str = os.getenv("GEMINI_MODEL", "gemini-2.5-flash-lite")

    # viewer / client side
    API_BASE_URL: str = os.getenv("API_BASE_URL", "http://localhost:8000")
    DISPLAY_TZ: str = os.getenv("DISPLAY_TZ", "Asia/Seoul")

settings = Settings()

def gemini_api_key() -> str | None:
    # read per call so a key added or removed at runtime is picked up
    return os.getenv(GEMINI_API_KEY_ENV) or None
