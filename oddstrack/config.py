from pydantic import Field
from pydantic_settings import BaseSettings
import os

class Settings(BaseSettings):
    db_dsn: str = os.getenv("DB_DSN", "sqlite:///./data/oddstrack.db")
    window: int = Field(default=int(os.getenv("WINDOW", 5)), ge=1)
    trim_fraction: float = Field(default=float(os.getenv("TRIM_FRACTION", 0.10)), ge=0.0, le=0.5)
    api_key: str | None = os.getenv("API_KEY")
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    ocr_lang: str = os.getenv("OCR_LANG", "eng")
    tesseract_cmd: str | None = os.getenv("TESSERACT_CMD")
    host: str = os.getenv("HOST", "127.0.0.1")
    port: int = int(os.getenv("PORT", 8000))

settings = Settings()
