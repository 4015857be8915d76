"""Configuration management for the application."""
from typing import Optional
from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # API Configuration
    API_TITLE: str = "StudyForge API"
    API_VERSION: str = "1.0.0"
    DEBUG: bool = False
    CORS_ALLOW_ORIGINS: str = "*"

    # Uploads
    UPLOAD_DIR: str = "uploads"
    MAX_UPLOAD_SIZE: int = 10 * 1024 * 1024  # 10MB
    ALLOWED_CONTENT_TYPE: str = "application/pdf"

    # Chat
    CHAT_HISTORY_LIMIT: int = Field(10, ge=1)
    CHAT_CONTEXT_CHARS: int = Field(2000, ge=1)

    # Model name handed to the browser-side AI provider
    AI_MODEL: str = "gpt-4o"

    # Azure Document Intelligence (optional, local PyMuPDF extraction otherwise)
    AZURE_DOCUMENT_INTELLIGENCE_ENDPOINT: Optional[str] = None
    AZURE_DOCUMENT_INTELLIGENCE_KEY: Optional[str] = None

    # Logging
    LOG_LEVEL: str = "INFO"

    class Config:
        env_file = ".env"
        case_sensitive = True
        extra = "ignore"  # Ignore any extra env vars not defined here


settings = Settings()
