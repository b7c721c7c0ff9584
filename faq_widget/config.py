from typing import Literal
from pydantic_settings import BaseSettings, SettingsConfigDict

class Settings(BaseSettings):
    # Remote FAQ content service
    # The endpoint is injected into HttpContentSource, never hardcoded there
    FAQ_API_BASE_URL: str = "http://localhost:8000"
    FAQ_WELCOME_PATH: str = "/api/welcome"
    FAQ_QUERY_PATH: str = "/api/query"
    FAQ_REQUEST_TIMEOUT: float = 10.0

    # "static" serves the bundled sample content without any network calls
    CONTENT_SOURCE: Literal["http", "static"] = "http"

    # Widget behaviour
    RELOAD_ON_OPEN: bool = False
    PRELOAD_ON_MOUNT: bool = True
    TRANSCRIPT_ENABLED: bool = True
    TYPING_DELAY_SECONDS: float = 0.6
    STRICT_SELECTION: bool = False
    WIDGET_TITLE: str = "Highland FAQ Bot"

    LOG_LEVEL: str = "INFO"

    # Loads from a .env file in the root directory
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

# Singleton instance
settings = Settings()
