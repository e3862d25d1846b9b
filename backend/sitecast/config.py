"""Application configuration via environment variables."""

from functools import lru_cache
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Application
    app_name: str = "sitecast"
    debug: bool = False
    environment: Literal["development", "staging", "production"] = "development"

    # Logging
    log_level: str = "INFO"
    log_json: bool = True

    # CORS
    cors_origins: list[str] = ["http://localhost:3000"]

    # LLM API Keys
    gemini_api_key: str | None = None
    google_api_key: str | None = None  # Text-to-Speech, and Gemini fallback
    openai_api_key: str | None = None
    anthropic_api_key: str | None = None
    llm_provider: Literal["gemini", "openai", "anthropic"] = "gemini"
    llm_model: str = "gemini-2.5-flash"
    llm_extraction_model: str = "gemini-2.0-flash-lite"  # Link and contact extraction

    # Prompt fitting
    token_ceiling: int = 1_048_576  # Gemini 2.5 Flash input token limit

    # Text-to-Speech
    tts_endpoint: str = "https://texttospeech.googleapis.com/v1beta1/text:synthesize"
    tts_language_code: str = "en-US"
    tts_audio_encoding: str = "MP3"
    tts_voices: list[str] = ["en-US-Chirp3-HD-Sulafat", "en-US-Chirp3-HD-Algenib"]
    tts_batch_size: int = 4  # Segments synthesized concurrently per batch
    tts_max_attempts: int = 3  # Per segment, including the first call
    tts_retry_base_delay_seconds: float = 1.0
    tts_timeout_seconds: float = 60.0
    tts_max_segment_bytes: int = 5_000  # Google TTS input limit, UTF-8 encoded

    # Scraper settings
    scraper_backend: Literal["httpx", "firecrawl"] = "httpx"
    scraper_timeout_seconds: float = 30.0
    scraper_verify_tls: bool = True
    scraper_max_priority_links: int = 5
    user_agent: str = "sitecast/1.0"

    # Firecrawl API
    firecrawl_api_key: str | None = None
    firecrawl_wait_for_ms: int = 3000  # Wait time in ms for JS rendering

    @property
    def gemini_key(self) -> str | None:
        """Gemini key, falling back to the shared Google API key."""
        return self.gemini_api_key or self.google_api_key


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
