from functools import lru_cache
from pathlib import Path
from typing import List, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

BASE_DIR = Path(__file__).resolve().parents[2]


class Settings(BaseSettings):
    project_name: str = "VoyageMate Travel API"
    api_prefix: str = "/api"
    log_level: str = "INFO"

    gemini_api_key: str = Field(default="", description="Google Generative Language API key")
    gemini_model: str = "gemini-2.0-flash"
    gemini_base_url: str = "https://generativelanguage.googleapis.com/v1beta/models"

    cohere_api_key: str = Field(default="", description="Cohere API key")
    cohere_model: str = "command-r-plus"
    cohere_max_tokens: int = 200
    cohere_url: str = "https://api.cohere.ai/v1/generate"

    # None disables the client-side timeout for model calls.
    llm_timeout_seconds: Optional[float] = None

    hotels_csv_path: Path = BASE_DIR / "data" / "india_hotels.csv"
    hotel_search_limit: int = 20

    supabase_url: str | None = None
    supabase_anon_key: str | None = None

    use_supabase: bool = False

    cors_origins: List[str] = Field(default_factory=lambda: ["*"])

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")


@lru_cache
def get_settings() -> Settings:
    return Settings()  # type: ignore[arg-type]


settings = get_settings()
