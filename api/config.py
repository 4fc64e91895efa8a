from functools import lru_cache
from pathlib import Path

from dotenv import load_dotenv
from pydantic_settings import BaseSettings, SettingsConfigDict

# Before any api import, so LOG_DIR/LOG_LEVEL from .env reach the first configure_logging call.
load_dotenv()

from api.storage import Repository  # noqa: E402

PLACEHOLDER_GEMINI_KEY = "your_gemini_api_key_here"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    port: int = 5000
    node_env: str = "development"
    jwt_secret: str = "apex-dev-secret-change-in-production"
    jwt_expire_days: int = 7

    data_dir: Path = Path("data")
    log_dir: Path = Path("logs")
    log_level: str = "INFO"
    cors_origins: str = "http://localhost:3000"

    llm_provider: str = "gemini"  # gemini | ollama
    gemini_api_key: str | None = None
    gemini_models: str = "gemini-1.5-flash,gemini-1.5-pro,gemini-pro"
    ollama_base_url: str = "http://localhost:11434"
    ollama_models: str = "qwen:latest"
    llm_timeout_seconds: float = 120.0

    # Generic-template judgment thresholds
    generic_title_max_length: int = 40
    generic_section_min_chars: int = 500
    generic_summary_min_chars: int = 100

    # Minutes credited to a user when a course is completed
    course_study_minutes: int = 25

    @property
    def gemini_configured(self) -> bool:
        return bool(self.gemini_api_key) and self.gemini_api_key != PLACEHOLDER_GEMINI_KEY

    @property
    def model_names(self) -> list[str]:
        raw = self.gemini_models if self.llm_provider == "gemini" else self.ollama_models
        return [m.strip() for m in raw.split(",") if m.strip()]

    @property
    def cors_origin_list(self) -> list[str]:
        return [o.strip() for o in self.cors_origins.split(",") if o.strip()]


@lru_cache
def get_settings() -> Settings:
    return Settings()


@lru_cache
def get_repository() -> Repository:
    """Process-wide repository over settings.data_dir (FastAPI dependency)."""
    return Repository(get_settings().data_dir)
