"""Application configuration via pydantic-settings."""

from functools import lru_cache
from pathlib import Path

from pydantic import computed_field
from pydantic_settings import BaseSettings, SettingsConfigDict

REPO_ROOT = Path(__file__).parents[3]


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # API Settings
    debug: bool = False
    host: str = "0.0.0.0"
    port: int = 8000
    log_level: str = "INFO"

    # CORS - comma-separated origins (env var: CORS_ORIGINS)
    cors_origins: str = "http://localhost:5173,http://127.0.0.1:5173"

    @computed_field
    @property
    def cors_origins_list(self) -> list[str]:
        """Parse CORS origins as a list."""
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]

    # Directory holding champions.json and matchup_stats.json
    knowledge_dir: str = "knowledge"

    # Saved drafts (DuckDB file, or ":memory:" to keep drafts for the process lifetime)
    database_path: str = ":memory:"

    def resolve_knowledge_dir(self) -> Path:
        """Knowledge directory, relative paths resolved from the repo root."""
        path = Path(self.knowledge_dir)
        return path if path.is_absolute() else REPO_ROOT / path

    def resolve_database_path(self) -> str:
        if self.database_path == ":memory:" or Path(self.database_path).is_absolute():
            return self.database_path
        return str(REPO_ROOT / self.database_path)


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


# Global settings instance
settings = get_settings()
