from functools import lru_cache
from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

# Load .env from the repository root so it works regardless of CWD
_env_file = Path(__file__).resolve().parent.parent.parent / ".env"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=_env_file, extra="ignore")

    # Backend (goodfriends.api)
    database_url: str = "postgresql://localhost/goodfriends"
    sql_echo: bool = False
    admin_rate_limit: str = "5/minute"
    seed_default_count: int = 100

    # CORS (comma-separated origins; * allows all)
    cors_origins: str = "*"

    # Web client (goodfriends.web) -> backend
    goodfriends_api_base_url: str = "http://localhost:8000"
    api_timeout_seconds: float = 30.0
    # Dataset partition the web client reads (seeded test data vs. user-created data)
    seeded_mode: bool = True

    # Related collections: server-filtered page, then the broad fallback scan
    related_page_size: int = 200
    related_scan_page_size: int = 500

    # Light friend lookup (flat listing paged until the id is found)
    friend_lookup_page_size: int = 50
    friend_lookup_max_pages: int = 20

    friends_page_size: int = 50

    @property
    def cors_origins_list(self) -> list[str]:
        """Parsed CORS origins for middleware."""
        raw = self.cors_origins.strip()
        return ["*"] if not raw else [o.strip() for o in raw.split(",") if o.strip()]

    @property
    def async_database_url(self) -> str:
        """database_url rewritten for the asyncpg driver."""
        url = self.database_url
        if url.startswith("postgres://"):
            return url.replace("postgres://", "postgresql+asyncpg://", 1)
        if url.startswith("postgresql://"):
            return url.replace("postgresql://", "postgresql+asyncpg://", 1)
        return url


@lru_cache
def get_settings() -> Settings:
    return Settings()
