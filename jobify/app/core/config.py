"""
Application configuration settings.
Loads from .env file first (without overriding variables already set), then pydantic reads from environment.
Production: set env vars in the platform (Docker, K8s, etc.); .env is optional.

All backend-related configs and constants are centralized here.
"""
from pathlib import Path

from dotenv import load_dotenv
from pydantic_settings import BaseSettings, SettingsConfigDict

# Resolve .env path: repo root .env (absolute path, works regardless of cwd)
_BASE_DIR = Path(__file__).resolve().parent.parent.parent.parent
_ENV_FILE = (_BASE_DIR / ".env").resolve()

# When .env doesn't exist (prod), this is a no-op; platform env vars are used.
# Values already in the process env take precedence over .env.
if _ENV_FILE.exists():
    load_dotenv(_ENV_FILE, override=False)


class Settings(BaseSettings):
    """Application settings. Source: env vars (after dotenv load)."""

    # App
    app_name: str = "Jobify"
    app_version: str = "1.0.0"
    port: int = 5000
    cors_origins: str = "*"

    # Database
    database_url: str = "sqlite:///./jobify.db"

    # Auth
    secret_key: str = "your-secret-key-change-in-production"
    algorithm: str = "HS256"
    access_token_expire_minutes: int = 60 * 24 * 30

    # Read-only demo account (requests from this user id cannot write)
    demo_user_id: str = "64661a2538227f5f90ae7fdd"

    # Jobs
    default_job_location: str = "my city"
    jobs_default_page: int = 1
    jobs_default_limit: int = 10
    stats_recent_months: int = 6

    # Update validation: False keeps the legacy company/position-only check,
    # True also rejects an explicitly empty jobLocation.
    strict_update_validation: bool = False

    # Logging
    log_level: str = "INFO"

    model_config = SettingsConfigDict(
        env_file=str(_ENV_FILE) if _ENV_FILE.exists() else ".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @property
    def cors_origin_list(self) -> list[str]:
        return [o.strip() for o in self.cors_origins.split(",") if o.strip()]


settings = Settings()


# --- Constants (non-env, business config) ---

JOB_STATUSES: tuple[str, ...] = ("pending", "interview", "declined")
JOB_TYPES: tuple[str, ...] = ("full-time", "part-time", "remote", "internship")

# sort value -> (column attribute name, descending)
SORT_OPTIONS: dict[str, tuple[str, bool]] = {
    "latest": ("created_at", True),
    "oldest": ("created_at", False),
    "a-z": ("position", False),
    "z-a": ("position", True),
}

# Query-string value meaning "do not filter on this field"
ALL_SENTINEL: str = "all"

# Largest accepted page/limit value; (page - 1) * limit stays within a signed 64-bit integer.
MAX_PAGE_PARAM: int = 2**31 - 1
