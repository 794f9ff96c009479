"""Settings read from the environment (.env is loaded first when present)."""

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

from agenda.infrastructure.cards import DEFAULT_LINKEDIN_PREFIX

_REPO_ROOT = Path(__file__).resolve().parent.parent.parent


@dataclass(frozen=True)
class Settings:
    database_url: str = "sqlite:///agenda.db"
    log_level: str = "INFO"
    linkedin_url_prefix: str = DEFAULT_LINKEDIN_PREFIX
    phone_region: str | None = None


def load_env() -> None:
    """Load .env from repo root or current dir (first one found)."""
    for path in (_REPO_ROOT / ".env", Path.cwd() / ".env"):
        if path.exists():
            load_dotenv(path)
            break


def load_settings() -> Settings:
    load_env()
    return Settings(
        database_url=os.environ.get("AGENDA_DATABASE_URL", Settings.database_url).strip(),
        log_level=os.environ.get("AGENDA_LOG_LEVEL", Settings.log_level).strip().upper(),
        linkedin_url_prefix=os.environ.get(
            "AGENDA_LINKEDIN_URL_PREFIX", Settings.linkedin_url_prefix
        ).strip(),
        phone_region=os.environ.get("AGENDA_PHONE_REGION", "").strip().upper() or None,
    )
