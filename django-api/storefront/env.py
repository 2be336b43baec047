"""Environment-driven configuration read by settings.py."""

from pathlib import Path
from typing import Literal

from pydantic import SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict

BASE_DIR = Path(__file__).resolve().parent.parent
_ENV_FILE = BASE_DIR / ".env"


class StorefrontSettings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="STOREFRONT_",
        env_file=str(_ENV_FILE),
        env_ignore_empty=True,
        extra="ignore",
    )

    SECRET_KEY: SecretStr = SecretStr("django-insecure-change-me")
    DEBUG: bool = False
    ALLOWED_HOSTS: str = "localhost,127.0.0.1"

    DATABASE_ENGINE: Literal["sqlite", "postgresql"] = "sqlite"
    DATABASE_NAME: str = str(BASE_DIR / "db.sqlite3")
    DATABASE_USER: str = ""
    DATABASE_PASSWORD: SecretStr = SecretStr("")
    DATABASE_HOST: str = ""
    DATABASE_PORT: int | None = None

    # "memory" keeps catalog and orders in process, seeded with sample data
    STORE_BACKEND: Literal["django", "memory"] = "django"

    LOG_LEVEL: str = "INFO"
    LOG_FILE: Path | None = None

    @property
    def allowed_hosts(self) -> list[str]:
        return [host.strip() for host in self.ALLOWED_HOSTS.split(",") if host.strip()]

    @property
    def databases(self) -> dict:
        if self.DATABASE_ENGINE == "sqlite":
            return {
                "default": {
                    "ENGINE": "django.db.backends.sqlite3",
                    "NAME": self.DATABASE_NAME,
                }
            }
        return {
            "default": {
                "ENGINE": "django.db.backends.postgresql",
                "NAME": self.DATABASE_NAME,
                "USER": self.DATABASE_USER,
                "PASSWORD": self.DATABASE_PASSWORD.get_secret_value(),
                "HOST": self.DATABASE_HOST,
                "PORT": self.DATABASE_PORT or "",
            }
        }


env = StorefrontSettings()
