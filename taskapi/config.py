import os
from pathlib import Path

from dotenv import load_dotenv


def load_env(base=None):
    """Load ``.env`` then ``.env.<APP_ENV>`` from the working directory."""
    base = Path(base or Path.cwd())
    load_dotenv(base / ".env")
    env_name = os.getenv("APP_ENV", "production")
    load_dotenv(base / f".env.{env_name}", override=True)


def _flag(name, default):
    value = os.getenv(name)
    if value is None or not value.strip():
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


class Config:
    """Flask settings read from the environment when the app is created."""

    def __init__(self):
        load_env()
        self.APP_ENV = os.getenv("APP_ENV", "production")
        self.DEVELOPMENT = self.APP_ENV == "development"
        self.PORT = int(os.getenv("PORT", "3000"))
        self.LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
        self.AUDIT_LOG_PATH = os.getenv("AUDIT_LOG_PATH", "").strip() or str(
            Path.cwd() / "logs" / "api.log"
        )
        self.SEED_EXAMPLE_TASKS = _flag("SEED_EXAMPLE_TASKS", True)
        # tasks live in memory only; a restart starts from scratch
        self.SQLALCHEMY_DATABASE_URI = "sqlite://"
        self.SQLALCHEMY_TRACK_MODIFICATIONS = False
