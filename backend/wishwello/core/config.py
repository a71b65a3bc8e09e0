# backend/wishwello/core/config.py
from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import Optional

class Settings(BaseSettings):

    PROJECT_NAME: str = "WishWello Pulse"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"

    # ── Database ─────────────────────────────────────────────
    DATABASE_URL: str = "postgresql+asyncpg://localhost/wishwello"

    # ── Pulse / dashboard ────────────────────────────────────
    # Zone used to align weeks on Sunday 00:00
    TIMEZONE: str = "UTC"
    PULSE_HISTORY_LIMIT: int = 12
    DASHBOARD_WINDOW_DAYS: int = 30

    # ── Weekly job ───────────────────────────────────────────
    PULSE_JOB_CONCURRENCY: int = 8
    PULSE_JOB_TEAM_TIMEOUT_SECONDS: float = 60.0

    # ── Alerts ───────────────────────────────────────────────
    ALERT_SINK: str = "log"        # log | email
    ALERT_EMAIL_TO: Optional[str] = None

    # ── Email (SMTP) ─────────────────────────────────────────
    SMTP_SERVER: str = "smtp.gmail.com"
    SMTP_PORT: int = 587
    SMTP_USER: Optional[str] = None
    SMTP_PASSWORD: Optional[str] = None
    EMAIL_FROM: str = "noreply@wishwello.com"
    BASE_URL: str = "http://localhost:8000"


    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding='utf-8',
        extra='ignore'
        )

settings = Settings()
