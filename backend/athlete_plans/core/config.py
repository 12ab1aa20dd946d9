from functools import lru_cache
from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    admin_email: str = "test@test"
    admin_password: str = "test"

    host: str = "0.0.0.0"
    port: int = 3000
    log_level: str = "INFO"

    data_file: Path = Path("data") / "data.json"
    public_dir: Path = Path("public")

    telegram_bot_token: str | None = None
    telegram_chat_id: str | None = None
    export_timeout: float = 30.0

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")


@lru_cache
def get_settings() -> Settings:
    return Settings()
