from pathlib import Path
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(extra="ignore", env_file=".env", env_file_encoding="utf-8")

    # "memory" keeps everything in process; "sql" uses database_url through SQLAlchemy
    storage_backend: Literal["memory", "sql"] = "memory"
    database_url: str = "sqlite+pysqlite:///:memory:"

    initial_user_id: int = 0
    initial_locker_id: int = 0

    host: str = "0.0.0.0"
    port: int = 8080
    log_level: str = "INFO"

    openapi_path : Path = Path(__file__).resolve().parents[1] / "openapi/openapi.yaml"


settings = Settings()
