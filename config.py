from functools import lru_cache
from typing import List, Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    app_name: str = "Rock Paper Scissors API"
    log_level: str = "INFO"
    json_logs: bool = False

    # List 類型要用 JSON 格式設定，例如 RPS_CORS_ORIGINS='["http://localhost:3000"]'
    cors_origins: List[str] = ["*"]

    host: str = "0.0.0.0"
    port: int = 8000

    # 設定後對手出拳可重現（方便 demo 和除錯）
    random_seed: Optional[int] = None

    model_config = SettingsConfigDict(
        env_prefix="RPS_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )


@lru_cache()
def get_settings() -> Settings:
    return Settings()
