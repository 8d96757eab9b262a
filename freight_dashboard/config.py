from pydantic_settings import BaseSettings
from functools import lru_cache


class Settings(BaseSettings):
    api_base_url: str = ""
    api_key: str = ""
    app_name: str = "Freight Dashboard API"
    upstream_timeout_seconds: float = 10.0
    metrics_cache_size: int = 8
    refresh_on_startup: bool = True
    log_level: str = "INFO"

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


@lru_cache
def get_settings() -> Settings:
    return Settings()
