from functools import lru_cache

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    APP_NAME: str = "Sales Report Service"
    APP_VERSION: str = "1.0.0"
    API_PREFIX: str = "/api/v1"
    LOG_LEVEL: str = "INFO"
    # seed for the generated sample dataset
    SAMPLE_SEED: int = 42


@lru_cache()
def get_settings() -> Settings:
    return Settings()


settings = get_settings()
