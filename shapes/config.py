from pydantic_settings import BaseSettings
from functools import lru_cache


class Settings(BaseSettings):
    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_JSON: bool = False  # True for production (structured JSON), False for dev (colored)
    
    # Diagnostics
    DIAGNOSTICS: bool = True  # Emit shape_check_failed events when a check fails
    PREVIEW_LENGTH: int = 50  # Max characters of a value preview in diagnostics
    
    class Config:
        env_prefix = "SHAPES_"
        env_file = ".env"
        extra = "ignore"


@lru_cache
def get_settings() -> Settings:
    return Settings()


settings = get_settings()
