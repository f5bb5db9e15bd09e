from typing import List, Optional

from pydantic_settings import BaseSettings, SettingsConfigDict
from functools import lru_cache


class Settings(BaseSettings):
    # Unset means every data row is scanned
    DEFAULT_ROW_LIMIT: Optional[int] = None
    MAX_UPLOAD_SIZE_MB: int = 50
    ALLOWED_ORIGINS: List[str] = ["http://localhost:3000"]
    LOG_LEVEL: str = "INFO"
    DEBUG: bool = False

    model_config = SettingsConfigDict(env_file=".env", env_prefix="HARBORCHECK_")


@lru_cache()
def get_settings() -> Settings:
    return Settings()


settings = get_settings()
