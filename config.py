# config.py
from pydantic import field_validator
from pydantic_settings import BaseSettings

class Settings(BaseSettings):
    PG_DSN: str
    PG_POOL_MIN: int = 1
    PG_POOL_MAX: int = 10
    HOST: str = "127.0.0.1"
    PORT: int = 3000
    LOG_LEVEL: str = "INFO"
    SEED_DEFAULT_ITEMS: bool = True  # starter menu on an empty table

    class Config:
        env_file = ".env"

    @field_validator("LOG_LEVEL")
    @classmethod
    def upper_log_level(cls, value: str) -> str:
        # logging wants "INFO", uvicorn is handed .lower()
        return value.strip().upper()

settings = Settings()
