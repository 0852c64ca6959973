from pydantic_settings import BaseSettings

class Settings(BaseSettings):
    MAX_BODY_BYTES: int = 1_000_000
    MANAGE_HOMES_CAPABILITY: str = "homes:manage"
    MARKET_TRENDS_MAX_AGE: int = 300
    # 0 keeps expired grants in the store; reads deny them either way
    SHARE_REAPER_INTERVAL_MINUTES: int = 0
    CORS_ORIGINS: list[str] = ["*"]
    LOG_LEVEL: str = "INFO"
    LOG_JSON: bool = False

    class Config:
        env_file = ".env"

settings = Settings()
