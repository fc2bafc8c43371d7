import json

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    DATABASE_URL: str = "sqlite+aiosqlite:///./analytics.db"
    DB_ECHO: bool = False
    DB_POOL_PRE_PING: bool = True

    BACKEND_CORS_ORIGINS: str = '["http://localhost:5173","http://localhost:3000"]'

    API_V1_PREFIX: str = "/api/v1"
    PROJECT_NAME: str = "Hostel Admin Analytics API"
    DEBUG: bool = False

    # Upper bound for one report's whole query fan-out
    ANALYTICS_QUERY_TIMEOUT_SECONDS: float = 10.0

    ACTIVITY_FEED_DEFAULT_LIMIT: int = 10
    ACTIVITY_FEED_MAX_LIMIT: int = 50

    class Config:
        env_file = ".env"
        case_sensitive = True
        extra = "ignore"

    @property
    def cors_origins(self) -> list[str]:
        if isinstance(self.BACKEND_CORS_ORIGINS, str):
            try:
                parsed: list[str] = json.loads(self.BACKEND_CORS_ORIGINS)
                return parsed
            except json.JSONDecodeError:
                return ["http://localhost:5173", "http://localhost:3000"]
        return self.BACKEND_CORS_ORIGINS


settings = Settings()
