from functools import lru_cache
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=True)

    ENVIRONMENT: str = "development"
    DEBUG: bool = True

    API_V1_PREFIX: str = "/api"

    # Security
    SECRET_KEY: str
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 60 * 24
    JWT_ALGORITHM: str = "HS256"
    AUTH_COOKIE_NAME: str = "token"
    ALLOW_ADMIN_SIGNUP: bool = False

    # Database
    DATABASE_URL: str | None = None
    POSTGRES_HOST: str = "db"
    POSTGRES_PORT: int = 5432
    POSTGRES_USER: str = "postgres"
    POSTGRES_PASSWORD: str = "postgres"
    POSTGRES_DB: str = "workshophub"

    # Redis (token revocation on logout)
    REDIS_URL: str = "redis://redis:6379/0"

    CORS_ORIGINS: list[str] = [
        "http://localhost:5173",
        "http://localhost:3000",
        "http://127.0.0.1:5173",
        "http://127.0.0.1:3000",
    ]

    @property
    def cookie_secure(self) -> bool:
        # Plain HTTP is only allowed for local development
        return self.ENVIRONMENT.lower() not in ("development", "dev", "local", "test")


@lru_cache
def get_settings() -> Settings:
    return Settings()


settings = get_settings()
