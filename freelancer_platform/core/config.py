from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Database (the Mongo-era variable names are still honoured)
    DATABASE_URL: str = Field(
        default="sqlite:///./freelancer_platform.db",
        validation_alias=AliasChoices("DATABASE_URL", "MONGODB_URI", "MONGODB_URL"),
    )

    # JWT Authentication
    SECRET_KEY: str = Field(
        default="fallback_jwt_secret_change_in_production",
        validation_alias=AliasChoices("JWT_SECRET", "SECRET_KEY"),
    )
    ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 60 * 24 * 7
    ALLOW_ADMIN_SIGNUP: bool = False

    # Application
    APP_NAME: str = "Freelancer Platform"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"
    HOST: str = "0.0.0.0"
    PORT: int = 5000
    BACKEND_CORS_ORIGINS: str = (
        "http://localhost:5173,"
        "http://127.0.0.1:5173,"
        "http://localhost:8080,"
        "http://127.0.0.1:8080"
    )


settings = Settings()
