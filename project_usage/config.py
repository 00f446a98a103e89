from pydantic_settings import BaseSettings

class Settings(BaseSettings):
    # Database
    DATABASE_URL: str = "sqlite:///./project_usage.db"

    # Projects without their own profiles borrow them from this project
    DEFAULT_PROJECT: str = "default"

    # Decimal places used when rendering byte totals (e.g. "7.5GiB")
    SIZE_PRECISION: int = 1

    # CORS
    CORS_ORIGINS: str = "http://localhost:3000,http://localhost:8080"

    # Server
    HOST: str = "0.0.0.0"
    PORT: int = 5006
    DEBUG: bool = False

    class Config:
        env_file = ".env"
        extra = "ignore"

settings = Settings()
