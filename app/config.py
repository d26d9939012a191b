from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # Database
    DATABASE_URL: str
    AUTO_CREATE_TABLES: bool = True
    DB_CONNECT_RETRIES: int = 5
    DB_CONNECT_DELAY: int = 3  # seconds, multiplied by attempt number

    # JWT
    JWT_SECRET_KEY: str
    JWT_ALGORITHM: str = "HS256"
    JWT_EXPIRE_MINUTES: int = 60

    # Errors
    EXPOSE_ERROR_DETAILS: bool = False

    # Server
    PORT: int = 5000

    # CORS
    CORS_ORIGINS: list = ["*"]

    class Config:
        env_file = ".env"
        case_sensitive = True


settings = Settings()
