from typing import List, Optional
from pydantic import model_validator
from pydantic_settings import BaseSettings

DEV_SECRET_KEY = "vyeya-dev-secret-key"


class Settings(BaseSettings):
    DATABASE_URL: str
    ENVIRONMENT: str = "development"
    SECRET_KEY: Optional[str] = None
    ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 60 * 24 * 7
    LOG_LEVEL: str = "INFO"
    CORS_ORIGINS: List[str] = ["*"]

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = True

    @model_validator(mode="after")
    def require_secret_in_production(self):
        if self.ENVIRONMENT == "production" and not self.SECRET_KEY:
            raise ValueError("SECRET_KEY must be set when ENVIRONMENT=production")
        return self

    @property
    def using_dev_secret(self) -> bool:
        return not self.SECRET_KEY

    @property
    def jwt_secret(self) -> str:
        return self.SECRET_KEY or DEV_SECRET_KEY


settings = Settings()
