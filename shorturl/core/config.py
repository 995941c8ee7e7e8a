from typing import Optional

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    PROJECT_NAME: str = "URL Shortener"
    VERSION: str = "1.0.0"

    HOST: str = "0.0.0.0"
    PORT: int = 3000
    # Derived from PORT when unset
    BASE_URL: Optional[str] = None

    DATABASE_URL: str = "sqlite:///./shorturl.db"

    SHORT_CODE_LENGTH: int = Field(7, ge=4, le=16)
    SHORT_CODE_MAX_RETRIES: int = Field(5, ge=1)

    STATIC_DIR: str = "public"
    LOG_LEVEL: str = "INFO"

    class Config:
        env_file = ".env"

    @model_validator(mode="after")
    def derive_base_url(self):
        if not self.BASE_URL:
            self.BASE_URL = f"http://localhost:{self.PORT}"
        self.BASE_URL = self.BASE_URL.rstrip("/")
        return self


settings = Settings()
