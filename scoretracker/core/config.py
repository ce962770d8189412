from typing import List, Optional

from pydantic_settings import BaseSettings

LOCAL_HOSTS = ("localhost", "127.0.0.1")

class Settings(BaseSettings):
    DB_HOST: str = "localhost"
    DB_PORT: int = 5432
    DB_USER: str = "scoretracker"
    DB_PASSWORD: str = "scoretracker_pass"
    DB_NAME: str = "scoretracker_db"
    DB_SSLMODE: Optional[str] = None # Auto-detected from DB_HOST when unset
    DATABASE_URL: Optional[str] = None # Overrides all DB_* fields when set

    DB_CONNECT_RETRIES: int = 10
    DB_RETRY_DELAY: float = 2.0

    API_PORT: int = 8080
    LOG_LEVEL: str = "INFO"
    CORS_ORIGINS: List[str] = ["*"]

    class Config:
        env_file = ".env"

    @property
    def sslmode(self) -> str:
        if self.DB_SSLMODE:
            return self.DB_SSLMODE
        return "disable" if self.DB_HOST in LOCAL_HOSTS else "require"

    @property
    def database_url(self) -> str:
        if self.DATABASE_URL:
            return self.DATABASE_URL
        return (
            f"postgresql+psycopg2://{self.DB_USER}:{self.DB_PASSWORD}"
            f"@{self.DB_HOST}:{self.DB_PORT}/{self.DB_NAME}?sslmode={self.sslmode}"
        )

settings = Settings()
