# inventory_api/config.py
from pathlib import Path
from typing import ClassVar, Literal

from dotenv import load_dotenv
from pydantic import field_validator
from pydantic_settings import BaseSettings

# Resolve absolute path to the .env file for reliable loading
env_path = Path(__file__).parent.parent / ".env"
load_dotenv(dotenv_path=env_path, override=False)


class Settings(BaseSettings):
    SECRET_KEY: str = "dev-secret-change-me"
    ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 60 * 24

    # "memory" keeps everything in process lists, "sql" goes through SQLAlchemy
    STORAGE_BACKEND: Literal["memory", "sql"] = "memory"
    DATABASE_URL: str = "sqlite:///./inventory.db"
    SEED_DATA: bool = True

    FRONTEND_URL: str = "http://localhost:4200"
    LOG_LEVEL: str = "INFO"

    class Config:
        env_file: ClassVar[str] = str(env_path)
        extra: ClassVar[str] = "ignore"

    @field_validator("DATABASE_URL")
    @classmethod
    def fix_database_url(cls, v: str) -> str:
        # SQLAlchemy requires postgresql://, some hosts still hand out postgres://
        if v.startswith("postgres://"):
            return v.replace("postgres://", "postgresql://", 1)
        return v


settings = Settings()
