"""
Application settings
"""
from pydantic_settings import BaseSettings
from typing import List


class Settings(BaseSettings):
    # Database (hosted Postgres connection string in production)
    DATABASE_URL: str = "sqlite:///./data/moonfilm.db"

    # Hosted project: auth + REST endpoints
    SUPABASE_URL: str
    SUPABASE_ANON_KEY: str

    # Receipts
    RECEIPT_PREFIX: str = "MFW"

    # Environment
    ENVIRONMENT: str = "development"
    DEBUG: bool = False

    # CORS
    CORS_ORIGINS: List[str] = ["http://localhost:3000", "http://localhost:5173"]

    # Local storage
    DATA_DIR: str = "./data"
    DRAFTS_DIR: str = "./data/drafts"

    class Config:
        env_file = ".env"
        case_sensitive = True
        extra = "ignore"


settings = Settings()
