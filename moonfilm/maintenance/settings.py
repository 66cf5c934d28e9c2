"""
Credentials for the maintenance commands, read from the environment or .env
"""
from pydantic_settings import BaseSettings


class ManagementSettings(BaseSettings):
    SUPABASE_PROJECT_REF: str
    SUPABASE_ACCESS_TOKEN: str
    SUPABASE_API_URL: str = "https://api.supabase.com"

    class Config:
        env_file = ".env"
        case_sensitive = True
        extra = "ignore"


class RestSettings(BaseSettings):
    SUPABASE_URL: str
    SUPABASE_ANON_KEY: str

    class Config:
        env_file = ".env"
        case_sensitive = True
        extra = "ignore"
