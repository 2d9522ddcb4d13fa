"""Centralized, environment-driven application settings."""

from pydantic_settings import BaseSettings
from typing import List
from pathlib import Path


class Settings(BaseSettings):
    DATABASE_URL: str = "sqlite:///./wordblog.db"
    ALLOWED_ORIGINS: List[str] = ["http://localhost:3000", "http://localhost:8000"]

    # Completion provider (OpenRouter, OpenAI-compatible API)
    OPENROUTER_API_KEY: str = ""
    OPENROUTER_BASE_URL: str = "https://openrouter.ai/api/v1"
    AI_MODEL: str = "tngtech/deepseek-r1t2-chimera:free"
    AI_TEMPERATURE: float = 0.7
    AI_MAX_TOKENS: int = 20000
    AI_TIMEOUT_SECONDS: float = 60.0
    # Attribution headers sent to OpenRouter
    SITE_URL: str = "http://localhost:3000"
    SITE_NAME: str = "Word Blog"

    # Identity service (Supabase Auth)
    AUTH_MODE: str = "jwt"  # jwt/remote
    SUPABASE_URL: str = ""
    SUPABASE_ANON_KEY: str = ""
    SUPABASE_JWT_SECRET: str = "change-me-to-the-project-jwt-secret"
    JWT_AUDIENCE: str = "authenticated"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 60
    AUTH_TIMEOUT_SECONDS: float = 10.0

    # Blog pipeline
    SLUG_MAX_ATTEMPTS: int = 3
    RECENT_POSTS_LIMIT: int = 6
    MAX_RECENT_POSTS_LIMIT: int = 50

    def openrouter_headers(self) -> dict:
        return {
            "HTTP-Referer": str(self.SITE_URL or "").strip(),
            "X-Title": str(self.SITE_NAME or "").strip(),
        }

    def supabase_user_url(self) -> str:
        return f"{str(self.SUPABASE_URL or '').rstrip('/')}/auth/v1/user"

    class Config:
        # Load backend/.env regardless of the working directory.
        env_file = str(Path(__file__).resolve().parents[1] / ".env")


settings = Settings()


def get_settings() -> Settings:
    return settings
