"""Application configuration settings"""

import os
from dotenv import load_dotenv

load_dotenv()

_TRUTHY = {"1", "true", "yes", "on"}


class Config:
    # General
    ENVIRONMENT = os.getenv("ENVIRONMENT", "development")
    DEBUG = os.getenv("DEBUG", "false").lower() in _TRUTHY

    # Database
    DATABASE_URL: str = os.getenv("DATABASE_URL", "sqlite+aiosqlite:///./roomchat.db")
    DATABASE_ECHO: bool = os.getenv("DATABASE_ECHO", "false").lower() in _TRUTHY
    DATABASE_AUTO_CREATE: bool = (
        os.getenv("DATABASE_AUTO_CREATE", "true").lower() in _TRUTHY
    )

    # Auth
    AUTH_TOKEN_SECRET = os.getenv(
        "AUTH_TOKEN_SECRET", "dev-only-secret-change-me-0123456789abcdef"
    )
    AUTH_TOKEN_ISSUER = os.getenv("AUTH_TOKEN_ISSUER", "roomchat")
    AUTH_TOKEN_AUDIENCE = os.getenv("AUTH_TOKEN_AUDIENCE", "roomchat-clients")
    ACCESS_TOKEN_TTL_SECONDS: int = int(
        os.getenv("ACCESS_TOKEN_TTL_SECONDS", str(30 * 24 * 3600))
    )
    GUEST_TOKEN_TTL_SECONDS: int = int(
        os.getenv("GUEST_TOKEN_TTL_SECONDS", str(7 * 24 * 3600))
    )
    BCRYPT_ROUNDS: int = int(os.getenv("BCRYPT_ROUNDS", "12"))

    # Messages
    MESSAGE_PAGE_SIZE: int = int(os.getenv("MESSAGE_PAGE_SIZE", "50"))
    MESSAGE_PAGE_SIZE_MAX: int = int(os.getenv("MESSAGE_PAGE_SIZE_MAX", "100"))

    # HTTP
    CORS_ORIGINS = [
        origin.strip()
        for origin in os.getenv("CORS_ORIGINS", "*").split(",")
        if origin.strip()
    ]

    # Logging
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
    LOG_PATH = os.getenv("LOG_PATH") or None
    LOG_FORMAT = os.getenv(
        "LOG_FORMAT",
        "%(asctime)s - %(name)s - %(levelname)s - [%(correlation_id)s] %(message)s",
    )
