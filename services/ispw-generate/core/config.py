"""Core configuration module for the ISPW Generate service."""

import os
from typing import Optional
from dotenv import load_dotenv
from pydantic_settings import BaseSettings

load_dotenv()


class Settings(BaseSettings):
    """
    Pydantic-based settings management for the application.
    Reads environment variables and provides them as typed attributes.
    """

    # Logging
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

    # Host-level timeout wrapped around the generate request. 0 disables it.
    GENERATE_TIMEOUT_SECONDS: float = float(os.getenv("GENERATE_TIMEOUT_SECONDS", "0"))

    # Action input provider
    INPUT_ENV_PREFIX: str = os.getenv("INPUT_ENV_PREFIX", "INPUT_")
    GITHUB_OUTPUT: Optional[str] = os.getenv("GITHUB_OUTPUT")

    # CORS Configuration
    ALLOWED_ORIGINS: list[str] = ["http://localhost:3000"]

    class Config:
        """Pydantic configuration for environment variable loading."""

        case_sensitive = True


# Create a single settings instance to be used throughout the application
settings = Settings()
