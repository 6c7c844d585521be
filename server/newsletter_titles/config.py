"""
Configuration settings for the title service.
Environment variables (and a local .env file) override defaults.
"""
import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

load_dotenv()


@dataclass
class Settings:
    """Service configuration"""

    # Server
    HOST: str = "0.0.0.0"
    PORT: int = 8000
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"

    # Upstream chat-completion API
    OPENAI_API_KEY: Optional[str] = None
    OPENAI_MODEL: str = "gpt-4o-mini"
    OPENAI_BASE_URL: str = "https://api.openai.com/v1"
    OPENAI_TIMEOUT: float = 60.0  # seconds

    def __post_init__(self):
        """Load from environment variables"""
        for key, spec in self.__dataclass_fields__.items():
            env_value = os.getenv(key)
            if env_value is None:
                continue
            field_type = spec.type
            if field_type == bool:
                setattr(self, key, env_value.lower() in ("true", "1", "yes"))
            elif field_type == int:
                setattr(self, key, int(env_value))
            elif field_type == float:
                setattr(self, key, float(env_value))
            else:
                setattr(self, key, env_value)


settings = Settings()


def get_settings() -> Settings:
    """FastAPI dependency returning the process-wide settings."""
    return settings
