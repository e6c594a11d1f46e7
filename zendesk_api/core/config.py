from typing import Optional
from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from functools import lru_cache


class Settings(BaseSettings):
    """Client settings with environment-based configuration"""

    # Zendesk account
    zendesk_subdomain: Optional[str] = None
    zendesk_email: Optional[str] = None
    zendesk_token: Optional[str] = None

    # Overrides https://{subdomain}.zendesk.com/api/v2, e.g. for a sandbox proxy
    zendesk_base_url: Optional[str] = None

    # Seconds handed to requests for every call
    zendesk_timeout: float = 30.0

    # Logging
    log_level: str = "INFO"

    @field_validator("zendesk_timeout")
    @classmethod
    def validate_timeout(cls, v):
        if v <= 0:
            raise ValueError("zendesk_timeout must be positive")
        return v

    @property
    def zendesk_config(self) -> dict:
        """Client config dict built from the environment"""
        return {
            "subdomain": self.zendesk_subdomain,
            "email": self.zendesk_email,
            "token": self.zendesk_token,
            "base_url": self.zendesk_base_url,
            "timeout": self.zendesk_timeout,
        }

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        env_parse_none_str="None"
    )


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance"""
    return Settings()
