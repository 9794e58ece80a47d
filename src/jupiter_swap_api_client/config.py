"""Client configuration using pydantic-settings."""

from functools import lru_cache
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_BASE_PATH = "https://quote-api.jup.ag/v6"


class Settings(BaseSettings):
    """Settings loaded from ``JUPITER_*`` environment variables or ``.env``."""

    model_config = SettingsConfigDict(
        env_prefix="JUPITER_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    base_path: str = Field(default=DEFAULT_BASE_PATH, description="Swap API base URL")
    proxy_url: Optional[str] = Field(
        default=None, description="Proxy URL for outbound requests (None = direct)"
    )
    debug: bool = Field(default=False, description="Enable debug logging")

    def get_safe_dict(self) -> dict:
        """Return settings dict with proxy credentials redacted."""
        return {
            "base_path": self.base_path,
            "proxy_url": self._redact_url(self.proxy_url) if self.proxy_url else "(not set)",
            "debug": self.debug,
        }

    @staticmethod
    def _redact_url(url: str) -> str:
        """Redact the password part of a URL."""
        if "://" in url and "@" in url:
            proto, rest = url.split("://", 1)
            if "@" in rest:
                creds, host = rest.rsplit("@", 1)
                if ":" in creds:
                    user, _ = creds.split(":", 1)
                    return f"{proto}://{user}:***@{host}"
        return url


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
