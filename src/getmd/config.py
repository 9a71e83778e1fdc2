"""Application configuration using Pydantic Settings.

Environment variables are automatically mapped to Settings fields.
Command-line options override them per invocation via ``model_copy``.
"""

from functools import lru_cache

from pydantic import model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables.

    Every field has a default so the CLI works without any configuration;
    invalid combinations fail early with clear error messages.
    """

    # --- Diagnostics ---
    getmd_debug: bool = False

    # --- Browser (Crawl4AI) ---
    browser_headless: bool = True
    browser_channel: str = "chromium"
    browser_viewport_width: int = 1280
    browser_viewport_height: int = 900
    browser_wait_until: str = "load"
    browser_wait: int = 2
    browser_timeout: int = 60
    browser_idle_buffer: int = 30
    browser_no_cache: bool = False

    # --- Element Selection ---
    default_selector: str = "body"

    # --- Markdown Generation ---
    markdown_skip_tags: str = "script,style,noscript,svg"
    markdown_fragment_separator: str = "\n\n---\n\n"
    markdown_body_width: int = 0
    markdown_escape_html: bool = True

    # --- Markdown Post-processing ---
    markdown_compact_tables: bool = True
    markdown_resolve_urls: bool = True

    @model_validator(mode="after")
    def validate_browser_config(self) -> "Settings":
        """Validate timing and selector configuration.

        Raises:
            ValueError: If a timeout is not positive, a delay is negative
                or the default selector is blank.

        """
        if self.browser_timeout <= 0:
            msg = "BROWSER_TIMEOUT must be a positive number of seconds"
            raise ValueError(msg)
        if self.browser_wait < 0:
            msg = "BROWSER_WAIT must not be negative"
            raise ValueError(msg)
        if self.browser_idle_buffer < 0:
            msg = "BROWSER_IDLE_BUFFER must not be negative"
            raise ValueError(msg)
        if not self.default_selector.strip():
            msg = "DEFAULT_SELECTOR must not be empty"
            raise ValueError(msg)
        return self

    @property
    def skip_tags(self) -> list[str]:
        """Tags removed from HTML before Markdown conversion."""
        return [tag.strip() for tag in self.markdown_skip_tags.split(",") if tag.strip()]

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )


@lru_cache
def get_settings() -> Settings:
    """Return cached settings instance.

    Uses lru_cache to ensure the .env file is only parsed once
    and all modules share the same settings instance.

    Returns:
        Settings instance with application configuration.

    Raises:
        ValidationError: If environment variables hold invalid values.

    """
    return Settings()


settings = get_settings()
