"""Suite settings using pydantic-settings."""

from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

_DATA_DIR = Path(__file__).resolve().parent.parent / "fixtures" / "data"


class Settings(BaseSettings):
    """storefront-e2e configuration from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",  # Ignore extra env vars
    )

    # Application
    app_name: str = Field(default="storefront-e2e", description="Suite name")
    debug: bool = Field(default=False, description="Pretty console logs instead of JSON")
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="INFO", description="Minimum log level"
    )

    # Target site
    site_base_url: str = Field(
        default="https://automationexercise.com",
        description="Start page every scenario navigates to",
    )

    # Timeouts (milliseconds)
    default_timeout_ms: int = Field(
        default=10_000, ge=1, description="Bounded wait for lookups, actions and assertions"
    )
    navigation_timeout_ms: int = Field(
        default=30_000, ge=1, description="Bounded wait for page navigation"
    )

    # Fixture data
    users_fixture_path: Path = Field(
        default=_DATA_DIR / "users.json", description="JSON list of user records"
    )
    upload_file_path: Path = Field(
        default=_DATA_DIR / "Helloworld.txt", description="File attached by the contact form"
    )

    # Reporting
    report_dir: Path = Field(default=Path("reports/html"), description="HTML report directory")
    report_title: str = Field(
        default="AutomationExercise E2E Report", description="HTML report page title"
    )

    # Browser
    browser_name: Literal["chromium", "firefox", "webkit"] = Field(
        default="chromium", description="Playwright browser engine"
    )
    headed: bool = Field(default=False, description="Show the browser window")
    slow_mo: int = Field(default=0, ge=0, description="Delay between browser actions (ms)")
    viewport_width: int = Field(default=1280, ge=320)
    viewport_height: int = Field(default=720, ge=240)

    @field_validator("site_base_url")
    @classmethod
    def validate_site_base_url(cls, v: str) -> str:
        """Validate site URL format."""
        if not v.startswith(("http://", "https://")):
            raise ValueError("Site base URL must start with http:// or https://")
        return v.rstrip("/")


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
