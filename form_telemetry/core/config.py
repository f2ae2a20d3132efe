"""
Application configuration.

All settings are read from the environment (or a ``.env`` file) through
pydantic-settings; ``get_config`` caches a single instance that tests can
replace by passing their own ``AppConfig`` to ``create_app``.
"""
from functools import lru_cache
from pathlib import Path
from typing import List

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


DEFAULT_TEMPLATE_DIR = Path(__file__).resolve().parents[1] / "templates"


class AppConfig(BaseSettings):
    """
    Single source of truth for all application configuration.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )

    # Environment
    environment: str = Field("development")
    app_name: str = Field("Form Telemetry")
    app_version: str = Field("1.0.0")

    # Server
    host: str = Field("0.0.0.0")
    port: int = Field(80, ge=0, le=65535)
    log_level: str = Field("INFO")

    # Form
    # Comma-separated; RECOGNIZED_FORM_CONTROLS=inputEmail,inputCVV
    recognized_form_controls: str = Field(
        "inputEmail,inputCVV,inputCardNumber",
    )
    template_dir: Path = Field(DEFAULT_TEMPLATE_DIR)

    # Diagnostics
    diagnostics_enabled: bool = Field(True)

    @property
    def recognized_form_controls_list(self) -> List[str]:
        """Parse recognized form controls from comma-separated string"""
        return [control.strip() for control in self.recognized_form_controls.split(",") if control.strip()]


@lru_cache()
def get_config() -> AppConfig:
    """
    Get application configuration.

    Uses @lru_cache to ensure single instance while still being easy to
    override in tests.
    """
    return AppConfig()
