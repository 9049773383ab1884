"""tenantconf configuration via pydantic-settings."""

from functools import lru_cache
from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


class TenantConfSettings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="TENANTCONF_")

    environment: str = "development"
    log_level: str = "INFO"

    # Plan table and default theme JSON files, read once at start-up.
    # When empty, the built-in catalog / theme is used.
    plan_table_path: str = ""
    default_theme_path: str = ""

    # API
    api_title: str = "tenantconf"
    api_version: str = "0.1.0"
    host: str = "0.0.0.0"
    port: int = 8080
    api_prefix: str = ""
    cors_origins: list[str] = ["http://localhost:3000", "http://localhost:5173"]

    def validate_paths(self) -> None:
        """Raise if a configured table or theme file does not exist."""
        missing = [
            f"TENANTCONF_{name.upper()}={value}"
            for name, value in (
                ("plan_table_path", self.plan_table_path),
                ("default_theme_path", self.default_theme_path),
            )
            if value and not Path(value).is_file()
        ]
        if missing:
            raise RuntimeError(
                f"Configured files not found in '{self.environment}' environment: "
                + ", ".join(missing)
            )


@lru_cache
def get_settings() -> TenantConfSettings:
    settings = TenantConfSettings()
    settings.validate_paths()
    return settings
