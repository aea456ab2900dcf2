"""
taxcompare settings, read from the environment or a local .env file.

    from taxcompare.config import settings
    settings.fiscal_year        # "2024-25"

Modules import the `settings` singleton directly rather than receiving it
through FastAPI Depends().
"""
from typing import List

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",  # .env may carry keys for other tools
    )

    # Browser origins allowed to call the API, comma-separated
    cors_origins: str = "http://localhost:3000,http://localhost:5173"

    # Regime tables used by /api/calculate and /api/export; the app refuses
    # to start if engine.regimes has no record for this year
    fiscal_year: str = "2024-25"

    # PDF title and document metadata
    report_title: str = "Tax Liability Comparison Report"

    # DEBUG log level and exception details in 500 responses
    debug: bool = False
    app_version: str = "0.1.0"

    @property
    def cors_origins_list(self) -> List[str]:
        """cors_origins as a list, blanks dropped."""
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]


settings = Settings()
