"""Configuration for the records management suite."""

from decimal import Decimal
from pathlib import Path
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# When installed in editable mode the project root is the repo root.
_PROJECT_ROOT = Path(__file__).resolve().parents[2]


class Settings(BaseSettings):
    """
    Suite configuration.

    All settings can be overridden via environment variables prefixed
    with ``RMS_`` (e.g. ``RMS_DATA_DIR``) or a local ``.env`` file.
    """

    # Files
    DATA_DIR: Path = Field(default=_PROJECT_ROOT / "data")
    INVENTORY_FILE: str = Field(default="inventory.json")
    GRADES_INPUT_FILE: str = Field(default="input.txt")
    GRADES_REPORT_FILE: str = Field(default="report.txt")

    # Finance simulator
    ACCOUNT_NUMBER: str = Field(default="ACC001")
    STARTING_BALANCE: Decimal = Field(default=Decimal("1000"), ge=0)

    # Logging
    LOG_LEVEL: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="WARNING"
    )
    LOG_JSON: bool = Field(default=False)

    model_config = SettingsConfigDict(
        env_prefix="RMS_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    @property
    def inventory_path(self) -> Path:
        return self.DATA_DIR / self.INVENTORY_FILE

    @property
    def grades_input_path(self) -> Path:
        return self.DATA_DIR / self.GRADES_INPUT_FILE

    @property
    def grades_report_path(self) -> Path:
        return self.DATA_DIR / self.GRADES_REPORT_FILE


settings = Settings()
