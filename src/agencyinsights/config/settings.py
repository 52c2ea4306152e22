"""Application settings and configuration."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from agencyinsights.core.types import DatasetKey


class DataSettings(BaseModel):
    """Dataset file locations."""

    data_dir: Path = Path("data")
    agent_list: str = "agents.csv"
    customer_list: str = "customers.csv"
    vendor_list: str = "vendors.csv"
    claim_list: str = "claims.csv"

    def path_for(self, key: DatasetKey) -> Path:
        """Resolve a dataset file, relative names against ``data_dir``."""
        name = {
            DatasetKey.AGENTS: self.agent_list,
            DatasetKey.CUSTOMERS: self.customer_list,
            DatasetKey.VENDORS: self.vendor_list,
            DatasetKey.CLAIMS: self.claim_list,
        }[key]
        path = Path(name)
        return path if path.is_absolute() else self.data_dir / path

    def file_paths(self) -> dict[str, Path]:
        """Dataset key to path mapping for multi-file queries."""
        return {key.value: self.path_for(key) for key in DatasetKey}


class Settings(BaseSettings):
    """Application configuration.

    Settings are loaded from environment variables or .env file.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        env_nested_delimiter="__",
    )

    # Dataset locations
    data: DataSettings = Field(default_factory=DataSettings)

    # Raise on missing files and malformed rows instead of logging them
    strict: bool = False

    # Logging
    log_level: str = "INFO"

    def __init__(self, **data: Any) -> None:
        """Initialize settings with environment variable overrides."""
        super().__init__(**data)
        self._load_env_overrides()

    def _load_env_overrides(self) -> None:
        """Load flat INSIGHTS_* environment overrides."""
        # A caller-supplied DataSettings must stay unchanged
        self.data = self.data.model_copy()
        if data_dir := os.getenv("INSIGHTS_DATA_DIR"):
            self.data.data_dir = Path(data_dir)
        if agents := os.getenv("INSIGHTS_AGENT_LIST"):
            self.data.agent_list = agents
        if customers := os.getenv("INSIGHTS_CUSTOMER_LIST"):
            self.data.customer_list = customers
        if vendors := os.getenv("INSIGHTS_VENDOR_LIST"):
            self.data.vendor_list = vendors
        if claims := os.getenv("INSIGHTS_CLAIM_LIST"):
            self.data.claim_list = claims
        if strict := os.getenv("INSIGHTS_STRICT"):
            self.strict = strict.lower() in ("true", "1", "yes")
