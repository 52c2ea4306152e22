"""Tests for settings and environment overrides."""

from __future__ import annotations

from pathlib import Path

import pytest

from agencyinsights.config.settings import DataSettings, Settings
from agencyinsights.core.types import DatasetKey


def test_defaults() -> None:
    settings = Settings()
    assert settings.strict is False
    assert settings.data.path_for(DatasetKey.AGENTS) == Path("data") / "agents.csv"


def test_absolute_names_not_joined(tmp_path: Path) -> None:
    data = DataSettings(data_dir=Path("elsewhere"), claim_list=str(tmp_path / "c.csv"))
    assert data.path_for(DatasetKey.CLAIMS) == tmp_path / "c.csv"


def test_file_paths_cover_every_dataset() -> None:
    paths = DataSettings(data_dir=Path("d")).file_paths()
    assert paths == {
        "agentList": Path("d/agents.csv"),
        "customerList": Path("d/customers.csv"),
        "vendorList": Path("d/vendors.csv"),
        "claimList": Path("d/claims.csv"),
    }


def test_env_overrides(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setenv("INSIGHTS_DATA_DIR", str(tmp_path))
    monkeypatch.setenv("INSIGHTS_CUSTOMER_LIST", "clients.csv")
    monkeypatch.setenv("INSIGHTS_STRICT", "yes")
    settings = Settings()
    assert settings.data.path_for(DatasetKey.CUSTOMERS) == tmp_path / "clients.csv"
    assert settings.strict is True


def test_env_overrides_leave_supplied_data_settings_alone(
    monkeypatch: pytest.MonkeyPatch, tmp_path: Path
) -> None:
    monkeypatch.setenv("INSIGHTS_DATA_DIR", str(tmp_path))
    data = DataSettings(data_dir=Path("mine"))
    settings = Settings(data=data)
    assert settings.data.data_dir == tmp_path
    assert data.data_dir == Path("mine")
