"""Pytest configuration and shared fixtures."""

from __future__ import annotations

import csv
from pathlib import Path
from typing import TYPE_CHECKING, Any

import pytest


if TYPE_CHECKING:
    from collections.abc import Callable, Sequence


AGENT_COLUMNS = ["agentId", "firstName", "lastName", "area", "language"]
CUSTOMER_COLUMNS = [
    "customerId", "firstName", "lastName", "age", "email", "area", "agentId", "agentRating",
    "primaryLanguage", "dependents", "homePolicy", "autoPolicy", "rentersPolicy",
    "totalMonthlyPremium", "yearsOfService", "vehiclesInsured",
]
VENDOR_COLUMNS = ["vendorId", "area", "vendorRating", "inScope"]
CLAIM_COLUMNS = ["claimId", "customerId", "closed", "monthsOpen"]

AGENTS = [
    [1, "Ann", "Lee", "North", "English"],
    [2, "Bob", "Ray", "South", "Spanish"],
    [3, "Cid", "Moe", "North", "Spanish"],
    [4, "Dee", "Fox", "North", "English"],
]

CUSTOMERS = [
    [1, "Ed", "Hill", 45, "ed@example.com", "North", 1, 5, "English",
     '[{"firstName":"Kim","lastName":"Hill"}]', "true", "false", "false", "$300", 5, 3],
    [2, "Flo", "Park", 39, "flo@example.com", "North", 1, 4, "English",
     "", "false", "false", "false", "100", 5, 4],
    [3, "Gus", "Ward", 50, "gus@example.com", "South", 2, 2, "Spanish",
     "[]", "false", "true", "false", "200", 5, 2],
    [4, "Hal", "Kerr", 40, "hal@example.com", "North", 3, 3, "Spanish",
     "", "false", "false", "false", "150", 4, 3],
    [5, "Ivy", "Nash", 41, "ivy@example.com", "North", 2, 4, "English",
     '[{"firstName":"A","lastName":"Nash"},{"firstName":"B","lastName":"Nash"}]',
     "false", "true", "true", "250", 2, 5],
]

VENDORS = [
    [1, "A", 3, "true"],
    [2, "A", 3, "false"],
    [3, "A", 4, "true"],
    [4, "B", 3, "true"],
]

CLAIMS = [
    [1, 1, "false", 2],
    [2, 2, "true", 10],
    [3, 1, "false", 1],
    [4, 99, "false", 0],
]


def write_csv(path: Path, columns: Sequence[str], rows: Sequence[Sequence[Any]]) -> Path:
    """Write a CSV file with a header row."""
    with path.open("w", encoding="utf-8", newline="") as handle:
        writer = csv.writer(handle)
        writer.writerow(columns)
        writer.writerows(rows)
    return path


@pytest.fixture
def make_csv(tmp_path: Path) -> Callable[..., Path]:
    """Factory writing a CSV file into the temp directory."""

    def _make(name: str, columns: Sequence[str], rows: Sequence[Sequence[Any]]) -> Path:
        return write_csv(tmp_path / name, columns, rows)

    return _make


@pytest.fixture
def data_dir(tmp_path: Path) -> Path:
    """Directory holding the four sample datasets."""
    directory = tmp_path / "data"
    directory.mkdir()
    write_csv(directory / "agents.csv", AGENT_COLUMNS, AGENTS)
    write_csv(directory / "customers.csv", CUSTOMER_COLUMNS, CUSTOMERS)
    write_csv(directory / "vendors.csv", VENDOR_COLUMNS, VENDORS)
    write_csv(directory / "claims.csv", CLAIM_COLUMNS, CLAIMS)
    return directory


@pytest.fixture
def agents_csv(data_dir: Path) -> Path:
    return data_dir / "agents.csv"


@pytest.fixture
def customers_csv(data_dir: Path) -> Path:
    return data_dir / "customers.csv"


@pytest.fixture
def vendors_csv(data_dir: Path) -> Path:
    return data_dir / "vendors.csv"


@pytest.fixture
def claims_csv(data_dir: Path) -> Path:
    return data_dir / "claims.csv"


@pytest.fixture
def csv_file_paths(data_dir: Path) -> dict[str, str]:
    """Dataset key to path mapping for multi-file queries."""
    return {
        "agentList": str(data_dir / "agents.csv"),
        "customerList": str(data_dir / "customers.csv"),
        "vendorList": str(data_dir / "vendors.csv"),
        "claimList": str(data_dir / "claims.csv"),
    }


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep INSIGHTS_* variables from the host out of tests."""
    for name in (
        "INSIGHTS_DATA_DIR", "INSIGHTS_AGENT_LIST", "INSIGHTS_CUSTOMER_LIST",
        "INSIGHTS_VENDOR_LIST", "INSIGHTS_CLAIM_LIST", "INSIGHTS_STRICT",
    ):
        monkeypatch.delenv(name, raising=False)
