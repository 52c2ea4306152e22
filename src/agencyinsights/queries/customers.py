"""Customer queries: retention, leads and undisclosed drivers."""

from __future__ import annotations

from typing import TYPE_CHECKING

from agencyinsights.core.models import Customer
from agencyinsights.storage.decoder import read_csv_file


if TYPE_CHECKING:
    from pathlib import Path

UNDISCLOSED_DRIVER_MIN_AGE = 40
UNDISCLOSED_DRIVER_MAX_AGE = 50


def get_customers_retained_for_years_by_policy_cost_asc(
    file_path: str | Path, years_of_service: int, *, strict: bool = False
) -> list[Customer]:
    """Return customers with exactly ``years_of_service`` years, cheapest premium first."""
    customers = read_csv_file(file_path, Customer, strict=strict)
    retained = [c for c in customers if c.years_of_service == years_of_service]
    return sorted(retained, key=lambda c: c.total_monthly_premium)


def get_leads_for_insurance(file_path: str | Path, *, strict: bool = False) -> list[Customer]:
    """Return customers holding no home, auto or renters policy."""
    customers = read_csv_file(file_path, Customer, strict=strict)
    return [c for c in customers if not c.has_policy]


def get_undisclosed_drivers(
    file_path: str | Path, vehicles_insured: int, dependents: int, *, strict: bool = False
) -> list[Customer]:
    """Return customers aged 40 to 50 who may have unlisted drivers.

    Args:
        file_path: Customer CSV path.
        vehicles_insured: Customers must insure strictly more vehicles than this.
        dependents: Customers must list at most this many dependents.
    """
    customers = read_csv_file(file_path, Customer, strict=strict)
    return [
        c
        for c in customers
        if UNDISCLOSED_DRIVER_MIN_AGE <= c.age <= UNDISCLOSED_DRIVER_MAX_AGE
        and c.vehicles_insured > vehicles_insured
        and len(c.dependents) <= dependents
    ]
