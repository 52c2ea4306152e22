"""Claim queries."""

from __future__ import annotations

from typing import TYPE_CHECKING

from agencyinsights.core.models import Claim, Customer
from agencyinsights.core.types import DatasetKey
from agencyinsights.storage.datasets import load_dataset


if TYPE_CHECKING:
    from collections.abc import Mapping
    from pathlib import Path


def get_customers_with_claims(
    csv_file_paths: Mapping[str, str | Path], months_open: int, *, strict: bool = False
) -> list[Customer]:
    """Return customers with a claim opened within the last ``months_open`` months.

    Args:
        csv_file_paths: Paths keyed by ``customerList`` and ``claimList``.
        months_open: Inclusive upper bound on a claim's months open.
    """
    customers = load_dataset(csv_file_paths, DatasetKey.CUSTOMERS, Customer, strict=strict)
    claims = load_dataset(csv_file_paths, DatasetKey.CLAIMS, Claim, strict=strict)
    recent = {claim.customer_id for claim in claims if claim.months_open <= months_open}
    return [c for c in customers if c.customer_id in recent]
