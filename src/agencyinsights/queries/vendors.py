"""Vendor queries."""

from __future__ import annotations

from typing import TYPE_CHECKING

from agencyinsights.core.models import Vendor
from agencyinsights.storage.decoder import read_csv_file


if TYPE_CHECKING:
    from pathlib import Path


def get_vendors_with_given_rating_that_are_in_scope(
    file_path: str | Path, area: str, in_scope: bool, vendor_rating: int, *, strict: bool = False
) -> list[Vendor]:
    """Return vendors in ``area`` with exactly ``vendor_rating``.

    When ``in_scope`` is true only in-scope vendors are kept; when false,
    vendors are returned regardless of scope.
    """
    vendors = read_csv_file(file_path, Vendor, strict=strict)
    matches = [v for v in vendors if v.area == area and v.vendor_rating == vendor_rating]
    if not in_scope:
        return matches
    return [v for v in matches if v.in_scope]
