"""Core module - Record types, errors and shared enums."""

from __future__ import annotations

from agencyinsights.core.errors import (
    AgentNotFoundError,
    DatasetUnavailableError,
    InsightsError,
    RankOutOfRangeError,
    RecordDecodeError,
    RecordNotFoundError,
)
from agencyinsights.core.models import (
    Agent,
    AgentRating,
    Claim,
    Customer,
    Dependent,
    Record,
    Vendor,
)
from agencyinsights.core.types import DatasetKey


__all__ = [
    # Records
    "Agent",
    # Errors
    "AgentNotFoundError",
    "AgentRating",
    "Claim",
    "Customer",
    "DatasetKey",
    "DatasetUnavailableError",
    # Types
    "Dependent",
    "InsightsError",
    "RankOutOfRangeError",
    "Record",
    "RecordDecodeError",
    "RecordNotFoundError",
    "Vendor",
]
