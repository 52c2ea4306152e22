"""Core type definitions and enums."""

from __future__ import annotations

from enum import Enum
from typing import TypeAlias


class DatasetKey(str, Enum):
    """Logical dataset names used in multi-file path mappings."""

    AGENTS = "agentList"
    CUSTOMERS = "customerList"
    VENDORS = "vendorList"
    CLAIMS = "claimList"


# Raw CSV row after empty cells have been dropped
RawRow: TypeAlias = dict[str, str]
