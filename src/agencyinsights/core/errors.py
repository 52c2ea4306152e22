"""Exception hierarchy for dataset loading and queries."""

from __future__ import annotations

from pathlib import Path


class InsightsError(Exception):
    """Base class for all agencyinsights errors."""


class DatasetUnavailableError(InsightsError):
    """A dataset file is missing, unreadable or was not configured."""

    def __init__(self, path: str | Path | None, reason: str) -> None:
        self.path = str(path) if path is not None else None
        self.reason = reason
        super().__init__(f"Dataset unavailable ({self.path}): {reason}")


class RecordDecodeError(InsightsError):
    """A CSV row could not be coerced into its record type."""

    def __init__(self, path: str | Path, line: int, reason: str) -> None:
        self.path = str(path)
        self.line = line
        self.reason = reason
        super().__init__(f"{self.path}:{line}: {reason}")


class RecordNotFoundError(InsightsError, LookupError):
    """A lookup the caller expected to succeed found nothing."""


class AgentNotFoundError(RecordNotFoundError):
    """No agent carries the requested first and last name."""

    def __init__(self, first_name: str, last_name: str) -> None:
        self.first_name = first_name
        self.last_name = last_name
        super().__init__(f"No agent named {first_name} {last_name}")


class RankOutOfRangeError(RecordNotFoundError, IndexError):
    """Requested satisfaction rank is outside 1..number of ranked agents."""

    def __init__(self, rank: int, available: int) -> None:
        self.rank = rank
        self.available = available
        super().__init__(f"Rank {rank} is out of range (1..{available})")
