"""Dataset-key lookups for multi-file queries."""

from __future__ import annotations

from typing import TYPE_CHECKING, TypeVar

from agencyinsights.core.errors import DatasetUnavailableError
from agencyinsights.core.models import Record
from agencyinsights.core.types import DatasetKey
from agencyinsights.storage.decoder import read_csv_file


if TYPE_CHECKING:
    from collections.abc import Mapping
    from pathlib import Path

RecordT = TypeVar("RecordT", bound=Record)


def dataset_path(csv_file_paths: Mapping[str, str | Path], key: DatasetKey) -> str | Path:
    """Return the path registered for ``key``.

    Raises:
        DatasetUnavailableError: No path is registered under the key.
    """
    # Mappings may be keyed by plain strings or DatasetKey members
    for candidate in (key.value, key):
        if candidate in csv_file_paths:
            return csv_file_paths[candidate]
    msg = f"no path configured for '{key.value}'"
    raise DatasetUnavailableError(None, msg)


def load_dataset(
    csv_file_paths: Mapping[str, str | Path],
    key: DatasetKey,
    record_type: type[RecordT],
    *,
    strict: bool = False,
) -> list[RecordT]:
    """Read the dataset registered under ``key``."""
    return read_csv_file(dataset_path(csv_file_paths, key), record_type, strict=strict)
