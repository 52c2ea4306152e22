"""CSV decoding into typed records."""

from __future__ import annotations

import csv
import logging
from pathlib import Path
from typing import TYPE_CHECKING, Any, TypeVar

from pydantic import BaseModel, Field, ValidationError

from agencyinsights.core.errors import DatasetUnavailableError, RecordDecodeError
from agencyinsights.core.models import Record


if TYPE_CHECKING:
    from agencyinsights.core.types import RawRow

logger = logging.getLogger(__name__)

RecordT = TypeVar("RecordT", bound=Record)

CSV_ENCODING = "utf-8-sig"


class DecodeIssue(BaseModel):
    """A row dropped during decoding."""

    line: int
    message: str


class DecodeResult(BaseModel):
    """Outcome of decoding one CSV file."""

    path: str
    records: list[Any] = Field(default_factory=list)
    issues: list[DecodeIssue] = Field(default_factory=list)
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None and not self.issues


def _clean_row(row: dict[str | None, Any], columns: frozenset[str]) -> RawRow:
    """Keep known columns with a non-empty value."""
    return {
        key: value
        for key, value in row.items()
        if key in columns and isinstance(value, str) and value != ""
    }


def _describe(exc: ValidationError) -> str:
    parts = []
    for err in exc.errors():
        loc = ".".join(str(p) for p in err["loc"]) or "row"
        parts.append(f"{loc}: {err['msg']}")
    return "; ".join(parts)


def decode_csv(file_path: str | Path, record_type: type[RecordT]) -> DecodeResult:
    """Decode a CSV file with a header row into records of ``record_type``.

    Columns are matched to fields by exact header name. Unknown columns are
    ignored and missing or empty cells leave the field at its default.
    Rows that fail coercion are dropped and reported as issues; a file that
    cannot be opened is reported through ``error``. Nothing is raised.

    Args:
        file_path: Path to the CSV file.
        record_type: Record model each row is decoded into.

    Returns:
        DecodeResult with the decoded records in file order.
    """
    path = Path(file_path)
    result = DecodeResult(path=str(path))
    columns = record_type.column_names()
    records: list[RecordT] = []

    try:
        with path.open(encoding=CSV_ENCODING, newline="") as handle:
            reader = csv.DictReader(handle)
            for row in reader:
                try:
                    records.append(record_type.model_validate(_clean_row(row, columns)))
                except ValidationError as e:
                    result.issues.append(DecodeIssue(line=reader.line_num, message=_describe(e)))
    except (OSError, UnicodeDecodeError, csv.Error) as e:
        result.error = f"{type(e).__name__}: {e}"

    result.records = records
    return result


def read_csv_file(
    file_path: str | Path, record_type: type[RecordT], *, strict: bool = False
) -> list[RecordT]:
    """Read a CSV file into a list of records.

    In tolerant mode (the default) file failures are logged and yield the
    records decoded from text read before the failure (none when the file
    cannot be opened),
    and malformed rows are logged and skipped. In strict mode the first
    problem is raised.

    Raises:
        DatasetUnavailableError: strict mode, file missing or unreadable.
        RecordDecodeError: strict mode, a row failed coercion.
    """
    result = decode_csv(file_path, record_type)

    if strict:
        if result.error is not None:
            raise DatasetUnavailableError(result.path, result.error)
        if result.issues:
            issue = result.issues[0]
            raise RecordDecodeError(result.path, issue.line, issue.message)

    for issue in result.issues:
        logger.warning("Skipping %s line %d: %s", result.path, issue.line, issue.message)
    if result.error is not None:
        logger.error("Could not read %s: %s", result.path, result.error)
        return list(result.records)

    logger.debug(
        "Loaded %d %s records from %s", len(result.records), record_type.__name__, result.path
    )
    return list(result.records)
