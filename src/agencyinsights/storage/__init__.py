"""Storage layer for reading agency datasets."""

from agencyinsights.storage.datasets import dataset_path, load_dataset
from agencyinsights.storage.decoder import DecodeIssue, DecodeResult, decode_csv, read_csv_file

__all__ = [
    "DecodeIssue",
    "DecodeResult",
    "dataset_path",
    "decode_csv",
    "load_dataset",
    "read_csv_file",
]
