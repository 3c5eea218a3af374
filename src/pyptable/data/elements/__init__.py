"""Bundled chemical element dataset."""

from pathlib import Path

from pyptable.data.constants import FileConstants

DATA_DIR = Path(__file__).parent
DEFAULT_DATASET_PATH = DATA_DIR / FileConstants.DEFAULT_DATASET

__all__ = ["DATA_DIR", "DEFAULT_DATASET_PATH"]
