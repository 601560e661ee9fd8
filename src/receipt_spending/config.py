"""Configuration via environment variables."""

from __future__ import annotations

import os
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()


def get_output_dir() -> Path:
    """Return the OUTPUT_PATH, defaulting to ./results.

    Always resolves to an absolute path to avoid issues if the
    working directory changes during execution.
    """
    return Path(os.environ.get("OUTPUT_PATH", "./results")).resolve()


def get_receipts_dir() -> Path:
    """Return the RECEIPTS_DIR, defaulting to ./receipts."""
    return Path(os.environ.get("RECEIPTS_DIR", "./receipts")).resolve()


def get_max_workers() -> int:
    """Return the number of documents processed concurrently.

    Reads RECEIPT_WORKERS (default 1, meaning strictly sequential).
    """
    raw = os.environ.get("RECEIPT_WORKERS", "1")
    try:
        workers = int(raw)
    except ValueError:
        msg = f"RECEIPT_WORKERS must be an integer, got {raw!r}"
        raise ValueError(msg) from None
    if workers < 1:
        msg = f"RECEIPT_WORKERS must be at least 1, got {workers}"
        raise ValueError(msg)
    return workers
