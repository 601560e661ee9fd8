"""Shared test fixtures."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from receipt_spending.extraction import ExtractionError

if TYPE_CHECKING:
    from pathlib import Path


class FakeExtractor:
    """In-memory TextExtractor keyed by filename.

    A value that is an Exception instance is raised instead of returned.
    """

    def __init__(self, texts: dict[str, str | Exception]) -> None:
        self.texts = texts
        self.calls: list[str] = []

    def extract(self, path: Path) -> str:
        self.calls.append(path.name)
        value = self.texts.get(path.name, "")
        if isinstance(value, Exception):
            raise value
        return value


@pytest.fixture
def receipts_dir(tmp_path: Path) -> Path:
    """Provide an empty directory to drop receipt files into."""
    root = tmp_path / "receipts"
    root.mkdir()
    return root


@pytest.fixture
def output_dir(tmp_path: Path) -> Path:
    """Provide a not-yet-created output directory."""
    return tmp_path / "results"


@pytest.fixture
def sample_texts() -> dict[str, str | Exception]:
    """One readable receipt for January 2024 and one corrupt file."""
    return {
        "Fatura_Cartao_Continente_20240115_1200.pdf": (
            "Continente\nLeite 1,20\nTOTAL A PAGAR 50,00\nObrigado"
        ),
        "Fatura_Cartao_Continente_20240120_0930.pdf": ExtractionError(
            "PdfiumError: file is corrupt"
        ),
    }


@pytest.fixture
def populated_dir(receipts_dir: Path, sample_texts: dict[str, str | Exception]) -> Path:
    """Receipts directory holding a placeholder file per sample text."""
    for name in sample_texts:
        (receipts_dir / name).write_bytes(b"%PDF-1.4 placeholder")
    return receipts_dir


@pytest.fixture
def sample_extractor(sample_texts: dict[str, str | Exception]) -> FakeExtractor:
    """FakeExtractor serving the sample texts."""
    return FakeExtractor(sample_texts)


@pytest.fixture
def make_extractor() -> type[FakeExtractor]:
    """Expose FakeExtractor so tests can build one from their own texts."""
    return FakeExtractor
