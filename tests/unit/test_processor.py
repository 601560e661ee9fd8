"""Tests for receipt_spending.processor."""

from __future__ import annotations

import os
from typing import TYPE_CHECKING

import pytest

from receipt_spending.extraction import ExtractionError
from receipt_spending.processor import (
    ReceiptDirectoryError,
    list_receipts,
    process_receipt,
    process_receipts,
)

if TYPE_CHECKING:
    from pathlib import Path


class TestProcessReceipt:
    """Tests for process_receipt()."""

    def test_success(self, receipts_dir: Path, make_extractor: type) -> None:
        path = receipts_dir / "Fatura_20181223_1509.pdf"
        extractor = make_extractor({path.name: "TOTAL A PAGAR 34,50"})

        record = process_receipt(path, extractor)

        assert record.filename == "Fatura_20181223_1509.pdf"
        assert record.date == "2018-12-23"
        assert record.total == 34.50
        assert record.error is None

    def test_extraction_failure_keeps_date(self, receipts_dir: Path, make_extractor: type) -> None:
        path = receipts_dir / "Fatura_20181223_1509.pdf"
        extractor = make_extractor({path.name: ExtractionError("corrupt")})

        record = process_receipt(path, extractor)

        assert record.date == "2018-12-23"
        assert record.total is None
        assert record.error == "corrupt"

    def test_no_total_found(self, receipts_dir: Path, make_extractor: type) -> None:
        path = receipts_dir / "scan.pdf"
        record = process_receipt(path, make_extractor({path.name: "nothing here"}))

        assert record.date is None
        assert record.total is None
        assert record.error is None

    def test_undecodable_filename_is_replaced(
        self, receipts_dir: Path, make_extractor: type
    ) -> None:
        path = receipts_dir / os.fsdecode(b"Fatura_\xe7_20240115_1200.pdf")
        extractor = make_extractor({path.name: "TOTAL A PAGAR 12,00"})

        record = process_receipt(path, extractor)

        assert record.filename == "Fatura_\ufffd_20240115_1200.pdf"
        assert record.date == "2024-01-15"
        assert record.total == 12.00

    def test_other_exceptions_propagate(self, receipts_dir: Path, make_extractor: type) -> None:
        path = receipts_dir / "a.pdf"
        extractor = make_extractor({path.name: RuntimeError("driver crashed")})
        with pytest.raises(RuntimeError, match="driver crashed"):
            process_receipt(path, extractor)


class TestListReceipts:
    """Tests for list_receipts()."""

    def test_only_pdf_files_sorted(self, receipts_dir: Path) -> None:
        for name in ["b.pdf", "a.pdf", "notes.txt", "UPPER.PDF", "archive.pdf.bak"]:
            (receipts_dir / name).write_bytes(b"")
        (receipts_dir / "folder.pdf").mkdir()

        assert [p.name for p in list_receipts(receipts_dir)] == ["a.pdf", "b.pdf"]

    def test_missing_directory_is_fatal(self, tmp_path: Path) -> None:
        with pytest.raises(ReceiptDirectoryError, match="Cannot read receipts directory"):
            list_receipts(tmp_path / "nope")

    def test_file_instead_of_directory_is_fatal(self, tmp_path: Path) -> None:
        path = tmp_path / "file"
        path.write_text("")
        with pytest.raises(ReceiptDirectoryError):
            list_receipts(path)


class TestProcessReceipts:
    """Tests for process_receipts()."""

    def test_mixed_outcomes(self, populated_dir: Path, sample_extractor) -> None:
        records = process_receipts(populated_dir, extractor=sample_extractor)

        assert [r.filename for r in records] == [
            "Fatura_Cartao_Continente_20240115_1200.pdf",
            "Fatura_Cartao_Continente_20240120_0930.pdf",
        ]
        assert records[0].total == 50.00
        assert records[0].error is None
        assert records[1].total is None
        assert records[1].error == "PdfiumError: file is corrupt"
        assert records[1].date == "2024-01-20"

    def test_skips_non_pdf_without_extracting(
        self, receipts_dir: Path, make_extractor: type
    ) -> None:
        (receipts_dir / "x_20240101_0001.pdf").write_bytes(b"")
        (receipts_dir / "readme.md").write_text("hi")
        extractor = make_extractor({"x_20240101_0001.pdf": "TOTAL A PAGAR 1,00"})

        records = process_receipts(receipts_dir, extractor=extractor)

        assert len(records) == 1
        assert extractor.calls == ["x_20240101_0001.pdf"]

    def test_undecodable_filename_does_not_abort_run(
        self, receipts_dir: Path, make_extractor: type
    ) -> None:
        odd = os.fsdecode(b"Fatura_\xe7_20240115_1200.pdf")
        (receipts_dir / odd).write_bytes(b"")
        (receipts_dir / "b_20240116_0001.pdf").write_bytes(b"")
        extractor = make_extractor(
            {odd: "TOTAL A PAGAR 1,50", "b_20240116_0001.pdf": ExtractionError("bad")}
        )

        records = process_receipts(receipts_dir, extractor=extractor)

        assert len(records) == 2
        assert {r.filename for r in records} == {
            "Fatura_\ufffd_20240115_1200.pdf",
            "b_20240116_0001.pdf",
        }

    def test_empty_directory(self, receipts_dir: Path, make_extractor: type) -> None:
        assert process_receipts(receipts_dir, extractor=make_extractor({})) == []

    def test_parallel_matches_sequential(self, receipts_dir: Path, make_extractor: type) -> None:
        texts = {}
        for i in range(12):
            name = f"r_2024{i + 1:02d}01_{i:04d}.pdf"
            (receipts_dir / name).write_bytes(b"")
            texts[name] = f"TOTAL A PAGAR {i + 1},00"
        texts["r_20240301_0002.pdf"] = ExtractionError("bad")

        sequential = process_receipts(receipts_dir, extractor=make_extractor(texts))
        parallel = process_receipts(
            receipts_dir, extractor=make_extractor(texts), max_workers=4
        )

        assert parallel == sequential
        assert [r.filename for r in parallel] == sorted(texts)

    def test_missing_directory_is_fatal(self, tmp_path: Path, make_extractor: type) -> None:
        with pytest.raises(ReceiptDirectoryError):
            process_receipts(tmp_path / "nope", extractor=make_extractor({}))
