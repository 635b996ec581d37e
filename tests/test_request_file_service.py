import tempfile
import unittest
from dataclasses import replace
from datetime import date
from pathlib import Path

from bars.application.services.request_file_service import (
    read_csv,
    read_request_file,
    read_txt,
)
from bars.domain.errors import (
    BillingCycleOutOfRangeError,
    EmptyInputError,
    InputTooLargeError,
    InvalidDateFormatError,
    MissingInputError,
    UnreadableInputError,
    UnsupportedFileTypeError,
)
from bars.settings import load_settings


def _write(root: Path, name: str, text: str, *, encoding: str = "utf-8") -> Path:
    path = root / name
    path.write_bytes(text.encode(encoding))
    return path


class TestReadRequestFile(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.root = Path(self._tmp.name)

    def tearDown(self) -> None:
        self._tmp.cleanup()

    def test_valid_txt(self) -> None:
        path = _write(self.root, "valid-txt.txt", "010116201302152013\n010116201602152016\n")
        result = read_request_file(path)
        self.assertEqual(len(result), 2)
        self.assertEqual(result[0].start_date, date(2013, 1, 16))
        self.assertEqual(result[1].end_date, date(2016, 2, 15))

    def test_valid_csv_with_bom(self) -> None:
        path = _write(self.root, "valid-csv.csv", "1,1/16/2013,2/15/2013\r\n1,1/16/2016,2/15/2016", encoding="utf-8-sig")
        result = read_request_file(path)
        self.assertEqual([r.billing_cycle for r in result], [1, 1])

    def test_invalid_billing_cycle_txt(self) -> None:
        path = _write(
            self.root,
            "invalid-billing-cycle-txt.txt",
            "010116201302152013\n010116201602152016\n000116201302152013\n",
        )
        with self.assertRaises(BillingCycleOutOfRangeError) as ctx:
            read_txt(path)
        self.assertEqual(str(ctx.exception), "ERROR: Billing Cycle not on range at row 3.")

    def test_invalid_end_date_csv(self) -> None:
        lines = ["1,1/16/2013,2/15/2013"] * 6 + ["1,1/16/2013,13/15/2013"]
        path = _write(self.root, "invalid-end-date-csv.csv", "\n".join(lines))
        with self.assertRaises(InvalidDateFormatError) as ctx:
            read_csv(path)
        self.assertEqual(str(ctx.exception), "ERROR: Invalid End Date format at row 7.")

    def test_empty_file(self) -> None:
        path = _write(self.root, "empty-txt.txt", "")
        with self.assertRaises(EmptyInputError):
            read_request_file(path)

    def test_missing_file(self) -> None:
        with self.assertRaises(MissingInputError) as ctx:
            read_request_file(self.root / "nope.txt")
        self.assertEqual(str(ctx.exception), "Please input an existing request file path.")

    def test_directory_is_missing_input(self) -> None:
        with self.assertRaises(MissingInputError):
            read_request_file(self.root)

    def test_unsupported_extension(self) -> None:
        path = _write(self.root, "requests.json", "[]")
        with self.assertRaises(UnsupportedFileTypeError):
            read_request_file(path)

    def test_explicit_format_overrides_extension(self) -> None:
        path = _write(self.root, "requests.dat", "1,1/16/2013,2/15/2013")
        result = read_request_file(path, format_id="csv")
        self.assertEqual(len(result), 1)

    def test_size_ceiling(self) -> None:
        path = _write(self.root, "big.txt", "010116201302152013\n" * 4)
        settings = replace(load_settings(), max_input_bytes=16)
        with self.assertRaises(InputTooLargeError) as ctx:
            read_request_file(path, settings=settings)
        self.assertEqual(ctx.exception.status_code, 413)

    def test_not_utf8(self) -> None:
        path = self.root / "latin.txt"
        path.write_bytes(b"\xff\xfe0101162013")
        with self.assertRaises(UnreadableInputError):
            read_request_file(path)
