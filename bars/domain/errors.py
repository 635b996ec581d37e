from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Literal, TypeAlias

DateField: TypeAlias = Literal["start_date", "end_date"]

_DATE_LABEL: dict[DateField, str] = {
    "start_date": "Start",
    "end_date": "End",
}


@dataclass(slots=True)
class DomainError(Exception):
    code: str
    message: str
    details: Any = None
    status_code: int = 400

    def __str__(self) -> str:
        return self.message


class EmptyInputError(DomainError):
    def __init__(self) -> None:
        super().__init__(
            code="empty_input",
            message="No request(s) to read from the input file.",
        )


class MissingInputError(DomainError):
    def __init__(self, *, details: Any = None) -> None:
        super().__init__(
            code="missing_input",
            message="Please input an existing request file path.",
            details=details,
        )


class UnsupportedFileTypeError(DomainError):
    def __init__(self, *, details: Any = None) -> None:
        super().__init__(
            code="unsupported_file_type",
            message="File is not supported for processing.",
            details=details,
        )


class InputTooLargeError(DomainError):
    def __init__(self, limit_bytes: int, *, details: Any = None) -> None:
        super().__init__(
            code="input_too_large",
            message=f"Request file exceeds the {limit_bytes} byte limit.",
            details=details,
            status_code=413,
        )


class UnreadableInputError(DomainError):
    def __init__(self, *, details: Any = None) -> None:
        super().__init__(
            code="unreadable_input",
            message="Request file is not valid UTF-8 text.",
            details=details,
        )


class RowError(DomainError):
    """某一行校验失败；`details["row"]` 为从 1 开始的行号。"""

    @property
    def row(self) -> int:
        return int(self.details["row"])


class MalformedLineError(RowError):
    def __init__(self, row: int) -> None:
        # 行长度/列数错误沿用 “Start Date” 文案，调用方依赖该字面文本。
        super().__init__(
            code="malformed_line",
            message=f"ERROR: Invalid Start Date format at row {row}.",
            details={"row": row},
        )


class BillingCycleOutOfRangeError(RowError):
    def __init__(self, row: int) -> None:
        super().__init__(
            code="billing_cycle_out_of_range",
            message=f"ERROR: Billing Cycle not on range at row {row}.",
            details={"row": row},
        )


class InvalidDateFormatError(RowError):
    def __init__(self, row: int, field: DateField) -> None:
        super().__init__(
            code="invalid_date_format",
            message=f"ERROR: Invalid {_DATE_LABEL[field]} Date format at row {row}.",
            details={"row": row, "field": field},
        )

    @property
    def field(self) -> DateField:
        return self.details["field"]
