"""逗号分隔（.csv）请求文件读取器。

每行 3 列、无表头：`账期,起始日期,结束日期`，日期为 `M/D/YYYY` 或 `MM/DD/YYYY`。
"""

from __future__ import annotations

from typing import Final

from bars.domain.errors import (
    BillingCycleOutOfRangeError,
    InvalidDateFormatError,
    MalformedLineError,
)
from bars.domain.models.billing_request import BillingRequest

from ._common import scan_lines
from .validators import parse_slashed_date, valid_billing_cycle

DELIMITER: Final[str] = ","
FIELDS: Final[tuple[str, ...]] = ("billing_cycle", "start_date", "end_date")


def parse_line(line: str, row: int) -> BillingRequest:
    parts = line.strip().split(DELIMITER)
    if len(parts) != len(FIELDS):
        raise MalformedLineError(row)

    fields = dict(zip(FIELDS, (p.strip() for p in parts)))

    if not valid_billing_cycle(fields["billing_cycle"]):
        raise BillingCycleOutOfRangeError(row)

    start_date = parse_slashed_date(fields["start_date"])
    if start_date is None:
        raise InvalidDateFormatError(row, "start_date")

    end_date = parse_slashed_date(fields["end_date"])
    if end_date is None:
        raise InvalidDateFormatError(row, "end_date")

    return BillingRequest(
        billing_cycle=int(fields["billing_cycle"]),
        start_date=start_date,
        end_date=end_date,
    )


def parse_delimited(content: str) -> list[BillingRequest]:
    """解析整份 CSV 内容；遇到第一行错误即失败，不返回部分结果。"""

    return list(scan_lines(content, parse_line))
