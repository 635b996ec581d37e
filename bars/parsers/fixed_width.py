"""定宽（.txt）请求文件读取器。

每行恰好 18 个字符，无表头：

    CC MMDDYYYY MMDDYYYY
    01 01162013 02152013   ->  "010116201302152013"
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final

from bars.domain.errors import (
    BillingCycleOutOfRangeError,
    InvalidDateFormatError,
    MalformedLineError,
)
from bars.domain.models.billing_request import BillingRequest

from ._common import scan_lines
from .validators import parse_compact_date, valid_billing_cycle


@dataclass(frozen=True, slots=True)
class Column:
    name: str
    offset: int
    width: int

    def take(self, line: str) -> str:
        return line[self.offset : self.offset + self.width]


BILLING_CYCLE: Final[Column] = Column("billing_cycle", 0, 2)
START_DATE: Final[Column] = Column("start_date", 2, 8)
END_DATE: Final[Column] = Column("end_date", 10, 8)
COLUMNS: Final[tuple[Column, ...]] = (BILLING_CYCLE, START_DATE, END_DATE)
LINE_WIDTH: Final[int] = sum(c.width for c in COLUMNS)


def parse_line(line: str, row: int) -> BillingRequest:
    text = line.strip()
    if len(text) != LINE_WIDTH:
        raise MalformedLineError(row)

    cycle_raw, start_raw, end_raw = (c.take(text) for c in COLUMNS)

    if not valid_billing_cycle(cycle_raw):
        raise BillingCycleOutOfRangeError(row)

    start_date = parse_compact_date(start_raw)
    if start_date is None:
        raise InvalidDateFormatError(row, "start_date")

    end_date = parse_compact_date(end_raw)
    if end_date is None:
        raise InvalidDateFormatError(row, "end_date")

    return BillingRequest(billing_cycle=int(cycle_raw), start_date=start_date, end_date=end_date)


def parse_fixed_width(content: str) -> list[BillingRequest]:
    """解析整份定宽内容；遇到第一行错误即失败，不返回部分结果。"""

    return list(scan_lines(content, parse_line))
