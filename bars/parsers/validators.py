"""两种请求格式共用的字段校验。"""

from __future__ import annotations

import re
from datetime import date
from typing import Final

BILLING_CYCLE_MIN: Final[int] = 1
BILLING_CYCLE_MAX: Final[int] = 12

_INT_RE: Final[re.Pattern[str]] = re.compile(r"[+-]?[0-9]+")
_COMPACT_DATE_RE: Final[re.Pattern[str]] = re.compile(r"(?P<m>[0-9]{2})(?P<d>[0-9]{2})(?P<y>[0-9]{4})")
_SLASHED_DATE_RE: Final[re.Pattern[str]] = re.compile(r"(?P<m>[0-9]{1,2})/(?P<d>[0-9]{1,2})/(?P<y>[0-9]{4})")


def valid_billing_cycle(raw: str) -> bool:
    """整数且落在 [1, 12]；“1.0”、“1e0” 之类一律拒绝。"""

    value = str(raw or "").strip()
    if not _INT_RE.fullmatch(value):
        return False
    return BILLING_CYCLE_MIN <= int(value) <= BILLING_CYCLE_MAX


def valid_calendar_date(year: int, month: int, day: int) -> bool:
    """
    按 (年, 月, 日) 构造日期后再逐项比对。

    构造失败（如 4 月 31 日、非闰年 2 月 29 日）或结果与输入不一致都视为非法。
    """
    try:
        built = date(year, month, day)
    except (ValueError, OverflowError):
        return False
    return (built.year, built.month, built.day) == (year, month, day)


def _to_date(match: re.Match[str] | None) -> date | None:
    if match is None:
        return None
    year, month, day = int(match.group("y")), int(match.group("m")), int(match.group("d"))
    if not valid_calendar_date(year, month, day):
        return None
    return date(year, month, day)


def parse_compact_date(raw: str) -> date | None:
    """解析定宽格式的 `MMDDYYYY`。"""

    return _to_date(_COMPACT_DATE_RE.fullmatch(raw))


def parse_slashed_date(raw: str) -> date | None:
    """解析 CSV 格式的 `M/D/YYYY` 或 `MM/DD/YYYY`。"""

    return _to_date(_SLASHED_DATE_RE.fullmatch(raw))
