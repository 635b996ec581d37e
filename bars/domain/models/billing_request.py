from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime


@dataclass(frozen=True, slots=True)
class BillingRequest:
    """一条已通过校验的账单请求：账期 + 起止日期（无时区的公历日期）。"""

    billing_cycle: int
    start_date: date
    end_date: date

    def __post_init__(self) -> None:
        if isinstance(self.billing_cycle, bool) or not isinstance(self.billing_cycle, int):
            raise ValueError(f"billing_cycle must be an int: {self.billing_cycle!r}")
        if not 1 <= self.billing_cycle <= 12:
            raise ValueError(f"billing_cycle out of range 1..12: {self.billing_cycle}")
        for name in ("start_date", "end_date"):
            value = getattr(self, name)
            # datetime 是 date 的子类，这里只接受纯日期。
            if isinstance(value, datetime) or not isinstance(value, date):
                raise ValueError(f"{name} must be a date: {value!r}")
