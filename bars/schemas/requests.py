from __future__ import annotations

from datetime import date

from pydantic import Field, field_serializer

from bars.domain.models.billing_request import BillingRequest

from .common import ResponseModel


def format_date(value: date) -> str:
    """`MM/DD/YYYY`，月、日补零。"""

    return f"{value.month:02d}/{value.day:02d}/{value.year:04d}"


class BillingRequestItem(ResponseModel):
    billing_cycle: int = Field(ge=1, le=12)
    start_date: date
    end_date: date

    @field_serializer("start_date", "end_date")
    def _serialize_date(self, value: date) -> str:
        return format_date(value)

    @classmethod
    def from_domain(cls, request: BillingRequest) -> "BillingRequestItem":
        return cls(
            billing_cycle=request.billing_cycle,
            start_date=request.start_date,
            end_date=request.end_date,
        )


class ParseResultModel(ResponseModel):
    requests: list[BillingRequestItem]
    count: int


def build_parse_result(requests: list[BillingRequest]) -> dict:
    model = ParseResultModel(
        requests=[BillingRequestItem.from_domain(r) for r in requests],
        count=len(requests),
    )
    return model.model_dump(mode="json")
