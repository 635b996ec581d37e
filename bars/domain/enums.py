from __future__ import annotations

from enum import StrEnum


class RequestFormat(StrEnum):
    TXT = "txt"
    CSV = "csv"
