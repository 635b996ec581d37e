"""请求文件解析器 registry。

目标：
- 对外提供稳定的格式列表（供 CLI 渲染），以及按格式 id / 文件扩展名获取解析器。
- 新增格式时只需在这里显式注册，不做动态发现。
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import PurePath
from typing import Callable, Final, Literal, TypedDict, TypeAlias

from bars.domain.enums import RequestFormat
from bars.domain.errors import UnsupportedFileTypeError
from bars.domain.models.billing_request import BillingRequest

from .delimited import parse_delimited
from .fixed_width import parse_fixed_width

RequestFormatOrAuto: TypeAlias = RequestFormat | Literal["auto"]


class FormatItem(TypedDict):
    id: str
    name: str
    extensions: list[str]


@dataclass(frozen=True, slots=True)
class RequestParser:
    format_id: RequestFormat
    name: str
    extensions: tuple[str, ...]
    parse: Callable[[str], list[BillingRequest]]


# =====================
# 解析器注册（显式）
# =====================

TXT_PARSER: Final[RequestParser] = RequestParser(
    format_id=RequestFormat.TXT,
    name="定宽文本（CC + MMDDYYYY + MMDDYYYY）",
    extensions=(".txt",),
    parse=parse_fixed_width,
)

CSV_PARSER: Final[RequestParser] = RequestParser(
    format_id=RequestFormat.CSV,
    name="逗号分隔（账期, M/D/YYYY, M/D/YYYY）",
    extensions=(".csv",),
    parse=parse_delimited,
)

_PARSERS: Final[tuple[RequestParser, ...]] = (TXT_PARSER, CSV_PARSER)


def iter_request_parsers() -> tuple[RequestParser, ...]:
    """返回已注册的解析器列表（不包含 auto）。"""

    return _PARSERS


def get_request_parser(format_id: RequestFormat) -> RequestParser:
    match format_id:
        case RequestFormat.TXT:
            return TXT_PARSER
        case RequestFormat.CSV:
            return CSV_PARSER
        case _:
            raise KeyError(f"unknown request format: {format_id}")


def parse_format_id(value: str | None) -> RequestFormatOrAuto:
    """把用户输入的字符串解析成合法的格式 id；空值视为 auto。"""

    v = str(value or "").strip().lower().lstrip(".")
    if not v or v == "auto":
        return "auto"
    try:
        return RequestFormat(v)
    except ValueError:
        raise ValueError(f"unknown request format: {value!r}") from None


def detect_format(filename: str | PurePath) -> RequestFormat:
    """按扩展名（不区分大小写）识别格式；其余扩展名一律不支持。"""

    suffix = PurePath(filename).suffix.lower()
    for parser in _PARSERS:
        if suffix in parser.extensions:
            return parser.format_id
    raise UnsupportedFileTypeError(details={"filename": str(filename), "extension": suffix})


def parse_content(content: str, format_id: RequestFormat) -> list[BillingRequest]:
    return get_request_parser(format_id).parse(content)


def list_request_formats() -> list[FormatItem]:
    """列出 CLI 用的格式列表（包含 auto）。"""

    formats: list[FormatItem] = [{"id": "auto", "name": "按扩展名自动识别", "extensions": []}]
    for parser in iter_request_parsers():
        formats.append(
            {"id": parser.format_id.value, "name": parser.name, "extensions": list(parser.extensions)}
        )
    return formats
