from __future__ import annotations

from pathlib import Path

from bars.domain.enums import RequestFormat
from bars.domain.errors import (
    DomainError,
    InputTooLargeError,
    MissingInputError,
    RowError,
    UnreadableInputError,
)
from bars.domain.models.billing_request import BillingRequest
from bars.logger import get_logger
from bars.parsers import detect_format, parse_content, parse_format_id
from bars.settings import Settings, load_settings


def resolve_format(path: Path, format_id: str | RequestFormat = "auto") -> RequestFormat:
    chosen = parse_format_id(format_id)
    if chosen == "auto":
        return detect_format(path.name)
    return chosen


def _require_file(path: Path) -> None:
    if not path.exists() or not path.is_file():
        raise MissingInputError(details={"path": str(path)})


def read_request_text(path: Path, *, settings: Settings | None = None) -> str:
    """读取并解码请求文件；大小上限在解析前检查。"""

    config = settings or load_settings()
    _require_file(path)

    size = path.stat().st_size
    if size > config.max_input_bytes:
        raise InputTooLargeError(
            config.max_input_bytes,
            details={"path": str(path), "size": size},
        )

    raw = path.read_bytes()
    try:
        # utf-8-sig 会去掉 BOM，否则首行会多出一个字符。
        return raw.decode("utf-8-sig")
    except UnicodeDecodeError as exc:
        raise UnreadableInputError(details={"path": str(path), "position": exc.start}) from exc


def read_request_file(
    path: str | Path,
    *,
    format_id: str | RequestFormat = "auto",
    settings: Settings | None = None,
) -> list[BillingRequest]:
    file_path = Path(path)
    logger = get_logger().bind(source=file_path.name)

    try:
        _require_file(file_path)
        fmt = resolve_format(file_path, format_id)
        logger = logger.bind(format=fmt.value)
        content = read_request_text(file_path, settings=settings)
        requests = parse_content(content, fmt)
    except RowError as exc:
        logger.warning(f"request file rejected code={exc.code} row={exc.row}: {exc.message}")
        raise
    except DomainError as exc:
        logger.warning(f"request file rejected code={exc.code}: {exc.message}")
        raise

    logger.info(f"Successfully processed Request File count={len(requests)}")
    return requests


def read_txt(path: str | Path, *, settings: Settings | None = None) -> list[BillingRequest]:
    return read_request_file(path, format_id=RequestFormat.TXT, settings=settings)


def read_csv(path: str | Path, *, settings: Settings | None = None) -> list[BillingRequest]:
    return read_request_file(path, format_id=RequestFormat.CSV, settings=settings)
