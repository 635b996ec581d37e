"""bars：读取并校验账单请求文件（.txt 定宽 / .csv 逗号分隔），以 JSON 输出结果。"""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import Any, TextIO
from uuid import uuid4

from bars.application.services.request_file_service import read_request_file, resolve_format
from bars.domain.errors import DomainError
from bars.logger import current_request_id, reset_request_id, set_request_id, setup_logging
from bars.parsers import list_request_formats
from bars.schemas.common import err, ok
from bars.schemas.requests import build_parse_result
from bars.settings import load_settings


def make_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="bars",
        description="读取并校验账单请求文件，输出规范化后的请求列表。",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    parser.add_argument("path", nargs="?", type=Path, default=None, help="请求文件路径（.txt / .csv）。")
    parser.add_argument(
        "--format",
        dest="format_id",
        choices=["auto", *(item["id"] for item in list_request_formats() if item["id"] != "auto")],
        default="auto",
        help="文件格式；auto 按扩展名识别。",
    )
    parser.add_argument("--indent", type=int, default=2, help="JSON 缩进；0 表示单行输出。")
    parser.add_argument("--list-formats", action="store_true", help="列出支持的格式后退出。")
    return parser


def _dump(obj: Any, stream: TextIO, indent: int) -> None:
    stream.write(json.dumps(obj, ensure_ascii=False, indent=indent or None) + "\n")
    stream.flush()


def main(argv: list[str] | None = None) -> int:
    parser = make_parser()
    args = parser.parse_args(argv)

    setup_logging(load_settings())
    token = set_request_id(uuid4().hex[:16])
    try:
        if args.list_formats:
            _dump(ok(list_request_formats(), request_id=current_request_id()), sys.stdout, args.indent)
            return 0

        if args.path is None:
            parser.error("path is required unless --list-formats is given")

        try:
            requests = read_request_file(args.path, format_id=args.format_id)
        except DomainError as exc:
            payload = err(
                request_id=current_request_id(),
                code=exc.code,
                message=exc.message,
                details=exc.details,
            )
            _dump(payload, sys.stderr, args.indent)
            return 2

        meta = {
            "source": args.path.name,
            "format": resolve_format(args.path, args.format_id).value,
        }
        _dump(ok(build_parse_result(requests), request_id=current_request_id(), meta=meta), sys.stdout, args.indent)
        return 0
    finally:
        reset_request_id(token)


if __name__ == "__main__":
    raise SystemExit(main())
