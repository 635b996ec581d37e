from __future__ import annotations

"""两种读取器共用的切行逻辑。"""

import re
from collections.abc import Callable, Iterator
from typing import TypeVar

from bars.domain.errors import EmptyInputError

_LINE_BREAK_RE = re.compile(r"\r?\n")

T = TypeVar("T")


def split_request_lines(content: str) -> list[str]:
    """整体去首尾空白后按 `\\n` / `\\r\\n` 切行；内容为空时抛 EmptyInputError。"""

    text = str(content or "").strip()
    if not text:
        raise EmptyInputError()
    return _LINE_BREAK_RE.split(text)


def scan_lines(content: str, parse_line: Callable[[str, int], T]) -> Iterator[T]:
    """逐行（行号从 1 开始）调用 parse_line；第一个异常直接向上抛出。"""

    for row, line in enumerate(split_request_lines(content), 1):
        yield parse_line(line, row)
