from __future__ import annotations

import os
from dataclasses import dataclass


def _env(key: str, default: str | None = None, *, legacy: tuple[str, ...] = ()) -> str | None:
    """
    读取环境变量，支持可选的旧名称回退。

    空字符串视为“未设置”，避免用户 export 了变量却忘记赋值时出现意外行为。
    """
    for k in (key, *legacy):
        v = os.environ.get(k)
        if v is not None and str(v).strip() != "":
            return v
    return default


def _parse_bool(v: str | None, default: bool) -> bool:
    if v is None:
        return default
    s = str(v).strip().lower()
    if s in {"1", "true", "yes", "y", "on"}:
        return True
    if s in {"0", "false", "no", "n", "off"}:
        return False
    return default


def _parse_int(v: str | None, default: int) -> int:
    if v is None:
        return default
    try:
        return int(str(v).strip())
    except ValueError:
        return default


@dataclass(frozen=True)
class Settings:
    log_level: str
    log_json: bool
    log_path: str | None
    log_rotation_mb: int
    log_retention_days: int
    max_input_bytes: int


def load_settings() -> Settings:
    log_level = (_env("BARS_LOG_LEVEL", "INFO", legacy=("LOG_LEVEL",)) or "INFO").upper()
    log_json = _parse_bool(_env("BARS_LOG_JSON", None), False)
    log_path = _env("BARS_LOG_PATH", None)

    log_rotation_mb = _parse_int(_env("BARS_LOG_ROTATION_MB", "10"), 10)
    if log_rotation_mb <= 0:
        log_rotation_mb = 10
    log_retention_days = _parse_int(_env("BARS_LOG_RETENTION_DAYS", "14"), 14)
    if log_retention_days <= 0:
        log_retention_days = 14

    max_input_mb = _parse_int(_env("BARS_MAX_INPUT_MB", "1"), 1)
    if max_input_mb <= 0:
        # “0” 等于拒绝所有文件；退回保守的默认值。
        max_input_mb = 1
    max_input_bytes = max_input_mb * 1024 * 1024

    return Settings(
        log_level=log_level,
        log_json=log_json,
        log_path=log_path,
        log_rotation_mb=log_rotation_mb,
        log_retention_days=log_retention_days,
        max_input_bytes=max_input_bytes,
    )
