"""Ortam değişkenlerinden okunan çalışma ayarları."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional

DEFAULT_PORT = 4000
DEFAULT_HOST = "127.0.0.1"
DEFAULT_LOG_LEVEL = "INFO"


def _optional_int(env: Mapping[str, str], key: str) -> Optional[int]:
    raw = env.get(key, "").strip()
    if not raw:
        return None
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{key} tam sayı olmalı: {raw!r}") from None


@dataclass
class DashboardSettings:
    port: int = DEFAULT_PORT
    host: str = DEFAULT_HOST
    log_level: str = DEFAULT_LOG_LEVEL
    kpi_seed: Optional[int] = None

    @classmethod
    def from_env(cls, env: Optional[Mapping[str, str]] = None) -> "DashboardSettings":
        """PORT, HOST, LOG_LEVEL ve KPI_SEED değişkenlerini okur; eksikse varsayılan kullanılır."""
        env = os.environ if env is None else env
        port = _optional_int(env, "PORT")
        return cls(
            port=DEFAULT_PORT if port is None else port,
            host=env.get("HOST") or DEFAULT_HOST,
            log_level=(env.get("LOG_LEVEL") or DEFAULT_LOG_LEVEL).upper(),
            kpi_seed=_optional_int(env, "KPI_SEED"),
        )
