"""logging の初期化。

- 詳細ログ: `.majority/logs/majority.log`
- 候補の選出や数え直しの結果（DEBUG）を後から追えるようにする
"""

from __future__ import annotations

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def setup_logging(*, root: Path, level: str = "INFO", log_dir: str = ".majority/logs") -> Path:
    """root logger にファイル出力を1回だけ追加し、ログファイルのパスを返す。"""
    configured: Path | None = getattr(setup_logging, "_log_path", None)
    if configured is not None:
        return configured

    log_path = root / log_dir / "majority.log"
    log_path.parent.mkdir(parents=True, exist_ok=True)

    handler = RotatingFileHandler(log_path, maxBytes=2_000_000, backupCount=3, encoding="utf-8")
    handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))

    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, level.upper(), logging.INFO))
    root_logger.addHandler(handler)

    setup_logging._log_path = log_path  # type: ignore[attr-defined]
    return log_path
