"""config: 実行設定。

設定ファイル: `majority.toml`（デフォルト）。無ければ既定値で動く。

```toml
[ballot]
path = "votes.txt"
encoding = "utf-8"
skip_blank = false
strip = false

[log]
level = "INFO"
dir = ".majority/logs"
```
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

try:
    import tomllib
except ModuleNotFoundError:  # Python < 3.11
    import tomli as tomllib  # type: ignore[no-redef]

DEFAULT_CONFIG_PATH = Path("majority.toml")


class ConfigError(Exception):
    """設定ファイルが壊れているときに送出する。"""


@dataclass
class BallotConfig:
    path: str = "votes.txt"
    encoding: str = "utf-8"
    skip_blank: bool = False  # 空行を票として数えない
    strip: bool = False  # 行頭/行末の空白を落とす


@dataclass
class LogConfig:
    level: str = "INFO"
    dir: str = ".majority/logs"


@dataclass
class MajorityConfig:
    ballot: BallotConfig = field(default_factory=BallotConfig)
    log: LogConfig = field(default_factory=LogConfig)


def _section(raw: dict, name: str, path: Path) -> dict:
    section = raw.get(name, {})
    if not isinstance(section, dict):
        raise ConfigError(f"設定ファイルが不正です: {path} ({name} はテーブルで指定してください)")
    return section


def load_config(path: Path | None = None) -> MajorityConfig:
    if path is None:
        path = DEFAULT_CONFIG_PATH
    if not path.exists():
        return MajorityConfig()

    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigError(f"設定ファイルを読めません: {path} ({type(e).__name__})") from e

    try:
        raw = tomllib.loads(text)
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"設定ファイルが不正です: {path} ({e})") from e

    ballot = _section(raw, "ballot", path)
    log = _section(raw, "log", path)

    return MajorityConfig(
        ballot=BallotConfig(
            path=str(ballot.get("path", "votes.txt")),
            encoding=str(ballot.get("encoding", "utf-8")),
            skip_blank=bool(ballot.get("skip_blank", False)),
            strip=bool(ballot.get("strip", False)),
        ),
        log=LogConfig(
            level=str(log.get("level", "INFO")),
            dir=str(log.get("dir", ".majority/logs")),
        ),
    )
