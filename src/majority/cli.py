"""majority CLI エントリポイント。"""

from __future__ import annotations

import json
import logging
from pathlib import Path

import typer
from rich.console import Console

from majority.ballot import BallotError, load_ballot
from majority.config import ConfigError, MajorityConfig, load_config
from majority.logging_setup import setup_logging
from majority.report import render_report, result_to_dict
from majority.vote import find_majority

APP_HELP = "🗳️ majority: 票の列に過半数の候補がいるかを判定するCLI"

app = typer.Typer(add_completion=False, help=APP_HELP)
console = Console()
log = logging.getLogger(__name__)


def _print_result(*, source: str, votes: list[str], as_json: bool) -> None:
    result = find_majority(votes)
    if as_json:
        console.print_json(json.dumps(result_to_dict(votes, result), ensure_ascii=False))
        return
    console.print(
        render_report(source=source, votes=votes, result=result),
        markup=False,
        highlight=False,
        soft_wrap=True,
    )


def _load_config_and_logging(config: Path, log_level: str | None) -> MajorityConfig:
    try:
        cfg = load_config(config)
    except ConfigError as e:
        console.print(f"❌ {e}", style="red", markup=False)
        raise typer.Exit(code=1)

    setup_logging(root=Path("."), level=log_level or cfg.log.level, log_dir=cfg.log.dir)
    return cfg


@app.command()
def run(
    path: Path | None = typer.Argument(
        None,
        help="投票ファイルへのパス（1行=1票、省略時は設定の ballot.path）",
    ),
    config: Path = typer.Option(
        Path("majority.toml"), "--config", help="設定ファイル"
    ),
    skip_blank: bool = typer.Option(
        False, "--skip-blank", help="空行を票として数えない"
    ),
    as_json: bool = typer.Option(False, "--json", help="結果をJSONで出力"),
    log_level: str | None = typer.Option(
        None, "--log-level", help="ログレベル (例: DEBUG / INFO)"
    ),
) -> None:
    """投票ファイルを読み込んで過半数の候補を表示する。"""
    cfg = _load_config_and_logging(config, log_level)

    ballot_path = path if path is not None else Path(cfg.ballot.path)
    try:
        votes = load_ballot(
            ballot_path,
            encoding=cfg.ballot.encoding,
            skip_blank=skip_blank or cfg.ballot.skip_blank,
            strip=cfg.ballot.strip,
        )
    except BallotError as e:
        log.error("%s", e)
        console.print(f"❌ {e}", style="red", markup=False)
        raise typer.Exit(code=1)

    _print_result(source=str(ballot_path), votes=votes, as_json=as_json)


@app.command()
def check(
    votes: list[str] = typer.Argument(..., help="票（スペース区切り）"),
    config: Path = typer.Option(
        Path("majority.toml"), "--config", help="設定ファイル（ログ設定のみ使う）"
    ),
    as_json: bool = typer.Option(False, "--json", help="結果をJSONで出力"),
    log_level: str | None = typer.Option(
        None, "--log-level", help="ログレベル (例: DEBUG / INFO)"
    ),
) -> None:
    """引数で渡した票をその場で判定する。"""
    _load_config_and_logging(config, log_level)
    log.info("checking %d votes from arguments", len(votes))
    _print_result(source="arguments", votes=votes, as_json=as_json)
