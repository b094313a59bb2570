"""投票ファイルの読み込み。

1行=1票。`votes.txt` のような素朴なテキストを想定する。
"""

from __future__ import annotations

import logging
from pathlib import Path

log = logging.getLogger(__name__)


class BallotError(Exception):
    """投票ファイルが読めないときに送出する。"""


def parse_ballot(text: str, *, skip_blank: bool = False, strip: bool = False) -> list[str]:
    """1行=1票に分ける。

    区切りは `\\n` のみ（直前の `\\r` は落とす）。`\\r` 単体や改ページ等は票の一部として残す。
    末尾の改行の後ろに空の票は作らない。
    """
    pieces = text.split("\n")
    last = pieces.pop()
    lines = [p.removesuffix("\r") for p in pieces]
    if last:
        lines.append(last)

    votes: list[str] = []
    for line in lines:
        if strip:
            line = line.strip()
        if skip_blank and not line.strip():
            continue
        votes.append(line)
    return votes


def load_ballot(
    path: Path,
    *,
    encoding: str = "utf-8",
    skip_blank: bool = False,
    strip: bool = False,
) -> list[str]:
    if not path.exists():
        raise BallotError(f"投票ファイルが見つかりません: {path}")

    try:
        # read_text は改行を変換するので bytes から decode する
        text = path.read_bytes().decode(encoding)
    except (OSError, UnicodeDecodeError, LookupError) as e:
        raise BallotError(f"投票ファイルを読めません: {path} ({type(e).__name__})") from e

    votes = parse_ballot(text, skip_blank=skip_blank, strip=strip)
    log.info("loaded %d votes from %s", len(votes), path)
    return votes
