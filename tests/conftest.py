from __future__ import annotations

from pathlib import Path

import pytest


@pytest.fixture()
def work_root(tmp_path: Path, monkeypatch) -> Path:
    """カレントディレクトリを一時フォルダに切り替え、`votes.txt` を置く。"""
    monkeypatch.chdir(tmp_path)
    (tmp_path / "votes.txt").write_text("b\na\na\nb\na\na\nb\n", encoding="utf-8")
    return tmp_path
