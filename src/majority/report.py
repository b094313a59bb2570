"""結果の整形。コンソール表示用のテキストとJSON用のdictを作る。"""

from __future__ import annotations

from majority.vote import Result, Winner

NO_WINNER = "No Winner"


def render_report(*, source: str, votes: list[str], result: Result[str]) -> str:
    winner = result.vote if isinstance(result, Winner) else NO_WINNER
    lines = [
        f"Running Boyer-Moore voting algorithm on votes in {source}",
        f"Votes: {' '.join(votes)}",
        f"Vote Winner: {winner}",
    ]
    return "\n".join(lines)


def result_to_dict(votes: list[str], result: Result[str]) -> dict:
    if isinstance(result, Winner):
        winner = result.vote
        count = sum(1 for v in votes if v == winner)
    else:
        winner = None
        count = 0
    return {
        "total": len(votes),
        "threshold": len(votes) // 2,
        "winner": winner,
        "count": count,
    }
