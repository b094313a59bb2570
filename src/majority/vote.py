"""vote: 過半数（majority）判定。

Boyer-Moore の多数決アルゴリズムで、票の列に過半数を取った候補がいるかを調べる。

- 1パス目: 候補の選出（打ち消し合いで生き残った票が候補になる）
- 2パス目: 候補の得票を数え直し、`len // 2` を超えていれば勝者

計算量は O(n)、追加メモリは O(1)。過半数なしは例外ではなく `NoWinner` で返す。
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from itertools import islice
from typing import Generic, TypeVar, Union

log = logging.getLogger(__name__)

V = TypeVar("V")


@dataclass(frozen=True)
class Winner(Generic[V]):
    vote: V


@dataclass(frozen=True)
class NoWinner:
    pass


Result = Union[Winner[V], NoWinner]


def find_majority(ballot: Sequence[V]) -> Result[V]:
    """票の列から過半数の候補を返す。いなければ NoWinner。"""
    if not ballot:
        return NoWinner()

    candidate = ballot[0]
    count = 1
    for vote in islice(ballot, 1, None):
        if vote == candidate:
            count += 1
        elif count == 0:
            # 新しい候補はこの1票を持った状態から始める
            candidate = vote
            count = 1
        else:
            count -= 1

    threshold = len(ballot) // 2
    final_count = sum(1 for vote in ballot if vote == candidate)
    log.debug(
        "candidate=%r count=%d threshold=%d total=%d",
        candidate,
        final_count,
        threshold,
        len(ballot),
    )

    if final_count > threshold:
        return Winner(candidate)
    return NoWinner()
