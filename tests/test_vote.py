"""vote (過半数判定) のテスト。"""

import itertools
import random
from typing import Union

from majority.vote import NoWinner, Result, Winner, find_majority


def test_no_votes_has_no_winner() -> None:
    assert find_majority([]) == NoWinner()


def test_one_vote_is_the_winner() -> None:
    assert find_majority(["a"]) == Winner("a")


def test_tied_votes_has_no_winner() -> None:
    assert find_majority(["a", "b"]) == NoWinner()


def test_winner_first_vote() -> None:
    assert find_majority(["a", "a", "b"]) == Winner("a")


def test_winner_last_vote() -> None:
    # 0票になった直後に候補を入れ替えるとき、その票を1票として数える
    assert find_majority(["b", "a", "a"]) == Winner("a")


def test_many_votes() -> None:
    assert find_majority(["b", "a", "a", "b", "a", "a", "b"]) == Winner("a")


def test_many_votes_no_greater_than_half_winner() -> None:
    assert find_majority(["b", "a", "b", "a", "a", "c", "c"]) == NoWinner()


def test_exact_half_is_not_a_majority() -> None:
    assert find_majority(["a", "b", "a", "b"]) == NoWinner()
    assert find_majority(["a", "a", "b", "b", "c", "a"]) == NoWinner()


def test_plurality_leader_is_rejected() -> None:
    # 1パス目で "c" が候補に残るが、数え直しで落ちる
    assert find_majority(["a", "a", "b", "b", "c"]) == NoWinner()


def test_alternating_majority() -> None:
    assert find_majority(["a", "b", "a", "c", "a"]) == Winner("a")
    assert find_majority(["b", "a", "c", "a", "a"]) == Winner("a")


def test_non_string_votes() -> None:
    assert find_majority([1, 2, 1]) == Winner(1)
    assert find_majority((None, None, "x")) == Winner(None)


def test_deterministic() -> None:
    votes = ["x", "y", "x", "z", "x"]
    assert find_majority(votes) == find_majority(votes)
    assert votes == ["x", "y", "x", "z", "x"]


def test_order_independent_all_permutations() -> None:
    for votes, expected in [
        (["a", "a", "a", "b", "c"], Winner("a")),
        (["a", "a", "b", "b", "c"], NoWinner()),
        (["a", "a", "b", "b", "c", "a"], NoWinner()),
        (["a", "b", "a", "b", "a", "c", "a"], Winner("a")),
    ]:
        for perm in set(itertools.permutations(votes)):
            assert find_majority(list(perm)) == expected, perm


def test_matches_brute_force_count() -> None:
    rng = random.Random(4219)
    for _ in range(300):
        n = rng.randint(0, 12)
        votes = [rng.choice("abc") for _ in range(n)]
        counts = {v: votes.count(v) for v in set(votes)}
        majority = [v for v, c in counts.items() if c > n // 2]
        expected = Winner(majority[0]) if majority else NoWinner()
        assert find_majority(votes) == expected, votes


def test_result_keeps_vote_type() -> None:
    assert Result[str] == Union[Winner[str], NoWinner]
    assert Result[int] != Result[str]
