"""Solutions to the number-driven problems of the collection."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from itertools import takewhile

LUCKY_DIGITS = frozenset("47")
MATRIX_SIZE = 5
ELEPHANT_MAX_STEP = 5


def nearly_lucky(n: int) -> bool:
    """110A: whether the number of lucky digits of ``n`` ends in 4 or 7."""
    if n <= 0:
        return False
    count = sum(digit in LUCKY_DIGITS for digit in str(n))
    return count % 10 in (4, 7)


def next_round(scores: Iterable[int], k: int) -> int:
    """158A: how many leading participants advance past place ``k``.

    Participants advance while their score is positive and at least the
    score of the ``k``-th place finisher.
    """
    ranked = list(scores)
    if not 1 <= k <= len(ranked):
        raise ValueError(f"place {k} is outside 1..{len(ranked)}")
    threshold = ranked[k - 1]
    advancing = takewhile(lambda score: score >= threshold and score > 0, ranked)
    return sum(1 for _ in advancing)


def team(problems: Iterable[Sequence[int]]) -> int:
    """231A: count the problems that at least two of the three friends can solve."""
    solved = 0
    for votes in problems:
        if len(votes) != 3:
            raise ValueError(f"expected three votes per problem, got {len(votes)}")
        if sum(votes) >= 2:
            solved += 1
    return solved


def beautiful_matrix(matrix: Iterable[Iterable[int]]) -> int:
    """263A: moves needed to bring the single one to the centre of a 5x5 matrix.

    If several cells hold a one, the last in row-major order counts.
    """
    rows = [list(row) for row in matrix]
    if len(rows) != MATRIX_SIZE or any(len(row) != MATRIX_SIZE for row in rows):
        raise ValueError(f"matrix must be {MATRIX_SIZE}x{MATRIX_SIZE}")
    ones = [
        (r, c)
        for r, row in enumerate(rows)
        for c, value in enumerate(row)
        if value == 1
    ]
    if not ones:
        raise ValueError("matrix holds no one")
    row, col = ones[-1]
    centre = MATRIX_SIZE // 2
    return abs(row - centre) + abs(col - centre)


def bits_plus_plus(statements: Iterable[str]) -> int:
    """282A: final value of x after running the Bit++ statements from zero."""
    return sum(
        1 if "+" in (statement[:1], statement[2:3]) else -1
        for statement in statements
    )


def watermelon(w: int) -> bool:
    """4A: whether a watermelon of weight ``w`` splits into two even parts."""
    return w % 2 == 0 and w > 2


def domino_piling(m: int, n: int) -> int:
    """50A: the most 2x1 dominoes that fit on an ``m`` by ``n`` board."""
    cells = m * n
    return cells // 2 if cells >= 0 else -(-cells // 2)


def soldier_and_bananas(k: int, n: int, w: int) -> int:
    """546A: dollars to borrow to buy ``w`` bananas, the i-th costing ``i*k``."""
    total = (w + 1) * w // 2 * k
    return max(total - n, 0)


def elephant(x: int) -> int:
    """617A: fewest steps of length 1 to 5 needed to walk to position ``x``."""
    steps = 0
    for stride in range(ELEPHANT_MAX_STEP, 0, -1):
        if x <= 0:
            break
        count, x = divmod(x, stride)
        steps += count
    return steps


def vanya_and_fence(heights: Iterable[int], h: int) -> int:
    """667A: road width for friends of the given heights along a fence of height ``h``."""
    return sum(1 if height <= h else 2 for height in heights)


def bear_and_big_brother(a: int, b: int) -> int:
    """791A: years until Limak (tripling) outweighs Bob (doubling)."""
    if a <= 0 and a <= b:
        raise ValueError("Limak's weight must be positive for him to catch up")
    years = 0
    while a <= b:
        a *= 3
        b *= 2
        years += 1
    return years


def wrong_subtraction(n: int, k: int) -> int:
    """977A: result of Tanya subtracting one from ``n``, ``k`` times."""
    for _ in range(k):
        n = n - 1 if n % 10 else n // 10
    return n