"""Command line front end: read a problem's input from stdin, print its answer."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable

from cfsolve import numeric
from cfsolve import text as strings


class _Tokens:
    """Whitespace-separated tokens of a problem input, read in order."""

    def __init__(self, data: str) -> None:
        self._tokens = iter(data.split())

    def word(self) -> str:
        try:
            return next(self._tokens)
        except StopIteration:
            raise ValueError("unexpected end of input") from None

    def integer(self) -> int:
        token = self.word()
        try:
            return int(token)
        except ValueError:
            raise ValueError(f"expected an integer, got {token!r}") from None

    def integers(self, count: int) -> list[int]:
        return [self.integer() for _ in range(count)]

    def words(self, count: int) -> list[str]:
        return [self.word() for _ in range(count)]


def _watermelon(tokens: _Tokens) -> str:
    if numeric.watermelon(tokens.integer()):
        return "YES\n"
    return "NO\n"


def _translation(tokens: _Tokens) -> str:
    original = tokens.word()
    translated = tokens.word()
    if strings.translation(original, translated):
        return "YES"
    return "NO"


def _nearly_lucky(tokens: _Tokens) -> str:
    if numeric.nearly_lucky(tokens.integer()):
        return "YES"
    return "NO"


def _next_round(tokens: _Tokens) -> str:
    n = tokens.integer()
    k = tokens.integer()
    return str(numeric.next_round(tokens.integers(n), k))


def _team(tokens: _Tokens) -> str:
    n = tokens.integer()
    return str(numeric.team([tuple(tokens.integers(3)) for _ in range(n)]))


def _beautiful_matrix(tokens: _Tokens) -> str:
    size = numeric.MATRIX_SIZE
    return str(numeric.beautiful_matrix([tokens.integers(size) for _ in range(size)]))


def _stones(tokens: _Tokens) -> str:
    tokens.integer()
    return str(strings.stones_on_the_table(tokens.word()))


def _bits(tokens: _Tokens) -> str:
    n = tokens.integer()
    return str(numeric.bits_plus_plus(tokens.words(n)))


def _fence(tokens: _Tokens) -> str:
    n = tokens.integer()
    h = tokens.integer()
    return str(numeric.vanya_and_fence(tokens.integers(n), h))


def _long_words(tokens: _Tokens) -> str:
    n = tokens.integer()
    return "".join(f"{strings.abbreviate(word)}\n" for word in tokens.words(n))


def _anton(tokens: _Tokens) -> str:
    tokens.integer()
    return strings.anton_and_danik(tokens.word())


_SOLVERS: dict[str, Callable[[_Tokens], str]] = {
    "4A": _watermelon,
    "41A": _translation,
    "50A": lambda t: str(numeric.domino_piling(t.integer(), t.integer())),
    "59A": lambda t: strings.word_case(t.word()),
    "71A": _long_words,
    "110A": _nearly_lucky,
    "112A": lambda t: str(strings.petya_and_strings(t.word(), t.word())),
    "158A": _next_round,
    "231A": _team,
    "236A": lambda t: strings.boy_or_girl(t.word()),
    "263A": _beautiful_matrix,
    "266A": _stones,
    "281A": lambda t: strings.capitalize_word(t.word()),
    "282A": _bits,
    "339A": lambda t: strings.helpful_maths(t.word()) + " ",
    "546A": lambda t: str(
        numeric.soldier_and_bananas(t.integer(), t.integer(), t.integer())
    ),
    "617A": lambda t: str(numeric.elephant(t.integer())),
    "667A": _fence,
    "734A": _anton,
    "791A": lambda t: str(numeric.bear_and_big_brother(t.integer(), t.integer())),
    "977A": lambda t: str(numeric.wrong_subtraction(t.integer(), t.integer())),
}


def solve(problem: str, text: str) -> str:
    """Answer ``problem`` (such as ``"4A"``) for the judge-format input ``text``."""
    try:
        solver = _SOLVERS[problem.strip().upper()]
    except KeyError:
        raise ValueError(f"unknown problem {problem!r}") from None
    return solver(_Tokens(text))


def main(argv: list[str] | None = None) -> int:
    """Run the solver for one problem on standard input."""
    parser = argparse.ArgumentParser(
        prog="cfsolve",
        description="Solve a problem, reading its input from standard input.",
    )
    parser.add_argument(
        "problem", help=f"problem identifier, one of: {', '.join(_SOLVERS)}"
    )
    args = parser.parse_args(argv)
    try:
        output = solve(args.problem, sys.stdin.read())
    except ValueError as exc:
        print(f"cfsolve: {exc}", file=sys.stderr)
        return 1
    sys.stdout.write(output)
    return 0


if __name__ == "__main__":
    sys.exit(main())