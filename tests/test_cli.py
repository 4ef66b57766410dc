import io

import pytest

from cfsolve.cli import main, solve
from cfsolve.numeric import beautiful_matrix, next_round
from cfsolve.text import abbreviate, helpful_maths, petya_and_strings


def test_solve_watermelon():
    assert solve("4A", "8\n") == "YES\n"
    assert solve("4a", "2") == "NO\n"


def test_solve_nearly_lucky():
    assert solve("110A", "40047\n") == "NO"
    assert solve("110A", "4444\n") == "YES"


def test_solve_petya_matches_library():
    assert solve("112A", "aBcD\nabcd\n") == str(petya_and_strings("aBcD", "abcd"))


def test_solve_next_round_matches_library():
    scores = [10, 9, 8, 7, 7, 7, 5, 5]
    data = "8 5\n" + " ".join(map(str, scores)) + "\n"
    assert solve("158A", data) == str(next_round(scores, 5))


def test_solve_beautiful_matrix_matches_library():
    matrix = [[0] * 5 for _ in range(5)]
    matrix[1][4] = 1
    data = "\n".join(" ".join(map(str, row)) for row in matrix)
    assert solve("263A", data) == str(beautiful_matrix(matrix))


def test_solve_long_words_one_per_line():
    words = ["word", "localization", "internationalization", "pneumonoultramicroscopicsilicovolcanoconiosis"]
    data = f"{len(words)}\n" + "\n".join(words) + "\n"
    output = solve("71A", data)
    assert output.endswith("\n")
    assert output.splitlines() == [abbreviate(w) for w in words]


def test_solve_helpful_maths_trailing_space():
    output = solve("339A", "3+2+1\n")
    assert output.endswith(" ")
    assert output.rstrip() == helpful_maths("3+2+1")


def test_solve_anton():
    assert solve("734A", "6\nADAAAA\n") == "Anton"


def test_solve_unknown_problem():
    with pytest.raises(ValueError, match="unknown problem"):
        solve("999Z", "")


def test_solve_truncated_input():
    with pytest.raises(ValueError, match="end of input"):
        solve("158A", "3 2\n1 2")


def test_solve_bad_integer():
    with pytest.raises(ValueError, match="expected an integer"):
        solve("617A", "five")


def test_main_writes_answer(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("8\n"))
    assert main(["4A"]) == 0
    assert capsys.readouterr().out == "YES\n"


def test_main_reports_unknown_problem(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO(""))
    assert main(["999Z"]) == 1
    captured = capsys.readouterr()
    assert "999Z" in captured.err
    assert captured.out == ""