import io
import sys

import pytest

from introalgos.cli import main
from introalgos.matrix import matrix_multiplication
from introalgos.subarray import find_max_subarray, find_max_subarray_bruteforce


def run(monkeypatch, capsys, command, text):
    monkeypatch.setattr(sys, "stdin", io.StringIO(text))
    code = main([command])
    captured = capsys.readouterr()
    return code, captured.out, captured.err


@pytest.mark.parametrize(
    "command", ["merge-sort", "insertion-sort", "recursive-insertion-sort"]
)
def test_sort_commands(monkeypatch, capsys, command):
    code, out, _ = run(monkeypatch, capsys, command, "5\n3 1 2 5 4\n")
    assert code == 0
    assert out == "1 2 3 4 5 "


@pytest.mark.parametrize(
    "command", ["binary-search", "recursive-binary-search", "linear-search"]
)
def test_search_commands_find_index(monkeypatch, capsys, command):
    code, out, _ = run(monkeypatch, capsys, command, "4\n10 20 30 40\n30\n")
    assert code == 0
    assert out == "2\n"


@pytest.mark.parametrize(
    "command", ["binary-search", "recursive-binary-search", "linear-search"]
)
def test_search_commands_missing_key(monkeypatch, capsys, command):
    code, out, _ = run(monkeypatch, capsys, command, "3\n1 2 3\n7\n")
    assert code == 0
    assert out == "-1\n"


@pytest.mark.parametrize(
    "command, find",
    [
        ("max-subarray", find_max_subarray),
        ("max-subarray-bruteforce", find_max_subarray_bruteforce),
    ],
)
def test_subarray_commands_match_library(monkeypatch, capsys, command, find):
    values = [13, -3, -25, 20, -3, -16, -23, 18, 20, -7, 12, -5, -22, 15, -4, 7]
    text = f"{len(values)}\n" + " ".join(map(str, values)) + "\n"
    code, out, _ = run(monkeypatch, capsys, command, text)
    best = find(values)
    assert code == 0
    assert out == f"{best.low} {best.high} {best.sum}\n"


@pytest.mark.parametrize("command", ["recursive-matrix-multiply", "strassen"])
def test_square_matrix_commands(monkeypatch, capsys, command):
    a = [[1, 2], [3, 4]]
    b = [[5, 6], [7, 8]]
    text = "2\n1 2\n3 4\n5 6\n7 8\n"
    code, out, _ = run(monkeypatch, capsys, command, text)
    expected = "".join(
        "".join(f"{v} " for v in row) + "\n" for row in matrix_multiplication(a, b)
    )
    assert code == 0
    assert out == expected


def test_rectangular_matrix_command(monkeypatch, capsys):
    text = "2 3 3 1\n1 2 3\n4 5 6\n1\n0\n0\n"
    code, out, _ = run(monkeypatch, capsys, "matrix-multiply", text)
    assert code == 0
    assert out == "1 \n4 \n"


def test_truncated_input_is_an_error(monkeypatch, capsys):
    code, out, err = run(monkeypatch, capsys, "merge-sort", "3\n1 2\n")
    assert code == 1
    assert out == ""
    assert "end of input" in err


def test_non_integer_input_is_an_error(monkeypatch, capsys):
    code, _, err = run(monkeypatch, capsys, "merge-sort", "2\n1 x\n")
    assert code == 1
    assert "'x'" in err


def test_incompatible_matrices_are_an_error(monkeypatch, capsys):
    code, _, err = run(monkeypatch, capsys, "matrix-multiply", "1 2 1 2\n1 2\n3 4\n")
    assert code == 1
    assert "cannot multiply" in err


def test_empty_subarray_is_an_error(monkeypatch, capsys):
    code, _, err = run(monkeypatch, capsys, "max-subarray", "0\n")
    assert code == 1
    assert "empty" in err


def test_unknown_command_exits(monkeypatch):
    monkeypatch.setattr(sys, "stdin", io.StringIO(""))
    with pytest.raises(SystemExit) as info:
        main(["no-such-command"])
    assert info.value.code == 2