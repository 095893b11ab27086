import io

import pytest

from dsakit.fibonacci import (
    MODULUS,
    fib_iterative,
    fib_iterative_mod,
    fib_matrix,
    fib_pair,
    fib_recursive,
    main,
    timed,
)


def test_base_cases():
    assert fib_iterative(0) == 0
    assert fib_iterative(1) == 1
    assert fib_recursive(0) == 0
    assert fib_matrix(1) == 1
    assert fib_pair(1) == (1, 0)


def test_known_value():
    assert fib_iterative(10) == 55


@pytest.mark.parametrize("n", range(2, 60))
def test_recurrence(n):
    assert fib_iterative(n) == fib_iterative(n - 1) + fib_iterative(n - 2)


@pytest.mark.parametrize("n", range(0, 22))
def test_recursive_agrees_with_iterative_mod(n):
    assert fib_recursive(n) == fib_iterative_mod(n)


@pytest.mark.parametrize("n", [0, 1, 2, 3, 17, 44, 100, 1000, 12345])
def test_matrix_agrees_with_exact_value(n):
    assert fib_matrix(n) == fib_iterative(n) % MODULUS
    assert fib_iterative_mod(n) == fib_iterative(n) % MODULUS


@pytest.mark.parametrize("n", [1, 2, 5, 30, 500])
def test_pair_holds_consecutive_numbers(n):
    assert fib_pair(n) == (fib_iterative(n), fib_iterative(n - 1))


def test_mod_results_stay_below_modulus():
    assert all(0 <= fib_matrix(n) < MODULUS for n in range(0, 300, 7))


@pytest.mark.parametrize(
    "func", [fib_recursive, fib_iterative, fib_iterative_mod, fib_matrix]
)
def test_negative_n_rejected(func):
    with pytest.raises(ValueError):
        func(-1)


def test_pair_requires_positive_n():
    with pytest.raises(ValueError):
        fib_pair(0)


def test_timed_returns_result_and_elapsed():
    result, elapsed = timed(fib_iterative, 30)
    assert result == fib_iterative(30)
    assert elapsed >= 0.0


def test_main_reports_result(capsys):
    assert main(["--algorithm", "matrix", "44"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == f"r: {fib_matrix(44)}"
    assert lines[1].startswith("elapsed time: ")
    assert lines[1].endswith(" milliseconds")


def test_main_plain_reads_stdin(capsys, monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO("25\n"))
    assert main(["--plain", "--algorithm", "pair"]) == 0
    assert capsys.readouterr().out == f"{fib_iterative(25)}\n"


def test_main_rejects_invalid_n(monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO("abc"))
    with pytest.raises(SystemExit) as info:
        main([])
    assert info.value.code == 2


def test_main_rejects_negative_n():
    with pytest.raises(SystemExit) as info:
        main(["--", "-3"])
    assert info.value.code == 2