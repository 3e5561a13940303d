import io

import pytest

from schoolkit.mathbits import fibonacci, integrate, main, second_number, to_binary


def test_to_binary_example():
    assert to_binary(5) == 101


@pytest.mark.parametrize("number", range(1, 200))
def test_to_binary_round_trip(number):
    assert int(str(to_binary(number)), 2) == number


@pytest.mark.parametrize("number", [0, -7])
def test_to_binary_non_positive_is_zero(number):
    assert to_binary(number) == 0


def test_fibonacci_starts_with_zero_and_one():
    terms = list(fibonacci(2))
    assert terms == [0, 1]


def test_fibonacci_recurrence_and_length():
    terms = list(fibonacci(30))
    assert len(terms) == 30
    for earlier, middle, later in zip(terms, terms[1:], terms[2:]):
        assert later == earlier + middle


def test_fibonacci_zero_count_is_empty():
    assert list(fibonacci(0)) == []


def test_integrate_square_close_to_exact():
    result = integrate(lambda x: x * x, 2, 4, 10000)
    assert result == pytest.approx(56 / 3, abs=1e-2)


def test_integrate_is_linear():
    single = integrate(lambda x: x * x, 2, 4, 500)
    double = integrate(lambda x: 2 * x * x, 2, 4, 500)
    assert double == pytest.approx(2 * single)


def test_integrate_rejects_zero_amount():
    with pytest.raises(ValueError):
        integrate(lambda x: x, 0, 1, 0)


@pytest.mark.parametrize("r1, s", [(11, 15), (4, 3), (-1000, 1000)])
def test_second_number_gives_mean(r1, s):
    assert (r1 + second_number(r1, s)) / 2 == s


def test_main_binary(capsys):
    assert main(["binary", "5"]) == 0
    assert "Your binary number is: 101" in capsys.readouterr().out


def test_main_fibonacci(capsys):
    assert main(["fibonacci", "8"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == "Fibonacci series:"
    assert [int(line) for line in lines[1:]] == list(fibonacci(8))


def test_main_integral(capsys):
    assert main(["integral", "--amount", "1000"]) == 0
    printed = float(capsys.readouterr().out.strip())
    assert printed == integrate(lambda x: x * x, 2, 4, 1000)


def test_main_r2_reads_stdin(capsys, monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO("11\n15\n"))
    assert main(["r2"]) == 0
    assert int(capsys.readouterr().out.strip()) == second_number(11, 15)


def test_main_r2_missing_input(capsys, monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO("11\n"))
    assert main(["r2"]) == 1
    assert capsys.readouterr().err