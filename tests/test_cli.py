import io
import random

import pytest

from pushswap.cli import main
from pushswap.stacks import PushSwap


def replay(values, moves):
    machine = PushSwap(values, io.StringIO())
    for move in moves:
        getattr(machine, move)()
    return machine


def test_no_arguments_prints_nothing(capsys):
    assert main([]) == 0
    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err == ""


def test_single_string_argument(capsys):
    assert main(["3 2 1"]) == 0
    captured = capsys.readouterr()
    assert captured.out == "sa\nrra\n"
    assert captured.err == ""


def test_sorted_input_prints_nothing(capsys):
    assert main(["1", "2", "3"]) == 0
    assert capsys.readouterr().out == ""


@pytest.mark.parametrize(
    "argv",
    [["1", "1"], ["   "], ["1", "x"], ["2147483648"], ["", "1"], ["1\t2"], ["+3", "1"]],
)
def test_invalid_input_reports_error(argv, capsys):
    assert main(argv) == 0
    captured = capsys.readouterr()
    assert captured.err == "Error\n"
    assert captured.out == ""


@pytest.mark.parametrize("count", [2, 5, 6, 50])
def test_output_sorts_the_input(count, capsys):
    rng = random.Random(count)
    numbers = rng.sample(range(-1000, 1000), count)
    if numbers == sorted(numbers):
        numbers.reverse()
    assert main([str(n) for n in numbers]) == 0
    moves = capsys.readouterr().out.splitlines()
    machine = replay(numbers, moves)
    assert machine.a == sorted(numbers)
    assert machine.b == []


def test_default_argv_uses_sys_argv(monkeypatch, capsys):
    monkeypatch.setattr("sys.argv", ["push_swap", "2 1"])
    assert main() == 0
    assert capsys.readouterr().out == "sa\n"