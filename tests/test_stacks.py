import io

import pytest

from pushswap.stacks import PushSwap


def make(values):
    out = io.StringIO()
    return PushSwap(values, out), out


def test_sa_swaps_top_two_and_prints():
    machine, out = make([1, 2, 3])
    machine.sa()
    assert machine.a[:2] == [2, 1]
    assert machine.a[2:] == [3]
    assert out.getvalue() == "sa\n"
    assert machine.moves == ["sa"]


def test_sa_twice_is_identity():
    values = [5, 9, 1, 4]
    machine, _ = make(values)
    machine.sa()
    machine.sa()
    assert machine.a == values


def test_ra_moves_top_to_bottom():
    values = [4, 8, 15, 16]
    machine, out = make(values)
    machine.ra()
    assert machine.a == values[1:] + values[:1]
    assert out.getvalue() == "ra\n"


def test_rra_moves_bottom_to_top():
    values = [4, 8, 15, 16]
    machine, out = make(values)
    machine.rra()
    assert machine.a == values[-1:] + values[:-1]
    assert out.getvalue() == "rra\n"


def test_ra_then_rra_is_identity():
    values = [3, 1, 2, 7, 0]
    machine, _ = make(values)
    machine.ra()
    machine.rra()
    assert machine.a == values
    assert machine.moves == ["ra", "rra"]


def test_pb_then_pa_restores():
    values = [3, 1, 2]
    machine, out = make(values)
    machine.pb()
    assert machine.b == values[:1]
    assert machine.a == values[1:]
    machine.pa()
    assert machine.a == values
    assert machine.b == []
    assert out.getvalue() == "pb\npa\n"


def test_pb_stacks_on_top_of_b():
    values = [3, 1, 2]
    machine, _ = make(values)
    machine.pb()
    machine.pb()
    assert machine.b == [values[1], values[0]]


@pytest.mark.parametrize("op", ["sa", "ra", "rra"])
@pytest.mark.parametrize("values", [[], [7]])
def test_short_stack_operations_do_nothing(op, values):
    machine, out = make(values)
    getattr(machine, op)()
    assert machine.a == values
    assert out.getvalue() == ""
    assert machine.moves == []


def test_pa_with_empty_b_does_nothing():
    machine, out = make([1, 2])
    machine.pa()
    assert machine.a == [1, 2]
    assert out.getvalue() == ""


def test_pb_with_empty_a_does_nothing():
    machine, out = make([])
    machine.pb()
    assert machine.b == []
    assert out.getvalue() == ""


def test_values_are_copied():
    values = [2, 1]
    machine, _ = make(values)
    machine.sa()
    assert values == [2, 1]
    assert machine.a == [1, 2]


def test_default_output_is_stdout(capsys):
    machine = PushSwap([2, 1])
    machine.sa()
    assert capsys.readouterr().out == "sa\n"