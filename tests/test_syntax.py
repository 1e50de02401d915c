import pytest

from crabkit.shell.frontend.env import Environment
from crabkit.shell.frontend.syntax import (
    DoubleQuoted,
    Number,
    ParseError,
    SimpleString,
    SingleQuoted,
    Var,
)


def _env(**values):
    env = Environment()
    for key, value in values.items():
        env.set(key, value)
    return env


def test_simple_and_single_quoted_are_verbatim():
    env = _env(x="1")
    assert SimpleString("$x").inner(env) == "$x"
    assert SingleQuoted("$x").inner(env) == "$x"


def test_double_quoted_expands_parts():
    parts = [SimpleString("name"), Var("x"), Var("missing")]
    assert DoubleQuoted(parts).inner(_env(x="val")) == "nameval"


def test_double_quoted_number_part():
    assert DoubleQuoted([Number(3.0)]).inner(Environment()) == "3"


def test_nested_double_quoted_is_rejected():
    with pytest.raises(ValueError):
        DoubleQuoted([DoubleQuoted([])]).inner(Environment())


def test_integral_number_prints_without_fraction():
    assert str(Number(1.0)) == "1"


def test_fractional_number_round_trips():
    for value in (0.5, 2.25, -7.125):
        assert float(str(Number(value))) == value


def test_large_number_has_no_exponent():
    text = str(Number(1e20))
    assert "e" not in text and float(text) == 1e20


def test_parse_error_message():
    assert str(ParseError("bad input")) == "bad input"