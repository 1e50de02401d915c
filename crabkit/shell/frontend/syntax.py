"""Intermediate representation of parsed command lines."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Union

from .env import Environment


class ParseError(Exception):
    """The input line cannot be turned into commands."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message


@dataclass
class SimpleString:
    """An unquoted literal."""

    value: str

    def inner(self, env: Environment) -> str:
        return self.value


@dataclass
class SingleQuoted:
    """Text between single quotes, taken verbatim."""

    value: str

    def inner(self, env: Environment) -> str:
        return self.value


@dataclass
class Var:
    """A ``$name`` reference."""

    name: str


@dataclass
class Number:
    """A literal that reads as a number."""

    value: float

    def __str__(self) -> str:
        value = self.value
        if math.isnan(value):
            return "NaN"
        if math.isinf(value):
            return "inf" if value > 0 else "-inf"
        if value.is_integer():
            text = str(int(value))
            return "-0" if text == "0" and math.copysign(1.0, value) < 0 else text
        return format(Decimal(repr(value)), "f")


@dataclass
class DoubleQuoted:
    """Text between double quotes, where variables are expanded."""

    parts: list[Arg] = field(default_factory=list)

    def inner(self, env: Environment) -> str:
        pieces = []
        for part in self.parts:
            if isinstance(part, DoubleQuoted):
                raise ValueError("Recursive DoubleQuoted string met.")
            if isinstance(part, Var):
                pieces.append(env.get(part.name))
            elif isinstance(part, Number):
                pieces.append(str(part))
            else:
                pieces.append(part.inner(env))
        return "".join(pieces)


Arg = Union[SimpleString, SingleQuoted, DoubleQuoted, Var, Number]


@dataclass
class CompoundArg:
    """Adjacent pieces of one word, such as ``$x$x``, joined when compiled."""

    inner: list[Arg] = field(default_factory=list)


@dataclass
class Execute:
    """Run the command named by ``name`` with ``args``."""

    name: CompoundArg
    args: list[CompoundArg] = field(default_factory=list)


@dataclass
class Assign:
    """Set a shell variable; a missing value means the empty string."""

    name: str
    value: CompoundArg | None = None


ShellCommandInterm = Union[Execute, Assign]