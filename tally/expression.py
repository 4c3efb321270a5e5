"""Arithmetic expressions over commodity amounts.

An expression is a tree of three kinds of nodes:
- `Literal` holds a concrete amount,
- `Identifier` refers to an amount by name in evaluation context,
- `Infix` applies a binary operator to two subexpressions.

Operators are looked up by symbol in an `OperatorTable`, the default table
knows only addition and multiplication.
"""

import operator
from collections import UserDict
from dataclasses import dataclass
from typing import Callable, Iterable, Mapping

from .amount import Amount
from .base import Numeric, UnknownIdentifier, UnknownOperator

BinaryOp = Callable[[Numeric, Numeric], Numeric]
Context = Mapping[str, Amount]

KNOWN_OPERATORS: dict[str, BinaryOp] = {
    "+": operator.add,
    "-": operator.sub,
    "*": operator.mul,
    "/": operator.truediv,
}
DEFAULT_SYMBOLS = ("+", "*")


class OperatorTable(UserDict[str, BinaryOp]):
    """Mapping of operator symbols to binary functions."""

    @classmethod
    def default(cls) -> "OperatorTable":
        return cls.from_symbols(DEFAULT_SYMBOLS)

    @classmethod
    def from_symbols(cls, symbols: Iterable[str]) -> "OperatorTable":
        """Make table with operators picked from known ones by symbol."""
        table = cls()
        for symbol in symbols:
            if symbol not in KNOWN_OPERATORS:
                raise UnknownOperator(symbol)
            table[symbol] = KNOWN_OPERATORS[symbol]
        return table

    def register(self, symbol: str, f: BinaryOp):
        self[symbol] = f
        return self

    def lookup(self, symbol: str) -> BinaryOp:
        try:
            return self[symbol]
        except KeyError:
            raise UnknownOperator(symbol) from None


class Node:
    """Expression tree node."""

    def evaluate(
        self, context: Context, operators: OperatorTable | None = None
    ) -> Amount:
        return evaluate(self, context, operators)  # type: ignore


@dataclass(frozen=True)
class Literal(Node):
    amount: Amount


@dataclass(frozen=True)
class Identifier(Node):
    name: str


@dataclass(frozen=True)
class Infix(Node):
    symbol: str
    left: "Expression"
    right: "Expression"

    @classmethod
    def add(cls, left: "Expression", right: "Expression") -> "Infix":
        return cls("+", left, right)

    @classmethod
    def mul(cls, left: "Expression", right: "Expression") -> "Infix":
        return cls("*", left, right)


Expression = Literal | Identifier | Infix


def evaluate(
    expression: Expression, context: Context, operators: OperatorTable | None = None
) -> Amount:
    """Evaluate *expression* to an amount using names from *context*.

    Left operand is evaluated before the right one. Raises `UnknownIdentifier`,
    `UnknownOperator` or `CommodityMismatch`.
    """
    if operators is None:
        operators = OperatorTable.default()
    match expression:
        case Literal(amount):
            return amount
        case Identifier(name):
            try:
                return context[name]
            except KeyError:
                raise UnknownIdentifier(name) from None
        case Infix(symbol, left, right):
            a = evaluate(left, context, operators)
            b = evaluate(right, context, operators)
            return a.combine(b, operators.lookup(symbol))
    raise TypeError(f"Not an expression: {expression!r}")
