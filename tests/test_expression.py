import operator

import pytest

from tally import (
    Amount,
    CommodityMismatch,
    Identifier,
    Infix,
    Literal,
    OperatorTable,
    UnknownIdentifier,
    UnknownOperator,
    evaluate,
)


@pytest.mark.expression
def test_literal(eur):
    assert Literal(eur(10)).evaluate({}) == eur(10)


@pytest.mark.expression
def test_identifier(eur):
    assert Identifier("lunch").evaluate({"lunch": eur(12)}) == eur(12)


@pytest.mark.expression
@pytest.mark.parametrize(
    "context", [{}, {"dinner": Amount(1, "EUR")}, {"Lunch": Amount(1, "EUR")}]
)
def test_unknown_identifier(context):
    with pytest.raises(UnknownIdentifier) as e:
        Identifier("lunch").evaluate(context)
    assert e.value.name == "lunch"


@pytest.mark.expression
def test_nested_infix(eur):
    # (lunch + 2 EUR) * 3
    expr = Infix.mul(Infix.add(Identifier("lunch"), Literal(eur(2))), Literal(eur(3)))
    assert expr.evaluate({"lunch": eur(10)}) == eur(36)


@pytest.mark.expression
def test_unknown_operator(eur):
    with pytest.raises(UnknownOperator) as e:
        evaluate(Infix("-", Literal(eur(2)), Literal(eur(1))), {})
    assert e.value.symbol == "-"


@pytest.mark.expression
def test_custom_operator_table(eur):
    table = OperatorTable.default().register("-", operator.sub)
    expr = Infix("-", Literal(eur(2)), Literal(eur(1)))
    assert expr.evaluate({}, table) == eur(1)


@pytest.mark.expression
def test_default_table_is_not_shared():
    OperatorTable.default().register("-", operator.sub)
    assert "-" not in OperatorTable.default()


@pytest.mark.expression
def test_from_symbols_rejects_unknown():
    with pytest.raises(UnknownOperator):
        OperatorTable.from_symbols(["+", "^"])


@pytest.mark.expression
def test_mismatch_propagates(eur, usd):
    with pytest.raises(CommodityMismatch):
        Infix.add(Literal(eur(1)), Literal(usd(1))).evaluate({})


@pytest.mark.expression
def test_left_is_evaluated_before_right():
    expr = Infix.add(Identifier("a"), Identifier("b"))
    with pytest.raises(UnknownIdentifier) as e:
        expr.evaluate({})
    assert e.value.name == "a"


@pytest.mark.expression
def test_operands_are_evaluated_before_operator_lookup(eur):
    expr = Infix("^", Identifier("a"), Literal(eur(1)))
    with pytest.raises(UnknownIdentifier):
        expr.evaluate({})


@pytest.mark.expression
def test_deep_tree(eur):
    expr = Literal(eur(0))
    for _ in range(200):
        expr = Infix.add(expr, Literal(eur(1)))
    assert expr.evaluate({}) == eur(200)


@pytest.mark.expression
def test_not_an_expression():
    with pytest.raises(TypeError):
        evaluate("10 EUR", {})  # type: ignore
