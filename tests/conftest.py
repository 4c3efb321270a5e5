import pytest

from tally import Amount, EvaluatedPosting, Literal, Posting


@pytest.fixture
def eur():
    return lambda value: Amount(value, "EUR")


@pytest.fixture
def usd():
    return lambda value: Amount(value, "USD")


@pytest.fixture
def food10(eur):
    return Posting("Expenses:Food", Literal(eur(10)))


@pytest.fixture
def checking_minus10(eur):
    return Posting("Assets:Checking", Literal(eur(-10)))


@pytest.fixture
def food20_usd(usd):
    return Posting("Expenses:Food", Literal(usd(20)))


@pytest.fixture
def checking_minus20_usd(usd):
    return Posting("Assets:Checking", Literal(usd(-20)))


@pytest.fixture
def evaluated_food10(eur):
    return EvaluatedPosting("Expenses:Food", eur(10))


@pytest.fixture
def evaluated_checking_minus10(eur):
    return EvaluatedPosting("Assets:Checking", eur(-10))
