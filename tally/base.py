from decimal import Decimal
from pathlib import Path
from typing import Mapping

Numeric = int | float | Decimal
Commodity = str
AccountName = str


class TallyError(Exception):
    pass


class EvaluationError(TallyError):
    """Expression could not be evaluated to an amount."""


class CommodityMismatch(EvaluationError):
    def __init__(self, left: Commodity, right: Commodity):
        self.left = left
        self.right = right
        super().__init__(f"Commodities do not match: {left!r} and {right!r}.")

    @staticmethod
    def must_match(left: Commodity, right: Commodity):
        if left != right:
            raise CommodityMismatch(left, right)


class UnknownOperator(EvaluationError):
    def __init__(self, symbol: str):
        self.symbol = symbol
        super().__init__(f"Unknown operator: {symbol}")


class UnknownIdentifier(EvaluationError):
    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Unknown identifier: {name}")


class TransactionError(TallyError):
    """Transaction cannot be evaluated to a balanced transaction."""


class TooManyImplicitPostings(TransactionError):
    def __init__(self, accounts: list[AccountName]):
        self.accounts = accounts
        super().__init__(
            f"Transaction can only contain one posting without amount, got {accounts}."
        )


class TransactionDoesNotBalance(TransactionError):
    def __init__(self, balance: Mapping[Commodity, Numeric]):
        self.balance = dict(balance)
        super().__init__(f"Transaction does not balance: {self.balance}")


class SaveLoadMixin:
    """A mix-in class for loading and saving models to JSON files."""

    @classmethod
    def load(cls, filename: str | Path):
        return cls.model_validate_json(Path(filename).read_text())  # type: ignore

    def save(self, filename: str | Path, allow_overwrite: bool = False):
        if not allow_overwrite and Path(filename).exists():
            raise FileExistsError(f"File already exists: {filename}")
        content = self.model_dump_json(indent=2, warnings=False)  # type: ignore
        Path(filename).write_text(content)  # type: ignore
