from dataclasses import dataclass

from .amount import Amount
from .base import AccountName
from .expression import Context, Expression, OperatorTable


@dataclass(frozen=True)
class EvaluatedPosting:
    """Posting with a concrete amount."""

    account: AccountName
    amount: Amount


@dataclass(frozen=True)
class Posting:
    """Posting with amount expression. Posting without amount is implicit,
    its amount is inferred when the transaction is evaluated.
    """

    account: AccountName
    amount: Expression | None = None

    @property
    def is_implicit(self) -> bool:
        return self.amount is None

    def evaluate(
        self, context: Context, operators: OperatorTable | None = None
    ) -> EvaluatedPosting:
        assert self.amount is not None, "Cannot evaluate posting without amount"
        return EvaluatedPosting(self.account, self.amount.evaluate(context, operators))
