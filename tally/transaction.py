"""Transaction evaluation and balancing.

`Transaction.evaluate()` turns postings with amount expressions into
an `EvaluatedTransaction` with concrete amounts:

1. postings with amounts are evaluated in order,
2. one posting without amount gets inferred amounts that offset
   the balance in every commodity,
3. the resulting transaction must balance to zero in every commodity.

Evaluation is all-or-nothing, the first error is raised to the caller.
"""

import logging
from collections import UserDict
from dataclasses import dataclass, field

import simplejson as json  # type: ignore

from .amount import Amount
from .base import (
    Commodity,
    Numeric,
    SaveLoadMixin,
    TooManyImplicitPostings,
    TransactionDoesNotBalance,
)
from .expression import Context, OperatorTable
from .posting import EvaluatedPosting, Posting
from .settings import Settings

logger = logging.getLogger(__name__)


class Balance(UserDict[Commodity, Numeric], SaveLoadMixin):
    """Sums of posting values by commodity, in order of first appearance."""

    def nonzero(self, tolerance: Numeric = 0) -> "Balance":
        return Balance({c: v for c, v in self.data.items() if abs(v) > tolerance})

    def is_zero(self, tolerance: Numeric = 0) -> bool:
        return not self.nonzero(tolerance)

    def model_dump_json(self, indent: int = 2, warnings: bool = False):
        return json.dumps(self.data, indent=indent)

    @classmethod
    def model_validate_json(cls, text: str):
        return cls(json.loads(text, use_decimal=True))


@dataclass
class EvaluatedTransaction:
    postings: list[EvaluatedPosting] = field(default_factory=list)

    @property
    def balance(self) -> Balance:
        total = Balance()
        for posting in self.postings:
            commodity = posting.amount.commodity
            total[commodity] = total.get(commodity, 0) + posting.amount.value
        return total

    def verify(self, tolerance: Numeric = 0):
        """Raise error if balance is not zero for any commodity."""
        if residue := self.balance.nonzero(tolerance):
            raise TransactionDoesNotBalance(residue)
        return self


@dataclass
class Transaction:
    postings: list[Posting] = field(default_factory=list)

    @property
    def explicit(self) -> list[Posting]:
        return [p for p in self.postings if not p.is_implicit]

    @property
    def implicit(self) -> list[Posting]:
        return [p for p in self.postings if p.is_implicit]

    def evaluate(
        self,
        context: Context | None = None,
        operators: OperatorTable | None = None,
        settings: Settings | None = None,
    ) -> EvaluatedTransaction:
        """Evaluate postings, infer implicit posting and verify the balance.

        Operators from *settings* are used unless *operators* are given.
        """
        if settings is None:
            settings = Settings()
        if operators is None:
            operators = settings.operator_table
        if context is None:
            context = {}
        implicit = self.implicit
        if len(implicit) > 1:
            accounts = [p.account for p in implicit]
            logger.debug("Rejected transaction with implicit postings %s", accounts)
            raise TooManyImplicitPostings(accounts)
        evaluated = EvaluatedTransaction(
            [p.evaluate(context, operators) for p in self.explicit]
        )
        if implicit:
            evaluated.postings.extend(self.infer(implicit[0], evaluated.balance))
        try:
            return evaluated.verify(settings.tolerance)
        except TransactionDoesNotBalance as e:
            logger.debug("Rejected transaction: %s", e)
            raise

    @staticmethod
    def infer(posting: Posting, balance: Balance) -> list[EvaluatedPosting]:
        """Offset non-zero balance of each commodity with *posting* account."""
        inferred = [
            EvaluatedPosting(posting.account, -Amount(value, commodity))
            for commodity, value in balance.items()
            if value != 0
        ]
        for p in inferred:
            logger.debug("Inferred %s %s", p.account, p.amount)
        return inferred
