from .amount import Amount
from .base import (
    CommodityMismatch,
    EvaluationError,
    TallyError,
    TooManyImplicitPostings,
    TransactionDoesNotBalance,
    TransactionError,
    UnknownIdentifier,
    UnknownOperator,
)
from .expression import Expression, Identifier, Infix, Literal, OperatorTable, evaluate
from .posting import EvaluatedPosting, Posting
from .settings import Settings
from .transaction import Balance, EvaluatedTransaction, Transaction
