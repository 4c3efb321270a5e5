"""Evaluation settings that can be saved to and loaded from JSON."""

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .base import SaveLoadMixin, UnknownOperator
from .expression import DEFAULT_SYMBOLS, OperatorTable


class Settings(BaseModel, SaveLoadMixin):
    """Operators allowed in expressions and tolerance for the zero balance check.

    Default tolerance is zero, so transaction must balance exactly.
    """

    model_config = ConfigDict(extra="forbid")

    operators: list[str] = Field(default_factory=lambda: list(DEFAULT_SYMBOLS))
    tolerance: float = Field(default=0, ge=0)

    @field_validator("operators")
    @classmethod
    def operators_must_be_known(cls, symbols: list[str]) -> list[str]:
        try:
            OperatorTable.from_symbols(symbols)
        except UnknownOperator as e:
            raise ValueError(str(e)) from None
        return symbols

    @property
    def operator_table(self) -> OperatorTable:
        return OperatorTable.from_symbols(self.operators)
