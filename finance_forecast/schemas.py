"""Pydantic schemas for validating raw transaction and budget records"""

import datetime
from typing import Any, Dict, Iterable, List, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from finance_forecast.domain.exceptions import InvalidTransactionDataError
from finance_forecast.domain.models import Budget, Transaction, TransactionType


class TransactionRecord(BaseModel):
    """Transaction as exported by the datastore"""

    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(..., min_length=1, description="Transaction identifier")
    date: datetime.date
    amount: float = Field(..., ge=0, description="Unsigned amount; direction comes from type")
    type: TransactionType
    category_id: Optional[str] = Field(None, alias="categoryId")
    is_recurring: bool = Field(False, alias="isRecurring")
    is_recurring_instance: bool = Field(False, alias="isRecurringInstance")

    def to_domain(self) -> Transaction:
        return Transaction(
            transaction_id=self.id,
            date=self.date,
            amount=self.amount,
            type=self.type,
            category_id=self.category_id,
            is_recurring=self.is_recurring or self.is_recurring_instance,
        )


class BudgetRecord(BaseModel):
    """Monthly budget limit for one category"""

    model_config = ConfigDict(populate_by_name=True)

    category_id: str = Field(..., min_length=1, alias="categoryId")
    limit: float = Field(..., gt=0, alias="amount")

    def to_domain(self) -> Budget:
        return Budget(category_id=self.category_id, limit=self.limit)


def parse_transactions(raw: Iterable[Dict[str, Any]]) -> List[Transaction]:
    """
    Validate raw transaction dicts and convert them to domain objects.

    Raises:
        InvalidTransactionDataError: a record is missing fields or has bad values
    """
    try:
        return [TransactionRecord.model_validate(item).to_domain() for item in raw]
    except ValidationError as e:
        raise InvalidTransactionDataError(f"Invalid transaction record: {e}") from e


def parse_budgets(raw: Iterable[Dict[str, Any]]) -> List[Budget]:
    """
    Validate raw budget dicts and convert them to domain objects.

    Raises:
        InvalidTransactionDataError: a record is missing fields or has bad values
    """
    try:
        return [BudgetRecord.model_validate(item).to_domain() for item in raw]
    except ValidationError as e:
        raise InvalidTransactionDataError(f"Invalid budget record: {e}") from e
