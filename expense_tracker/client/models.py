import datetime
from enum import Enum
from typing import Literal, Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field


class Category(str, Enum):
    FOOD = "Food"
    TRANSPORTATION = "Transportation"
    ENTERTAINMENT = "Entertainment"
    SHOPPING = "Shopping"
    BILLS = "Bills"
    SALARY = "Salary"
    OTHER = "Other"


class TransactionType(str, Enum):
    INCOME = "income"
    EXPENSE = "expense"


ALL_CATEGORIES = "All"
DEFAULT_CATEGORY = Category.FOOD.value
DEFAULT_TYPE = TransactionType.EXPENSE.value


class Transaction(BaseModel):
    """A stored income or expense record as returned by the store.

    ``category`` stays a plain string: records carrying a value outside
    :class:`Category` are kept and only drop out of the category breakdown.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: str
    label: str
    amount: float
    date: datetime.date
    category: str
    type: Literal["income", "expense"]
    created_at: Optional[datetime.datetime] = Field(
        default=None, validation_alias=AliasChoices("created_at", "createdAt")
    )
    updated_at: Optional[datetime.datetime] = Field(
        default=None, validation_alias=AliasChoices("updated_at", "updatedAt")
    )
