import datetime
from typing import Annotated, Literal, Optional
from uuid import UUID

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, StringConstraints

Label = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]
ExpenseType = Literal["income", "expense"]


class ExpenseCreate(BaseModel):
    label: Label
    amount: float = Field(..., gt=0, allow_inf_nan=False)
    date: datetime.date
    category: str = Field(..., min_length=1)
    type: ExpenseType


class ExpenseUpdate(BaseModel):
    label: Optional[Label] = None
    amount: Optional[float] = Field(None, gt=0, allow_inf_nan=False)
    date: Optional[datetime.date] = None
    category: Optional[str] = Field(None, min_length=1)
    type: Optional[ExpenseType] = None


class ExpenseResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    id: UUID
    label: str
    amount: float
    date: datetime.date
    category: str
    type: str
    created_at: datetime.datetime = Field(
        validation_alias=AliasChoices("created_at", "createdAt"),
        serialization_alias="createdAt",
    )
    updated_at: datetime.datetime = Field(
        validation_alias=AliasChoices("updated_at", "updatedAt"),
        serialization_alias="updatedAt",
    )
