from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing_extensions import Annotated


class InvestmentPlanIn(BaseModel):
    name: Annotated[str, Field(min_length=1, max_length=127)]
    tenure: Annotated[str, Field(min_length=1, max_length=50)]
    amount: Annotated[str, Field(min_length=1, max_length=50)]
    details: Optional[str] = None
    terms: Optional[str] = None


class InvestmentPlanOut(InvestmentPlanIn):
    model_config = ConfigDict(from_attributes=True)

    id: str


class PaymentEntry(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    month: Annotated[str, Field(min_length=1)]
    amount: Annotated[str, Field(min_length=1)]
    date: Annotated[str, Field(min_length=1)]
    account_name: Annotated[str, Field(alias="accountName", min_length=1)]
    remark: Optional[str] = None


class InvestmentOut(BaseModel):
    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    id: str
    plan_name: Optional[str] = Field(None, alias="planName")
    user_mobile: Optional[str] = Field(None, alias="userMobile")
    created_at: Optional[datetime] = Field(None, alias="createdAt")
    payment_history: List[PaymentEntry] = Field(default_factory=list, alias="paymentHistory")

    @field_validator("payment_history", mode="before")
    @classmethod
    def _empty_history(cls, value):
        # customer app may leave it unset
        return value or []
