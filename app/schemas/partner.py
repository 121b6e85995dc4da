from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field
from typing_extensions import Annotated


class EarningEntry(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    bill_amount: float = Field(alias="billAmount")
    earning_amount: float = Field(alias="earningAmount")
    # dd/mm/yyyy
    date: Annotated[str, Field(min_length=1)]
    remark: Optional[str] = None


class PartnerOut(BaseModel):
    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    mobile: str
    name: Optional[str] = ""
    total_earning: float = Field(0, alias="totalEarning")
    history: List[EarningEntry] = Field(default_factory=list)
