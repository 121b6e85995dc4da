from typing import Optional

from pydantic import BaseModel, ConfigDict


class MetalRatesIn(BaseModel):
    gold24k: float
    gold22k: float
    gold18k: float
    gold14k: float
    silver: float


class MetalRatesPatch(BaseModel):
    gold24k: Optional[float] = None
    gold22k: Optional[float] = None
    gold18k: Optional[float] = None
    gold14k: Optional[float] = None
    silver: Optional[float] = None


class MetalRatesOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    gold24k: Optional[float] = None
    gold22k: Optional[float] = None
    gold18k: Optional[float] = None
    gold14k: Optional[float] = None
    silver: Optional[float] = None
