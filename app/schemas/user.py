from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class UserProfile(BaseModel):
    name: Optional[str] = None
    city: Optional[str] = None


class UserOut(BaseModel):
    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    id: str
    mobile: Optional[str] = None
    gender: Optional[str] = None
    pin: Optional[str] = None
    created_at: Optional[datetime] = Field(None, alias="createdAt")
    profile: Optional[UserProfile] = None
