from typing import Optional

from pydantic import BaseModel, ConfigDict, Field
from typing_extensions import Annotated


class ConnectionParams(BaseModel):
    """Everything needed to open a handle on one shop's data store.

    Copied from the master directory at login. The shop password is never
    part of it.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    api_key: Optional[str] = Field(None, alias="apiKey")
    auth_domain: Optional[str] = Field(None, alias="authDomain")
    project_id: Annotated[str, Field(alias="projectId", min_length=1)]
    app_id: Optional[str] = Field(None, alias="appId")
    messaging_sender_id: Optional[str] = Field(None, alias="messagingSenderId")
    measurement_id: Optional[str] = Field(None, alias="measurementId")
    shop_name: Optional[str] = Field(None, alias="shopName")

    @classmethod
    def from_shop(cls, shop) -> "ConnectionParams":
        return cls(
            api_key=shop.api_key,
            auth_domain=shop.auth_domain,
            project_id=shop.project_id,
            app_id=shop.app_id,
            messaging_sender_id=shop.messaging_sender_id,
            measurement_id=shop.measurement_id,
            shop_name=shop.shop_name,
        )

    def to_record(self) -> dict:
        return self.model_dump(by_alias=True)


class LoginRequest(BaseModel):
    shop_id: Annotated[str, Field(min_length=1, max_length=128)]
    password: Annotated[str, Field(min_length=1)]


class LoginResponse(BaseModel):
    access_token: str
    token_type: str = "bearer"
    shop_name: Optional[str] = None
    expires_at: int


class SessionStatus(BaseModel):
    authenticated: bool
    shop_name: Optional[str] = None
