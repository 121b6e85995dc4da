from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field
from typing_extensions import Annotated


# =====================================================
# CATEGORY
# =====================================================

class CategoryIn(BaseModel):
    title: Annotated[str, Field(min_length=1, max_length=127)]
    # pure base64 jpeg, see app.utils.image
    image: Annotated[str, Field(min_length=1)]


class CategoryOut(BaseModel):
    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    id: str
    title: str
    image: str
    created_at: Optional[datetime] = Field(None, alias="createdAt")
    updated_at: Optional[datetime] = Field(None, alias="updatedAt")


# =====================================================
# PRODUCT
# =====================================================

class ProductIn(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    category_id: Annotated[str, Field(alias="categoryId", min_length=1)]
    title: Annotated[str, Field(min_length=1, max_length=127)]
    image: Annotated[str, Field(min_length=1)]
    weight: Optional[str] = None
    karat: Optional[str] = None
    making: Optional[str] = None
    description: Optional[str] = None
    stock: bool = True
    show: bool = True
    shop: Optional[str] = None


class ProductOut(BaseModel):
    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    id: str
    product_id: str = Field(alias="productId")
    category_id: str = Field(alias="categoryId")
    title: str
    image: str
    weight: Optional[str] = None
    karat: Optional[str] = None
    making: Optional[str] = None
    description: Optional[str] = None
    stock: bool
    show: bool
    shop: Optional[str] = None
    created_at: Optional[datetime] = Field(None, alias="createdAt")
    updated_at: Optional[datetime] = Field(None, alias="updatedAt")
