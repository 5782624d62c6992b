from typing import Optional, List
from datetime import datetime
from decimal import Decimal
from pydantic import BaseModel, Field, ConfigDict, field_validator


class ProductBase(BaseModel):
    name: str = Field(..., min_length=1)
    description: Optional[str] = None
    price: Decimal = Field(..., gt=0)
    stock: int = Field(default=0, ge=0)
    category: Optional[str] = None
    location: Optional[str] = None
    store_id: Optional[str] = None


class ProductCreate(ProductBase):
    pass


class ProductUpdate(BaseModel):
    name: Optional[str] = Field(None, min_length=1)
    description: Optional[str] = None
    price: Optional[Decimal] = Field(None, gt=0)
    stock: Optional[int] = Field(None, ge=0)
    category: Optional[str] = None
    location: Optional[str] = None
    store_id: Optional[str] = None

    @field_validator("name", "price", "stock")
    @classmethod
    def reject_null(cls, value, info):
        # Omitir el campo lo deja igual; enviarlo en null no se permite
        if value is None:
            raise ValueError(f"{info.field_name} cannot be null")
        return value


class ProductResponse(ProductBase):
    id: str
    grower_id: str
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)


class ProductList(BaseModel):
    products: List[ProductResponse]
    total: int
