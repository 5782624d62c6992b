from typing import Optional, List
from datetime import datetime
from decimal import Decimal
from pydantic import BaseModel, Field, ConfigDict


class OrderItemCreate(BaseModel):
    product_id: str = Field(..., alias="productId", min_length=1)
    quantity: int = Field(..., gt=0)
    price: Decimal = Field(..., ge=0)

    model_config = ConfigDict(populate_by_name=True)


class OrderCreate(BaseModel):
    # Se validan en el servicio de órdenes para responder con mensajes propios
    items: Optional[List[OrderItemCreate]] = None
    total_amount: Optional[Decimal] = Field(None, alias="totalAmount")

    model_config = ConfigDict(populate_by_name=True)


class OrderResponse(BaseModel):
    id: str
    user_id: str
    total_amount: Decimal
    status: str
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)


class OrderItemResponse(BaseModel):
    id: str
    order_id: str
    product_id: str
    quantity: int
    price: Decimal
    product_name: Optional[str] = None

    model_config = ConfigDict(from_attributes=True)


class OrderWithItems(OrderResponse):
    items: List[OrderItemResponse]


class OrderEnvelope(BaseModel):
    order: OrderResponse


class OrderDetailEnvelope(BaseModel):
    order: OrderWithItems


class OrderList(BaseModel):
    orders: List[OrderResponse]
