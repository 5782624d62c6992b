from typing import Optional, List
from datetime import datetime
from pydantic import BaseModel, Field, ConfigDict


class StoreBase(BaseModel):
    name: str = Field(..., min_length=1)
    description: Optional[str] = None
    store_type: Optional[str] = None
    location: Optional[str] = None
    hours: Optional[str] = None


class StoreCreate(StoreBase):
    pass


class StoreResponse(StoreBase):
    id: str
    owner_id: str
    verified: bool
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)


class StoreList(BaseModel):
    stores: List[StoreResponse]
    total: int
