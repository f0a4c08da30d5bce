"""Pydantic schemas for StoreRating."""

from pydantic import BaseModel
from datetime import datetime
from typing import Optional


class StoreRatingCreate(BaseModel):
    user_id: Optional[int] = None
    store_id: Optional[int] = None
    value: Optional[int] = None


class StoreRatingUpdate(BaseModel):
    value: Optional[int] = None


class StoreRatingRead(BaseModel):
    id: int
    user_id: int
    store_id: int
    value: int
    created_at: Optional[datetime] = None

    model_config = {"from_attributes": True}
