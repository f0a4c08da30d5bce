"""Pydantic schemas for Store."""

from pydantic import BaseModel
from datetime import datetime
from typing import Dict, List, Optional

from storerate.domain.schemas.store_rating import StoreRatingRead


class StoreCreate(BaseModel):
    name: Optional[str] = None
    email: Optional[str] = None
    address: Optional[str] = None
    proprietor_id: Optional[int] = None


class StoreUpdate(BaseModel):
    name: Optional[str] = None
    email: Optional[str] = None
    address: Optional[str] = None
    proprietor_id: Optional[int] = None


class StoreRead(BaseModel):
    id: int
    name: str
    email: str
    address: str
    proprietor_id: int
    average_rating: Optional[float] = None
    created_at: Optional[datetime] = None

    model_config = {"from_attributes": True}


class RatingStatistics(BaseModel):
    average: float
    total_ratings: int
    rating_distribution: Dict[int, int]
    recent_ratings: List[StoreRatingRead]
