"""Pydantic schemas for User."""

from pydantic import BaseModel
from datetime import datetime
from typing import Optional


class UserCreate(BaseModel):
    name: Optional[str] = None
    email: Optional[str] = None
    address: Optional[str] = None
    password: Optional[str] = None
    role: Optional[str] = None


class UserUpdate(BaseModel):
    name: Optional[str] = None
    email: Optional[str] = None
    address: Optional[str] = None
    password: Optional[str] = None
    role: Optional[str] = None
    active: Optional[bool] = None


class UserRead(BaseModel):
    id: int
    name: str
    email: str
    address: str
    role: str
    active: bool
    created_at: Optional[datetime] = None

    model_config = {"from_attributes": True}


class UserFilter(BaseModel):
    role: Optional[str] = None
    active: Optional[bool] = None
    name: Optional[str] = None
    page: int = 1
    page_size: int = 50
