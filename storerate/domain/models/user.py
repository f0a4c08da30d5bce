"""User domain model — maps to the 'users' table."""

import enum

from sqlalchemy import Column, Integer, String, Boolean, DateTime
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from storerate.infrastructure.database import Base


class UserRole(str, enum.Enum):
    REGULAR = "regular"
    PROPRIETOR = "proprietor"
    SUPERVISOR = "supervisor"


ROLES = tuple(role.value for role in UserRole)


class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(60), nullable=False)
    email = Column(String(255), unique=True, nullable=False, index=True)
    address = Column(String(400), nullable=False)
    password_digest = Column(String(255), nullable=False)
    role = Column(String(20), nullable=False, default=UserRole.REGULAR.value, index=True)
    auth_token = Column(String(64), unique=True, nullable=True, index=True)
    active = Column(Boolean, nullable=False, default=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())

    store_ratings = relationship(
        "StoreRating", back_populates="user", cascade="all, delete-orphan"
    )
    owned_store = relationship("Store", back_populates="proprietor", uselist=False)

    def __init__(self, **kwargs):
        kwargs.setdefault("active", True)
        super().__init__(**kwargs)
        self.initialize_role()

    def initialize_role(self) -> None:
        if not self.role:
            self.role = UserRole.REGULAR.value

    @property
    def is_proprietor(self) -> bool:
        return self.role == UserRole.PROPRIETOR.value

    def __repr__(self):
        return f"<User {self.email}>"
