"""Store domain model — maps to the 'stores' table."""

from sqlalchemy import Column, Integer, String, Numeric, DateTime, ForeignKey
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from storerate.infrastructure.database import Base


class Store(Base):
    __tablename__ = "stores"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(60), nullable=False)
    email = Column(String(255), unique=True, nullable=False, index=True)
    address = Column(String(400), nullable=False)
    proprietor_id = Column(Integer, ForeignKey("users.id"), nullable=False, unique=True, index=True)

    # Cached mean of store_ratings.value, written by the rating service
    average_rating = Column(Numeric(3, 2, asdecimal=False), nullable=True)

    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())

    proprietor = relationship("User", back_populates="owned_store")
    store_ratings = relationship(
        "StoreRating", back_populates="store", cascade="all, delete-orphan"
    )

    def __repr__(self):
        return f"<Store {self.name}>"
