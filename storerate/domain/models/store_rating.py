"""Store rating — one user's 1..5 opinion of one store."""

from sqlalchemy import Column, Integer, DateTime, ForeignKey, UniqueConstraint
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from storerate.infrastructure.database import Base


class StoreRating(Base):
    __tablename__ = "store_ratings"
    __table_args__ = (
        UniqueConstraint("user_id", "store_id", name="uq_store_ratings_user_store"),
    )

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    store_id = Column(Integer, ForeignKey("stores.id", ondelete="CASCADE"), nullable=False, index=True)
    value = Column(Integer, nullable=False, index=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), index=True)
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())

    user = relationship("User", back_populates="store_ratings")
    store = relationship("Store", back_populates="store_ratings")

    def __repr__(self):
        return f"<StoreRating store={self.store_id} user={self.user_id} value={self.value}>"
