from sqlalchemy import Column, String, Text, Integer, DateTime, ForeignKey, DECIMAL
from sqlalchemy.orm import relationship
from vyeya.core.database import Base
from vyeya.models.user import new_id, utcnow


class Product(Base):
    __tablename__ = "products"

    id = Column(String(36), primary_key=True, default=new_id)
    grower_id = Column(String(36), ForeignKey("users.id"), nullable=False, index=True)
    store_id = Column(String(36), ForeignKey("stores.id"), index=True)
    name = Column(String(255), nullable=False)
    description = Column(Text)
    price = Column(DECIMAL(10, 2), nullable=False)
    stock = Column(Integer, nullable=False, default=0)
    category = Column(String(100), index=True)
    location = Column(String(255))
    created_at = Column(DateTime(timezone=True), default=utcnow)
    updated_at = Column(DateTime(timezone=True), default=utcnow, onupdate=utcnow)

    grower = relationship("User", back_populates="products")
    store = relationship("Store", back_populates="products")
