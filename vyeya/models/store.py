from sqlalchemy import Column, String, Text, DateTime, Boolean, ForeignKey
from sqlalchemy.orm import relationship
from vyeya.core.database import Base
from vyeya.models.user import new_id, utcnow


class Store(Base):
    __tablename__ = "stores"

    id = Column(String(36), primary_key=True, default=new_id)
    owner_id = Column(String(36), ForeignKey("users.id"), nullable=False, index=True)
    name = Column(String(255), nullable=False)
    description = Column(Text)
    store_type = Column(String(50))
    location = Column(String(255))
    hours = Column(String(100))
    verified = Column(Boolean, default=False, nullable=False)
    created_at = Column(DateTime(timezone=True), default=utcnow)
    updated_at = Column(DateTime(timezone=True), default=utcnow, onupdate=utcnow)

    owner = relationship("User", back_populates="stores")
    products = relationship("Product", back_populates="store")
