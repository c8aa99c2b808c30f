"""User database model."""
import uuid

from sqlalchemy import Boolean, Column, DateTime, String, Text
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.sql import func

from storefront.db.base import Base

ROLE_BUYER = "buyer"
ROLE_ADMIN = "admin"


class User(Base):
    """Buyer or admin account."""

    __tablename__ = "users"

    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    email = Column(String(255), unique=True, nullable=False, index=True)
    hashed_password = Column(String(255), nullable=False)
    full_name = Column(String(255))

    # Profile
    phone = Column(String(32))
    address = Column(Text)
    avatar_url = Column(String(512))

    role = Column(String(20), nullable=False, default=ROLE_BUYER, index=True)

    # Metadata
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())
    is_active = Column(Boolean, default=True)

    @property
    def is_admin(self) -> bool:
        return self.role == ROLE_ADMIN
