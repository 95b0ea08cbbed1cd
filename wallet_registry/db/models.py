"""SQLAlchemy ORM models."""
import uuid

from sqlalchemy import Column, DateTime, String, Text
from sqlalchemy.sql import func

from wallet_registry.infrastructure.database.base import Base


def generate_uuid() -> str:
    return str(uuid.uuid4())


class WalletOwner(Base):
    __tablename__ = "wallet_owners"

    id = Column(String(36), primary_key=True, default=generate_uuid)
    name = Column(Text, nullable=False)
    id_card = Column(Text, unique=True, nullable=False, index=True)
    wallet_number = Column(Text, unique=True, nullable=False, index=True)
    phone = Column(Text)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False, index=True)
