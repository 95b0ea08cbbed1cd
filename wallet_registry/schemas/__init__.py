"""Pydantic schemas used across the project."""
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class WalletOwnerCreate(CamelModel):
    name: str = Field(..., min_length=1)
    id_card: str = Field(..., min_length=1)
    wallet_number: str = Field(..., min_length=1)
    phone: Optional[str] = None


class WalletOwnerUpdate(CamelModel):
    """Partial update; omitted fields keep their stored value."""

    name: Optional[str] = Field(default=None, min_length=1)
    id_card: Optional[str] = Field(default=None, min_length=1)
    wallet_number: Optional[str] = Field(default=None, min_length=1)
    phone: Optional[str] = None

    @field_validator("name", "id_card", "wallet_number", mode="before")
    @classmethod
    def _reject_null(cls, value):
        if value is None:
            raise ValueError("value must not be null")
        return value


class WalletOwnerResponse(CamelModel):
    id: str
    name: str
    id_card: str
    wallet_number: str
    phone: Optional[str] = None
    created_at: datetime

    model_config = ConfigDict(
        from_attributes=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )


class MessageResponse(BaseModel):
    message: str


class HealthResponse(BaseModel):
    status: str = "ok"
    backend: str
    version: str
