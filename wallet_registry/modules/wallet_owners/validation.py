"""Payload validation for wallet owner create/update requests.

Field rules live on the pydantic schemas; this module turns a raw JSON body
into domain input objects and reduces pydantic's error list to the first
failure, with a localized message per field.
"""

from __future__ import annotations

from typing import Any, Mapping

from pydantic import ValidationError

from wallet_registry.schemas import WalletOwnerCreate, WalletOwnerUpdate

from .exceptions import WalletOwnerValidationError
from .models import UNSET, WalletOwnerCreateInput, WalletOwnerUpdateInput

INVALID_PAYLOAD_MESSAGE = "بيانات غير صالحة"

FIELD_MESSAGES: dict[str, str] = {
    "name": "اسم المالك مطلوب",
    "id_card": "رقم البطاقة مطلوب",
    "wallet_number": "رقم المحفظة مطلوب",
    "phone": "رقم الهاتف غير صالح",
}

_ALIASES = {"idCard": "id_card", "walletNumber": "wallet_number"}


def _first_error(exc: ValidationError) -> WalletOwnerValidationError:
    errors = exc.errors()
    if not errors or not errors[0]["loc"]:
        return WalletOwnerValidationError(None, INVALID_PAYLOAD_MESSAGE)
    location = str(errors[0]["loc"][0])
    field = _ALIASES.get(location, location)
    return WalletOwnerValidationError(field, FIELD_MESSAGES.get(field, INVALID_PAYLOAD_MESSAGE))


def _normalize_phone(phone: str | None) -> str | None:
    return phone or None


def validate_create(data: Any) -> WalletOwnerCreateInput:
    if not isinstance(data, Mapping):
        raise WalletOwnerValidationError(None, INVALID_PAYLOAD_MESSAGE)
    try:
        payload = WalletOwnerCreate.model_validate(dict(data))
    except ValidationError as exc:
        raise _first_error(exc) from exc

    return WalletOwnerCreateInput(
        name=payload.name,
        id_card=payload.id_card,
        wallet_number=payload.wallet_number,
        phone=_normalize_phone(payload.phone),
    )


def validate_update(owner_id: str, data: Any) -> WalletOwnerUpdateInput:
    if not owner_id:
        raise WalletOwnerValidationError("id", INVALID_PAYLOAD_MESSAGE)
    if data is None:
        data = {}
    if not isinstance(data, Mapping):
        raise WalletOwnerValidationError(None, INVALID_PAYLOAD_MESSAGE)

    body = {key: value for key, value in data.items() if key != "id"}
    try:
        payload = WalletOwnerUpdate.model_validate(body)
    except ValidationError as exc:
        raise _first_error(exc) from exc

    provided = payload.model_fields_set
    return WalletOwnerUpdateInput(
        name=payload.name if "name" in provided else UNSET,
        id_card=payload.id_card if "id_card" in provided else UNSET,
        wallet_number=payload.wallet_number if "wallet_number" in provided else UNSET,
        phone=_normalize_phone(payload.phone) if "phone" in provided else UNSET,
    )
