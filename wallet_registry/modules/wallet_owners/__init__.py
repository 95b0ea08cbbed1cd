"""Wallet owner module exports."""

from .exceptions import (
    DuplicateIdCardError,
    DuplicateWalletNumberError,
    WalletOwnerDuplicateError,
    WalletOwnerError,
    WalletOwnerNotFoundError,
    WalletOwnerValidationError,
)
from .memory_repository import MemoryWalletOwnerRepository
from .models import UNSET, WalletOwner, WalletOwnerCreateInput, WalletOwnerUpdateInput
from .repository import WalletOwnerRepository
from .service import WalletOwnerService
from .validation import validate_create, validate_update

__all__ = [
    "DuplicateIdCardError",
    "DuplicateWalletNumberError",
    "MemoryWalletOwnerRepository",
    "UNSET",
    "WalletOwner",
    "WalletOwnerCreateInput",
    "WalletOwnerDuplicateError",
    "WalletOwnerError",
    "WalletOwnerNotFoundError",
    "WalletOwnerRepository",
    "WalletOwnerService",
    "WalletOwnerUpdateInput",
    "WalletOwnerValidationError",
    "validate_create",
    "validate_update",
]
