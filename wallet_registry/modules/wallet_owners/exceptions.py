"""Wallet owner domain specific exceptions."""

DUPLICATE_ID_CARD_MESSAGE = "رقم البطاقة مسجل مسبقاً"
DUPLICATE_WALLET_NUMBER_MESSAGE = "رقم المحفظة مسجل مسبقاً"
NOT_FOUND_MESSAGE = "المالك غير موجود"


class WalletOwnerError(Exception):
    """Base class for wallet owner domain errors."""


class WalletOwnerValidationError(WalletOwnerError):
    """Raised with the first failing field of a rejected payload."""

    def __init__(self, field: str | None, message: str) -> None:
        super().__init__(message)
        self.field = field
        self.message = message


class WalletOwnerDuplicateError(WalletOwnerError):
    """Raised when a unique field is already registered to another owner."""

    field: str = ""
    default_message: str = ""

    def __init__(self, value: str, message: str | None = None) -> None:
        super().__init__(message or self.default_message)
        self.value = value
        self.message = message or self.default_message


class DuplicateIdCardError(WalletOwnerDuplicateError):
    field = "id_card"
    default_message = DUPLICATE_ID_CARD_MESSAGE


class DuplicateWalletNumberError(WalletOwnerDuplicateError):
    field = "wallet_number"
    default_message = DUPLICATE_WALLET_NUMBER_MESSAGE


class WalletOwnerNotFoundError(WalletOwnerError):
    """Raised when the requested owner cannot be found."""

    def __init__(self, owner_id: str) -> None:
        super().__init__(NOT_FOUND_MESSAGE)
        self.owner_id = owner_id
        self.message = NOT_FOUND_MESSAGE
