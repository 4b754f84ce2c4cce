"""Bank catalog and bank selection domain exceptions."""

from typing import Iterable

from econsim.domain.shared.exceptions import (
    ConflictError,
    EntityNotFoundError,
    ErrorCode,
    ExternalServiceError,
    ValidationError,
)


class BankNotFoundError(EntityNotFoundError):
    """Raised when an active bank cannot be found."""

    def __init__(self, bank_id: str) -> None:
        super().__init__(
            message=f"Bank '{bank_id}' not found",
            code=ErrorCode.BANK_NOT_FOUND,
            details={"bank_id": bank_id},
        )


class InvalidSearchCriteriaError(ValidationError):
    """Raised when bank search parameters are out of range."""

    def __init__(self, message: str, field: str) -> None:
        super().__init__(
            message=message,
            code=ErrorCode.INVALID_SEARCH_CRITERIA,
            details={"field": field},
        )


class TooManyBanksError(ValidationError):
    """Raised when a replacement list exceeds the selection cap."""

    def __init__(self, requested: int, max_banks: int) -> None:
        super().__init__(
            message=f"Cannot select more than {max_banks} banks",
            code=ErrorCode.TOO_MANY_BANKS,
            details={"requested": requested, "max_banks": max_banks},
        )


class SelectionFullError(ValidationError):
    """Raised when adding to a selection that already holds max_banks ids."""

    def __init__(self, max_banks: int) -> None:
        super().__init__(
            message=f"Selection is full (maximum {max_banks} banks)",
            code=ErrorCode.SELECTION_FULL,
            details={"max_banks": max_banks},
        )


class UnknownBanksError(ValidationError):
    """Raised when a selection references banks that are missing or inactive."""

    def __init__(self, bank_ids: Iterable[str]) -> None:
        missing = sorted(bank_ids)
        super().__init__(
            message="One or more banks not found",
            code=ErrorCode.UNKNOWN_BANKS,
            details={"unknown_bank_ids": missing},
        )
        self.bank_ids = missing


class SelectionConflictError(ConflictError):
    """Raised when a selection update keeps losing to concurrent writers."""

    def __init__(self, user_id: str, attempts: int) -> None:
        super().__init__(
            message="Selection was modified concurrently, please retry",
            code=ErrorCode.SELECTION_CONFLICT,
            details={"user_id": user_id, "attempts": attempts},
        )


class FinancialDataUnavailableError(ExternalServiceError):
    """Raised when the regulatory financial data bridge cannot answer."""

    def __init__(self, message: str, rssd_id: str | None = None) -> None:
        super().__init__(
            message=message,
            code=ErrorCode.FINANCIAL_DATA_UNAVAILABLE,
            details={"rssd_id": rssd_id} if rssd_id else None,
        )
