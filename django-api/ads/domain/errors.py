"""Domain error codes for the ads module."""

from dataclasses import dataclass
from enum import Enum


class ErrorCode(Enum):
    """Domain error codes."""

    AD_NOT_FOUND = "AD_NOT_FOUND"
    INVALID_AD_ID = "INVALID_AD_ID"


@dataclass(frozen=True)
class DomainError(Exception):
    """Base domain error with code and user-safe message."""

    code: ErrorCode
    message: str

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"


class AdNotFoundError(DomainError):
    """Raised when an ad is not found."""

    def __init__(self, ad_id: str) -> None:
        super().__init__(code=ErrorCode.AD_NOT_FOUND, message="Ad not found")
        self.ad_id = ad_id


class InvalidAdIdError(DomainError):
    """Raised when an ad ID is invalid."""

    def __init__(self) -> None:
        super().__init__(code=ErrorCode.INVALID_AD_ID, message="Invalid ad ID format")
