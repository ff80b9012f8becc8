"""Domain errors - typed failures surfaced by the analysis core."""
from enum import Enum
from typing import Optional


class ErrorCode(str, Enum):
    """Machine-readable discriminant carried by every domain error."""
    SYMBOL_NOT_FOUND = "SYMBOL_NOT_FOUND"
    VALIDATION_ERROR = "VALIDATION_ERROR"
    EXTERNAL_SERVICE_ERROR = "EXTERNAL_SERVICE_ERROR"
    CACHE_NOT_FOUND = "CACHE_NOT_FOUND"


class DomainError(Exception):
    """Base class for all domain errors."""
    code: ErrorCode

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class SymbolNotFoundError(DomainError):
    """Symbol is not listed on the exchange or cannot be analyzed.

    ``reason`` tells the two apart in logs without changing the error kind
    callers see: ``"not_listed"`` when the exchange does not know the pair,
    ``"degenerate_result"`` when the computed result was not finite.
    """
    code = ErrorCode.SYMBOL_NOT_FOUND

    NOT_LISTED = "not_listed"
    DEGENERATE_RESULT = "degenerate_result"

    def __init__(self, symbol: str, reason: str = NOT_LISTED):
        super().__init__(f"Symbol '{symbol}' not found on exchange")
        self.symbol = symbol
        self.reason = reason


class ValidationError(DomainError):
    """Malformed caller input."""
    code = ErrorCode.VALIDATION_ERROR


class ExternalServiceError(DomainError):
    """An upstream service (exchange API, database) failed."""
    code = ErrorCode.EXTERNAL_SERVICE_ERROR

    def __init__(self, service: str, cause: Optional[BaseException] = None):
        detail = str(cause) if cause is not None and str(cause) else "Unknown error"
        super().__init__(f"External service '{service}' failed: {detail}")
        self.service = service
        self.cause = cause


class CacheNotFoundError(DomainError):
    """Strict cache read found no entry."""
    code = ErrorCode.CACHE_NOT_FOUND

    def __init__(self, key: str):
        super().__init__(f"Cache entry not found for key: {key}")
        self.key = key
