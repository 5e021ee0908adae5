"""Commodity data error types."""

from __future__ import annotations

from enum import Enum


class CommodityDataErrorCode(Enum):
    """Error classification codes."""

    NOT_FOUND = "not_found"
    TIMEOUT = "timeout"
    PROVIDER_ERROR = "provider_error"
    VALIDATION_FAILED = "validation_failed"
    NO_DATA = "no_data"
    STORAGE_ERROR = "storage_error"


class CommodityDataError(Exception):
    """Commodity data exception with error code and retryable flag.

    Attributes:
        code: Structured error code for programmatic handling.
        retryable: Whether the caller should retry with another provider.
    """

    def __init__(
        self,
        message: str,
        code: CommodityDataErrorCode = CommodityDataErrorCode.PROVIDER_ERROR,
        retryable: bool = False,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.retryable = retryable
