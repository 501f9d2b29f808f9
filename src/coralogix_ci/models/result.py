"""
Module: result.py
Description: Delivery outcome model.

Returned by the non-raising delivery surface so callers decide
explicitly what to do with a failed send instead of relying on blanket
exception handling.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class DeliveryResult(BaseModel):
    """
    Outcome of one delivery attempt.

    Attributes:
        delivered: True when the request was sent and a response received
        status_code: HTTP status of the response, if any
        error: Error message when the attempt was abandoned
        error_type: Exception class name when the attempt was abandoned
    """

    model_config = ConfigDict(frozen=True)

    delivered: bool = Field(..., description="Whether a response was received")
    status_code: Optional[int] = Field(default=None)
    error: Optional[str] = Field(default=None)
    error_type: Optional[str] = Field(default=None)

    @classmethod
    def ok(cls, status_code: Optional[int] = None) -> "DeliveryResult":
        return cls(delivered=True, status_code=status_code)

    @classmethod
    def failed(cls, error: BaseException) -> "DeliveryResult":
        return cls(delivered=False, error=str(error), error_type=type(error).__name__)

    @classmethod
    def skipped(cls, reason: str) -> "DeliveryResult":
        """Nothing was sent because the caller's own checks rejected the input."""
        return cls(delivered=False, error=reason, error_type="Skipped")

    def __bool__(self) -> bool:
        return self.delivered
