# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-10-12
# Description: gateway_result.py
# -----------------------------------------------------------------------------
from dataclasses import dataclass
from typing import Generic, Optional, TypeVar

from utility.errors import GatewayFailure

T = TypeVar("T")


@dataclass(frozen=True)
class GatewayResult(Generic[T]):
    """
    Outcome of a single gateway call: either a value or a GatewayFailure.

    Gateways return this instead of raising so that the orchestration layer
    decides how a failure is reported.
    """

    value: Optional[T] = None
    error: Optional[GatewayFailure] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, value: T) -> "GatewayResult[T]":
        return cls(value=value)

    @classmethod
    def failure(cls, error: GatewayFailure) -> "GatewayResult[T]":
        return cls(error=error)

    def unwrap(self) -> T:
        if self.error is not None:
            raise self.error
        return self.value  # type: ignore[return-value]
