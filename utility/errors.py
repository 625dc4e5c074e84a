# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-10-12
# Description: errors.py
# -----------------------------------------------------------------------------
from typing import Optional


class ProductSearchError(Exception):
    """Base class for product search errors."""


class GatewayFailure(ProductSearchError):
    """
    An embedding or chat service call failed (network, auth, rate limit, timeout).

    Carried inside a GatewayResult; the search service turns it into
    response text rather than letting it escape.
    """

    def __init__(
            self,
            gateway: str,
            operation: str,
            message: str,
            *,
            cause: Optional[BaseException] = None,
            retryable: bool = False,
    ) -> None:
        super().__init__(f"{gateway}.{operation} failed: {message}")
        self.gateway = gateway
        self.operation = operation
        self.message = message
        self.cause = cause
        self.retryable = retryable

    @classmethod
    def from_exception(cls, gateway: str, operation: str, exc: BaseException, *, retryable: bool = False) -> "GatewayFailure":
        message = str(exc) or exc.__class__.__name__
        return cls(gateway, operation, message, cause=exc, retryable=retryable)


class IndexingItemFailure(ProductSearchError):
    """A single product could not be embedded during fill."""

    def __init__(self, product_id: int, cause: BaseException) -> None:
        super().__init__(f"Failed to index product {product_id}: {cause}")
        self.product_id = product_id
        self.cause = cause


class ConfigurationError(ProductSearchError):
    """Fatal misconfiguration. Never swallowed per query."""


class DimensionMismatchError(ConfigurationError):
    def __init__(self, expected: int, actual: int) -> None:
        super().__init__(
            f"Embedding dimension mismatch: index holds {expected}-d vectors, got {actual}-d. "
            "Indexing and querying must use the same embedding model."
        )
        self.expected = expected
        self.actual = actual
