# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-10-15
# Description: EmbeddingHealth
# -----------------------------------------------------------------------------
import time
import logging
from typing import Optional

from embedding.EmbeddingGateway import EmbeddingGateway
from utility.logging_utils import get_logger


class EmbeddingHealth:
    """
    Smoke test for the embedding gateway.

    Verifies:
      - The embedding call completes successfully
      - The response contains a non-empty vector
      - The vector dimension matches the expected dimension (if provided)
    """

    def __init__(
        self,
        embedder: EmbeddingGateway,
        expected_dim: Optional[int] = None,
        logger: Optional[logging.Logger] = None,
    ):
        self.embedder = embedder
        self.expected_dim = expected_dim
        self.logger = logger or get_logger(__name__)

    async def run(self) -> bool:
        test_text = "Camping tent embedding healthcheck"
        self.logger.info("Running embedding healthcheck using %s", type(self.embedder).__name__)

        start = time.time()
        result = await self.embedder.embed(test_text)
        elapsed_ms = (time.time() - start) * 1000.0

        if not result.ok:
            self.logger.error("Embedding healthcheck FAILED: %s", result.error)
            return False

        dim = int(result.value.shape[0]) if result.value is not None else 0
        if dim == 0:
            self.logger.error("No embedding data returned in response.")
            return False

        self.logger.info("Embedding call succeeded in %.1f ms. Returned dimension: %d", elapsed_ms, dim)

        if self.expected_dim is not None and dim != self.expected_dim:
            self.logger.warning("Dimension mismatch: expected %d, got %d.", self.expected_dim, dim)
            return False

        self.logger.info("Embedding healthcheck PASSED.")
        return True
