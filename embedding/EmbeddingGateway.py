# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-10-13
# Description: EmbeddingGateway
# -----------------------------------------------------------------------------

from typing import Protocol, runtime_checkable

import numpy as np

from utility.gateway_result import GatewayResult


@runtime_checkable
class EmbeddingGateway(Protocol):
    """Text -> fixed-length vector. Indexing and querying must share one model."""

    async def embed(self, text: str) -> GatewayResult[np.ndarray]:
        ...
