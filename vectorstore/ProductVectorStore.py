# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-10-12
# Description: ProductVectorStore
# -----------------------------------------------------------------------------

from typing import Protocol, List, Optional, Tuple, runtime_checkable

import numpy as np

from vectorstore.VectorRecord import VectorRecord


@runtime_checkable
class ProductVectorStore(Protocol):
    def upsert(self, record: VectorRecord) -> int:
        ...

    def nearest_neighbor(
            self,
            query: np.ndarray,
            top_k: int = 1,
    ) -> List[Tuple[VectorRecord, float]]:
        ...

    def get(self, record_id: int) -> Optional[VectorRecord]:
        ...

    def count(self) -> int:
        ...
