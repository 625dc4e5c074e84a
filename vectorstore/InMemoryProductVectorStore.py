# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-10-12
# Description: InMemoryProductVectorStore
# -----------------------------------------------------------------------------
import logging
import threading
from typing import Dict, List, Optional, Tuple

import numpy as np

from utility.errors import DimensionMismatchError
from utility.logging_utils import get_class_logger
from vectorstore.ProductVectorStore import ProductVectorStore
from vectorstore.VectorRecord import VectorRecord


def _normalize(vec: np.ndarray) -> np.ndarray:
    norm = float(np.linalg.norm(vec))
    if norm == 0.0:
        return vec
    return vec / norm


class InMemoryProductVectorStore(ProductVectorStore):
    """
    Process-local product vector collection ranked by cosine similarity.

    Records are keyed by product id, so upsert is insert-or-replace.
    The embedding dimension is fixed by the first record stored; any later
    record or query with another dimension is a configuration error.
    """

    def __init__(self, name: str = "products", logger: logging.Logger | None = None) -> None:
        self.name = name
        self.logger = logger or get_class_logger(self.__class__)

        self._records: Dict[int, VectorRecord] = {}
        self._unit_vectors: Dict[int, np.ndarray] = {}
        self._dimension: Optional[int] = None

        # (ids, matrix) cache rebuilt lazily after writes
        self._matrix_cache: Optional[Tuple[List[int], np.ndarray]] = None
        self._lock = threading.RLock()

        self.logger.info("In-memory vector collection ready: '%s'", self.name)

    @property
    def dimension(self) -> Optional[int]:
        return self._dimension

    def _check_dimension(self, actual: int) -> None:
        if self._dimension is not None and actual != self._dimension:
            raise DimensionMismatchError(expected=self._dimension, actual=actual)

    def upsert(self, record: VectorRecord) -> int:
        vec = np.asarray(record.vector, dtype=np.float32).reshape(-1)
        if vec.size == 0:
            raise ValueError(f"Record {record.id} has an empty vector")

        with self._lock:
            self._check_dimension(vec.shape[0])
            if self._dimension is None:
                self._dimension = int(vec.shape[0])
                self.logger.info("Collection '%s' dimension fixed at %d", self.name, self._dimension)

            replaced = record.id in self._records
            record.vector = vec
            self._records[record.id] = record
            self._unit_vectors[record.id] = _normalize(vec)
            self._matrix_cache = None

        self.logger.debug(
            "%s record id=%s in collection '%s'",
            "Replaced" if replaced else "Inserted",
            record.id,
            self.name,
        )
        return record.id

    def _matrix(self) -> Tuple[List[int], np.ndarray]:
        if self._matrix_cache is None:
            ids = list(self._unit_vectors.keys())
            matrix = np.vstack([self._unit_vectors[i] for i in ids])
            self._matrix_cache = (ids, matrix)
        return self._matrix_cache

    def nearest_neighbor(
            self,
            query: np.ndarray,
            top_k: int = 1,
    ) -> List[Tuple[VectorRecord, float]]:
        if top_k < 1:
            raise ValueError(f"top_k must be >= 1, got {top_k}")

        q = np.asarray(query, dtype=np.float32).reshape(-1)

        with self._lock:
            if not self._records:
                self.logger.debug("Collection '%s' is empty; no neighbours", self.name)
                return []

            self._check_dimension(q.shape[0])
            ids, matrix = self._matrix()
            scores = matrix @ _normalize(q)

            k = min(top_k, len(ids))
            # stable sort keeps insertion order among equal scores
            order = np.argsort(-scores, kind="stable")[:k]
            results = [(self._records[ids[i]], float(scores[i])) for i in order]

        self.logger.debug(
            "Collection '%s' search complete: returned %d results (requested %d)",
            self.name,
            len(results),
            top_k,
        )
        return results

    def get(self, record_id: int) -> Optional[VectorRecord]:
        return self._records.get(record_id)

    def count(self) -> int:
        return len(self._records)

    def __len__(self) -> int:
        return self.count()

    def __repr__(self) -> str:
        return f"InMemoryProductVectorStore(name='{self.name}', rows={self.count()}, dimension={self._dimension})"
