# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-10-12
# Description: VectorRecord
# -----------------------------------------------------------------------------
from dataclasses import dataclass
from decimal import Decimal

import numpy as np

from product.Product import Product


@dataclass
class VectorRecord:
    """Embedding vector + denormalized product fields, keyed by product id."""
    id: int
    name: str
    description: str
    price: Decimal
    image_url: str
    vector: np.ndarray

    @classmethod
    def from_product(cls, product: Product, vector) -> "VectorRecord":
        return cls(
            id=product.id,
            name=product.name,
            description=product.description,
            price=product.price,
            image_url=product.image_url,
            vector=np.asarray(vector, dtype=np.float32).reshape(-1),
        )

    def to_product(self) -> Product:
        return Product(
            id=self.id,
            name=self.name,
            description=self.description,
            price=self.price,
            image_url=self.image_url,
        )

    @property
    def dimension(self) -> int:
        return int(self.vector.shape[0])
