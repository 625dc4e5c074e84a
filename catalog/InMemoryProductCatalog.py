# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-10-12
# Description: InMemoryProductCatalog
# -----------------------------------------------------------------------------
import json
import logging
from pathlib import Path
from typing import Iterable, List

from catalog.ProductCatalog import ProductCatalog
from product.Product import Product
from utility.logging_utils import get_class_logger


class InMemoryProductCatalog(ProductCatalog):
    """
    Read-only product listing held in memory.

    Products are keyed by id; a later row with the same id replaces the earlier one.
    """

    def __init__(self, products: Iterable[Product] = (), logger: logging.Logger | None = None) -> None:
        self.logger = logger or get_class_logger(self.__class__)
        self._products: dict[int, Product] = {}
        for p in products:
            self._products[p.id] = p

    @classmethod
    def from_json_file(cls, path: str | Path, logger: logging.Logger | None = None) -> "InMemoryProductCatalog":
        """
        Load a JSON array of ``{id, name, description, price, imageUrl}`` objects.
        """
        p = Path(path)
        if not p.exists():
            raise FileNotFoundError(f"Product catalog not found: {p}")

        raw = json.loads(p.read_text(encoding="utf-8"))
        if not isinstance(raw, list):
            raise ValueError(f"Product catalog {p} must contain a JSON array, got {type(raw).__name__}")

        catalog = cls((Product.from_dict(row) for row in raw), logger=logger)
        catalog.logger.info("Loaded %d products from %s", len(catalog), p)
        return catalog

    def list_products(self) -> List[Product]:
        # copy so callers cannot mutate the listing
        return list(self._products.values())

    def __len__(self) -> int:
        return len(self._products)
