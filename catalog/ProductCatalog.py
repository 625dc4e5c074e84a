# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-10-12
# Description: ProductCatalog
# -----------------------------------------------------------------------------

from typing import Protocol, List, runtime_checkable

from product.Product import Product


@runtime_checkable
class ProductCatalog(Protocol):
    def list_products(self) -> List[Product]:
        ...
