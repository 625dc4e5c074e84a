# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-10-12
# Description: SearchResult
# -----------------------------------------------------------------------------
from dataclasses import dataclass, field
from typing import List, Optional

from product.Product import Product


@dataclass
class SearchResult:
    """Outcome of one search call: the chosen product (or placeholder) and the generated text."""
    products: List[Product] = field(default_factory=lambda: [Product.empty()])
    response: str = ""
    score: Optional[float] = None
    found: bool = False
