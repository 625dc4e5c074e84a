# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-10-15
# Description: search.py
# -----------------------------------------------------------------------------
from __future__ import annotations

from decimal import Decimal
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from product.Product import Product
from product.SearchResult import SearchResult


class SearchRequest(BaseModel):
    query: str = Field(..., min_length=1, max_length=2000)


class ProductModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: int
    name: str
    description: str
    price: Decimal
    image_url: str = Field("", alias="imageUrl")

    @classmethod
    def from_product(cls, product: Product) -> "ProductModel":
        return cls.model_validate(product.to_dict())


class SearchResponse(BaseModel):
    products: List[ProductModel] = Field(default_factory=list)
    response: str

    # helpful for debugging / telemetry
    score: Optional[float] = None
    found: bool = False

    @classmethod
    def from_result(cls, result: SearchResult) -> "SearchResponse":
        return cls(
            products=[ProductModel.from_product(p) for p in result.products],
            response=result.response,
            score=result.score,
            found=result.found,
        )
