# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-10-14
# Description: ProductIndexService.py
# -----------------------------------------------------------------------------
from __future__ import annotations

import asyncio
import logging
import time
from dataclasses import dataclass, field
from typing import Iterable, List, Optional

import settings
from catalog.ProductCatalog import ProductCatalog
from embedding.EmbeddingGateway import EmbeddingGateway
from product.Product import Product
from utility.errors import ConfigurationError, IndexingItemFailure
from utility.logging_utils import get_class_logger
from vectorstore.ProductVectorStore import ProductVectorStore
from vectorstore.VectorRecord import VectorRecord


@dataclass
class IndexReport:
    requested: int = 0
    indexed: int = 0
    failed_ids: List[int] = field(default_factory=list)
    elapsed_seconds: float = 0.0

    @property
    def failed(self) -> int:
        return len(self.failed_ids)


class ProductIndexService:
    """
    Owns the product index pipeline:
      - read products (via ProductCatalog)
      - synthesize a description per product
      - embed
      - upsert into vector store

    A product that fails to embed is logged and skipped; the others still
    get indexed. Configuration errors (dimension mismatch) abort the fill.
    """

    def __init__(
        self,
        *,
        store: ProductVectorStore,
        embedder: EmbeddingGateway,
        max_concurrency: Optional[int] = None,
        logger: logging.Logger | None = None,
    ) -> None:
        self.store = store
        self.embedder = embedder
        self.max_concurrency = max_concurrency or settings.INDEX_MAX_CONCURRENCY
        self.logger = logger or get_class_logger(self.__class__)

    @staticmethod
    def describe(product: Product) -> str:
        return (
            f"[{product.name}] is a product that costs [{product.price}] "
            f"and is described as [{product.description}]"
        )

    async def fill_from_catalog(self, catalog: ProductCatalog) -> IndexReport:
        self.logger.info("Get a copy of the list of products")
        products = catalog.list_products()
        return await self.fill(products)

    async def fill(self, products: Iterable[Product]) -> IndexReport:
        product_list = list(products)
        report = IndexReport(requested=len(product_list))
        if not product_list:
            self.logger.info("No products to index")
            return report

        self.logger.info(
            "Filling products in memory: %d products (concurrency=%d)",
            len(product_list),
            self.max_concurrency,
        )
        started = time.perf_counter()
        semaphore = asyncio.Semaphore(self.max_concurrency)

        async def _bounded(p: Product) -> Optional[IndexingItemFailure]:
            async with semaphore:
                return await self._index_one(p)

        tasks = [asyncio.create_task(_bounded(p)) for p in product_list]
        try:
            outcomes = await asyncio.gather(*tasks)
        except ConfigurationError:
            for t in tasks:
                t.cancel()
            await asyncio.gather(*tasks, return_exceptions=True)
            raise

        for p, failure in zip(product_list, outcomes):
            if failure is None:
                report.indexed += 1
            else:
                report.failed_ids.append(p.id)

        report.elapsed_seconds = time.perf_counter() - started
        self.logger.info(
            "DONE! Filling products in memory: %d/%d indexed, %d failed (%.2fs)",
            report.indexed,
            report.requested,
            report.failed,
            report.elapsed_seconds,
        )
        return report

    async def _index_one(self, product: Product) -> Optional[IndexingItemFailure]:
        self.logger.info("Adding product to memory: %s", product.name)
        product_info = self.describe(product)

        try:
            result = await self.embedder.embed(product_info)
        except Exception as e:
            failure = IndexingItemFailure(product.id, e)
            self.logger.error("%s", failure, exc_info=True)
            return failure

        if not result.ok:
            failure = IndexingItemFailure(product.id, result.error)
            self.logger.error("%s", failure)
            return failure

        try:
            record_id = self.store.upsert(VectorRecord.from_product(product, result.value))
        except ConfigurationError:
            raise
        except Exception as e:
            failure = IndexingItemFailure(product.id, e)
            self.logger.error("%s", failure, exc_info=True)
            return failure

        self.logger.info("Product added to memory: %s with recordId: %s", product.name, record_id)
        return None
