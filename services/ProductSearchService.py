# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-10-14
# Description: ProductSearchService.py
# -----------------------------------------------------------------------------
from __future__ import annotations

import asyncio
import json
import logging
from typing import List, Optional

import settings
from catalog.ProductCatalog import ProductCatalog
from chat.ChatGateway import ChatGateway, Message
from embedding.EmbeddingGateway import EmbeddingGateway
from product.Product import Product
from product.SearchResult import SearchResult
from services.ProductIndexService import IndexReport, ProductIndexService
from utility.errors import ConfigurationError
from utility.logging_utils import get_class_logger
from vectorstore.InMemoryProductVectorStore import InMemoryProductVectorStore
from vectorstore.ProductVectorStore import ProductVectorStore


class ProductSearchService:
    """
    Search Service:
        - makes sure the product index is filled (once per instance)
        - embeds the query and retrieves the closest product
        - keeps it only if its similarity clears the relevance threshold
        - asks the chat model for a short, friendly answer about it
        - returns products + response text

    search() never raises for gateway or runtime failures; they come back
    as the response text. ConfigurationError is the one exception.
    """

    system_prompt: str = (
        "You are a useful assistant. You always reply with a short and funny message. "
        "If you do not know an answer, you say 'I don't know that.' "
        "You only answer questions related to outdoor camping products. "
        "For any other type of questions, explain to the user that you only answer "
        "outdoor camping products questions. "
        "Do not store memory of the chat conversation."
    )

    empty_query_response: str = "Please tell me what you are looking for."

    def __init__(
        self,
        *,
        catalog: ProductCatalog,
        store: ProductVectorStore,
        embedder: EmbeddingGateway,
        chat_client: ChatGateway,
        index_service: Optional[ProductIndexService] = None,
        relevance_threshold: Optional[float] = None,
        top_k: Optional[int] = None,
        logger: logging.Logger | None = None,
    ) -> None:
        self.catalog = catalog
        self.store = store
        self.embedder = embedder
        self.chat_client = chat_client
        self.index_service = index_service or ProductIndexService(store=store, embedder=embedder)
        self.relevance_threshold = settings.RELEVANCE_THRESHOLD if relevance_threshold is None else relevance_threshold
        self.top_k = top_k or settings.SEARCH_TOP_K
        self.logger = logger or get_class_logger(self.__class__)

        # One-shot index gate
        self._index_lock = asyncio.Lock()
        self._indexed = False
        self._ready = asyncio.Event()
        self.last_index_report: Optional[IndexReport] = None

        self.logger.info(
            "ProductSearchService initialised (store=%s embedder=%s chat_client=%s threshold=%.2f)",
            type(self.store).__name__,
            type(self.embedder).__name__,
            type(self.chat_client).__name__,
            self.relevance_threshold,
        )

    @classmethod
    def initialize(
        cls,
        *,
        embedding_gateway: EmbeddingGateway,
        chat_gateway: ChatGateway,
        catalog: ProductCatalog,
        store: Optional[ProductVectorStore] = None,
        **kwargs,
    ) -> "ProductSearchService":
        """Build the service once at process startup."""
        return cls(
            catalog=catalog,
            store=store if store is not None else InMemoryProductVectorStore(),
            embedder=embedding_gateway,
            chat_client=chat_gateway,
            **kwargs,
        )

    # -------------------------------------------------------------------------
    # Index gate
    # -------------------------------------------------------------------------
    @property
    def is_ready(self) -> bool:
        return self._indexed

    async def wait_until_ready(self, timeout: Optional[float] = None) -> bool:
        try:
            await asyncio.wait_for(self._ready.wait(), timeout=timeout)
            return True
        except asyncio.TimeoutError:
            return False

    async def ensure_indexed(self) -> None:
        """
        Fill the index exactly once. Concurrent first callers wait for the
        single fill to finish and then search the populated index.

        A fill that indexed none of a non-empty catalog leaves the gate open,
        so the next call tries again once the embedding service is back.
        """
        if self._indexed:
            return

        async with self._index_lock:
            if self._indexed:
                return

            self.logger.info("Index not yet filled; filling from catalog")
            report = await self.index_service.fill_from_catalog(self.catalog)
            self.last_index_report = report

            if report.requested > 0 and report.indexed == 0:
                self.logger.warning(
                    "Index fill indexed 0/%d products; will retry on next search", report.requested,
                )
                return

            self._indexed = True
            self._ready.set()

    # -------------------------------------------------------------------------
    # Relevance + prompt
    # -------------------------------------------------------------------------
    def is_relevant(self, score: float) -> bool:
        return score > self.relevance_threshold

    def build_messages(self, query: str, product: Optional[Product]) -> List[Message]:
        if product is not None:
            prompt = (
                "You are an intelligent assistant helping Contoso Inc clients with their search "
                "about outdoor product. Generate a catchy and friendly message using the following information:\n"
                f"    - User Question: {query}\n"
                f"    - Found Product Name: {product.name}\n"
                f"    - Found Product Description: {product.description}\n"
                f"    - Found Product Price: {product.price}\n"
                "Include the found product information in the response to the user question."
            )
        else:
            prompt = (
                "You are an intelligent assistant helping Contoso Inc clients with their search "
                "about outdoor product. Generate a catchy and friendly message using the following information:\n"
                f"    - User Question: {query}\n"
                "    - Found Product: none. No product in the catalog matches this question.\n"
                "Tell the user that no matching product was found. Do not invent or suggest a product. "
                "Invite the user to rephrase the search."
            )

        return [
            {"role": "system", "content": self.system_prompt},
            {"role": "user", "content": prompt},
        ]

    # -------------------------------------------------------------------------
    # Search
    # -------------------------------------------------------------------------
    async def search(self, query: str) -> SearchResult:
        q = (query or "").strip()
        if not q:
            return SearchResult(response=self.empty_query_response)

        self.logger.info("search: query='%s' (start)", q[:120])

        found: Optional[Product] = None
        score: Optional[float] = None
        try:
            await self.ensure_indexed()

            embedded = await self.embedder.embed(query)
            if not embedded.ok:
                return self._error_result(embedded.error, found, score)

            hits = self.store.nearest_neighbor(embedded.value, top_k=self.top_k)
            if hits:
                record, score = hits[0]
                if self.is_relevant(score):
                    found = record.to_product()
                    self.logger.info(
                        "The product [%s] fits with the search criteria [%s][%.2f]",
                        found.name, q[:120], score,
                    )
                else:
                    self.logger.info("search: best hit id=%s score=%.2f below threshold %.2f", record.id, score, self.relevance_threshold)
            else:
                self.logger.warning("search: index returned no hits")

            messages = self.build_messages(query, found)
            self.logger.debug("Chat history created: %s", json.dumps(messages))

            completion = await self.chat_client.complete(messages)
            if not completion.ok:
                return self._error_result(completion.error, found, score)

            self.logger.info("search: found=%s answer_chars=%d (done)", found is not None, len(completion.value))
            return SearchResult(
                products=[found if found is not None else Product.empty()],
                response=completion.value,
                score=score,
                found=found is not None,
            )

        except ConfigurationError:
            self.logger.critical("search: configuration error", exc_info=True)
            raise
        except Exception as e:
            self.logger.error("search: failed: %s", e, exc_info=True)
            return self._error_result(e, found, score)

    def _error_result(self, error: BaseException, found: Optional[Product], score: Optional[float]) -> SearchResult:
        message = str(error) or error.__class__.__name__
        self.logger.error("search: returning error response: %s", message)
        return SearchResult(
            products=[found if found is not None else Product.empty()],
            response=f"An error occurred: {message}",
            score=score,
            found=found is not None,
        )
