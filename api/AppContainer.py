# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-10-15
# Description: AppContainer.py
# -----------------------------------------------------------------------------
from typing import Optional

import settings
from catalog.InMemoryProductCatalog import InMemoryProductCatalog
from catalog.ProductCatalog import ProductCatalog
from chat.ChatGateway import ChatGateway
from chat.OpenAIChat import OpenAIChat
from config.Config import Config
from embedding.EmbeddingGateway import EmbeddingGateway
from embedding.ProductEmbedder import ProductEmbedder
from health.TestRunner import TestRunner
from services.HealthService import HealthService
from services.ProductIndexService import ProductIndexService
from services.ProductSearchService import ProductSearchService
from utility.logging_utils import get_class_logger
from vectorstore.InMemoryProductVectorStore import InMemoryProductVectorStore
from vectorstore.ProductVectorStore import ProductVectorStore


class AppContainer:
    """
    Owns heavy object instantiation and application wiring.
    Any collaborator can be passed in; the rest are built from Config.
    """

    def __init__(
        self,
        *,
        cfg: Optional[Config] = None,
        catalog: Optional[ProductCatalog] = None,
        embedder: Optional[EmbeddingGateway] = None,
        chat_client: Optional[ChatGateway] = None,
        store: Optional[ProductVectorStore] = None,
    ) -> None:
        self.logger = get_class_logger(self.__class__)

        # Configuration is only needed for the OpenAI gateways
        if cfg is None and (embedder is None or chat_client is None):
            cfg = Config.from_env()
        self.cfg = cfg
        if cfg is not None:
            self.logger.info("Config: %s", cfg.summary())

        # Catalog (read once, at fill time)
        self.catalog = catalog or InMemoryProductCatalog.from_json_file(settings.CATALOG_PATH)

        # Gateways
        self.embedder = embedder or ProductEmbedder(cfg=cfg)
        self.chat_client = chat_client or OpenAIChat(cfg=cfg)

        # Core infrastructure
        self.store = store if store is not None else InMemoryProductVectorStore(name="products")

        self.index_service = ProductIndexService(
            store=self.store,
            embedder=self.embedder,
        )

        # Return a singleton ProductSearchService instance
        self.search_service = ProductSearchService(
            catalog=self.catalog,
            store=self.store,
            embedder=self.embedder,
            chat_client=self.chat_client,
            index_service=self.index_service,
        )

        # Smoke tests / health
        self.test_runner = TestRunner(embedder=self.embedder, chat_client=self.chat_client)
        self.health_service = HealthService(
            test_runner=self.test_runner,
            search_service=self.search_service,
        )
