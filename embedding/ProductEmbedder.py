# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-10-13
# Description: ProductEmbedder
# -----------------------------------------------------------------------------
from typing import Optional

import numpy as np
from openai import AsyncOpenAI

import settings
from config.Config import Config
from embedding.EmbeddingGateway import EmbeddingGateway
from utility.gateway_result import GatewayResult
from utility.logging_utils import get_class_logger
from utility.retry import call_gateway


class ProductEmbedder(EmbeddingGateway):
    def __init__(
            self,
            cfg: Config,
            *,
            normalize: bool = True,
            timeout: float | None = None,
            max_retries: int | None = None,
            client: Optional[AsyncOpenAI] = None,
            logger=None,
    ):
        self.cfg = cfg
        self.normalize = normalize
        self.timeout = timeout or settings.GATEWAY_TIMEOUT_SECONDS
        self.max_retries = max_retries or settings.GATEWAY_MAX_RETRIES
        self.logger = logger or get_class_logger(self.__class__)

        # SDK-level retries are disabled; call_gateway owns the retry policy
        self.client = client or AsyncOpenAI(
            api_key=cfg.openai_api_key,
            base_url=cfg.openai_base_url or None,
            organization=cfg.openai_org or None,
            timeout=self.timeout,
            max_retries=0,
        )
        self.model = cfg.openai_embed_model or "text-embedding-3-small"
        self.logger.info("OpenAI embedder initialised (model=%s, normalize=%s)", self.model, self.normalize)

    async def _create(self, text: str) -> np.ndarray:
        resp = await self.client.embeddings.create(model=self.model, input=text)

        vec = np.asarray(resp.data[0].embedding, dtype=np.float32)

        # Normalize vectors (cosine-friendly)
        if self.normalize:
            vec = vec / (np.linalg.norm(vec) + 1e-12)
        return vec

    async def embed(self, text: str) -> GatewayResult[np.ndarray]:
        if not text or not text.strip():
            self.logger.warning("embed called with empty text")

        result = await call_gateway(
            "embedding",
            "embed",
            lambda: self._create(text),
            timeout=self.timeout,
            max_retries=self.max_retries,
            logger=self.logger,
        )
        if result.ok:
            self.logger.debug("Embedding generated: vector_length=%d", result.value.shape[0])
        return result
