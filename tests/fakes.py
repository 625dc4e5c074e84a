# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-10-16
# Description: fakes.py
# -----------------------------------------------------------------------------
import asyncio
import re
from typing import Dict, List, Optional

import numpy as np

from utility.errors import GatewayFailure
from utility.gateway_result import GatewayResult

VOCAB = ["tent", "two", "person", "stove", "cook", "lantern", "light", "jacket", "rain"]


class FakeEmbedder:
    """
    Bag-of-words embedder over a tiny fixed vocabulary.
    Records every text it was asked to embed.
    """

    def __init__(
        self,
        vocab: Optional[List[str]] = None,
        *,
        fail_on: Optional[set] = None,
        raise_on: Optional[set] = None,
        delay: float = 0.0,
        overrides: Optional[Dict[str, List[float]]] = None,
    ):
        self.vocab = vocab or VOCAB
        self.fail_on = fail_on or set()
        self.raise_on = raise_on or set()
        self.delay = delay
        self.overrides = overrides or {}
        self.calls: List[str] = []

    async def embed(self, text: str) -> GatewayResult[np.ndarray]:
        self.calls.append(text)
        if self.delay:
            await asyncio.sleep(self.delay)

        if any(marker in text for marker in self.raise_on):
            raise ConnectionError("embedding service unreachable")
        if any(marker in text for marker in self.fail_on):
            return GatewayResult.failure(GatewayFailure("embedding", "embed", "rate limited", retryable=True))

        if text in self.overrides:
            return GatewayResult.success(np.asarray(self.overrides[text], dtype=np.float32))

        tokens = re.findall(r"\w+", text.lower())
        vec = np.asarray([tokens.count(w) for w in self.vocab], dtype=np.float32)
        return GatewayResult.success(vec)

    def product_calls(self) -> List[str]:
        return [c for c in self.calls if c.startswith("[")]


class FakeChat:
    def __init__(self, answer: str = "Pitch it and sleep tight!", *, fail: bool = False, raise_exc: bool = False):
        self.answer = answer
        self.fail = fail
        self.raise_exc = raise_exc
        self.calls: List[List[Dict[str, str]]] = []

    async def complete(self, messages):
        self.calls.append(messages)
        if self.raise_exc:
            raise RuntimeError("chat exploded")
        if self.fail:
            return GatewayResult.failure(GatewayFailure("chat", "complete", "401 invalid api key"))
        return GatewayResult.success(self.answer)

    @property
    def last_user_prompt(self) -> str:
        return self.calls[-1][-1]["content"]
