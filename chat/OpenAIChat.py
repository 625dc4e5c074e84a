# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-10-13
# Description: OpenAIChat
# -----------------------------------------------------------------------------
from dataclasses import dataclass
from typing import Dict, Any, List, Optional

from openai import AsyncOpenAI

import settings
from chat.ChatGateway import ChatGateway, Message
from utility.errors import GatewayFailure
from utility.gateway_result import GatewayResult
from utility.logging_utils import get_class_logger
from utility.retry import call_gateway


@dataclass
class OpenAIChat(ChatGateway):
    """
        OpenAI chat wrapper for product search.

        Expected Config fields:
          cfg.openai_api_key: str
          cfg.openai_org: str | None (optional)
          cfg.openai_base_url: str | None (optional)
          cfg.openai_chat_model: str  (e.g. "gpt-4o-mini", "gpt-4o", etc.)
    """

    cfg: Any
    temperature: float = settings.CHAT_DEFAULTS["temperature"]
    max_tokens: int = settings.CHAT_DEFAULTS["max_tokens"]
    timeout: float = settings.GATEWAY_TIMEOUT_SECONDS
    max_retries: int = settings.GATEWAY_MAX_RETRIES
    client: Optional[AsyncOpenAI] = None
    logger: Any = None

    def __post_init__(self) -> None:
        self.logger = self.logger or get_class_logger(self.__class__)

        if not getattr(self.cfg, "openai_api_key", None):
            raise ValueError("Config is missing openai_api_key")

        self.model = getattr(self.cfg, "openai_chat_model", None)
        if not self.model:
            raise ValueError("Config missing openai_chat_model.")

        if self.client is None:
            self.client = AsyncOpenAI(
                api_key=self.cfg.openai_api_key,
                base_url=getattr(self.cfg, "openai_base_url", None) or None,
                organization=getattr(self.cfg, "openai_org", None) or None,
                timeout=self.timeout,
                max_retries=0,
            )

        self.logger.info("OpenAIChat initialised (model=%s)", self.model)

    # Standard chat call
    async def chat(
            self,
            messages: List[Message],
            temperature: Optional[float] = None,
            max_tokens: Optional[int] = None,
            extra_params: Optional[Dict[str, Any]] = None,
    ) -> Any:
        if not messages:
            raise ValueError("messages must be non-empty.")

        params: Dict[str, Any] = {
            "model": self.model,
            "messages": messages,
            "temperature": self.temperature if temperature is None else temperature,
            "max_tokens": self.max_tokens if max_tokens is None else max_tokens,
        }
        if extra_params:
            params.update(extra_params)

        self.logger.debug(
            "Chat request: model=%s temp=%s max_tokens=%s",
            self.model, params["temperature"], params["max_tokens"]
        )

        resp = await self.client.chat.completions.create(**params)

        self.logger.debug("Raw ChatCompletion response: %r", resp)
        return resp

    @staticmethod
    def first_text(resp: Any) -> str:
        try:
            content = resp.choices[0].message.content
        except (AttributeError, IndexError, TypeError) as e:
            raise RuntimeError(f"Unexpected chat response format: {e}") from e
        if not content:
            raise RuntimeError("Chat response contained no text")
        return content

    async def complete(self, messages: List[Message]) -> GatewayResult[str]:
        if not messages:
            return GatewayResult.failure(GatewayFailure("chat", "complete", "messages must be non-empty"))

        async def _call() -> str:
            resp = await self.chat(messages)
            self.logger.debug("Token usage: %r", getattr(resp, "usage", None))
            return self.first_text(resp)

        result = await call_gateway(
            "chat",
            "complete",
            _call,
            timeout=self.timeout,
            max_retries=self.max_retries,
            logger=self.logger,
        )
        if result.ok:
            self.logger.info("Chat answer generated (model=%s, chars=%d)", self.model, len(result.value))
        return result
