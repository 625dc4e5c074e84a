# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-10-15
# Description: ChatHealth
# -----------------------------------------------------------------------------
import time
import logging
from typing import Optional

from chat.ChatGateway import ChatGateway
from utility.logging_utils import get_logger


class ChatHealth:
    """Smoke test for the chat gateway: a tiny prompt must come back with text."""

    def __init__(self, chat_client: ChatGateway, logger: Optional[logging.Logger] = None):
        self.chat_client = chat_client
        self.logger = logger or get_logger(__name__)

    async def run(self) -> bool:
        messages = [
            {"role": "system", "content": "You are a test assistant."},
            {"role": "user", "content": "Reply with a single word: OK"},
        ]

        start = time.time()
        result = await self.chat_client.complete(messages)
        elapsed_ms = (time.time() - start) * 1000.0

        if not result.ok:
            self.logger.error("Chat healthcheck FAILED: %s", result.error)
            return False

        if not (result.value or "").strip():
            self.logger.error("Chat healthcheck returned empty text.")
            return False

        self.logger.info("Chat healthcheck PASSED in %.1f ms.", elapsed_ms)
        return True
