# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-10-15
# Description: TestRunner
# -----------------------------------------------------------------------------

from __future__ import annotations

import logging
from typing import Dict, Optional

from chat.ChatGateway import ChatGateway
from embedding.EmbeddingGateway import EmbeddingGateway
from health.ChatHealth import ChatHealth
from health.EmbeddingHealth import EmbeddingHealth
from utility.logging_utils import get_class_logger


class TestRunner:
    """
    Orchestrates all gateway smoke tests and reports a consolidated result.

    Tests included:
      - EmbeddingHealth (embedding gateway)
      - ChatHealth      (chat gateway)
    """

    # not a pytest test class
    __test__ = False

    def __init__(
        self,
        embedder: EmbeddingGateway,
        chat_client: ChatGateway,
        expected_dim: Optional[int] = None,
        logger: Optional[logging.Logger] = None,
    ):
        self.logger = logger or get_class_logger(self.__class__)
        self.embedding_health = EmbeddingHealth(embedder, expected_dim=expected_dim)
        self.chat_health = ChatHealth(chat_client)

    # -------------------------------------------------------------------------
    async def run_all(self, include_chat: bool = True) -> Dict[str, bool]:
        """
        Run all configured smoke tests.

        :param include_chat: If False, skips the (billable) chat completion test.
        :return: Dict mapping test names to True/False.
        """
        self.logger.info("Starting smoke test suite (include_chat=%s)", include_chat)

        results: Dict[str, bool] = {}

        try:
            ok_embed = await self.embedding_health.run()
            results["embedding_health"] = ok_embed
            self._log_result("EmbeddingHealth", ok_embed)
        except Exception as e:
            self.logger.exception("EmbeddingHealth.run() raised an exception: %s", e)
            results["embedding_health"] = False

        if include_chat:
            try:
                ok_chat = await self.chat_health.run()
                results["chat_health"] = ok_chat
                self._log_result("ChatHealth", ok_chat)
            except Exception as e:
                self.logger.exception("ChatHealth.run() raised an exception: %s", e)
                results["chat_health"] = False

        self._log_summary(results)
        return results

    # -------------------------------------------------------------------------
    def _log_result(self, name: str, ok: bool) -> None:
        if ok:
            self.logger.info("%s: PASS", name)
        else:
            self.logger.error("%s: FAIL", name)

    def _log_summary(self, results: Dict[str, bool]) -> None:
        total = len(results)
        passed = sum(1 for v in results.values() if v)
        failed = total - passed

        self.logger.info("Smoke test summary: %d total, %d passed, %d failed", total, passed, failed)

        for name, ok in results.items():
            status = "PASS" if ok else "FAIL"
            self.logger.info("  %s: %s", name, status)
