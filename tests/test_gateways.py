# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-10-16
# Description: test_gateways.py
# -----------------------------------------------------------------------------
import asyncio
import logging
from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock

import httpx
import numpy as np
import openai
import pytest

from chat.ChatGateway import ChatGateway
from chat.OpenAIChat import OpenAIChat
from config.Config import Config
from embedding.EmbeddingGateway import EmbeddingGateway
from embedding.ProductEmbedder import ProductEmbedder
from utility.errors import GatewayFailure
from utility.gateway_result import GatewayResult
from utility.retry import call_gateway

logger = logging.getLogger(__name__)


@pytest.fixture
def cfg() -> Config:
    return Config(openai_api_key="test-key", openai_chat_model="gpt-test", openai_embed_model="embed-test")


def _embedding_client(*side_effect):
    client = MagicMock()
    client.embeddings.create = AsyncMock(side_effect=list(side_effect))
    return client


def _chat_client(*side_effect):
    client = MagicMock()
    client.chat.completions.create = AsyncMock(side_effect=list(side_effect))
    return client


def _chat_response(content):
    return SimpleNamespace(
        choices=[SimpleNamespace(message=SimpleNamespace(content=content))],
        usage=None,
        model="gpt-test",
    )


# -----------------------------------------------------------------------------
# GatewayResult / call_gateway
# -----------------------------------------------------------------------------
def test_gateway_result_unwrap():
    assert GatewayResult.success(3).unwrap() == 3

    failure = GatewayFailure("chat", "complete", "boom")
    result = GatewayResult.failure(failure)
    assert result.ok is False
    with pytest.raises(GatewayFailure):
        result.unwrap()


@pytest.mark.asyncio
async def test_call_gateway_retries_then_succeeds():
    fn = AsyncMock(side_effect=[ConnectionError("reset"), "done"])

    result = await call_gateway("chat", "complete", fn, timeout=1.0, max_retries=3, logger=logger, initial_delay=0)

    assert result.ok
    assert result.value == "done"
    assert fn.await_count == 2


@pytest.mark.asyncio
async def test_call_gateway_gives_up_with_failure():
    fn = AsyncMock(side_effect=ConnectionError("reset"))

    result = await call_gateway("embedding", "embed", fn, timeout=1.0, max_retries=2, logger=logger, initial_delay=0)

    assert not result.ok
    assert result.error.gateway == "embedding"
    assert result.error.message == "reset"
    assert isinstance(result.error.cause, ConnectionError)
    assert fn.await_count == 2


@pytest.mark.asyncio
async def test_call_gateway_timeout_is_retryable_failure():
    async def slow():
        await asyncio.sleep(1)
        return "late"

    result = await call_gateway("chat", "complete", slow, timeout=0.01, max_retries=2, logger=logger, initial_delay=0)

    assert not result.ok
    assert result.error.retryable is True
    assert "timed out" in result.error.message


@pytest.mark.asyncio
async def test_call_gateway_does_not_retry_auth_error():
    request = httpx.Request("POST", "https://api.openai.com/v1/embeddings")
    response = httpx.Response(401, request=request)
    fn = AsyncMock(side_effect=openai.AuthenticationError("invalid api key", response=response, body=None))

    result = await call_gateway("embedding", "embed", fn, timeout=1.0, max_retries=3, logger=logger, initial_delay=5)

    assert not result.ok
    assert result.error.retryable is False
    assert "invalid api key" in result.error.message
    assert isinstance(result.error.cause, openai.AuthenticationError)
    assert fn.await_count == 1


# -----------------------------------------------------------------------------
# ProductEmbedder
# -----------------------------------------------------------------------------
@pytest.mark.asyncio
async def test_embedder_returns_normalized_float32_vector(cfg):
    client = _embedding_client(SimpleNamespace(data=[SimpleNamespace(embedding=[3.0, 4.0])]))
    embedder = ProductEmbedder(cfg, client=client)

    result = await embedder.embed("tent")

    assert isinstance(embedder, EmbeddingGateway)
    assert result.ok
    assert result.value.dtype == np.float32
    np.testing.assert_allclose(result.value, [0.6, 0.8], rtol=1e-5)
    client.embeddings.create.assert_awaited_once_with(model="embed-test", input="tent")


@pytest.mark.asyncio
async def test_embedder_failure_is_returned_not_raised(cfg):
    client = _embedding_client(RuntimeError("429 rate limit"))
    embedder = ProductEmbedder(cfg, client=client, max_retries=1)

    result = await embedder.embed("tent")

    assert not result.ok
    assert "429" in result.error.message


# -----------------------------------------------------------------------------
# OpenAIChat
# -----------------------------------------------------------------------------
@pytest.mark.asyncio
async def test_chat_complete_returns_first_text(cfg):
    client = _chat_client(_chat_response("Sleep tight in this tent!"))
    chat = OpenAIChat(cfg=cfg, client=client, temperature=0.2, max_tokens=64)
    messages = [{"role": "user", "content": "tent?"}]

    result = await chat.complete(messages)

    assert isinstance(chat, ChatGateway)
    assert result.ok
    assert result.value == "Sleep tight in this tent!"
    kwargs = client.chat.completions.create.await_args.kwargs
    assert kwargs["model"] == "gpt-test"
    assert kwargs["messages"] == messages
    assert kwargs["temperature"] == 0.2
    assert kwargs["max_tokens"] == 64


@pytest.mark.asyncio
async def test_chat_empty_content_is_failure(cfg):
    client = _chat_client(_chat_response(None))
    chat = OpenAIChat(cfg=cfg, client=client, max_retries=1)

    result = await chat.complete([{"role": "user", "content": "tent?"}])

    assert not result.ok
    assert "no text" in result.error.message


@pytest.mark.asyncio
async def test_chat_rejects_empty_messages(cfg):
    chat = OpenAIChat(cfg=cfg, client=_chat_client())

    result = await chat.complete([])

    assert not result.ok


def test_chat_requires_model():
    cfg = SimpleNamespace(openai_api_key="k", openai_chat_model="")
    with pytest.raises(ValueError):
        OpenAIChat(cfg=cfg, client=MagicMock())


# -----------------------------------------------------------------------------
# Config
# -----------------------------------------------------------------------------
def test_config_requires_api_key():
    with pytest.raises(ValueError, match="OPENAI_API_KEY"):
        Config(openai_api_key="")


def test_config_from_env_keeps_defaults(monkeypatch):
    monkeypatch.setenv("OPENAI_API_KEY", "sk-test")
    monkeypatch.delenv("OPENAI_CHAT_MODEL", raising=False)
    monkeypatch.setenv("OPENAI_EMBED_MODEL", "text-embedding-3-large")

    cfg = Config.from_env()

    assert cfg.openai_chat_model == "gpt-4o-mini"
    assert cfg.openai_embed_model == "text-embedding-3-large"
    assert "openai_api_key" not in cfg.summary()
