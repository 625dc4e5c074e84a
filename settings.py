# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-10-12
# Description: settings.py
# -----------------------------------------------------------------------------
import os
from pathlib import Path
from typing import Any, Dict


def _env(name: str, default: str = "") -> str:
    """Read env var safely and strip whitespace."""
    return (os.getenv(name) or default).strip()


def _env_int(name: str, default: int) -> int:
    v = _env(name, "")
    if v == "":
        return default
    try:
        return int(v)
    except ValueError as e:
        raise RuntimeError(f"Env var {name} must be an int, got {v!r}") from e


def _env_float(name: str, default: float) -> float:
    v = _env(name, "")
    if v == "":
        return default
    try:
        return float(v)
    except ValueError as e:
        raise RuntimeError(f"Env var {name} must be a float, got {v!r}") from e


def _env_bool(name: str, default: bool) -> bool:
    v = _env(name, "")
    if v == "":
        return default
    v = v.lower()
    if v in ("1", "true", "t", "yes", "y", "on"):
        return True
    if v in ("0", "false", "f", "no", "n", "off"):
        return False
    raise RuntimeError(f"Env var {name} must be a boolean, got {v!r}")


# -----------------------------------------------------------------------------
# Retrieval
# -----------------------------------------------------------------------------
# A hit counts as a match only when its cosine similarity is strictly above this
RELEVANCE_THRESHOLD = _env_float("PRODUCT_SEARCH_RELEVANCE_THRESHOLD", 0.4)

SEARCH_TOP_K = _env_int("PRODUCT_SEARCH_TOP_K", 1)


# -----------------------------------------------------------------------------
# Gateways (embedding + chat)
# -----------------------------------------------------------------------------
GATEWAY_TIMEOUT_SECONDS = _env_float("PRODUCT_SEARCH_GATEWAY_TIMEOUT_SECONDS", 30.0)
GATEWAY_MAX_RETRIES = _env_int("PRODUCT_SEARCH_GATEWAY_MAX_RETRIES", 3)

CHAT_DEFAULTS: Dict[str, Any] = {
    "temperature": _env_float("PRODUCT_SEARCH_CHAT_TEMPERATURE", 0.7),
    "max_tokens": _env_int("PRODUCT_SEARCH_CHAT_MAX_TOKENS", 256),
}


# -----------------------------------------------------------------------------
# Indexing
# -----------------------------------------------------------------------------
INDEX_MAX_CONCURRENCY = _env_int("PRODUCT_SEARCH_INDEX_MAX_CONCURRENCY", 4)

# Fill the index during app startup rather than on the first request
WARM_INDEX_ON_STARTUP = _env_bool("PRODUCT_SEARCH_WARM_INDEX", True)


# -----------------------------------------------------------------------------
# Catalog
# -----------------------------------------------------------------------------
CATALOG_PATH = Path(
    _env("PRODUCT_SEARCH_CATALOG_PATH", str(Path(__file__).resolve().parent / "data" / "products.json"))
)


# -----------------------------------------------------------------------------
# Sanity checks (tunable)
# -----------------------------------------------------------------------------
if not -1.0 <= RELEVANCE_THRESHOLD <= 1.0:
    raise RuntimeError(f"RELEVANCE_THRESHOLD must be within [-1, 1], got {RELEVANCE_THRESHOLD}")

if SEARCH_TOP_K < 1:
    raise RuntimeError(f"SEARCH_TOP_K must be >= 1, got {SEARCH_TOP_K}")

if GATEWAY_TIMEOUT_SECONDS <= 0:
    raise RuntimeError(f"GATEWAY_TIMEOUT_SECONDS must be positive, got {GATEWAY_TIMEOUT_SECONDS}")

if GATEWAY_MAX_RETRIES < 1:
    raise RuntimeError(f"GATEWAY_MAX_RETRIES must be >= 1, got {GATEWAY_MAX_RETRIES}")

if INDEX_MAX_CONCURRENCY < 1:
    raise RuntimeError(f"INDEX_MAX_CONCURRENCY must be >= 1, got {INDEX_MAX_CONCURRENCY}")
