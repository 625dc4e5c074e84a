# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-10-16
# Description: conftest.py
# -----------------------------------------------------------------------------

import sys
from decimal import Decimal
from pathlib import Path

import pytest

# add project root to sys.path
ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(ROOT))

from catalog.InMemoryProductCatalog import InMemoryProductCatalog  # noqa: E402
from fakes import FakeChat, FakeEmbedder  # noqa: E402
from product.Product import Product  # noqa: E402


@pytest.fixture
def tent() -> Product:
    return Product(id=1, name="Tent", description="2-person tent", price=Decimal("99.99"), image_url="tent.png")


@pytest.fixture
def stove() -> Product:
    return Product(id=2, name="Stove", description="Compact stove to cook outdoors", price=Decimal("49.50"))


@pytest.fixture
def catalog(tent, stove) -> InMemoryProductCatalog:
    return InMemoryProductCatalog([tent, stove])


@pytest.fixture
def embedder() -> FakeEmbedder:
    return FakeEmbedder()


@pytest.fixture
def chat() -> FakeChat:
    return FakeChat()
