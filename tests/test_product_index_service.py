# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-10-16
# Description: test_product_index_service.py
# -----------------------------------------------------------------------------
from decimal import Decimal

import pytest

from fakes import FakeEmbedder
from product.Product import Product
from services.ProductIndexService import ProductIndexService
from utility.errors import DimensionMismatchError
from vectorstore.InMemoryProductVectorStore import InMemoryProductVectorStore


@pytest.fixture
def store() -> InMemoryProductVectorStore:
    return InMemoryProductVectorStore()


def test_describe_synthesizes_product_text(tent):
    assert ProductIndexService.describe(tent) == (
        "[Tent] is a product that costs [99.99] and is described as [2-person tent]"
    )


@pytest.mark.asyncio
async def test_fill_embeds_and_upserts_every_product(store, embedder, tent, stove):
    svc = ProductIndexService(store=store, embedder=embedder)

    report = await svc.fill([tent, stove])

    assert report.requested == 2
    assert report.indexed == 2
    assert report.failed_ids == []
    assert store.count() == 2
    assert sorted(embedder.calls) == sorted([svc.describe(tent), svc.describe(stove)])
    assert store.get(tent.id).name == "Tent"
    assert store.get(tent.id).price == Decimal("99.99")


@pytest.mark.asyncio
async def test_fill_with_no_products_is_noop(store, embedder):
    svc = ProductIndexService(store=store, embedder=embedder)

    report = await svc.fill([])

    assert report.requested == 0
    assert report.indexed == 0
    assert embedder.calls == []
    assert store.count() == 0


@pytest.mark.asyncio
async def test_failed_item_does_not_abort_fill(store, tent, stove):
    lantern = Product(id=3, name="Lantern", description="Bright light", price=Decimal("15"))
    embedder = FakeEmbedder(fail_on={"Stove"}, raise_on={"Lantern"})
    svc = ProductIndexService(store=store, embedder=embedder, max_concurrency=1)

    report = await svc.fill([tent, stove, lantern])

    assert report.indexed == 1
    assert sorted(report.failed_ids) == [stove.id, lantern.id]
    assert store.count() == 1
    assert store.get(tent.id) is not None
    assert len(embedder.calls) == 3


@pytest.mark.asyncio
async def test_dimension_mismatch_aborts_fill(store, tent, stove):
    embedder = FakeEmbedder(overrides={
        ProductIndexService.describe(tent): [1.0, 0.0, 0.0],
        ProductIndexService.describe(stove): [1.0, 0.0],
    })
    svc = ProductIndexService(store=store, embedder=embedder, max_concurrency=1)

    with pytest.raises(DimensionMismatchError):
        await svc.fill([tent, stove])


@pytest.mark.asyncio
async def test_fill_from_catalog_reads_catalog(store, embedder, catalog):
    svc = ProductIndexService(store=store, embedder=embedder)

    report = await svc.fill_from_catalog(catalog)

    assert report.indexed == len(catalog)
    assert store.count() == len(catalog)


@pytest.mark.asyncio
async def test_empty_vector_is_item_failure(store, tent, stove):
    embedder = FakeEmbedder(overrides={ProductIndexService.describe(stove): []})
    svc = ProductIndexService(store=store, embedder=embedder)

    report = await svc.fill([tent, stove])

    assert report.indexed == 1
    assert report.failed_ids == [stove.id]
