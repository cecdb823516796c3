from decimal import Decimal

import pytest

from retailpos.core.errors import ValidationError
from retailpos.v1_0.repositories import CostPriceRepository
from retailpos.v1_0.services import PricingService, compute_sale_price


@pytest.mark.parametrize(
    "cost, margin, expected",
    [
        (100, 20, Decimal("120.00")),
        (Decimal("19.99"), 15, Decimal("22.99")),
        (Decimal("10.005"), 0, Decimal("10.01")),
        (50, -10, Decimal("45.00")),
        (0, 35, Decimal("0.00")),
        (2.5, 40, Decimal("3.50")),
    ],
)
def test_compute_sale_price(cost, margin, expected):
    assert compute_sale_price(cost, margin) == expected


def test_compute_sale_price_rejects_negative_cost():
    with pytest.raises(ValidationError):
        compute_sale_price(-1, 20)


@pytest.mark.parametrize("bad", [float("nan"), float("inf"), "12", None, True])
def test_compute_sale_price_rejects_non_numbers(bad):
    with pytest.raises(ValidationError):
        compute_sale_price(bad, 10)
    with pytest.raises(ValidationError):
        compute_sale_price(10, bad)


@pytest.fixture
def pricing():
    return PricingService(cost_price_repository=CostPriceRepository())


async def test_bulk_reprice_updates_cost_and_price(db, catalog, pricing, read):
    async with db.session() as s:
        result = await pricing.bulk_reprice(catalog.acme_id, 10, s)

    assert result.updated_count == 2
    assert result.message == f"Prices updated: 2 products for supplier {catalog.acme_id}."

    cola = await read(catalog.cola_id)
    assert cola.cost == 110.00
    assert cola.sale_price == 132.00
    big = await read(catalog.cola_big_id)
    assert big.cost == 220.00
    assert big.sale_price == 275.00


async def test_bulk_reprice_leaves_other_suppliers_alone(db, catalog, pricing, read):
    async with db.session() as s:
        await pricing.bulk_reprice(catalog.acme_id, 10, s)

    chips = await read(catalog.chips_id)
    assert chips.cost == 2.50
    assert chips.sale_price == 3.50


async def test_bulk_reprice_negative_percentage_lowers_prices(db, catalog, pricing, read):
    async with db.session() as s:
        result = await pricing.bulk_reprice(catalog.acme_id, -10, s)

    assert result.updated_count == 2
    cola = await read(catalog.cola_id)
    assert cola.cost == 90.00
    assert cola.sale_price == 108.00


async def test_bulk_reprice_rejects_zero(db, catalog, pricing, read):
    async with db.session() as s:
        with pytest.raises(ValidationError) as exc:
            await pricing.bulk_reprice(catalog.acme_id, 0, s)

    assert "other than zero" in exc.value.message
    cola = await read(catalog.cola_id)
    assert cola.cost == 100.00
    assert cola.sale_price == 120.00


async def test_bulk_reprice_unknown_supplier_updates_nothing(db, catalog, pricing):
    async with db.session() as s:
        result = await pricing.bulk_reprice(9999, 10, s)

    assert result.updated_count == 0
    assert result.message == "Prices updated: 0 products for supplier 9999."


async def test_bulk_reprice_compounds_when_applied_twice(db, catalog, pricing, read):
    async with db.session() as s:
        await pricing.bulk_reprice(catalog.acme_id, 10, s)
    async with db.session() as s:
        await pricing.bulk_reprice(catalog.acme_id, 10, s)

    cola = await read(catalog.cola_id)
    assert cola.cost == 121.00
    assert cola.sale_price == 145.20


@pytest.mark.parametrize("pct", [-100, -150, 1000.5])
async def test_bulk_reprice_rejects_out_of_range_percentages(db, catalog, pricing, read, pct):
    async with db.session() as s:
        with pytest.raises(ValidationError):
            await pricing.bulk_reprice(catalog.acme_id, pct, s)

    cola = await read(catalog.cola_id)
    assert cola.cost == 100.00
    assert cola.sale_price == 120.00


async def test_bulk_reprice_accepts_just_above_minus_hundred(db, catalog, pricing, read):
    async with db.session() as s:
        result = await pricing.bulk_reprice(catalog.acme_id, -99.5, s)

    assert result.updated_count == 2
    cola = await read(catalog.cola_id)
    assert cola.cost == 0.50
