"""
Pytest fixtures for the RetailPOS tests.

Each test gets its own SQLite file store, an application container bound to
it, an HTTP client over the ASGI app and a small seeded catalog.
"""

import os

# settings are read at import time
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///./retailpos-test.db")
os.environ.setdefault("LOG_LEVEL", "WARNING")

from decimal import Decimal
from types import SimpleNamespace

import pytest
from dependency_injector import providers
from httpx import AsyncClient, ASGITransport

from retailpos.app_containers import ApplicationContainer
from retailpos.main import create_app
from retailpos.storage.database import Database
from retailpos.v1_0.models import Supplier, Category, Product, CostPrice


@pytest.fixture
async def db(tmp_path):
    """Fresh file-backed store with the schema created."""
    database = Database(f"sqlite+aiosqlite:///{tmp_path / 'pos.db'}")
    await database.create_all()
    yield database
    await database.dispose()


@pytest.fixture
def container(db):
    c = ApplicationContainer()
    c.database.override(providers.Object(db))
    yield c
    c.database.reset_override()


@pytest.fixture
async def client(container):
    app = create_app(container)
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest.fixture
async def catalog(db):
    """
    Two suppliers, one category and three priced products.

    Acme:  Cola 500ml  cost 100.00 margin 20 -> 120.00, stock 5
           Cola 1.5L   cost 200.00 margin 25 -> 250.00, stock 8
    Beta:  Chips       cost   2.50 margin 40 ->   3.50, stock 10
    """
    async with db.unit_of_work() as s:
        acme = Supplier(trade_name="Acme", tax_id="30-1", phone="111")
        beta = Supplier(trade_name="Beta")
        drinks = Category(name="Drinks")
        s.add_all([acme, beta, drinks])
        await s.flush()

        cola = Product(name="Cola 500ml", sku="COLA-500", stock_on_hand=5,
                       unit_of_measure="unit", category_id=drinks.id)
        cola_big = Product(name="Cola 1.5L", sku="COLA-1500", stock_on_hand=8,
                           unit_of_measure="unit", category_id=drinks.id)
        chips = Product(name="Chips", sku="CH-1", stock_on_hand=10,
                        unit_of_measure="bag")
        s.add_all([cola, cola_big, chips])
        await s.flush()

        s.add_all([
            CostPrice(product_id=cola.id, supplier_id=acme.id, cost=Decimal("100.00"),
                      margin_percentage=Decimal("20"), sale_price=Decimal("120.00")),
            CostPrice(product_id=cola_big.id, supplier_id=acme.id, cost=Decimal("200.00"),
                      margin_percentage=Decimal("25"), sale_price=Decimal("250.00")),
            CostPrice(product_id=chips.id, supplier_id=beta.id, cost=Decimal("2.50"),
                      margin_percentage=Decimal("40"), sale_price=Decimal("3.50")),
        ])
        await s.flush()

    return SimpleNamespace(
        acme_id=acme.id,
        beta_id=beta.id,
        drinks_id=drinks.id,
        cola_id=cola.id,
        cola_big_id=cola_big.id,
        chips_id=chips.id,
    )


async def read_product(db: Database, product_id: int) -> SimpleNamespace:
    """Current stock and sale price of a product, read in a fresh session."""
    async with db.session() as s:
        p = await s.get(Product, product_id)
        cp = (await s.execute(
            CostPrice.__table__.select().where(CostPrice.product_id == product_id)
        )).mappings().first()
        return SimpleNamespace(
            stock_on_hand=p.stock_on_hand,
            cost=float(cp["cost"]),
            sale_price=float(cp["sale_price"]),
        )


@pytest.fixture
def read(db):
    async def _read(product_id: int) -> SimpleNamespace:
        return await read_product(db, product_id)
    return _read
