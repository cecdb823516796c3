from retailpos.v1_0.models import Product, CostPrice
from retailpos.v1_0.repositories import ProductRepository


async def test_create_and_list_suppliers(client, catalog):
    res = await client.post(
        "/suppliers", json={"trade_name": "  Distribuidora Norte ", "phone": "555"}
    )
    assert res.status_code == 201
    body = res.json()
    assert body["message"] == "Supplier created."
    assert body["supplier"]["trade_name"] == "Distribuidora Norte"
    assert body["supplier"]["tax_id"] is None

    listed = await client.get("/suppliers")
    assert listed.status_code == 200
    assert [s["trade_name"] for s in listed.json()] == ["Acme", "Beta", "Distribuidora Norte"]


async def test_create_supplier_requires_name(client):
    res = await client.post("/suppliers", json={"phone": "555"})
    assert res.status_code == 400


async def test_list_categories(client, catalog):
    res = await client.get("/categories")
    assert res.status_code == 200
    assert res.json() == [{"id": catalog.drinks_id, "name": "Drinks"}]


async def test_create_product_with_initial_cost(client, catalog, read):
    res = await client.post(
        "/products",
        json={
            "name": "Yerba mate 1kg",
            "sku": "YM-1000",
            "stock_on_hand": 40,
            "category_id": catalog.drinks_id,
            "unit_of_measure": "unit",
            "supplier_id": catalog.beta_id,
            "cost": 19.99,
            "margin_percentage": 15,
        },
    )
    assert res.status_code == 201
    body = res.json()
    assert body["product"]["name"] == "Yerba mate 1kg"
    assert body["sale_price"] == 22.99

    stored = await read(body["product"]["id"])
    assert stored.stock_on_hand == 40
    assert stored.sale_price == 22.99


async def test_create_product_unknown_supplier_creates_nothing(client, db, catalog):
    res = await client.post(
        "/products",
        json={"name": "Ghost", "unit_of_measure": "unit", "supplier_id": 999,
              "cost": 1, "margin_percentage": 1},
    )
    assert res.status_code == 404
    assert res.json() == {"error": "Supplier not found."}

    found = await client.get("/products/search", params={"q": "ghost"})
    assert found.json() == []


async def test_create_product_unknown_category(client, catalog):
    res = await client.post(
        "/products",
        json={"name": "Ghost", "unit_of_measure": "unit", "supplier_id": catalog.acme_id,
              "category_id": 999, "cost": 1, "margin_percentage": 1},
    )
    assert res.status_code == 404
    assert res.json() == {"error": "Category not found."}


async def test_create_product_rejects_negative_cost(client, catalog):
    res = await client.post(
        "/products",
        json={"name": "Bad", "unit_of_measure": "unit", "supplier_id": catalog.acme_id,
              "cost": -5, "margin_percentage": 10},
    )
    assert res.status_code == 400


async def test_search_is_case_insensitive_on_name_and_sku(client, catalog):
    res = await client.get("/products/search", params={"q": "COLA"})
    assert res.status_code == 200
    rows = res.json()
    assert [r["name"] for r in rows] == ["Cola 1.5L", "Cola 500ml"]
    assert rows[1]["sale_price"] == 120.00
    assert rows[1]["stock_on_hand"] == 5

    by_sku = await client.get("/products/search", params={"q": "ch-1"})
    assert [r["name"] for r in by_sku.json()] == ["Chips"]


async def test_search_treats_wildcards_literally(client, catalog):
    res = await client.get("/products/search", params={"q": "%"})
    assert res.json() == []


async def test_search_caps_results(db, catalog):
    async with db.unit_of_work() as s:
        for i in range(60):
            p = Product(name=f"Widget {i:02d}", unit_of_measure="unit", stock_on_hand=1)
            s.add(p)
            await s.flush()
            s.add(CostPrice(product_id=p.id, supplier_id=catalog.beta_id,
                            cost=1, margin_percentage=0, sale_price=1))
        await s.flush()

    repo = ProductRepository()
    async with db.session() as s:
        rows = await repo.search("widget", s)
        few = await repo.search("widget", s, limit=3)
    assert len(rows) == 50
    assert rows[0]["name"] == "Widget 00"
    assert [r["name"] for r in few] == ["Widget 00", "Widget 01", "Widget 02"]
