async def test_update_by_supplier(client, catalog, read):
    res = await client.put(
        "/prices/update-by-supplier",
        json={"supplier_id": catalog.acme_id, "percentage_increase": 10},
    )
    assert res.status_code == 200
    assert res.json() == {
        "message": f"Prices updated: 2 products for supplier {catalog.acme_id}.",
        "updated_count": 2,
    }
    cola = await read(catalog.cola_id)
    assert (cola.cost, cola.sale_price) == (110.00, 132.00)


async def test_update_by_supplier_without_products(client, catalog):
    res = await client.put(
        "/prices/update-by-supplier",
        json={"supplier_id": 777, "percentage_increase": 5.5},
    )
    assert res.status_code == 200
    assert res.json()["updated_count"] == 0


async def test_update_by_supplier_rejects_zero(client, catalog, read):
    res = await client.put(
        "/prices/update-by-supplier",
        json={"supplier_id": catalog.acme_id, "percentage_increase": 0},
    )
    assert res.status_code == 400
    assert res.json() == {"error": "percentage_increase must be a valid number other than zero."}
    assert (await read(catalog.cola_id)).sale_price == 120.00


async def test_update_by_supplier_rejects_bad_payloads(client, catalog):
    for payload in (
        {"percentage_increase": 10},
        {"supplier_id": catalog.acme_id},
        {"supplier_id": catalog.acme_id, "percentage_increase": "ten"},
        {"supplier_id": "acme", "percentage_increase": 10},
    ):
        res = await client.put("/prices/update-by-supplier", json=payload)
        assert res.status_code == 400, payload
        assert res.json()["error"] == "Invalid request payload."


async def test_update_by_supplier_rejects_out_of_range_percentages(client, catalog, read):
    for pct in (-100, -150, 1e300):
        res = await client.put(
            "/prices/update-by-supplier",
            json={"supplier_id": catalog.acme_id, "percentage_increase": pct},
        )
        assert res.status_code == 400, pct
        assert res.json()["error"] == "Invalid request payload."

    cola = await read(catalog.cola_id)
    assert (cola.cost, cola.sale_price) == (100.00, 120.00)


async def test_update_by_supplier_rejects_huge_supplier_id(client, catalog):
    res = await client.put(
        "/prices/update-by-supplier",
        json={"supplier_id": 10**30, "percentage_increase": 10},
    )
    assert res.status_code == 400
