"""
Product API tests - CRUD, validation and ownership isolation.
"""

import pytest
from httpx import AsyncClient
from sqlalchemy import func, select

from belongings.db.models import IncidentReport, UsageLog
from belongings.db.repositories.product_repository import ProductRepository

PRODUCTS = "/api/v1/products"


@pytest.mark.asyncio
async def test_products_require_session(client: AsyncClient):
    response = await client.get(PRODUCTS)
    assert response.status_code == 401
    assert response.json() == {"error": "Not authenticated"}


@pytest.mark.asyncio
async def test_invalid_token_rejected(client: AsyncClient):
    response = await client.get(PRODUCTS, headers={"Authorization": "Bearer not-a-token"})
    assert response.status_code == 401
    assert response.json()["error"] == "Invalid or expired token"


@pytest.mark.asyncio
async def test_create_product_parses_optional_fields(client: AsyncClient, auth_headers: dict, test_user):
    response = await client.post(
        PRODUCTS,
        headers=auth_headers,
        json={
            "name": "  Washing machine ",
            "model_number": "WM-100",
            "purchase_date": "2023-04-15",
            "category": "Appliance",
            "manufacturer": "",
            "warranty_months": "36",
            "expected_lifespan_years": 8,
            "expected_usage_hours": None,
            "purchase_price": "1299.99",
            "notes": "",
        },
    )
    assert response.status_code == 201
    data = response.json()
    assert data["name"] == "Washing machine"
    assert data["owner_id"] == test_user.id
    assert data["purchase_date"] == "2023-04-15"
    assert data["warranty_months"] == 36
    assert data["expected_lifespan_years"] == 8
    assert data["expected_usage_hours"] is None
    assert data["purchase_price"] == pytest.approx(1299.99)
    assert data["manufacturer"] is None
    assert data["notes"] is None
    assert data["created_at"] and data["updated_at"]


@pytest.mark.asyncio
async def test_create_product_with_empty_name_persists_nothing(
    client: AsyncClient, auth_headers: dict, session, test_user
):
    response = await client.post(PRODUCTS, headers=auth_headers, json={"name": ""})
    assert response.status_code == 400
    assert response.json()["error"] == "name is required"
    assert await ProductRepository(session).list_for_owner(test_user.id) == []


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "field, value",
    [
        ("warranty_months", "two years"),
        ("expected_lifespan_years", "1.5"),
        ("expected_usage_hours", -5),
        ("purchase_price", "NaN"),
        ("purchase_price", "cheap"),
        ("purchase_date", "yesterday"),
    ],
)
async def test_create_product_rejects_unparseable_values(
    client: AsyncClient, auth_headers: dict, session, test_user, field, value
):
    response = await client.post(PRODUCTS, headers=auth_headers, json={"name": "Kettle", field: value})
    assert response.status_code == 400
    assert field in response.json()["error"]
    assert await ProductRepository(session).list_for_owner(test_user.id) == []


@pytest.mark.asyncio
async def test_list_products_only_returns_own_products_newest_first(
    client: AsyncClient, auth_headers: dict, other_headers: dict
):
    for name in ("Lamp", "Desk", "Chair"):
        r = await client.post(PRODUCTS, headers=auth_headers, json={"name": name})
        assert r.status_code == 201
    r = await client.post(PRODUCTS, headers=other_headers, json={"name": "Bike"})
    assert r.status_code == 201

    response = await client.get(PRODUCTS, headers=auth_headers)
    assert response.status_code == 200
    assert [p["name"] for p in response.json()] == ["Chair", "Desk", "Lamp"]


@pytest.mark.asyncio
async def test_get_product(client: AsyncClient, auth_headers: dict, product: dict):
    response = await client.get(f"{PRODUCTS}/{product['id']}", headers=auth_headers)
    assert response.status_code == 200
    assert response.json()["name"] == "Fridge"


@pytest.mark.asyncio
async def test_get_missing_product_is_404(client: AsyncClient, auth_headers: dict):
    response = await client.get(f"{PRODUCTS}/9999", headers=auth_headers)
    assert response.status_code == 404
    assert response.json() == {"error": "Product not found"}


@pytest.mark.asyncio
async def test_get_foreign_product_is_403_without_data(client: AsyncClient, other_headers: dict, product: dict):
    response = await client.get(f"{PRODUCTS}/{product['id']}", headers=other_headers)
    assert response.status_code == 403
    body = response.json()
    assert "Fridge" not in response.text
    assert set(body) == {"error"}


@pytest.mark.asyncio
async def test_update_changes_only_supplied_fields(client: AsyncClient, auth_headers: dict, product: dict):
    response = await client.put(
        f"{PRODUCTS}/{product['id']}",
        headers=auth_headers,
        json={"category": "Kitchen", "warranty_months": "", "purchase_price": 499.5},
    )
    assert response.status_code == 200
    data = response.json()
    assert data["category"] == "Kitchen"
    assert data["warranty_months"] is None
    assert data["purchase_price"] == pytest.approx(499.5)
    assert data["name"] == "Fridge"
    assert data["expected_usage_hours"] == 100
    assert data["purchase_date"] == "2024-01-01"


@pytest.mark.asyncio
async def test_empty_update_only_touches_updated_at(client: AsyncClient, auth_headers: dict, product: dict):
    response = await client.put(f"{PRODUCTS}/{product['id']}", headers=auth_headers, json={})
    assert response.status_code == 200
    data = response.json()
    unchanged = {k: v for k, v in product.items() if k != "updated_at"}
    assert {k: v for k, v in data.items() if k != "updated_at"} == unchanged
    assert data["updated_at"] >= product["updated_at"]


@pytest.mark.asyncio
@pytest.mark.parametrize("name", ["", "   ", None])
async def test_update_cannot_blank_the_name(client: AsyncClient, auth_headers: dict, product: dict, name):
    response = await client.put(f"{PRODUCTS}/{product['id']}", headers=auth_headers, json={"name": name})
    assert response.status_code == 400
    again = await client.get(f"{PRODUCTS}/{product['id']}", headers=auth_headers)
    assert again.json()["name"] == "Fridge"


@pytest.mark.asyncio
async def test_update_rejects_bad_number(client: AsyncClient, auth_headers: dict, product: dict):
    response = await client.put(
        f"{PRODUCTS}/{product['id']}", headers=auth_headers, json={"expected_usage_hours": "lots"}
    )
    assert response.status_code == 400
    assert "expected_usage_hours" in response.json()["error"]


@pytest.mark.asyncio
async def test_update_foreign_product_is_403(client: AsyncClient, other_headers: dict, auth_headers: dict, product: dict):
    response = await client.put(f"{PRODUCTS}/{product['id']}", headers=other_headers, json={"name": "Mine now"})
    assert response.status_code == 403
    again = await client.get(f"{PRODUCTS}/{product['id']}", headers=auth_headers)
    assert again.json()["name"] == "Fridge"


@pytest.mark.asyncio
async def test_delete_product_removes_logs_and_incidents(client: AsyncClient, auth_headers: dict, product: dict, session):
    pid = product["id"]
    r = await client.post(f"{PRODUCTS}/{pid}/usage", headers=auth_headers, json={"date": "2024-02-01", "duration": 30})
    assert r.status_code == 201
    r = await client.post(
        f"{PRODUCTS}/{pid}/incidents", headers=auth_headers, json={"date": "2024-03-01", "description": "Door seal"}
    )
    assert r.status_code == 201

    response = await client.delete(f"{PRODUCTS}/{pid}", headers=auth_headers)
    assert response.status_code == 204

    assert (await client.get(f"{PRODUCTS}/{pid}", headers=auth_headers)).status_code == 404
    assert (await client.get(f"{PRODUCTS}/{pid}/usage", headers=auth_headers)).status_code == 404

    logs = await session.scalar(select(func.count(UsageLog.id)).where(UsageLog.product_id == pid))
    incidents = await session.scalar(select(func.count(IncidentReport.id)).where(IncidentReport.product_id == pid))
    assert logs == 0
    assert incidents == 0


@pytest.mark.asyncio
async def test_delete_foreign_product_is_403_and_keeps_data(
    client: AsyncClient, auth_headers: dict, other_headers: dict, product: dict
):
    pid = product["id"]
    await client.post(f"{PRODUCTS}/{pid}/usage", headers=auth_headers, json={"date": "2024-02-01", "duration": 30})

    response = await client.delete(f"{PRODUCTS}/{pid}", headers=other_headers)
    assert response.status_code == 403

    assert (await client.get(f"{PRODUCTS}/{pid}", headers=auth_headers)).status_code == 200
    logs = await client.get(f"{PRODUCTS}/{pid}/usage", headers=auth_headers)
    assert len(logs.json()) == 1


@pytest.mark.asyncio
async def test_malformed_body_is_400(client: AsyncClient, auth_headers: dict):
    response = await client.post(
        PRODUCTS, headers={**auth_headers, "Content-Type": "application/json"}, content=b"{not json"
    )
    assert response.status_code == 400
    assert response.json()["error"] == "Invalid input"


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "field, value",
    [
        ("warranty_months", 200000),
        ("expected_lifespan_years", 8000),
        ("expected_usage_hours", "99999999999999999999"),
        ("purchase_price", "12.345"),
        ("purchase_price", "12345678901"),
        ("model_number", "M" * 256),
        ("name", "N" * 256),
    ],
)
async def test_create_product_rejects_values_the_columns_cannot_hold(
    client: AsyncClient, auth_headers: dict, session, test_user, field, value
):
    payload = {"name": "Safe", "purchase_date": "2024-01-01", field: value}
    response = await client.post(PRODUCTS, headers=auth_headers, json=payload)
    assert response.status_code == 400
    assert field in response.json()["error"]
    assert await ProductRepository(session).list_for_owner(test_user.id) == []


@pytest.mark.asyncio
async def test_price_round_trips_exactly(client: AsyncClient, auth_headers: dict):
    response = await client.post(PRODUCTS, headers=auth_headers, json={"name": "Pen", "purchase_price": "12.30"})
    assert response.status_code == 201
    assert response.json()["purchase_price"] == 12.3
    fetched = await client.get(f"{PRODUCTS}/{response.json()['id']}", headers=auth_headers)
    assert fetched.json()["purchase_price"] == 12.3


@pytest.mark.asyncio
async def test_update_rejects_out_of_range_warranty(client: AsyncClient, auth_headers: dict, product: dict):
    response = await client.put(
        f"{PRODUCTS}/{product['id']}", headers=auth_headers, json={"warranty_months": 200000}
    )
    assert response.status_code == 400
    again = await client.get(f"{PRODUCTS}/{product['id']}", headers=auth_headers)
    assert again.json()["warranty_months"] == 24
