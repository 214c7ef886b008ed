"""Tests for admin endpoints."""

from uuid import uuid4

from fastapi.testclient import TestClient

from macro_tracker.api.app import create_app
from macro_tracker.containers import AppContainer
from tests.conftest import (
    ADMIN_HEADERS,
    ADMIN_ID,
    USER_HEADERS,
    InMemoryFoodRepository,
)


def test_admin_routes_require_admin_role(container: AppContainer) -> None:
    client = TestClient(create_app(container))

    assert client.get("/admin/foods").status_code == 401
    assert client.get("/admin/foods", headers=USER_HEADERS).status_code == 403
    assert client.get("/admin/foods", headers=ADMIN_HEADERS).status_code == 200


def test_pending_filter_and_approval(
    container: AppContainer, food_repository: InMemoryFoodRepository
) -> None:
    client = TestClient(create_app(container))
    food_repository.add_food("Tuna", [("1 can", 120, 26, 0, 1)])
    pending = food_repository.create_food(
        {"display_name": "Smoothie", "category": "custom", "is_approved": False}
    )

    listed = client.get(
        "/admin/foods", params={"approval": "pending"}, headers=ADMIN_HEADERS
    )
    approved = client.post(
        f"/admin/foods/{pending.id}/approve", headers=ADMIN_HEADERS
    )

    assert [food["display_name"] for food in listed.json()["foods"]] == ["Smoothie"]
    assert approved.json()["food"]["is_approved"] is True
    assert approved.json()["food"]["approved_by"] == str(ADMIN_ID)


def test_food_editor_flow(container: AppContainer) -> None:
    client = TestClient(create_app(container))

    created = client.post(
        "/admin/foods",
        headers=ADMIN_HEADERS,
        json={"display_name": "Quinoa", "category": "grain", "is_approved": True},
    )
    food_id = created.json()["food"]["id"]
    portion = client.post(
        f"/admin/foods/{food_id}/portions",
        headers=ADMIN_HEADERS,
        json={"display_name": "1 cup", "calories": 222, "protein_g": 8},
    )
    addon = client.post(
        f"/admin/foods/{food_id}/addons",
        headers=ADMIN_HEADERS,
        json={"display_name": "Olive oil", "calories": 40, "fats_g": 4.5},
    )
    detail = client.get(f"/admin/foods/{food_id}", headers=ADMIN_HEADERS)
    deleted = client.delete(f"/admin/foods/{food_id}", headers=ADMIN_HEADERS)
    missing = client.get(f"/admin/foods/{food_id}", headers=ADMIN_HEADERS)

    assert created.status_code == 201
    assert portion.status_code == 201
    assert addon.json()["addon"]["display_name"] == "Olive oil"
    assert detail.json()["portions"][0]["calories"] == 222
    assert deleted.json() == {"status": "ok"}
    assert missing.status_code == 404


def test_update_portion(
    container: AppContainer, food_repository: InMemoryFoodRepository
) -> None:
    client = TestClient(create_app(container))
    food = food_repository.add_food("Pasta", [("1 cup", 220, 8, 43, 1.3)])
    portion = food_repository.list_portions(food.id)[0]

    response = client.patch(
        f"/admin/foods/{food.id}/portions/{portion.id}",
        headers=ADMIN_HEADERS,
        json={"calories": 230},
    )

    assert response.json()["portion"]["calories"] == 230
    assert response.json()["portion"]["display_name"] == "1 cup"


def test_portion_routes_reject_other_foods_rows(
    container: AppContainer, food_repository: InMemoryFoodRepository
) -> None:
    client = TestClient(create_app(container))
    pasta = food_repository.add_food("Pasta", [("1 cup", 220, 8, 43, 1.3)])
    bread = food_repository.add_food(
        "Bread", [("1 slice", 80, 3, 15, 1)], addons=[("Butter", 100, 0, 0, 11)]
    )
    bread_portion = food_repository.list_portions(bread.id)[0]
    bread_addon = food_repository.list_addons(bread.id)[0]

    patched = client.patch(
        f"/admin/foods/{pasta.id}/portions/{bread_portion.id}",
        headers=ADMIN_HEADERS,
        json={"calories": 1},
    )
    deleted = client.delete(
        f"/admin/foods/{pasta.id}/addons/{bread_addon.id}", headers=ADMIN_HEADERS
    )

    assert patched.status_code == 404
    assert deleted.status_code == 404
    assert food_repository.portions[bread_portion.id].calories == 80
    assert bread_addon.id in food_repository.addons


def test_missing_portion_and_addon_return_not_found(
    container: AppContainer, food_repository: InMemoryFoodRepository
) -> None:
    client = TestClient(create_app(container))
    pasta = food_repository.add_food("Pasta", [("1 cup", 220, 8, 43, 1.3)])

    patched = client.patch(
        f"/admin/foods/{pasta.id}/portions/{uuid4()}",
        headers=ADMIN_HEADERS,
        json={"calories": 1},
    )
    addon = client.patch(
        f"/admin/foods/{pasta.id}/addons/{uuid4()}",
        headers=ADMIN_HEADERS,
        json={"calories": 1},
    )

    assert patched.status_code == 404
    assert addon.status_code == 404
