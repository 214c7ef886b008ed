"""Tests for admin catalog curation."""

from uuid import uuid4

import pytest

from macro_tracker.domain.errors import NotFoundError
from macro_tracker.services.admin import AdminService, ApprovalFilter
from tests.conftest import InMemoryCatalogRepository, InMemoryFoodRepository


@pytest.fixture
def admin_service(food_repository: InMemoryFoodRepository) -> AdminService:
    return AdminService(InMemoryCatalogRepository(food_repository))


def test_list_foods_filters_by_approval_and_category(
    admin_service: AdminService, food_repository: InMemoryFoodRepository
) -> None:
    approved = food_repository.add_food("Salmon", [("100 g", 208, 20, 0, 13)])
    pending = food_repository.create_food(
        {"display_name": "Mystery stew", "category": "custom", "is_approved": False}
    )
    unknown = food_repository.create_food(
        {"display_name": "Old entry", "category": "custom"}
    )

    assert admin_service.list_foods(approval=ApprovalFilter.APPROVED) == [approved]
    assert admin_service.list_foods(approval=ApprovalFilter.PENDING) == [
        unknown,
        pending,
    ]
    assert admin_service.list_foods(category="protein") == [approved]
    assert len(admin_service.list_foods()) == 3


def test_approve_food_records_admin(
    admin_service: AdminService, food_repository: InMemoryFoodRepository
) -> None:
    food = food_repository.create_food(
        {"display_name": "Soup", "category": "custom", "is_approved": False}
    )
    admin_id = uuid4()

    approved = admin_service.approve_food(food.id, admin_id)

    assert approved.is_approved is True
    assert approved.approved_by == admin_id


def test_missing_food_raises_not_found(admin_service: AdminService) -> None:
    with pytest.raises(NotFoundError):
        admin_service.approve_food(uuid4(), uuid4())
    with pytest.raises(NotFoundError):
        admin_service.save_portion(uuid4(), {"display_name": "1 cup"})


def test_save_food_creates_then_updates(admin_service: AdminService) -> None:
    created = admin_service.save_food({"display_name": "Lentils", "category": "grain"})

    updated = admin_service.save_food({"description": "Cooked"}, created.id)

    assert updated.id == created.id
    assert updated.description == "Cooked"


def test_portion_and_addon_crud(
    admin_service: AdminService, food_repository: InMemoryFoodRepository
) -> None:
    food = food_repository.add_food("Yogurt", [("1 cup", 150, 8, 17, 4)])

    portion = admin_service.save_portion(
        food.id, {"display_name": "1/2 cup", "calories": 75}
    )
    renamed = admin_service.save_portion(
        food.id, {"display_name": "Half cup"}, portion.id
    )
    addon = admin_service.save_addon(food.id, {"display_name": "Granola"})

    assert renamed.display_name == "Half cup"
    assert len(admin_service.list_portions(food.id)) == 2
    assert admin_service.list_addons(food.id) == [addon]

    admin_service.delete_portion(food.id, portion.id)
    admin_service.delete_addon(food.id, addon.id)
    assert len(admin_service.list_portions(food.id)) == 1
    assert admin_service.list_addons(food.id) == []


def test_delete_food_removes_children(
    admin_service: AdminService, food_repository: InMemoryFoodRepository
) -> None:
    food = food_repository.add_food(
        "Bagel",
        [("1 bagel", 250, 10, 48, 1.5)],
        addons=[("Cream cheese", 100, 2, 1, 10)],
    )

    admin_service.delete_food(food.id)

    assert food_repository.foods == {}
    assert food_repository.portions == {}
    assert food_repository.addons == {}


def test_portion_and_addon_must_belong_to_food(
    admin_service: AdminService, food_repository: InMemoryFoodRepository
) -> None:
    oats = food_repository.add_food(
        "Oats", [("1/2 cup", 150, 5, 27, 3)], addons=[("Honey", 64, 0, 17, 0)]
    )
    rice = food_repository.add_food("Rice", [("1 cup", 205, 4, 45, 0.4)])
    oats_portion = food_repository.list_portions(oats.id)[0]
    oats_addon = food_repository.list_addons(oats.id)[0]

    with pytest.raises(NotFoundError):
        admin_service.save_portion(rice.id, {"calories": 1}, oats_portion.id)
    with pytest.raises(NotFoundError):
        admin_service.delete_portion(rice.id, oats_portion.id)
    with pytest.raises(NotFoundError):
        admin_service.save_addon(rice.id, {"calories": 1}, oats_addon.id)
    with pytest.raises(NotFoundError):
        admin_service.delete_addon(rice.id, uuid4())

    assert food_repository.portions[oats_portion.id].calories == 150
    assert food_repository.addons[oats_addon.id].calories == 64
