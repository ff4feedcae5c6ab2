"""Tests for the in-memory repositories and the composition root."""

from uuid import uuid4

from clickfood.domain.model.order import Order
from clickfood.infrastructure.bootstrap import default_menu, new_session
from clickfood.infrastructure.persistence.in_memory_item_repository import (
    InMemoryItemRepository,
)
from clickfood.infrastructure.persistence.in_memory_order_repository import (
    InMemoryOrderRepository,
)
from tests.fakes import make_item, sample_menu


class TestInMemoryItemRepository:

    def test_list_all_keeps_menu_order(self):
        menu = sample_menu()
        assert InMemoryItemRepository(menu).list_all() == menu

    def test_get_by_id(self):
        menu = sample_menu()
        repo = InMemoryItemRepository(menu)
        assert repo.get_by_id(menu[2].id) is menu[2]
        assert repo.get_by_id(uuid4()) is None

    def test_get_by_name_ignores_case_and_padding(self):
        repo = InMemoryItemRepository(sample_menu())
        assert repo.get_by_name("  margherita PIZZA ").name == "Margherita Pizza"
        assert repo.get_by_name("Sushi") is None

    def test_list_all_returns_a_copy(self):
        repo = InMemoryItemRepository(sample_menu())
        repo.list_all().clear()
        assert len(repo.list_all()) == 4


class TestInMemoryOrderRepository:

    def test_assigns_sequential_ids(self):
        repo = InMemoryOrderRepository()
        assert repo.next_id() == 1
        first = Order.place("Alice", [make_item()])
        second = Order.place("Bob", [make_item()])
        repo.save(first)
        repo.save(second)
        assert (first.id, second.id) == (1, 2)
        assert repo.get_by_id(2) is second

    def test_saving_again_keeps_id(self):
        repo = InMemoryOrderRepository()
        order = Order.place("Alice", [make_item()])
        repo.save(order)
        order.advance()
        repo.save(order)
        assert order.id == 1
        assert repo.next_id() == 2

    def test_missing_order(self):
        assert InMemoryOrderRepository().get_by_id(1) is None


class TestBootstrap:

    def test_default_menu(self):
        menu = default_menu()
        assert [i.name for i in menu] == ["Burger", "Margherita Pizza", "Soda", "Açaí"]
        assert str(menu[0].price) == "R$ 24.90"
        assert menu[0].image_ref == "burger"

    def test_sessions_have_their_own_cart(self):
        a, b = new_session(), new_session()
        a.cart.add(a.item_repo.list_all()[0])
        assert a.cart.count == 1
        assert b.cart.is_empty
