"""Unit tests for the Order aggregate and its delivery state machine."""

import pytest

from clickfood.domain.exceptions import ValidationError
from clickfood.domain.model.order import Order, OrderEvent, OrderStatus
from clickfood.domain.model.payment import PaymentMethod
from clickfood.domain.model.value_objects import Money
from tests.fakes import make_item


def _place(**overrides) -> Order:
    kwargs = {
        "customer_name": "Alice",
        "items": [make_item("Burger", "24.90"), make_item("Soda", "6.00")],
    }
    kwargs.update(overrides)
    return Order.place(**kwargs)


class TestOrderPlacement:

    def test_happy_path(self):
        order = _place(payment_method=PaymentMethod.PIX)
        assert order.customer_name == "Alice"
        assert order.status == OrderStatus.PREPARING
        assert order.payment_method == PaymentMethod.PIX
        assert order.total == Money.of("30.90")

    def test_id_is_none_for_new_orders(self):
        assert _place().id is None  # assigned by repository

    def test_defaults_to_credit_card(self):
        assert _place().payment_method == PaymentMethod.CREDIT_CARD

    def test_empty_items_rejected(self):
        with pytest.raises(ValidationError, match="Cart is empty"):
            _place(items=[])

    def test_blank_customer_rejected(self):
        with pytest.raises(ValidationError, match="Customer name"):
            _place(customer_name="  ")

    def test_items_are_a_snapshot(self):
        items = [make_item("Burger", "24.90")]
        order = _place(items=items)
        items.clear()
        assert len(order.items) == 1
        assert order.total == Money.of("24.90")


class TestOrderEvents:

    def test_full_delivery_flow(self):
        order = _place()
        order.apply(OrderEvent.FOOD_READY)
        assert order.status == OrderStatus.READY
        order.apply(OrderEvent.PICKED_UP)
        assert order.status == OrderStatus.OUT_FOR_DELIVERY
        order.apply(OrderEvent.DELIVERED)
        assert order.status == OrderStatus.DELIVERED
        assert order.is_delivered

    def test_skipping_a_step_rejected(self):
        order = _place()
        with pytest.raises(ValidationError, match="Cannot apply DELIVERED"):
            order.apply(OrderEvent.DELIVERED)
        assert order.status == OrderStatus.PREPARING

    def test_repeating_an_event_rejected(self):
        order = _place()
        order.apply(OrderEvent.FOOD_READY)
        with pytest.raises(ValidationError, match="READY status"):
            order.apply(OrderEvent.FOOD_READY)

    def test_no_events_after_delivery(self):
        order = _place()
        for event in (OrderEvent.FOOD_READY, OrderEvent.PICKED_UP, OrderEvent.DELIVERED):
            order.apply(event)
        for event in OrderEvent:
            with pytest.raises(ValidationError):
                order.apply(event)


class TestOrderAdvance:

    def test_advance_walks_statuses_in_order(self):
        order = _place()
        seen = [order.status]
        while not order.is_delivered:
            order.advance()
            seen.append(order.status)
        assert seen == list(OrderStatus)

    def test_advance_after_delivery_rejected(self):
        order = _place()
        for _ in range(3):
            order.advance()
        with pytest.raises(ValidationError, match="already delivered"):
            order.advance()


class TestOrderStatusLabels:

    def test_every_status_has_a_label(self):
        for status in OrderStatus:
            assert status.label

    def test_labels(self):
        assert OrderStatus.PREPARING.label == "Your order is being prepared..."
        assert OrderStatus.DELIVERED.label == "Your order has arrived! Enjoy your meal!"
