"""Unit tests for payment method selection."""

import pytest

from clickfood.domain.exceptions import ValidationError
from clickfood.domain.model.payment import DEFAULT_PAYMENT_METHOD, PaymentMethod


class TestPaymentMethod:

    def test_default_is_credit_card(self):
        assert DEFAULT_PAYMENT_METHOD is PaymentMethod.CREDIT_CARD

    @pytest.mark.parametrize(
        "text, expected",
        [
            ("pix", PaymentMethod.PIX),
            ("PIX", PaymentMethod.PIX),
            ("credit_card", PaymentMethod.CREDIT_CARD),
            ("Credit Card", PaymentMethod.CREDIT_CARD),
            (" boleto ", PaymentMethod.BOLETO),
            ("cash", PaymentMethod.CASH),
        ],
    )
    def test_parse(self, text, expected):
        assert PaymentMethod.parse(text) is expected

    def test_unknown_method_rejected(self):
        with pytest.raises(ValidationError, match="Unknown payment method 'bitcoin'"):
            PaymentMethod.parse("bitcoin")

    def test_labels(self):
        assert [m.label for m in PaymentMethod] == ["Credit Card", "Pix", "Boleto", "Cash"]
