"""Payment methods offered at checkout.

Choosing a method is the whole of "payment": nothing is charged.
"""

from __future__ import annotations

from enum import Enum

from clickfood.domain.exceptions import ValidationError


class PaymentMethod(Enum):
    CREDIT_CARD = "Credit Card"
    PIX = "Pix"
    BOLETO = "Boleto"
    CASH = "Cash"

    @property
    def label(self) -> str:
        return self.value

    @staticmethod
    def parse(text: str) -> PaymentMethod:
        """Resolve user text ("pix", "credit_card", "Credit Card") to a method."""
        wanted = text.strip().casefold()
        for method in PaymentMethod:
            if wanted in (method.name.casefold(), method.value.casefold()):
                return method
        accepted = ", ".join(m.value for m in PaymentMethod)
        raise ValidationError(
            f"Unknown payment method '{text}' (accepted: {accepted})"
        )


DEFAULT_PAYMENT_METHOD = PaymentMethod.CREDIT_CARD
