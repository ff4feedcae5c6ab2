"""Application service: Register Customer use case (signup screen)."""

from __future__ import annotations

import logging

from clickfood.domain.model.customer import Customer

logger = logging.getLogger(__name__)


class RegisterCustomerHandler:

    def handle(self, name: str, email: str, password: str) -> Customer:
        customer = Customer.register(name=name, email=email, password=password)
        logger.info("Registered customer %s <%s>", customer.name, customer.email)
        return customer
