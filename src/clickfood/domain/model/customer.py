"""Customer — the person who signed up on the welcome screen."""

from __future__ import annotations

from dataclasses import dataclass

from clickfood.domain.exceptions import ValidationError


@dataclass(frozen=True)
class Customer:
    """A registered customer.

    The password given at signup is checked but never kept.
    """

    name: str
    email: str

    @staticmethod
    def register(name: str, email: str, password: str) -> Customer:
        if not name or not name.strip():
            raise ValidationError("Name is required")
        if not email or not email.strip():
            raise ValidationError("Email is required")
        if "@" not in email:
            raise ValidationError(f"Invalid email address: '{email.strip()}'")
        if not password:
            raise ValidationError("Password is required")
        return Customer(name=name.strip(), email=email.strip().lower())
