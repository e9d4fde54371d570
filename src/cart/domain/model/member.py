"""Member aggregate: account identity plus a loyalty point balance."""

from __future__ import annotations

import hmac
from dataclasses import dataclass

from cart.domain.exceptions import (
    InsufficientPointError,
    InvalidSpendPointError,
    ValidationError,
)


@dataclass
class Member:
    """Aggregate root for a shop member.

    Invariants:
    - ``point`` is never negative

    Members are created at signup, which lives outside this system.
    The only mutation here is spending points on an order.
    """

    id: int | None
    email: str
    password: str
    point: int = 0

    def __post_init__(self) -> None:
        if self.point < 0:
            raise ValidationError(f"Member point cannot be negative, got {self.point}")

    def matches_password(self, password: str) -> bool:
        return hmac.compare_digest(self.password.encode("utf-8"), password.encode("utf-8"))

    def spend_point(self, point: int) -> None:
        """Debit *point* from the balance.

        Raises before touching the balance, so a failed call leaves the
        member unchanged.
        """
        if point < 0:
            raise InvalidSpendPointError(f"Spend point cannot be negative, got {point}")
        if point > self.point:
            raise InsufficientPointError(
                f"Insufficient points (requested {point}, have {self.point})"
            )
        self.point -= point
