"""Application service: Authenticate Member.

Resolves the requesting member from credentials before any other use
case runs.  Use cases themselves never look at credentials; they take
the resolved member ID as an argument.
"""

from __future__ import annotations

import base64
import binascii

from cart.domain.exceptions import AuthenticationError
from cart.domain.model.member import Member
from cart.domain.repository.unit_of_work import UnitOfWork

_BASIC_SCHEME = "basic"


def credentials_from_basic_header(value: str) -> tuple[str, str]:
    """Decode an HTTP Basic ``Authorization`` value into (email, password)."""
    scheme, _, token = value.strip().partition(" ")
    if scheme.lower() != _BASIC_SCHEME or not token.strip():
        raise AuthenticationError("Authorization must use the Basic scheme")

    try:
        decoded = base64.b64decode(token.strip(), validate=True).decode("utf-8")
    except (binascii.Error, UnicodeDecodeError) as exc:
        raise AuthenticationError("Malformed Basic credentials") from exc

    email, sep, password = decoded.partition(":")
    if not sep or not email:
        raise AuthenticationError("Malformed Basic credentials")
    return email, password


class AuthenticateMemberHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(self, email: str, password: str) -> Member:
        with self._uow as uow:
            member = uow.members.get_by_email(email)
        # Same error for unknown email and wrong password.
        if member is None or not member.matches_password(password):
            raise AuthenticationError("Invalid email or password")
        return member
