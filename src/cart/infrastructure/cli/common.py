"""Helpers shared by the CLI command modules."""

from __future__ import annotations

import functools
import json
from typing import Any, Callable

import click

from cart.application.authenticate import (
    AuthenticateMemberHandler,
    credentials_from_basic_header,
)
from cart.domain.exceptions import DomainException, RequestValidationError
from cart.infrastructure.bootstrap import unit_of_work


def member_options(func: Callable[..., Any]) -> Callable[..., Any]:
    """Add credential options and pass the authenticated member ID as ``member_id``."""

    @click.option("--email", default=None, help="Member email.")
    @click.option("--password", default=None, help="Member password.")
    @click.option(
        "--authorization",
        default=None,
        envvar="CART_AUTHORIZATION",
        help="HTTP Basic value ('Basic <base64>') instead of --email/--password.",
    )
    @functools.wraps(func)
    def wrapper(email: str | None, password: str | None, authorization: str | None, **kwargs: Any) -> Any:
        kwargs["member_id"] = _authenticate(email, password, authorization)
        return func(**kwargs)

    return wrapper


def _authenticate(email: str | None, password: str | None, authorization: str | None) -> int:
    try:
        if authorization:
            email, password = credentials_from_basic_header(authorization)
        if not email or password is None:
            raise click.UsageError("Provide --email and --password, or --authorization")
        member = AuthenticateMemberHandler(uow=unit_of_work()).handle(email, password)
    except DomainException as exc:
        raise click.ClickException(str(exc))
    return member.id  # type: ignore[return-value]


def fail(exc: DomainException) -> click.ClickException:
    """Translate a domain error into a CLI error, listing field errors one per line."""
    if isinstance(exc, RequestValidationError):
        lines = [f"{field}: {message}" for field, message in exc.errors.items()]
        return click.ClickException("Invalid request\n" + "\n".join(lines))
    return click.ClickException(str(exc))


def echo_json(result: Any) -> None:
    click.echo(json.dumps({"result": result}, indent=2, ensure_ascii=False))
