"""Identity gate: turns the request user into an order principal."""

from typing import Any

from catalog.domain.errors import UnauthorizedError
from orders.domain import UserId


def resolve_principal(user: Any) -> UserId | None:
    """Return the principal for an authenticated Django user, else None."""
    if user is None or not getattr(user, "is_authenticated", False):
        return None
    return UserId(user.pk)


def require_principal(principal: UserId | None) -> UserId:
    """Raise UnauthorizedError unless a principal was resolved."""
    if principal is None:
        raise UnauthorizedError()
    return principal
