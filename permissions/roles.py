"""
Role hierarchy helpers.
"""

from types import MappingProxyType
from typing import Any, Iterable, Mapping, Optional

from .models import Actor, Role, is_collection

ROLE_LEVELS: Mapping[Role, int] = MappingProxyType({
    Role.ADMIN: 100,
    Role.SELLER: 50,
    Role.USER: 10,
    Role.GUEST: 0,
})


def role_level(role: Any) -> int:
    """Numeric level of a role; unknown roles rank with guest at 0."""
    parsed = Role.parse(role)
    if parsed is None:
        return 0
    return ROLE_LEVELS[parsed]


def effective_role(actor: Any) -> Optional[Role]:
    """Role the rules apply to.

    A missing actor is a guest. An actor whose role is not recognized gets
    None, which no rule matches.
    """
    actor = Actor.coerce(actor)
    if actor is None:
        return Role.GUEST
    return actor.role_enum


def has_role(actor: Any, required_role: Any) -> bool:
    """True when the actor's role ranks at or above ``required_role``."""
    return role_level(effective_role(actor)) >= role_level(required_role)


def has_any_role(actor: Any, roles: Iterable[Any]) -> bool:
    """True when the actor's role is exactly one of ``roles``."""
    role = effective_role(actor)
    if role is None or not is_collection(roles):
        return False
    return any(Role.parse(candidate) is role for candidate in roles)
