"""
Bulk filtering of result sets by role.
"""

from typing import Any, Iterable, List, Optional

from .models import Actor, ResourceData, ResourceType, Role, is_collection
from .ownership import (
    Predicate, any_of, authored_by_actor, created_by_actor, is_public, shop_matches
)
from .roles import effective_role
from .rules import ANONYMOUS

VISIBILITY_FILTERS = {
    Role.SELLER: any_of(is_public, shop_matches, created_by_actor),
    Role.USER: any_of(is_public, authored_by_actor),
    Role.GUEST: is_public,
}


def collect(items: Any) -> List[Any]:
    """Materialize a result set; None and non-collections become []."""
    return list(items) if is_collection(items) else []


def visibility_filter(role: Optional[Role]) -> Optional[Predicate]:
    """Per-item predicate for a role; None for roles that see nothing."""
    return VISIBILITY_FILTERS.get(role)


def filter_by_role(actor: Any, resource_type: Any, items: Iterable[Any]) -> List[Any]:
    """Keep the items ``actor`` may see, in their original order.

    Admin gets every item back. Everyone else keeps public items plus the
    ones they are affiliated with: ``userId``/``createdBy`` for users,
    ``shopId``/``createdBy`` for sellers. Items are returned as given.
    Non-admin actors get nothing for an unknown resource type. Anything
    other than a collection of items counts as an empty result set.
    """
    items = collect(items)

    actor = Actor.coerce(actor)
    role = effective_role(actor)
    if role is Role.ADMIN:
        return items

    keep = visibility_filter(role)
    if keep is None or ResourceType.parse(resource_type) is None:
        return []

    if actor is None:
        actor = ANONYMOUS
    return [item for item in items if keep(actor, ResourceData.coerce(item))]
