"""
Ownership detection and the affiliation predicates used by the rule table.

Every predicate takes ``(actor, data)`` with a loaded ``Actor`` and
``ResourceData``; a field that is missing on either side never matches.
"""

from typing import Any, Callable

from .models import Actor, ResourceData, Role

Predicate = Callable[[Actor, ResourceData], bool]


def _matches(expected: Any, actual: Any) -> bool:
    return expected is not None and actual is not None and expected == actual


def is_owner(actor: Any, data: Any = None) -> bool:
    """Whether the actor owns the resource through any affiliation channel.

    Channels: ``userId``, ``createdBy`` or ``ownerId`` equal to the actor id,
    or, for sellers only, ``shopId`` equal to the actor's shop.
    """
    actor = Actor.coerce(actor)
    if actor is None or data is None:
        return False
    data = ResourceData.coerce(data)

    return (
        _matches(data.user_id, actor.id)
        or _matches(data.created_by, actor.id)
        or _matches(data.owner_id, actor.id)
        or shop_matches(actor, data)
    )


def always(actor: Actor, data: ResourceData) -> bool:
    return True


def is_public(actor: Actor, data: ResourceData) -> bool:
    return data.is_public


def shop_matches(actor: Actor, data: ResourceData) -> bool:
    """Seller whose shop the resource belongs to."""
    return actor.role_enum is Role.SELLER and _matches(data.shop_id, actor.shop_id)


def created_by_actor(actor: Actor, data: ResourceData) -> bool:
    return _matches(data.created_by, actor.id)


def placed_by_actor(actor: Actor, data: ResourceData) -> bool:
    """Resource whose ``userId`` is the actor."""
    return _matches(data.user_id, actor.id)


def authored_by_actor(actor: Actor, data: ResourceData) -> bool:
    """Resource whose ``userId`` or ``createdBy`` is the actor."""
    return placed_by_actor(actor, data) or created_by_actor(actor, data)


def owner_matches(actor: Actor, data: ResourceData) -> bool:
    return _matches(data.owner_id, actor.id)


def is_actor_shop(actor: Actor, data: ResourceData) -> bool:
    """The resource is the shop the seller runs."""
    return _matches(data.id, actor.shop_id)


def is_actor_profile(actor: Actor, data: ResourceData) -> bool:
    """The resource is the actor's own user profile."""
    return _matches(data.uid, actor.id) or _matches(data.id, actor.id)


def has_no_shop(actor: Actor, data: ResourceData) -> bool:
    return not actor.shop_id


def status_in(*statuses: str) -> Predicate:
    allowed = frozenset(statuses)

    def predicate(actor: Actor, data: ResourceData) -> bool:
        return data.status in allowed

    return predicate


def status_not_in(*statuses: str) -> Predicate:
    blocked = frozenset(statuses)

    def predicate(actor: Actor, data: ResourceData) -> bool:
        return data.status not in blocked

    return predicate


def any_of(*predicates: Predicate) -> Predicate:
    """Predicate that holds when at least one of ``predicates`` holds."""
    def predicate(actor: Actor, data: ResourceData) -> bool:
        return any(check(actor, data) for check in predicates)

    return predicate


def all_of(*predicates: Predicate) -> Predicate:
    """Predicate that holds when every one of ``predicates`` holds."""
    def predicate(actor: Actor, data: ResourceData) -> bool:
        return all(check(actor, data) for check in predicates)

    return predicate
