"""
Decision table for the permissions engine.

Rules are keyed by ``(resource_type, action)``; each entry maps a role to
the predicate that must hold for that role. Admin never reaches the table.
A missing entry, or a role absent from an entry, means deny.
"""

from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional, Tuple

from shared.logging import get_logger

from .models import Action, Actor, ResourceData, ResourceType, Role, VisibilityClass
from .ownership import (
    Predicate, all_of, always, any_of, authored_by_actor, created_by_actor,
    has_no_shop, is_actor_profile, is_actor_shop, is_public, owner_matches,
    placed_by_actor, shop_matches, status_in, status_not_in
)
from .roles import effective_role

logger = get_logger("permissions.rules")

RuleKey = Tuple[ResourceType, Action]
RoleRules = Mapping[Role, Predicate]

# Payouts in these states are settled by an admin only
TERMINAL_PAYOUT_STATUSES = ("approved", "rejected")

# Used for rule lookups on behalf of a missing actor
ANONYMOUS = Actor(id="", role=Role.GUEST)

_listing_read: Dict[Role, Predicate] = {
    Role.SELLER: any_of(shop_matches, is_public),
    Role.USER: is_public,
    Role.GUEST: is_public,
}

_seller_catalog_manage = any_of(shop_matches, created_by_actor)


def _build_table() -> Mapping[RuleKey, RoleRules]:
    table: Dict[RuleKey, Dict[Role, Predicate]] = {}

    # Read
    for resource_type in ResourceType:
        if resource_type.visibility is not VisibilityClass.PUBLIC_LISTING:
            continue
        table[(resource_type, Action.READ)] = dict(_listing_read)

    table[(ResourceType.REVIEWS, Action.READ)] = {
        Role.SELLER: any_of(shop_matches, is_public),
        Role.USER: any_of(authored_by_actor, is_public),
        Role.GUEST: is_public,
    }
    table[(ResourceType.ORDERS, Action.READ)] = {
        # A seller also shops as a buyer
        Role.SELLER: any_of(shop_matches, authored_by_actor),
        Role.USER: authored_by_actor,
    }
    table[(ResourceType.TICKETS, Action.READ)] = {
        Role.SELLER: any_of(shop_matches, authored_by_actor),
        Role.USER: authored_by_actor,
    }
    table[(ResourceType.PAYOUTS, Action.READ)] = {
        Role.SELLER: shop_matches,
    }
    # Unlike reviews, active coupons still need a signed-in reader
    table[(ResourceType.COUPONS, Action.READ)] = {
        Role.SELLER: any_of(shop_matches, created_by_actor, is_public),
        Role.USER: is_public,
    }
    table[(ResourceType.USERS, Action.READ)] = {
        Role.SELLER: is_actor_profile,
        Role.USER: is_actor_profile,
    }

    # Create / update
    for resource_type in (ResourceType.PRODUCTS, ResourceType.AUCTIONS, ResourceType.COUPONS):
        table[(resource_type, Action.CREATE)] = {Role.SELLER: always}
        table[(resource_type, Action.UPDATE)] = {Role.SELLER: _seller_catalog_manage}

    table[(ResourceType.SHOPS, Action.CREATE)] = {
        # One shop per seller
        Role.SELLER: has_no_shop,
    }
    table[(ResourceType.SHOPS, Action.UPDATE)] = {
        Role.SELLER: any_of(is_actor_shop, owner_matches),
    }
    table[(ResourceType.ORDERS, Action.CREATE)] = {
        Role.SELLER: always,
        Role.USER: always,
    }
    table[(ResourceType.ORDERS, Action.UPDATE)] = {
        # Fulfillment only; buyers never edit an order
        Role.SELLER: shop_matches,
    }
    table[(ResourceType.PAYOUTS, Action.CREATE)] = {
        Role.SELLER: always,
    }
    table[(ResourceType.PAYOUTS, Action.UPDATE)] = {
        Role.SELLER: all_of(shop_matches, status_not_in(*TERMINAL_PAYOUT_STATUSES)),
    }
    table[(ResourceType.TICKETS, Action.CREATE)] = {
        Role.SELLER: always,
        Role.USER: always,
    }
    table[(ResourceType.TICKETS, Action.UPDATE)] = {
        Role.SELLER: any_of(shop_matches, created_by_actor),
        Role.USER: authored_by_actor,
    }
    table[(ResourceType.REVIEWS, Action.CREATE)] = {
        Role.USER: always,
    }
    table[(ResourceType.REVIEWS, Action.UPDATE)] = {
        Role.USER: authored_by_actor,
    }
    table[(ResourceType.USERS, Action.UPDATE)] = {
        Role.USER: is_actor_profile,
    }

    # Delete
    for resource_type in (ResourceType.PRODUCTS, ResourceType.AUCTIONS, ResourceType.COUPONS):
        table[(resource_type, Action.DELETE)] = {Role.SELLER: _seller_catalog_manage}

    table[(ResourceType.ORDERS, Action.DELETE)] = {
        # Cancellation: the shop at any time, the buyer while pending
        Role.SELLER: shop_matches,
        Role.USER: all_of(placed_by_actor, status_in("pending")),
    }
    table[(ResourceType.TICKETS, Action.DELETE)] = {
        Role.USER: placed_by_actor,
    }
    table[(ResourceType.REVIEWS, Action.DELETE)] = {
        Role.USER: placed_by_actor,
    }

    return MappingProxyType({key: MappingProxyType(rules) for key, rules in table.items()})


DECISION_TABLE: Mapping[RuleKey, RoleRules] = _build_table()


def get_rule(resource_type: Any, action: Any, role: Any) -> Optional[Predicate]:
    """Look up the predicate for one table entry, or None when there is none."""
    parsed_type = ResourceType.parse(resource_type)
    parsed_action = Action.parse(action)
    parsed_role = Role.parse(role)
    if parsed_type is None or parsed_action is None or parsed_role is None:
        return None

    rules = DECISION_TABLE.get((parsed_type, parsed_action))
    if rules is None:
        return None
    return rules.get(parsed_role)


def evaluate(actor: Any, resource_type: Any, action: Any, data: Any = None) -> bool:
    """Decide one action; the core of every ``can_*`` function.

    Admin is allowed without looking at the resource type or data. A
    missing actor follows the guest rules. Unknown resource types, actions
    and roles are denied.
    """
    try:
        actor = Actor.coerce(actor)
        role = effective_role(actor)
        if role is Role.ADMIN:
            return True

        predicate = get_rule(resource_type, action, role)
        if predicate is None:
            return False

        return bool(predicate(actor if actor is not None else ANONYMOUS, ResourceData.coerce(data)))

    except Exception as e:
        logger.error(
            "Rule evaluation error",
            resource_type=str(resource_type),
            action=str(action),
            error=str(e)
        )
        return False
