"""
Single-resource permission checks.

All functions are pure and total: malformed or missing input is a deny,
never an exception.
"""

from typing import Any

from .models import Action
from .rules import evaluate

WRITE_ACTIONS = frozenset({Action.CREATE, Action.UPDATE})


def can_read(actor: Any, resource_type: Any, data: Any = None) -> bool:
    """Whether ``actor`` may read the resource instance described by ``data``."""
    return evaluate(actor, resource_type, Action.READ, data)


def can_write(actor: Any, resource_type: Any, action: Any, data: Any = None) -> bool:
    """Whether ``actor`` may create or update a resource.

    ``action`` must be ``"create"`` or ``"update"``; any other action is
    denied to everyone but admin.
    """
    parsed = Action.parse(action)
    if parsed not in WRITE_ACTIONS:
        # Admin bypasses every check, including the action itself
        return evaluate(actor, resource_type, None, data)
    return evaluate(actor, resource_type, parsed, data)


def can_create(actor: Any, resource_type: Any) -> bool:
    return can_write(actor, resource_type, Action.CREATE)


def can_update(actor: Any, resource_type: Any, data: Any = None) -> bool:
    return can_write(actor, resource_type, Action.UPDATE, data)


def can_delete(actor: Any, resource_type: Any, data: Any = None) -> bool:
    """Whether ``actor`` may delete (or, for orders, cancel) a resource."""
    return evaluate(actor, resource_type, Action.DELETE, data)
