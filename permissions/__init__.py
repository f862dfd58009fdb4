"""
Role-based permissions engine for the marketplace.

Decides whether an actor (admin, seller, user or anonymous guest) may
read, create, update or delete a resource, and filters result sets with
the same rules. The engine is pure: no I/O, no stored state.

Modules of interest:
- models: Role, ResourceType, Action, Actor and ResourceData.
- roles: Role hierarchy helpers.
- ownership: Ownership detection and affiliation predicates.
- rules: The (resource type, action) decision table.
- decisions: can_read / can_write / can_delete and aliases.
- filtering: Bulk filtering of result sets.
- engine: PolicyEngine facade with logging and metrics.
"""

from .decisions import can_create, can_delete, can_read, can_update, can_write
from .engine import PolicyEngine
from .filtering import filter_by_role
from .models import Action, Actor, ResourceData, ResourceType, Role, VisibilityClass
from .ownership import is_owner
from .roles import ROLE_LEVELS, has_any_role, has_role, role_level

__all__ = [
    "Action",
    "Actor",
    "PolicyEngine",
    "ROLE_LEVELS",
    "ResourceData",
    "ResourceType",
    "Role",
    "VisibilityClass",
    "can_create",
    "can_delete",
    "can_read",
    "can_update",
    "can_write",
    "filter_by_role",
    "has_any_role",
    "has_role",
    "is_owner",
    "role_level",
]
