"""
Policy engine facade.

Wraps the pure decision functions with structured logging, Prometheus
counters and an ``authorize`` helper for request layers that prefer an
exception over a boolean.
"""

import time
from typing import Any, Dict, Iterable, List, Optional

from shared.config import PolicyConfig, get_config
from shared.errors import AuthorizationError
from shared.logging import configure_logging, get_logger
from shared.metrics import PolicyMetrics

from .decisions import can_delete, can_read, can_write
from .filtering import collect, filter_by_role
from .models import Action, Actor, ResourceType
from .roles import effective_role
from .rules import DECISION_TABLE


def _label(parsed: Any) -> str:
    return parsed.value if parsed is not None else "unknown"


def _actor_id(actor: Any) -> Any:
    actor = Actor.coerce(actor)
    return actor.id if actor is not None else None


class PolicyEngine:
    """Permission decision engine."""

    def __init__(self, config: Optional[PolicyConfig] = None, metrics: Optional[PolicyMetrics] = None):
        self.config = config or get_config()
        if self.config.configure_logging:
            configure_logging(self.config.service_name, self.config.log_level)
        self.logger = get_logger(f"{self.config.service_name}.policy_engine")
        if metrics is None and self.config.enable_metrics:
            metrics = PolicyMetrics(self.config.service_name)
        self.metrics = metrics

    def can_read(self, actor: Any, resource_type: Any, data: Any = None) -> bool:
        """Check read access to one resource."""
        return self.check(actor, resource_type, Action.READ, data)

    def can_write(self, actor: Any, resource_type: Any, action: Any, data: Any = None) -> bool:
        """Check create/update access to one resource."""
        parsed = Action.parse(action)
        if parsed not in (Action.CREATE, Action.UPDATE):
            return self._record(actor, resource_type, action, can_write(actor, resource_type, action, data))
        return self.check(actor, resource_type, parsed, data)

    def can_create(self, actor: Any, resource_type: Any) -> bool:
        return self.check(actor, resource_type, Action.CREATE)

    def can_update(self, actor: Any, resource_type: Any, data: Any = None) -> bool:
        return self.check(actor, resource_type, Action.UPDATE, data)

    def can_delete(self, actor: Any, resource_type: Any, data: Any = None) -> bool:
        """Check delete access to one resource."""
        return self.check(actor, resource_type, Action.DELETE, data)

    def check(self, actor: Any, resource_type: Any, action: Any, data: Any = None) -> bool:
        """Decide any single-resource action.

        ``bulk`` and unknown actions are denied to everyone but admin.
        """
        parsed = Action.parse(action)
        if parsed is Action.READ:
            allowed = can_read(actor, resource_type, data)
        elif parsed is Action.DELETE:
            allowed = can_delete(actor, resource_type, data)
        else:
            # create/update go through can_write; anything else is denied there
            allowed = can_write(actor, resource_type, action, data)

        return self._record(actor, resource_type, action, allowed)

    def authorize(self, actor: Any, resource_type: Any, action: Any, data: Any = None) -> None:
        """Raise AuthorizationError unless the action is allowed."""
        if self.check(actor, resource_type, action, data):
            return

        details = self._describe(actor, resource_type, action)
        raise AuthorizationError(
            f"Not permitted to {details['action']} {details['resource_type']}",
            details=details
        )

    def filter(self, actor: Any, resource_type: Any, items: Iterable[Any]) -> List[Any]:
        """Filter a result set down to the items the actor may see."""
        start_time = time.time()
        items = collect(items)
        visible = filter_by_role(actor, resource_type, items)

        details = self._describe(actor, resource_type, Action.BULK)
        if self.metrics is not None:
            self.metrics.record_filter(
                details["resource_type"],
                details["role"],
                kept=len(visible),
                dropped=len(items) - len(visible)
            )

        if self.config.log_decisions:
            self.logger.debug(
                "Filtered result set",
                resource_type=details["resource_type"],
                role=details["role"],
                total=len(items),
                visible=len(visible),
                evaluation_time_ms=(time.time() - start_time) * 1000
            )

        return visible

    def _record(self, actor: Any, resource_type: Any, action: Any, allowed: bool) -> bool:
        """Log and count one decision, then hand it back."""
        details = self._describe(actor, resource_type, action)

        if self.metrics is not None:
            self.metrics.record_decision(
                details["resource_type"],
                details["action"],
                details["role"],
                allowed
            )

        if self.config.log_decisions:
            self.logger.debug("Permission decision", allowed=allowed, actor_id=_actor_id(actor), **details)

        return allowed

    def _describe(self, actor: Any, resource_type: Any, action: Any) -> Dict[str, str]:
        """Bounded labels for logs, metrics and errors."""
        role = effective_role(actor)
        return {
            "resource_type": _label(ResourceType.parse(resource_type)),
            "action": _label(Action.parse(action)),
            "role": _label(role),
        }

    def get_engine_stats(self) -> Dict[str, Any]:
        """Get engine statistics."""
        return {
            "rule_entries": len(DECISION_TABLE),
            "resource_types": sorted({key[0].value for key in DECISION_TABLE}),
            "metrics_enabled": self.metrics is not None,
            "log_decisions": self.config.log_decisions,
        }
