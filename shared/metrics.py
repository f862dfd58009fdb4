"""
Shared metrics configuration for the marketplace permissions engine.
"""

from typing import Dict, Any, Optional
from prometheus_client import Counter, Info, CollectorRegistry


class PolicyMetrics:
    """Prometheus counters for permission decisions."""

    def __init__(self, service_name: str = "permissions", registry: Optional[CollectorRegistry] = None):
        self.service_name = service_name
        # Each collector gets its own registry unless one is shared in
        self.registry = registry if registry is not None else CollectorRegistry()
        self._metrics: Dict[str, Any] = {}
        self._setup_metrics()

    def _setup_metrics(self):
        """Set up decision metrics."""
        self._metrics["service_info"] = Info(
            "service_info",
            "Service information",
            registry=self.registry
        )
        self._metrics["service_info"].info({
            "service": self.service_name,
            "version": "1.0.0"
        })

        self._metrics["policy_decisions_total"] = Counter(
            "policy_decisions_total",
            "Total permission decisions",
            ["resource_type", "action", "role", "decision"],
            registry=self.registry
        )

        self._metrics["policy_filtered_items_total"] = Counter(
            "policy_filtered_items_total",
            "Total items evaluated by bulk filtering",
            ["resource_type", "role", "outcome"],
            registry=self.registry
        )

    def get_metric(self, name: str):
        """Get a metric by name."""
        return self._metrics.get(name)

    def record_decision(self, resource_type: str, action: str, role: str, allowed: bool):
        """Record a single allow/deny decision."""
        self._metrics["policy_decisions_total"].labels(
            resource_type=resource_type,
            action=action,
            role=role,
            decision="allow" if allowed else "deny"
        ).inc()

    def record_filter(self, resource_type: str, role: str, kept: int, dropped: int):
        """Record the outcome of a bulk filter."""
        counter = self._metrics["policy_filtered_items_total"]
        if kept:
            counter.labels(resource_type=resource_type, role=role, outcome="kept").inc(kept)
        if dropped:
            counter.labels(resource_type=resource_type, role=role, outcome="dropped").inc(dropped)

    def get_sample(self, name: str, labels: Dict[str, str]) -> float:
        """Read the current value of a sample; 0.0 when never recorded."""
        value = self.registry.get_sample_value(name, labels)
        return value or 0.0
