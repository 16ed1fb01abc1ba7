"""Metrics collector — Prometheus counters for event dispatch.

- ``<prefix>_events_emitted_total`` counter-vec (event)
- ``<prefix>_listener_invocations_total`` counter-vec (event)
- ``<prefix>_listener_failures_total`` counter-vec (event)
"""

from __future__ import annotations

from prometheus_client import CollectorRegistry, Counter

_DEFAULT_PREFIX = "beacon"
_EVENT_LABELS = ("event",)


class MetricsCollector:
    """Low-level Prometheus collector that owns the registry.

    Use :class:`EventMetrics` for the high-level tracking interface.
    """

    def __init__(self, registry: CollectorRegistry | None = None) -> None:
        self._registry = registry or CollectorRegistry()

    @property
    def registry(self) -> CollectorRegistry:
        """Return the underlying Prometheus registry."""
        return self._registry

    def counter(self, name: str, doc: str, labels: tuple[str, ...] = ()) -> Counter:
        """Register and return a Counter."""
        return Counter(name, doc, labels, registry=self._registry)


class EventMetrics:
    """Dispatch counters, labelled by event kind.

    Each instance owns its own registry unless a collector is passed in, so
    several clients in one process never collide on metric names.
    """

    def __init__(
        self,
        collector: MetricsCollector | None = None,
        *,
        prefix: str = _DEFAULT_PREFIX,
    ) -> None:
        self._collector = collector or MetricsCollector()
        self._prefix = prefix

        self._emitted = self._collector.counter(
            f"{prefix}_events_emitted",
            "Number of emit() calls",
            _EVENT_LABELS,
        )
        self._invocations = self._collector.counter(
            f"{prefix}_listener_invocations",
            "Number of listener invocations",
            _EVENT_LABELS,
        )
        self._failures = self._collector.counter(
            f"{prefix}_listener_failures",
            "Number of listeners that raised or whose task failed",
            _EVENT_LABELS,
        )

    @property
    def registry(self) -> CollectorRegistry:
        """Return the underlying Prometheus registry."""
        return self._collector.registry

    def record_emit(self, event: str) -> None:
        self._emitted.labels(event=event).inc()

    def record_invocation(self, event: str) -> None:
        self._invocations.labels(event=event).inc()

    def record_failure(self, event: str) -> None:
        self._failures.labels(event=event).inc()

    def value(self, name: str, event: str) -> float:
        """Read a counter sample, e.g. ``value("listener_failures", "UNKNOWN")``.

        Returns 0.0 for a label that was never incremented.
        """
        sample = self.registry.get_sample_value(f"{self._prefix}_{name}_total", {"event": event})
        return sample or 0.0
