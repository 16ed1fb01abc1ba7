"""Tests for the dispatch metrics collector."""

from __future__ import annotations

from prometheus_client import CollectorRegistry

from beacon_events.metrics import EventMetrics, MetricsCollector


class TestEventMetrics:
    def test_counters_start_at_zero(self) -> None:
        metrics = EventMetrics()
        assert metrics.value("events_emitted", "PAIR_INIT") == 0.0

    def test_record(self) -> None:
        metrics = EventMetrics()
        metrics.record_emit("PAIR_INIT")
        metrics.record_invocation("PAIR_INIT")
        metrics.record_invocation("PAIR_INIT")
        metrics.record_failure("PAIR_INIT")
        assert metrics.value("events_emitted", "PAIR_INIT") == 1.0
        assert metrics.value("listener_invocations", "PAIR_INIT") == 2.0
        assert metrics.value("listener_failures", "PAIR_INIT") == 1.0

    def test_instances_do_not_collide(self) -> None:
        first = EventMetrics()
        second = EventMetrics()
        first.record_emit("UNKNOWN")
        assert second.value("events_emitted", "UNKNOWN") == 0.0

    def test_shared_registry_with_prefix(self) -> None:
        registry = CollectorRegistry()
        metrics = EventMetrics(MetricsCollector(registry), prefix="dapp")
        metrics.record_emit("UNKNOWN")
        assert metrics.registry is registry
        names = {m.name for m in registry.collect()}
        assert "dapp_events_emitted" in names
