"""Metrics — Prometheus counters for event dispatch."""

from __future__ import annotations

from beacon_events.metrics.collector import EventMetrics, MetricsCollector

__all__ = ["EventMetrics", "MetricsCollector"]
