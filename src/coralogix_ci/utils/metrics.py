"""
Module: metrics.py
Description: Host and process metrics snapshot.

Produces a registry-style snapshot (gauges, counters, histograms,
meters, timers) describing the CI host process. The metrics collector
serializes this snapshot into a single log record.

Key Components:
- MetricsRegistry: Thread-safe counters plus registered gauges
- collect_metrics(): Snapshot of the default registry
- Graceful handling of gauges unavailable on the platform
"""

import os
import threading
import time
from typing import Any, Callable, Dict

from coralogix_ci.utils.logger import get_logger

logger = get_logger(__name__)

_PROCESS_START = time.time()


def _load_average() -> float:
    return os.getloadavg()[0]


class MetricsRegistry:
    """Registry of named gauges and counters."""

    def __init__(self):
        self._lock = threading.Lock()
        self._gauges: Dict[str, Callable[[], Any]] = {}
        self._counters: Dict[str, int] = {}

    def register_gauge(self, name: str, fn: Callable[[], Any]) -> None:
        """Register a callable sampled on every snapshot."""
        with self._lock:
            self._gauges[name] = fn

    def increment(self, name: str, value: int = 1) -> None:
        with self._lock:
            self._counters[name] = self._counters.get(name, 0) + value

    def snapshot(self) -> Dict[str, Any]:
        """
        Sample all gauges and copy counters.

        Gauges that fail to sample are left out of the snapshot.

        Returns:
            Dict with gauges, counters, histograms, meters and timers sections
        """
        with self._lock:
            gauges = dict(self._gauges)
            counters = dict(self._counters)

        sampled = {}
        for name, fn in gauges.items():
            try:
                sampled[name] = {'value': fn()}
            except (OSError, AttributeError) as e:
                logger.debug("Gauge unavailable", gauge=name, error=str(e))

        return {
            'gauges': sampled,
            'counters': {name: {'count': count} for name, count in counters.items()},
            'histograms': {},
            'meters': {},
            'timers': {},
        }


def default_registry() -> MetricsRegistry:
    """Registry with the standard host/process gauges."""
    registry = MetricsRegistry()
    registry.register_gauge('system.cpu.count', os.cpu_count)
    registry.register_gauge('system.load.average.1m', _load_average)
    registry.register_gauge('vm.thread.count', threading.active_count)
    registry.register_gauge('vm.uptime.seconds', lambda: round(time.time() - _PROCESS_START, 3))
    registry.register_gauge('process.pid', os.getpid)
    return registry


_registry = default_registry()


def get_registry() -> MetricsRegistry:
    return _registry


def collect_metrics() -> Dict[str, Any]:
    """Snapshot of the default registry."""
    return _registry.snapshot()
