"""
Module: metrics.py
Description: Periodic metrics collector.

Samples the host metrics registry on a fixed interval and forwards
each snapshot as one 'metrics' record. Runs on its own daemon thread;
the first snapshot is taken after an initial delay.
"""

import json
import threading
from typing import Any, Callable, Dict, Optional

from coralogix_ci.config.settings import Settings
from coralogix_ci.delivery.client import CoralogixClient
from coralogix_ci.models.log import Severity
from coralogix_ci.models.result import DeliveryResult
from coralogix_ci.utils.logger import get_logger
from coralogix_ci.utils.metrics import collect_metrics

from .audit import HostEventHandler

logger = get_logger(__name__)


class MetricsCollector(HostEventHandler):
    """Sends metrics snapshots while metrics_enabled is on."""

    subsystem = "metrics"
    category = "metrics"
    toggle = "metrics_enabled"

    def __init__(
        self,
        client: CoralogixClient,
        settings: Settings,
        collect: Callable[[], Dict[str, Any]] = collect_metrics
    ):
        super().__init__(client, settings)
        self.collect = collect
        self._run_lock = threading.Lock()
        self._stop_event = threading.Event()
        self._thread: Optional[threading.Thread] = None

    def run_once(self) -> DeliveryResult:
        """Take one snapshot and send it. Never raises."""
        if not self.enabled:
            return DeliveryResult.skipped(f"{self.toggle} is off")

        with self._run_lock:
            try:
                snapshot = dict(self.collect())
                snapshot.pop('histograms', None)
                text = json.dumps(snapshot, default=str)
            except Exception as e:
                logger.warning(
                    "Cannot collect metrics!",
                    error=str(e),
                    error_type=type(e).__name__
                )
                return DeliveryResult.failed(e)

            return self.send(text, Severity.INFO)

    def start(self) -> None:
        """Start the collector thread; calling it twice is a no-op."""
        if self._thread is not None and self._thread.is_alive():
            return

        self._stop_event.clear()
        self._thread = threading.Thread(
            target=self._run,
            name="coralogix-metrics-collector",
            daemon=True
        )
        self._thread.start()

        logger.info(
            "Metrics collector started",
            initial_delay=self.settings.metrics_initial_delay,
            interval=self.settings.metrics_interval
        )

    def stop(self, timeout: Optional[float] = None) -> None:
        """
        Signal the collector thread to exit and wait for it.

        If the thread is still alive after timeout it stays referenced,
        so start() will not launch a second collector next to it.
        """
        self._stop_event.set()
        if self._thread is not None:
            self._thread.join(timeout)
            if self._thread.is_alive():
                logger.warning("Metrics collector did not stop in time", timeout=timeout)
                return
            self._thread = None
        logger.info("Metrics collector stopped")

    @property
    def running(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    def _run(self) -> None:
        if self._stop_event.wait(self.settings.metrics_initial_delay):
            return
        while True:
            self.run_once()
            if self._stop_event.wait(self.settings.metrics_interval):
                return
