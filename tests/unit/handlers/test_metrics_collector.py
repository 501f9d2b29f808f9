"""
Module: test_metrics_collector.py
Description: Unit tests for the periodic metrics collector.
"""

import json
import threading

from coralogix_ci.handlers.metrics import MetricsCollector
from coralogix_ci.models.result import DeliveryResult
from tests.conftest import LOGS_URL


def fake_snapshot():
    return {
        "gauges": {"vm.thread.count": {"value": 12}},
        "counters": {"builds.completed": {"count": 3}},
        "histograms": {"queue.wait": {"count": 1}},
        "meters": {},
        "timers": {},
    }


class TestRunOnce:

    def test_sends_snapshot_without_histograms(self, enabled_client, enabled_settings, httpx_mock):
        httpx_mock.add_response(method="POST", url=LOGS_URL)
        collector = MetricsCollector(enabled_client, enabled_settings, collect=fake_snapshot)

        result = collector.run_once()

        assert result.delivered
        body = json.loads(httpx_mock.get_request().content)
        assert body["subsystemName"] == "metrics"
        entry = body["logEntries"][0]
        assert entry["category"] == "metrics"
        assert entry["severity"] == 3
        metrics = json.loads(entry["text"])
        assert "histograms" not in metrics
        assert metrics["gauges"]["vm.thread.count"]["value"] == 12

    def test_disabled_sends_nothing(self, client, test_settings, httpx_mock):
        collector = MetricsCollector(client, test_settings, collect=fake_snapshot)

        assert not collector.run_once().delivered
        assert httpx_mock.get_requests() == []

    def test_collect_failure_does_not_raise(self, enabled_client, enabled_settings, httpx_mock):
        def broken():
            raise RuntimeError("registry unavailable")

        result = MetricsCollector(enabled_client, enabled_settings, collect=broken).run_once()

        assert result.error_type == "RuntimeError"
        assert httpx_mock.get_requests() == []


class TestThread:

    def test_start_runs_until_stopped(self, enabled_client, enabled_settings, monkeypatch):
        collector = MetricsCollector(enabled_client, enabled_settings, collect=fake_snapshot)
        ran = threading.Event()

        def fake_run_once():
            ran.set()
            return DeliveryResult.ok()

        monkeypatch.setattr(collector, "run_once", fake_run_once)

        collector.start()
        try:
            assert ran.wait(timeout=5)
            assert collector.running
        finally:
            collector.stop(timeout=5)

        assert not collector.running

    def test_start_twice_keeps_one_thread(self, enabled_client, enabled_settings):
        settings = enabled_settings.model_copy(update={"metrics_initial_delay": 60})
        collector = MetricsCollector(enabled_client, settings, collect=fake_snapshot)

        collector.start()
        first = collector._thread
        collector.start()

        assert collector._thread is first
        collector.stop(timeout=5)

    def test_stop_timeout_keeps_live_thread(self, enabled_client, enabled_settings):
        """A thread that outlives stop() is not replaced by start()."""
        collector = MetricsCollector(enabled_client, enabled_settings, collect=fake_snapshot)
        release = threading.Event()
        collector._run = lambda: release.wait(timeout=5)

        collector.start()
        first = collector._thread
        try:
            collector.stop(timeout=0.05)

            assert collector._thread is first
            assert collector.running
            collector.start()
            assert collector._thread is first
        finally:
            release.set()
            first.join(timeout=5)

        collector.stop(timeout=5)
        assert collector._thread is None
        assert not collector.running
