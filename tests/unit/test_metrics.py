"""
Unit tests for submission_decoder.decoding.metrics.

Verifies that all helpers work both when prometheus_client is installed
(real counters) and when it is absent (no-op stubs), so the module is
safe to import in any environment.
"""
from __future__ import annotations

import json

import pytest


class TestMetricsAvailability:
    def test_module_importable(self):
        import submission_decoder.decoding.metrics as m
        assert hasattr(m, "METRICS_AVAILABLE")
        assert isinstance(m.METRICS_AVAILABLE, bool)

    def test_all_public_helpers_present(self):
        from submission_decoder.decoding import metrics as m
        for name in (
            "record_decode_failure",
            "timed_decode",
            "DECODE_FAILURES",
            "DECODE_LATENCY",
        ):
            assert hasattr(m, name), f"Missing public symbol: {name}"


class TestMetricHelpers:
    """Every helper must be callable without raising regardless of install state."""

    def test_record_decode_failure(self):
        from submission_decoder.decoding.metrics import record_decode_failure
        record_decode_failure("UnknownStatusError")
        record_decode_failure()

    def test_timed_decode_context_manager(self):
        from submission_decoder.decoding.metrics import timed_decode
        with timed_decode():
            x = 1 + 1  # noqa: F841

    def test_timed_decode_does_not_suppress_exceptions(self):
        from submission_decoder.decoding.metrics import timed_decode
        with pytest.raises(ValueError, match="test error"):
            with timed_decode():
                raise ValueError("test error")


class TestDecodeFailureCounter:
    def test_failures_counted_by_error_type(self):
        from submission_decoder.decoding import metrics as m
        from submission_decoder.decoding.assembler import parse_submission_result
        from submission_decoder.decoding.errors import UnknownStatusError

        if not m.METRICS_AVAILABLE:
            pytest.skip("prometheus_client not installed")

        from prometheus_client import REGISTRY

        def _count():
            return REGISTRY.get_sample_value(
                "submission_decode_failures_total", {"error_type": "UnknownStatusError"}
            ) or 0.0

        before = _count()
        with pytest.raises(UnknownStatusError):
            parse_submission_result(json.dumps({"status": "bogus"}))
        assert _count() == before + 1
