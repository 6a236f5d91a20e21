"""
Prometheus Metrics: decoder observability.

Exposes:
- Decode failures per error type
- Decode latency

All metrics use lazy initialisation guarded by a try/except so the module
remains importable even when prometheus_client is not installed (e.g. in
pure unit-test environments without the extra dependency).

Usage
-----
    from submission_decoder.decoding.metrics import record_decode_failure, timed_decode

    with timed_decode():
        result = parser.parse_from_json(text)

    record_decode_failure("UnknownStatusError")
"""
from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Generator

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Try to import prometheus_client, fail gracefully if missing
# ---------------------------------------------------------------------------
try:
    from prometheus_client import Counter, Histogram
    METRICS_AVAILABLE = True
except ImportError:  # pragma: no cover
    METRICS_AVAILABLE = False
    logger.warning(
        "prometheus_client not installed, metrics will be no-ops. "
        "Install with: pip install prometheus-client"
    )


# ---------------------------------------------------------------------------
# Metric definitions
# ---------------------------------------------------------------------------

if METRICS_AVAILABLE:
    # Total failed decodes, labelled by error class name.
    DECODE_FAILURES: Counter = Counter(
        "submission_decode_failures_total",
        "Total submission result decode failures by error type",
        ["error_type"],
    )

    # Time spent decoding one document (seconds).
    DECODE_LATENCY: Histogram = Histogram(
        "submission_decode_seconds",
        "Time spent decoding one submission result document in seconds",
        buckets=(0.0005, 0.001, 0.005, 0.01, 0.05, 0.1, 0.5, 1.0),
    )
else:
    # Stub objects so callers don't need to guard every usage.
    class _NoOpMetric:
        def labels(self, **_kwargs):  # noqa: ANN001
            return self

        def inc(self, _amount: float = 1) -> None:
            pass

        def observe(self, _value: float) -> None:
            pass

        def time(self):
            return self

        def __enter__(self):
            return self

        def __exit__(self, *args):  # noqa: ANN002
            pass

    DECODE_FAILURES = _NoOpMetric()  # type: ignore[assignment]
    DECODE_LATENCY = _NoOpMetric()   # type: ignore[assignment]


# ---------------------------------------------------------------------------
# Convenience helpers
# ---------------------------------------------------------------------------

def record_decode_failure(error_type: str = "generic") -> None:
    """Increment the decode failure counter for *error_type*."""
    DECODE_FAILURES.labels(error_type=error_type).inc()


@contextmanager
def timed_decode() -> Generator[None, None, None]:
    """Context manager that records decode latency."""
    with DECODE_LATENCY.time():
        yield
