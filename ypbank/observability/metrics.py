"""
Prometheus metrics collection for ypbank

Counts records decoded and encoded per format, codec failures by error type,
and the time spent in each decode/encode call.
"""
from typing import Optional

from prometheus_client import (
    CollectorRegistry,
    Counter,
    Histogram,
    generate_latest,
)


# Global registry for metrics
REGISTRY = CollectorRegistry()


# =======================
# CODEC METRICS
# =======================

codec_records_total = Counter(
    name="ypbank_codec_records_total",
    documentation="Total number of records decoded or encoded",
    labelnames=["format", "operation"],  # operation: decode, encode
    registry=REGISTRY,
)

codec_failures_total = Counter(
    name="ypbank_codec_failures_total",
    documentation="Total number of failed decode/encode calls",
    labelnames=["format", "operation", "error_type"],
    registry=REGISTRY,
)

codec_operation_duration_seconds = Histogram(
    name="ypbank_codec_operation_duration_seconds",
    documentation="Time spent in a single decode/encode call in seconds",
    labelnames=["format", "operation"],
    buckets=[0.001, 0.005, 0.01, 0.05, 0.1, 0.5, 1.0, 5.0, 30.0],
    registry=REGISTRY,
)


# =======================
# HELPER FUNCTIONS
# =======================

def generate_metrics() -> bytes:
    """
    Generate Prometheus metrics in text format

    Returns:
        Metrics in Prometheus text format
    """
    return generate_latest(REGISTRY)


class track_duration:
    """
    Context manager for tracking operation duration

    Usage:
        with track_duration(codec_operation_duration_seconds, format="csv", operation="decode"):
            # do work
            pass
    """

    def __init__(self, histogram: Histogram, **labels):
        self.histogram = histogram
        self.labels = labels
        self.timer = None

    def __enter__(self):
        self.timer = self.histogram.labels(**self.labels).time()
        self.timer.__enter__()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.timer.__exit__(exc_type, exc_val, exc_tb)
        return False


def increment_counter(counter: Counter, value: float = 1.0, **labels) -> None:
    """
    Increment a counter metric

    Args:
        counter: Prometheus Counter metric
        value: Amount to increment (default: 1.0)
        **labels: Label values for the metric
    """
    counter.labels(**labels).inc(value)


def observe_histogram(histogram: Histogram, value: float, **labels) -> None:
    """
    Observe a value in a histogram metric

    Args:
        histogram: Prometheus Histogram metric
        value: Value to observe
        **labels: Label values for the metric
    """
    histogram.labels(**labels).observe(value)


def record_codec_success(format_name: str, operation: str, record_count: int) -> None:
    """Record a completed decode/encode call."""
    increment_counter(codec_records_total, record_count, format=format_name, operation=operation)


def record_codec_failure(format_name: str, operation: str, error: Optional[BaseException]) -> None:
    """Record a failed decode/encode call."""
    error_type = type(error).__name__ if error is not None else "unknown"
    increment_counter(
        codec_failures_total, 1, format=format_name, operation=operation, error_type=error_type
    )


def get_sample_value(name: str, labels: Optional[dict] = None) -> Optional[float]:
    """Read the current value of a sample from the ypbank registry."""
    return REGISTRY.get_sample_value(name, labels or {})
