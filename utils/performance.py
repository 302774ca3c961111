"""
Performance monitoring utilities.

Tracks how long diff and parse operations take. Both LCS passes are
quadratic, so large pastes show up here as slow-operation warnings.
"""

import time
import functools
from typing import Callable, Any, Dict, Optional
import logging

# Configure logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


class PerformanceMonitor:
    """
    Records operation durations and reports slow ones.

    Attributes:
        slow_threshold: Seconds after which an operation is logged as slow
        metrics: Recorded durations per operation name
    """

    def __init__(self, slow_threshold: float = 1.0):
        self.slow_threshold = slow_threshold
        self.metrics: Dict[str, list] = {}

    def record(self, operation: str, duration: float):
        """
        Record an operation duration and warn when it is over the threshold.

        Args:
            operation: Name of the operation
            duration: Duration in seconds
        """
        self.metrics.setdefault(operation, []).append(duration)

        if duration > self.slow_threshold:
            logger.warning(
                f"Operation '{operation}' took {duration:.2f}s "
                f"(threshold: {self.slow_threshold}s)"
            )

    def get_stats(self, operation: str) -> Dict[str, float]:
        """
        Get statistics for an operation.

        Returns:
            Dictionary with min, max, avg, total, count
        """
        durations = self.metrics.get(operation)
        if not durations:
            return {'min': 0, 'max': 0, 'avg': 0, 'total': 0, 'count': 0}

        return {
            'min': min(durations),
            'max': max(durations),
            'avg': sum(durations) / len(durations),
            'total': sum(durations),
            'count': len(durations)
        }

    def get_all_stats(self) -> Dict[str, Dict[str, float]]:
        return {operation: self.get_stats(operation) for operation in self.metrics}

    def clear(self):
        """Clear all recorded metrics."""
        self.metrics.clear()

    def log_stats(self, operation: Optional[str] = None):
        """
        Log statistics for one operation, or for all of them.

        Args:
            operation: Specific operation to log, or None for all
        """
        operations = [operation] if operation else list(self.metrics)
        for op in operations:
            stats = self.get_stats(op)
            logger.info(
                f"'{op}': count={stats['count']} avg={stats['avg']:.4f}s "
                f"max={stats['max']:.4f}s total={stats['total']:.4f}s"
            )


# Global performance monitor instance
_global_monitor = PerformanceMonitor()


def get_monitor() -> PerformanceMonitor:
    """Get the global performance monitor instance."""
    return _global_monitor


def monitor_performance(operation_name: str = None):
    """
    Decorator recording the wall time of each call on the global monitor.

    Args:
        operation_name: Name for the operation (defaults to function name)

    Example:
        @monitor_performance("line_diff")
        def compute(old_lines, new_lines):
            ...
    """
    def decorator(func: Callable) -> Callable:
        op_name = operation_name or func.__name__

        @functools.wraps(func)
        def wrapper(*args, **kwargs) -> Any:
            start_time = time.perf_counter()
            try:
                return func(*args, **kwargs)
            finally:
                _global_monitor.record(op_name, time.perf_counter() - start_time)

        return wrapper
    return decorator


class measure_time:
    """
    Context manager recording the wall time of a block on the global monitor.

    Example:
        with measure_time("render_diff"):
            diff_html = engine.render_diff(result, view_mode)
    """

    def __init__(self, operation_name: str):
        self.name = operation_name
        self.start_time = None
        self.duration = None

    def __enter__(self):
        self.start_time = time.perf_counter()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.duration = time.perf_counter() - self.start_time
        _global_monitor.record(self.name, self.duration)
        return False
