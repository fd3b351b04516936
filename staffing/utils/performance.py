"""Run tracking for matching: latency, pool size and reference fallbacks"""
import time
import threading
from functools import wraps
from dataclasses import dataclass, field
from typing import Any, List, Optional
import numpy as np


@dataclass
class RunMetrics:
    """Matching run metrics"""
    failed_runs: int = 0
    latencies: List[float] = field(default_factory=list)
    considered: List[int] = field(default_factory=list)
    fallback_results: int = 0

    @property
    def successful_runs(self) -> int:
        return len(self.considered)

    @property
    def total_runs(self) -> int:
        return self.successful_runs + self.failed_runs

    @property
    def p95_latency(self) -> float:
        return float(np.percentile(self.latencies, 95)) if self.latencies else 0.0

    @property
    def avg_considered(self) -> float:
        return float(np.mean(self.considered)) if self.considered else 0.0


class PerformanceMonitor:
    """Monitor matching runs"""

    def __init__(self):
        self.metrics = RunMetrics()
        self._lock = threading.Lock()

    def record(self, latency: float, output: Optional[Any] = None):
        """Record one run; ``output`` is the MatchOutput, or None for a failed run"""
        with self._lock:
            self.metrics.latencies.append(latency)
            if output is None:
                self.metrics.failed_runs += 1
                return
            self.metrics.considered.append(output.considered)
            self.metrics.fallback_results += sum(
                1 for result in output.results
                if result.scores.visa_defaulted or result.scores.flight_defaulted
            )

    def measure(self, func):
        """Decorator for functions returning a MatchOutput"""
        @wraps(func)
        def wrapper(*args, **kwargs):
            start = time.perf_counter()
            try:
                output = func(*args, **kwargs)
            except Exception:
                self.record(time.perf_counter() - start)
                raise
            self.record(time.perf_counter() - start, output)
            return output

        return wrapper

    def reset(self):
        with self._lock:
            self.metrics = RunMetrics()

    def get_report(self) -> dict:
        """Generate run report"""
        with self._lock:
            return {
                "total_runs": self.metrics.total_runs,
                "successful_runs": self.metrics.successful_runs,
                "failed_runs": self.metrics.failed_runs,
                "p95_latency_ms": round(self.metrics.p95_latency * 1000, 3),
                "avg_candidates_considered": round(self.metrics.avg_considered, 2),
                "fallback_results": self.metrics.fallback_results,
            }

# Global monitor instance
monitor = PerformanceMonitor()
