"""
Run metrics for explorer traffic.

Request counts, error counts and per-endpoint latency for one run.
Nothing is exported; the CLI logs a snapshot at DEBUG.
"""

from __future__ import annotations

import time
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Dict, Iterator, List


@dataclass
class Metrics:
    """In-process counters and latency samples for a single run."""

    counters: Dict[str, int] = field(default_factory=dict)
    latencies_ms: Dict[str, List[float]] = field(default_factory=dict)

    def inc(self, name: str, by: int = 1) -> None:
        self.counters[name] = self.counters.get(name, 0) + by

    def observe(self, name: str, value_ms: float) -> None:
        self.latencies_ms.setdefault(name, []).append(float(value_ms))

    @contextmanager
    def timed(self, endpoint: str) -> Iterator[None]:
        """
        Time one explorer call.

        Increments ``{endpoint}_requests_total`` on entry, records latency
        under ``{endpoint}_ms`` on success and ``{endpoint}_errors_total``
        when the body raises. The exception is re-raised.
        """
        self.inc(f"{endpoint}_requests_total")
        t0 = time.perf_counter()
        try:
            yield
        except Exception:
            self.inc(f"{endpoint}_errors_total")
            raise
        self.observe(f"{endpoint}_ms", (time.perf_counter() - t0) * 1000.0)

    def snapshot(self) -> dict:
        return {
            "counters": dict(self.counters),
            "latencies_ms": {k: list(v) for k, v in self.latencies_ms.items()},
        }
