from __future__ import annotations

from dataclasses import dataclass

import numpy as np


@dataclass(frozen=True, slots=True)
class FeatureTiming:
    """Latency and throughput of one feature over a batch of frames."""

    name: str
    calls: int
    p50_ms: float
    p99_ms: float
    mean_ms: float
    calls_per_s: float
    samples_per_s: float
    realtime_factor: float


def summarize_timing(
    name: str,
    latencies_ns: list[int],
    *,
    frame_size: int,
    sample_rate: float,
) -> FeatureTiming:
    """Summarize per-call latencies for a feature run on `frame_size`-sample frames.

    `realtime_factor` is audio duration processed per second of compute; values
    above 1 keep up with a live stream.
    """
    if not latencies_ns:
        return FeatureTiming(
            name=name, calls=0, p50_ms=0.0, p99_ms=0.0, mean_ms=0.0,
            calls_per_s=0.0, samples_per_s=0.0, realtime_factor=0.0,
        )

    ms = np.asarray(latencies_ns, dtype=np.float64) / 1e6
    p50, p99 = np.quantile(ms, [0.50, 0.99]).tolist()
    total_s = float(np.sum(ms)) / 1e3
    # Clock resolution can report 0ns for trivial calls; clamp to 1ns total.
    total_s = max(total_s, 1e-9)
    calls_per_s = ms.size / total_s
    samples_per_s = calls_per_s * int(frame_size)
    return FeatureTiming(
        name=name,
        calls=int(ms.size),
        p50_ms=float(p50),
        p99_ms=float(p99),
        mean_ms=float(np.mean(ms)),
        calls_per_s=float(calls_per_s),
        samples_per_s=float(samples_per_s),
        realtime_factor=float(samples_per_s / float(sample_rate)),
    )
