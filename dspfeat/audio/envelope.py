from __future__ import annotations

import numpy as np

from dspfeat.core.signal import SignalLike, as_signal

ONSET_WINDOW = 512


def envelope(samples: SignalLike, window_size: int = 1024) -> np.ndarray:
    """RMS of consecutive, non-overlapping windows (the last may be shorter)."""
    if int(window_size) < 1:
        raise ValueError("window_size must be >= 1")
    x = as_signal(samples)
    w = int(window_size)
    if x.size == 0:
        return np.zeros(0, dtype=np.float64)

    starts = np.arange(0, x.size, w)
    # Per-window sum of squares; reduceat handles the short tail window.
    sq_sums = np.add.reduceat(x * x, starts)
    counts = np.minimum(starts + w, x.size) - starts
    return np.sqrt(sq_sums / counts)


def onset_detection(
    samples: SignalLike,
    threshold: float = 0.1,
    *,
    window_size: int = ONSET_WINDOW,
) -> np.ndarray:
    """Sample positions of sharp energy rises in the windowed RMS envelope.

    Window `i` is an onset when its rise over window `i-1` exceeds `threshold`
    and the next step rises by less than half as much (a local peak rather than
    a sustained ramp). Returns `i * window_size` for every flagged window.
    """
    env = envelope(samples, window_size)
    if env.size < 3:
        return np.zeros(0, dtype=np.int64)

    rise = env[1:-1] - env[:-2]
    next_rise = env[2:] - env[1:-1]
    hits = np.flatnonzero((rise > float(threshold)) & (next_rise < rise * 0.5)) + 1
    return hits.astype(np.int64) * int(window_size)
