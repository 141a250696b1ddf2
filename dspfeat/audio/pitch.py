from __future__ import annotations

import logging
import math

import numpy as np

from dspfeat.core.signal import SignalLike, as_signal, check_sample_rate

logger = logging.getLogger(__name__)


def autocorrelation(samples: SignalLike, max_lag: int | None = None) -> np.ndarray:
    """Lag-normalized autocorrelation r[k] = sum_j x[j] x[j+k] / (n - k).

    Lags run from 0 to `min(max_lag, n - 1)`; `max_lag=None` uses `n // 2`.
    r[0] is the mean squared amplitude.
    """
    if max_lag is not None and int(max_lag) < 0:
        raise ValueError("max_lag must be >= 0")
    x = as_signal(samples)
    n = int(x.size)
    lag = min(n // 2 if max_lag is None else int(max_lag), n - 1)
    if lag < 0:
        return np.zeros(0, dtype=np.float64)

    # "full" correlation is centered at index n-1 (lag 0).
    full = np.correlate(x, x, mode="full")
    sums = full[n - 1 : n + lag]
    return sums / (n - np.arange(lag + 1, dtype=np.float64))


def fundamental_frequency(
    samples: SignalLike,
    sample_rate: float,
    min_freq: float = 80.0,
    max_freq: float = 800.0,
) -> float:
    """Estimate pitch in Hz from the strongest autocorrelation peak.

    Only periods between `sample_rate / max_freq` and `sample_rate / min_freq`
    samples are searched. Returns 0 when no period in range correlates
    positively. No sub-sample interpolation is done.
    """
    sr = check_sample_rate(sample_rate)
    if float(min_freq) <= 0.0 or float(max_freq) <= 0.0:
        raise ValueError("min_freq and max_freq must be > 0")

    min_period = int(math.floor(sr / float(max_freq)))
    max_period = int(math.floor(sr / float(min_freq)))

    corr = autocorrelation(samples)
    window = corr[min_period : min(max_period, corr.size - 1) + 1]
    if window.size == 0 or float(np.max(window)) <= 0.0:
        logger.debug("fundamental_frequency: no positive correlation in periods [%d, %d]", min_period, max_period)
        return 0.0

    # argmax picks the first maximum, matching a strict ">" scan.
    best_period = min_period + int(np.argmax(window))
    if best_period == 0:
        return 0.0
    return sr / float(best_period)
