from __future__ import annotations

import logging

import numpy as np

from dspfeat.core.signal import MutableBuffer, SignalLike, as_buffer, as_signal

logger = logging.getLogger(__name__)


def rms(samples: SignalLike) -> float:
    """Root-mean-square amplitude. Empty input gives 0."""
    x = as_signal(samples)
    return float(np.sqrt(np.sum(x * x) / max(x.size, 1)))


def peak(samples: SignalLike) -> float:
    """Largest absolute amplitude. Empty input gives 0."""
    x = as_signal(samples)
    if x.size == 0:
        return 0.0
    return float(np.max(np.abs(x)))


def zero_crossing_rate(samples: SignalLike) -> float:
    """Fraction of adjacent sample pairs whose sign differs.

    Zero is treated as non-negative, so a crossing is one sample `< 0` next to
    one `>= 0`. Inputs shorter than two samples give 0.
    """
    x = as_signal(samples)
    if x.size <= 1:
        return 0.0
    # np.signbit would classify -0.0 as negative; compare against 0 instead.
    neg = x < 0.0
    crossings = int(np.count_nonzero(neg[1:] != neg[:-1]))
    return crossings / float(x.size - 1)


def normalize(buffer: MutableBuffer, target: float = 1.0) -> float:
    """Scale `buffer` in place so its peak equals `target`.

    Returns the applied scale factor. A silent buffer (peak 0) is left
    untouched and 1.0 is returned.
    """
    buf = as_buffer(buffer)
    p = peak(buf)
    if p == 0.0:
        logger.debug("normalize: zero peak over %d samples, buffer unchanged", len(buf))
        return 1.0

    s = float(target) / p
    if isinstance(buf, np.ndarray):
        buf *= s
    else:
        for i in range(len(buf)):
            buf[i] = buf[i] * s
    return s
