from __future__ import annotations

import logging

import numpy as np

from dspfeat.core.signal import SignalLike, as_signal, check_sample_rate

logger = logging.getLogger(__name__)


def _bin_width(n: int, sample_rate: float) -> float:
    # n bins spread linearly from 0 Hz up to Nyquist.
    return sample_rate / (2.0 * n)


def spectral_centroid(magnitudes: SignalLike, sample_rate: float) -> float:
    """Magnitude-weighted mean frequency in Hz ("brightness")."""
    sr = check_sample_rate(sample_rate)
    mags = as_signal(magnitudes)
    n = int(mags.size)
    den = float(np.sum(mags)) if n else 0.0
    if den == 0.0:
        logger.debug("spectral_centroid: empty or silent spectrum (%d bins), returning 0", n)
        return 0.0
    freqs = np.arange(n, dtype=np.float64) * _bin_width(n, sr)
    return float(np.sum(freqs * mags) / den)


def spectral_rolloff(magnitudes: SignalLike, sample_rate: float, threshold: float = 0.85) -> float:
    """Frequency below which `threshold` of the total magnitude lies.

    Falls back to Nyquist when the threshold is never reached: empty or silent
    spectra, and any `threshold >= 1`.
    """
    sr = check_sample_rate(sample_rate)
    mags = as_signal(magnitudes)
    nyquist = sr / 2.0
    n = int(mags.size)
    total = float(np.sum(mags))
    if n == 0 or total <= 0.0 or float(threshold) >= 1.0:
        logger.debug("spectral_rolloff: threshold unreachable, returning nyquist %.1f Hz", nyquist)
        return nyquist

    cumulative = np.cumsum(mags)
    reached = np.flatnonzero(cumulative >= total * float(threshold))
    if reached.size == 0:
        return nyquist
    return float(reached[0]) * _bin_width(n, sr)


def spectral_flatness(magnitudes: SignalLike) -> float:
    """Geometric over arithmetic mean of the positive magnitudes.

    Near 1 for noise-like spectra, near 0 for tonal ones. Both means use the
    full length n: non-positive bins drop out of the geometric product but
    still count in the arithmetic mean's denominator.
    """
    mags = as_signal(magnitudes)
    n = int(mags.size)
    if n == 0:
        logger.debug("spectral_flatness: empty spectrum, returning 0")
        return 0.0

    positive = mags[mags > 0.0]
    if positive.size == 0:
        logger.debug("spectral_flatness: no positive bins among %d, returning 0", n)
        return 0.0

    # prod(m ** (1/n)) evaluated in the log domain to avoid underflow.
    geometric = float(np.exp(np.sum(np.log(positive)) / n))
    arithmetic = float(np.sum(positive)) / n
    if arithmetic <= 0.0:
        return 0.0
    return geometric / arithmetic
