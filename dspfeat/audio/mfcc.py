from __future__ import annotations

import logging
from functools import lru_cache

import numpy as np

from dspfeat.core.signal import SignalLike, as_signal, check_sample_rate

logger = logging.getLogger(__name__)

LOG_FLOOR = 1e-10


def hz_to_mel(hz):
    return 2595.0 * np.log10(1.0 + np.asarray(hz, dtype=np.float64) / 700.0)


def mel_to_hz(mel):
    return 700.0 * (10.0 ** (np.asarray(mel, dtype=np.float64) / 2595.0) - 1.0)


@lru_cache(maxsize=32)
def _filter_bank(fft_size: int, sample_rate: float, num_filters: int) -> np.ndarray:
    logger.debug("building mel filter bank: fft_size=%d sr=%.1f filters=%d", fft_size, sample_rate, num_filters)
    mel_points = np.linspace(float(hz_to_mel(0.0)), float(hz_to_mel(sample_rate / 2.0)), num_filters + 2)
    bins = np.floor((fft_size + 1) * mel_to_hz(mel_points) / sample_rate).astype(np.int64)

    bank = np.zeros((num_filters, fft_size), dtype=np.float64)
    for k in range(num_filters):
        left, center, right = int(bins[k]), int(bins[k + 1]), int(bins[k + 2])
        # Empty ranges (coincident edges) leave the slope at zero.
        rise = np.arange(left, min(center, fft_size))
        bank[k, rise] = (rise - left) / float(center - left) if rise.size else 0.0
        fall = np.arange(center, min(right, fft_size))
        bank[k, fall] = (right - fall) / float(right - center) if fall.size else 0.0

    bank.flags.writeable = False
    return bank


def mel_filter_bank(fft_size: int, sample_rate: float, num_filters: int = 26) -> np.ndarray:
    """Triangular mel filters, shape [num_filters, fft_size].

    Filter edges sit at `num_filters + 2` equally spaced mel points from 0 Hz
    to Nyquist, mapped to bins with `floor((fft_size + 1) * hz / sample_rate)`.
    The matrix is cached per argument triple and returned read-only.
    """
    if int(fft_size) < 0:
        raise ValueError("fft_size must be >= 0")
    if int(num_filters) < 1:
        raise ValueError("num_filters must be >= 1")
    sr = check_sample_rate(sample_rate)
    return _filter_bank(int(fft_size), sr, int(num_filters))


def dct_ii(values: SignalLike) -> np.ndarray:
    """Unnormalized DCT-II: out[k] = sum_i v[i] * cos(pi * k * (2i + 1) / (2n))."""
    v = as_signal(values)
    n = int(v.size)
    if n == 0:
        return np.zeros(0, dtype=np.float64)
    k = np.arange(n, dtype=np.float64)[:, None]
    i = np.arange(n, dtype=np.float64)[None, :]
    basis = np.cos(np.pi * k * (2.0 * i + 1.0) / (2.0 * n))
    return basis @ v


def mfcc(
    magnitudes: SignalLike,
    sample_rate: float,
    num_coeffs: int = 13,
    num_filters: int = 26,
) -> np.ndarray:
    """Mel-frequency cepstral coefficients of one magnitude spectrum.

    Mel filter energies are log-compressed (floored at 1e-10), passed through
    `dct_ii`, and the first `num_coeffs` coefficients are kept.
    """
    if int(num_coeffs) < 0:
        raise ValueError("num_coeffs must be >= 0")
    mags = as_signal(magnitudes)
    bank = mel_filter_bank(mags.size, sample_rate, num_filters)

    energies = bank @ mags
    log_energies = np.log(np.maximum(energies, LOG_FLOOR))
    return dct_ii(log_energies)[: int(num_coeffs)]
