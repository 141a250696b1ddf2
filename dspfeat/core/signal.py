from __future__ import annotations

from collections.abc import MutableSequence, Sequence

import numpy as np

# Read-only input: anything numpy can turn into a 1-D float array.
SignalLike = Sequence[float] | np.ndarray
# In-place input: a writeable float array or a mutable Python sequence.
MutableBuffer = MutableSequence[float] | np.ndarray


def as_signal(x: SignalLike) -> np.ndarray:
    """Return a read-only 1-D float64 view of `x` (copying only when needed)."""
    arr = np.asarray(x, dtype=np.float64)
    if arr.ndim != 1:
        raise ValueError(f"signal must be 1D, got shape {arr.shape}")
    if arr.flags.writeable:
        arr = arr.view()
        arr.flags.writeable = False
    return arr


def as_buffer(buf: MutableBuffer) -> MutableBuffer:
    """Check that `buf` can be scaled in place and hand it back unchanged."""
    if isinstance(buf, np.ndarray):
        if buf.ndim != 1:
            raise ValueError(f"buffer must be 1D, got shape {buf.shape}")
        if not np.issubdtype(buf.dtype, np.floating):
            raise ValueError(f"buffer must have a floating dtype, got {buf.dtype}")
        if not buf.flags.writeable:
            raise ValueError("buffer is read-only")
        return buf
    if not isinstance(buf, MutableSequence):
        raise ValueError(f"buffer must be a mutable sequence, got {type(buf).__name__}")
    return buf


def check_sample_rate(sample_rate: float) -> float:
    sr = float(sample_rate)
    if not sr > 0.0:
        raise ValueError("sample_rate must be > 0")
    return sr
