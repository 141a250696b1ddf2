from __future__ import annotations

import array

import numpy as np
import pytest

from dspfeat.core.signal import as_buffer, as_signal, check_sample_rate


def test_as_signal_accepts_common_containers():
    for src in ([0.5, -0.5], (0.5, -0.5), array.array("f", [0.5, -0.5]), np.array([1, -1], dtype=np.int16) / 2):
        x = as_signal(src)
        assert x.dtype == np.float64
        assert x.shape == (2,)
        np.testing.assert_allclose(x, [0.5, -0.5])


def test_as_signal_is_read_only_without_touching_caller_array():
    src = np.zeros(4)
    x = as_signal(src)
    assert x.flags.writeable is False
    assert src.flags.writeable is True


def test_as_signal_rejects_non_1d():
    with pytest.raises(ValueError):
        as_signal(np.zeros((2, 3)))
    with pytest.raises(ValueError):
        as_signal(1.0)


def test_as_buffer_checks_mutability():
    buf = [0.1, 0.2]
    assert as_buffer(buf) is buf
    arr = np.zeros(3, dtype=np.float32)
    assert as_buffer(arr) is arr

    ro = np.zeros(3)
    ro.flags.writeable = False
    with pytest.raises(ValueError):
        as_buffer(ro)
    with pytest.raises(ValueError):
        as_buffer(np.zeros(3, dtype=np.int32))
    with pytest.raises(ValueError):
        as_buffer((0.1, 0.2))


def test_check_sample_rate():
    assert check_sample_rate(16000) == 16000.0
    with pytest.raises(ValueError):
        check_sample_rate(0)
    with pytest.raises(ValueError):
        check_sample_rate(-8000.0)
