from __future__ import annotations

import numpy as np
import pytest

from dspfeat.audio.envelope import envelope, onset_detection


def _blocks(levels: list[float], size: int = 512) -> np.ndarray:
    return np.concatenate([np.full(size, lv, dtype=np.float64) for lv in levels])


def test_envelope_windows_and_short_tail():
    x = np.concatenate([np.full(1024, 1.0), np.full(1024, -2.0), np.full(452, 3.0)])
    np.testing.assert_allclose(envelope(x), [1.0, 2.0, 3.0])


def test_envelope_empty_and_invalid_window():
    assert envelope([]).size == 0
    with pytest.raises(ValueError):
        envelope([0.1, 0.2], 0)


def test_envelope_single_short_window():
    env = envelope([3.0, 4.0], 1024)
    np.testing.assert_allclose(env, [np.sqrt(12.5)])


def test_onset_single_jump_then_decay():
    x = _blocks([0.0, 0.0, 0.5, 0.3, 0.1, 0.0])
    onsets = onset_detection(x)
    assert onsets.tolist() == [1024]
    assert onsets.dtype == np.int64


def test_onset_ignores_sustained_ramp():
    x = _blocks([0.0, 0.2, 0.4, 0.6, 0.8])
    assert onset_detection(x).size == 0


def test_onset_threshold_and_short_input():
    x = _blocks([0.0, 0.0, 0.05, 0.0])
    assert onset_detection(x).size == 0
    assert onset_detection(x, threshold=0.01).tolist() == [1024]
    assert onset_detection(np.ones(700)).size == 0


def test_onset_custom_window():
    x = _blocks([0.0, 0.0, 0.5, 0.2], size=128)
    assert onset_detection(x, window_size=128).tolist() == [256]
