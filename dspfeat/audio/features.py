from __future__ import annotations

from dataclasses import asdict, dataclass

from dspfeat.audio.envelope import ONSET_WINDOW, onset_detection
from dspfeat.audio.mfcc import mfcc
from dspfeat.audio.pitch import fundamental_frequency
from dspfeat.audio.spectral import spectral_centroid, spectral_flatness, spectral_rolloff
from dspfeat.audio.time_domain import peak, rms, zero_crossing_rate
from dspfeat.core.signal import SignalLike, as_signal, check_sample_rate


@dataclass(frozen=True, slots=True)
class FeatureConfig:
    # Spectral shape
    rolloff_threshold: float = 0.85

    # Pitch search range
    min_freq_hz: float = 80.0
    max_freq_hz: float = 800.0

    # Cepstrum
    num_coeffs: int = 13
    num_filters: int = 26

    # Onsets
    onset_threshold: float = 0.1
    onset_window: int = ONSET_WINDOW

    # Voicing gates
    min_rms: float = 0.01
    max_zcr: float = 0.20
    max_centroid_hz: float = 3500.0


@dataclass(frozen=True, slots=True)
class AudioFeatures:
    rms: float
    peak: float
    zcr: float
    fundamental_hz: float
    spectral_centroid_hz: float
    spectral_rolloff_hz: float
    spectral_flatness: float
    mfcc: tuple[float, ...]
    onsets: tuple[int, ...]
    voicing: bool

    def as_dict(self) -> dict:
        d = asdict(self)
        d["mfcc"] = list(self.mfcc)
        d["onsets"] = list(self.onsets)
        return d


def compute_features(
    samples: SignalLike,
    magnitudes: SignalLike | None,
    sample_rate: float,
    config: FeatureConfig | None = None,
) -> AudioFeatures:
    """Compute the full descriptor set for one analysis frame.

    `samples` is the mono time-domain frame; `magnitudes` is the same frame's
    magnitude spectrum from an external transform, or None to skip the
    spectral descriptors.
    """
    cfg = config or FeatureConfig()
    sr = check_sample_rate(sample_rate)
    x = as_signal(samples)

    frame_rms = rms(x)
    frame_zcr = zero_crossing_rate(x)
    f0 = fundamental_frequency(x, sr, cfg.min_freq_hz, cfg.max_freq_hz) if x.size else 0.0
    onsets = tuple(int(i) for i in onset_detection(x, cfg.onset_threshold, window_size=cfg.onset_window))

    if magnitudes is None:
        centroid_hz = rolloff_hz = flatness = 0.0
        cepstrum: tuple[float, ...] = ()
    else:
        mags = as_signal(magnitudes)
        centroid_hz = spectral_centroid(mags, sr)
        rolloff_hz = spectral_rolloff(mags, sr, cfg.rolloff_threshold)
        flatness = spectral_flatness(mags)
        cepstrum = tuple(float(c) for c in mfcc(mags, sr, cfg.num_coeffs, cfg.num_filters))

    # A cheap voicing heuristic: voiced speech has energy, a low ZCR and a
    # detectable pitch. Without a spectrum the centroid gate is skipped.
    centroid_ok = magnitudes is None or centroid_hz <= cfg.max_centroid_hz
    voicing = bool(frame_rms >= cfg.min_rms and frame_zcr <= cfg.max_zcr and centroid_ok and f0 > 0.0)

    return AudioFeatures(
        rms=frame_rms,
        peak=peak(x),
        zcr=frame_zcr,
        fundamental_hz=f0,
        spectral_centroid_hz=centroid_hz,
        spectral_rolloff_hz=rolloff_hz,
        spectral_flatness=flatness,
        mfcc=cepstrum,
        onsets=onsets,
        voicing=voicing,
    )
