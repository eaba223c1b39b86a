"""
Pitch estimation strategies.

Pitch cannot be read off amplitude alone, so the feature extractor takes
a pluggable estimator. The fixed estimator returns a neutral placeholder;
the YIN estimator tracks fundamental frequency with librosa.
"""

import logging
from typing import Optional, Protocol

import librosa
import numpy as np

from voice_aura.exceptions import EstimationError
from voice_aura.models.audio_sample import AudioSample
from voice_aura.utils.metrics import VoiceAuraMetrics


logger = logging.getLogger(__name__)


class PitchEstimator(Protocol):
    """
    Protocol defining the interface for pitch estimation.

    Implementations return a relative pitch in [0, 1] and must never raise
    for a non-empty sample.
    """

    def estimate(self, sample: AudioSample) -> float:
        """
        Estimate relative pitch of a sample.

        Args:
            sample: Non-empty audio sample

        Returns:
            Relative pitch, 0 (low) to 1 (high)
        """
        ...


class FixedPitchEstimator:
    """Returns a constant pitch regardless of the audio."""

    DEFAULT_PITCH = 0.5

    def __init__(self, value: float = DEFAULT_PITCH):
        if not 0.0 <= value <= 1.0:
            raise ValueError(f"value must be in [0, 1], got {value}")
        self.value = value

    def estimate(self, sample: AudioSample) -> float:
        return self.value


class YinPitchEstimator:
    """
    Estimates pitch with librosa's YIN fundamental frequency tracker.

    The median f0 across frames is mapped linearly from [fmin, fmax] Hz
    onto [0, 1] and clamped. Falls back to the neutral placeholder pitch
    on any processing errors.
    """

    DEFAULT_FMIN_HZ = 65.0
    DEFAULT_FMAX_HZ = 400.0

    def __init__(
        self,
        fmin: float = DEFAULT_FMIN_HZ,
        fmax: float = DEFAULT_FMAX_HZ,
        metrics: Optional[VoiceAuraMetrics] = None
    ):
        """
        Initialize YIN pitch estimator.

        Args:
            fmin: Lowest tracked frequency in Hz (maps to pitch 0)
            fmax: Highest tracked frequency in Hz (maps to pitch 1)
            metrics: Optional metrics emitter for CloudWatch metrics
        """
        if fmin <= 0 or fmax <= fmin:
            raise ValueError(f"Invalid frequency range: fmin={fmin}, fmax={fmax}")

        self.fmin = fmin
        self.fmax = fmax
        self.metrics = metrics or VoiceAuraMetrics()

    def estimate(self, sample: AudioSample) -> float:
        try:
            f0 = librosa.yin(
                sample.samples,
                fmin=self.fmin,
                fmax=self.fmax,
                sr=sample.sample_rate
            )
            f0 = f0[np.isfinite(f0)]
            if f0.size == 0:
                raise EstimationError("YIN returned no finite f0 frames")

            median_f0 = float(np.median(f0))
            pitch = (median_f0 - self.fmin) / (self.fmax - self.fmin)
            pitch = float(np.clip(pitch, 0.0, 1.0))

            logger.debug("Pitch estimation completed: f0=%.2fHz, pitch=%.3f", median_f0, pitch)
            return pitch

        except Exception as e:
            logger.error(
                "Pitch estimation failed: %s. Falling back to pitch %.2f",
                str(e),
                FixedPitchEstimator.DEFAULT_PITCH,
                exc_info=True,
                extra={
                    'sample_rate': sample.sample_rate,
                    'sample_count': int(sample.samples.size),
                    'error_type': type(e).__name__
                }
            )

            self.metrics.emit_error_count(
                error_type=type(e).__name__,
                component='YinPitchEstimator'
            )
            self.metrics.emit_fallback_used(fallback_type='DefaultPitch')

            return FixedPitchEstimator.DEFAULT_PITCH
