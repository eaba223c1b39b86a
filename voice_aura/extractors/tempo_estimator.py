"""
Tempo estimation strategies.

Speaking rate needs syllable or onset detection, so the feature extractor
takes a pluggable estimator. The fixed estimator returns a placeholder
rate; the onset estimator counts librosa onsets per minute.
"""

import logging
import math
from typing import Optional, Protocol

import librosa

from voice_aura.exceptions import EstimationError
from voice_aura.models.audio_sample import AudioSample
from voice_aura.utils.metrics import VoiceAuraMetrics


logger = logging.getLogger(__name__)


class TempoEstimator(Protocol):
    """
    Protocol defining the interface for speaking rate estimation.

    Implementations return a positive words-per-minute value and must
    never raise for a non-empty sample.
    """

    def estimate(self, sample: AudioSample) -> float:
        """
        Estimate speaking rate of a sample.

        Args:
            sample: Non-empty audio sample

        Returns:
            Words per minute, strictly positive
        """
        ...


class FixedTempoEstimator:
    """Returns a constant speaking rate regardless of the audio."""

    DEFAULT_TEMPO = 120.0

    def __init__(self, value: float = DEFAULT_TEMPO):
        if value <= 0:
            raise ValueError(f"value must be positive, got {value}")
        self.value = value

    def estimate(self, sample: AudioSample) -> float:
        return self.value


class OnsetTempoEstimator:
    """
    Estimates speaking rate from onset density.

    Uses librosa onset detection to find speech event boundaries and
    treats each onset as one word. Falls back to the placeholder rate
    on any processing errors or when no onsets are found.
    """

    HOP_LENGTH = 512

    def __init__(self, metrics: Optional[VoiceAuraMetrics] = None):
        """
        Initialize onset tempo estimator.

        Args:
            metrics: Optional metrics emitter for CloudWatch metrics
        """
        self.metrics = metrics or VoiceAuraMetrics()

    def estimate(self, sample: AudioSample) -> float:
        try:
            duration_minutes = sample.duration / 60.0
            if duration_minutes <= 0:
                raise EstimationError(f"Sample duration must be positive, got {sample.duration}s")

            onset_frames = librosa.onset.onset_detect(
                y=sample.samples,
                sr=sample.sample_rate,
                units='frames',
                hop_length=self.HOP_LENGTH,
                backtrack=False
            )
            onset_count = len(onset_frames)
            if onset_count == 0:
                raise EstimationError("No onsets detected")

            wpm = onset_count / duration_minutes
            if not math.isfinite(wpm) or wpm <= 0:
                raise EstimationError(f"Estimated rate is not a positive number: {wpm}")

            logger.debug(
                "Tempo estimation completed: wpm=%.2f, onsets=%d, duration=%.2fs",
                wpm,
                onset_count,
                sample.duration
            )
            return wpm

        except Exception as e:
            logger.error(
                "Tempo estimation failed: %s. Falling back to %.0f wpm",
                str(e),
                FixedTempoEstimator.DEFAULT_TEMPO,
                exc_info=True,
                extra={
                    'sample_rate': sample.sample_rate,
                    'duration': sample.duration,
                    'error_type': type(e).__name__
                }
            )

            self.metrics.emit_error_count(
                error_type=type(e).__name__,
                component='OnsetTempoEstimator'
            )
            self.metrics.emit_fallback_used(fallback_type='DefaultTempo')

            return FixedTempoEstimator.DEFAULT_TEMPO
