"""
Tone feature extraction from audio samples.

Energy is the RMS amplitude scaled by a fixed gain and clamped to [0, 1].
Pitch and tempo come from injectable estimators whose defaults return
neutral placeholders.
"""

import logging
import time
from typing import Optional

import numpy as np

from voice_aura.config.settings import Settings
from voice_aura.exceptions import InvalidInputError
from voice_aura.extractors.pitch_estimator import (
    FixedPitchEstimator,
    PitchEstimator,
    YinPitchEstimator,
)
from voice_aura.extractors.tempo_estimator import (
    FixedTempoEstimator,
    OnsetTempoEstimator,
    TempoEstimator,
)
from voice_aura.models.audio_sample import AudioSample
from voice_aura.models.tone_features import ToneFeatures
from voice_aura.utils.metrics import VoiceAuraMetrics


logger = logging.getLogger(__name__)


class FeatureExtractor:
    """
    Extracts ToneFeatures from an audio sample.

    Stateless across calls; safe to share between concurrent callers as
    long as the injected estimators are.
    """

    # RMS of conversational speech sits well under 0.1 full scale
    ENERGY_GAIN = 10.0

    def __init__(
        self,
        pitch_estimator: Optional[PitchEstimator] = None,
        tempo_estimator: Optional[TempoEstimator] = None,
        metrics: Optional[VoiceAuraMetrics] = None
    ):
        """
        Initialize feature extractor.

        Args:
            pitch_estimator: Pitch strategy (fixed 0.5 placeholder if None)
            tempo_estimator: Tempo strategy (fixed 120 wpm placeholder if None)
            metrics: Optional metrics emitter for CloudWatch metrics
        """
        self.pitch_estimator = pitch_estimator or FixedPitchEstimator()
        self.tempo_estimator = tempo_estimator or FixedTempoEstimator()
        self.metrics = metrics or VoiceAuraMetrics()

    @classmethod
    def from_settings(
        cls,
        settings: Settings,
        metrics: Optional[VoiceAuraMetrics] = None
    ) -> 'FeatureExtractor':
        """
        Build an extractor with the estimators named in settings.

        Args:
            settings: Loaded settings
            metrics: Optional metrics emitter shared with the estimators

        Returns:
            FeatureExtractor instance
        """
        metrics = metrics or VoiceAuraMetrics(namespace=settings.metrics_namespace)

        if settings.pitch_estimator == 'yin':
            pitch_estimator = YinPitchEstimator(
                fmin=settings.pitch_min_hz,
                fmax=settings.pitch_max_hz,
                metrics=metrics
            )
        else:
            pitch_estimator = FixedPitchEstimator()

        if settings.tempo_estimator == 'onset':
            tempo_estimator = OnsetTempoEstimator(metrics=metrics)
        else:
            tempo_estimator = FixedTempoEstimator()

        return cls(
            pitch_estimator=pitch_estimator,
            tempo_estimator=tempo_estimator,
            metrics=metrics
        )

    def extract(
        self,
        sample: AudioSample,
        correlation_id: Optional[str] = None
    ) -> ToneFeatures:
        """
        Extract tone features from an audio sample.

        Args:
            sample: Captured audio sample
            correlation_id: Optional correlation ID for tracking

        Returns:
            ToneFeatures for the sample

        Raises:
            InvalidInputError: When the buffer is empty or holds non-finite values
        """
        if sample.is_empty:
            raise InvalidInputError("Audio sample buffer is empty")

        if not np.all(np.isfinite(sample.samples)):
            raise InvalidInputError("Audio sample buffer contains non-finite values")

        start_time = time.time()

        energy = self.compute_energy(sample.samples)
        pitch = float(self.pitch_estimator.estimate(sample))
        tempo = float(self.tempo_estimator.estimate(sample))

        tone = ToneFeatures(pitch=pitch, energy=energy, tempo=tempo)

        latency_ms = (time.time() - start_time) * 1000
        self.metrics.emit_extraction_latency(latency_ms, correlation_id=correlation_id)

        logger.debug(
            "Feature extraction completed: pitch=%.3f, energy=%.3f, tempo=%.1f",
            tone.pitch,
            tone.energy,
            tone.tempo,
            extra={'correlation_id': correlation_id}
        )

        return tone

    def compute_energy(self, samples: np.ndarray) -> float:
        """
        Compute normalized energy as gained RMS amplitude.

        Args:
            samples: Non-empty amplitude buffer

        Returns:
            Energy in [0, 1]
        """
        rms = float(np.sqrt(np.mean(np.square(samples))))
        return float(min(max(rms * self.ENERGY_GAIN, 0.0), 1.0))
