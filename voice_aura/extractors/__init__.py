"""
Tone feature extractors.

Provides RMS energy extraction and pluggable pitch and tempo estimators.
"""

from voice_aura.extractors.feature_extractor import FeatureExtractor
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

__all__ = [
    'FeatureExtractor',
    'PitchEstimator',
    'FixedPitchEstimator',
    'YinPitchEstimator',
    'TempoEstimator',
    'FixedTempoEstimator',
    'OnsetTempoEstimator',
]
