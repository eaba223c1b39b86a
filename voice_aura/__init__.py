"""
Voice Aura: voice tone emotion classification and profile aggregation.

This module turns captured audio into tone features (pitch, energy,
tempo), classifies them into one of eight emotions, aggregates repeated
analyses into a per-user profile and selects poem recommendation queries.
"""

from .analyzer import VoiceAnalyzer
from .session import VoiceSession
from .extractors.feature_extractor import FeatureExtractor
from .classifiers.emotion_classifier import classify
from .aggregation.profile_aggregator import aggregate
from .recommendations.recommendation_selector import recommend
from .models import (
    AnalysisResult,
    AudioSample,
    Emotion,
    ToneFeatures,
    VoiceAnalysis,
    VoiceProfile,
)
from .exceptions import InvalidInputError, VoiceAuraError

__version__ = "1.0.0"

__all__ = [
    'VoiceAnalyzer',
    'VoiceSession',
    'FeatureExtractor',
    'classify',
    'aggregate',
    'recommend',
    'AnalysisResult',
    'AudioSample',
    'Emotion',
    'ToneFeatures',
    'VoiceAnalysis',
    'VoiceProfile',
    'InvalidInputError',
    'VoiceAuraError',
]
