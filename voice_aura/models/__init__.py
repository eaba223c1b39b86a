"""
Data models for voice tone analysis.

This module provides dataclasses for representing audio samples, tone
features, classified analyses, aggregated profiles and pipeline results.
"""

from .emotion import Emotion
from .tone_features import ToneFeatures
from .audio_sample import AudioSample
from .voice_analysis import VoiceAnalysis
from .voice_profile import VoiceProfile
from .analysis_result import AnalysisResult, CollaboratorFailure, EmotionScore

__all__ = [
    'Emotion',
    'ToneFeatures',
    'AudioSample',
    'VoiceAnalysis',
    'VoiceProfile',
    'AnalysisResult',
    'CollaboratorFailure',
    'EmotionScore',
]
