"""
Emotion classifiers.
"""

from voice_aura.classifiers.emotion_classifier import (
    EMOTION_RULES,
    EmotionRule,
    FALLBACK_EMOTION,
    classify,
)

__all__ = ['EMOTION_RULES', 'EmotionRule', 'FALLBACK_EMOTION', 'classify']
