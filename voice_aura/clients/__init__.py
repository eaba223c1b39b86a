"""
External collaborator interfaces for transcription and emotion scoring.
"""

from voice_aura.clients.transcriber import Transcriber
from voice_aura.clients.emotion_scorer import EmotionScorer

__all__ = ['Transcriber', 'EmotionScorer']
