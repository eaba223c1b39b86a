"""
Voice analysis data model.

Represents the classified result of one audio sample. Produced once,
immutable thereafter, and owned by the caller.
"""

from dataclasses import dataclass
from typing import Any, Dict, Tuple

from .emotion import Emotion
from .tone_features import ToneFeatures


@dataclass(frozen=True)
class VoiceAnalysis:
    """
    Result of analyzing a single voice sample.

    Attributes:
        emotion: Classified emotion label
        confidence: Confidence in the label, 0 to 1
        tone: Tone features the label was derived from
        recommendations: Ordered poem store query descriptors
    """

    emotion: Emotion
    confidence: float
    tone: ToneFeatures
    recommendations: Tuple[str, ...] = ()

    def __post_init__(self):
        """Validate voice analysis data."""
        if not isinstance(self.emotion, Emotion):
            raise ValueError(f"emotion must be Emotion, got {type(self.emotion)}")

        if not isinstance(self.confidence, (int, float)) or not 0.0 <= self.confidence <= 1.0:
            raise ValueError(f"confidence must be in [0, 1], got {self.confidence}")

        if not isinstance(self.tone, ToneFeatures):
            raise ValueError(f"tone must be ToneFeatures, got {type(self.tone)}")

        object.__setattr__(self, 'recommendations', tuple(self.recommendations))

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert to dictionary for JSON serialization.

        Returns:
            Dictionary representation with camelCase keys
        """
        return {
            'emotion': self.emotion.value,
            'confidence': self.confidence,
            'tone': self.tone.to_dict(),
            'recommendations': list(self.recommendations)
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'VoiceAnalysis':
        """
        Create VoiceAnalysis from dictionary.

        Args:
            data: Dictionary as produced by to_dict()

        Returns:
            VoiceAnalysis instance

        Raises:
            ValueError: When the emotion label or any field is invalid
        """
        return cls(
            emotion=Emotion(data['emotion']),
            confidence=float(data['confidence']),
            tone=ToneFeatures.from_dict(data['tone']),
            recommendations=tuple(data.get('recommendations', ()))
        )
