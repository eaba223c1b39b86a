"""
Voice profile data model.

Aggregated summary over a batch of voice analyses. Always rebuilt from
the full batch, never updated in place.
"""

import math
from dataclasses import dataclass
from typing import Any, Dict, Mapping

from .emotion import Emotion
from .tone_features import ToneFeatures


DISTRIBUTION_TOLERANCE = 1e-9


@dataclass(frozen=True)
class VoiceProfile:
    """
    Per-user voice profile.

    Attributes:
        dominant_emotion: Most frequent label in the batch
        average_tone: Unweighted mean of each tone component
        emotion_distribution: Share of each of the 8 labels, summing to 1
    """

    dominant_emotion: Emotion
    average_tone: ToneFeatures
    emotion_distribution: Mapping[Emotion, float]

    def __post_init__(self):
        """Validate distribution covers every label and sums to 1."""
        missing = set(Emotion) - set(self.emotion_distribution)
        if missing:
            raise ValueError(
                f"emotion_distribution missing labels: {sorted(e.value for e in missing)}"
            )

        total = sum(self.emotion_distribution.values())
        if not math.isclose(total, 1.0, abs_tol=DISTRIBUTION_TOLERANCE):
            raise ValueError(f"emotion_distribution must sum to 1, got {total}")

    def share_of(self, emotion: Emotion) -> float:
        """Return the distribution share for one label."""
        return self.emotion_distribution[emotion]

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert to dictionary for JSON serialization.

        Returns:
            Dictionary representation with camelCase keys
        """
        return {
            'dominantEmotion': self.dominant_emotion.value,
            'averageTone': self.average_tone.to_dict(),
            'emotionDistribution': {
                emotion.value: self.share_of(emotion) for emotion in Emotion
            }
        }
