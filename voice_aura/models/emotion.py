"""
Emotion label enumeration.

The closed set of categorical labels the classifier can emit. The
presentation layer maps each value to a visual theme, so no value
outside this set may ever leave the engine.
"""

from enum import Enum


class Emotion(str, Enum):
    """
    Enumeration of all emotion labels.

    Values are the lowercase label strings used on the wire.
    """

    HAPPY = 'happy'
    SAD = 'sad'
    ROMANTIC = 'romantic'
    MOTIVATIONAL = 'motivational'
    PEACEFUL = 'peaceful'
    ANGRY = 'angry'
    NOSTALGIC = 'nostalgic'
    NEUTRAL = 'neutral'

    def __str__(self) -> str:
        return self.value
