"""
Rule-based emotion classification from tone features.

An ordered decision list over energy (e) and pitch (p). The first rule
whose predicate matches wins. Several ranges overlap, so the position of
a rule in EMOTION_RULES is part of its meaning; all comparisons are strict.
"""

import logging
from typing import Callable, NamedTuple, Tuple

from voice_aura.models.emotion import Emotion
from voice_aura.models.tone_features import ToneFeatures


logger = logging.getLogger(__name__)


class EmotionRule(NamedTuple):
    """One entry of the decision list."""

    name: str
    predicate: Callable[[float, float], bool]
    emotion: Emotion


# Evaluated top to bottom; do not reorder. Predicates take (energy, pitch).
EMOTION_RULES: Tuple[EmotionRule, ...] = (
    EmotionRule(
        'high_energy_high_pitch',
        lambda e, p: e > 0.7 and p > 0.6,
        Emotion.HAPPY
    ),
    EmotionRule(
        'low_energy_low_pitch',
        lambda e, p: e < 0.4 and p < 0.4,
        Emotion.SAD
    ),
    EmotionRule(
        'medium_energy_raised_pitch',
        lambda e, p: 0.5 < e < 0.7 and p > 0.5,
        Emotion.ROMANTIC
    ),
    EmotionRule(
        'high_energy_medium_pitch',
        lambda e, p: e > 0.7 and 0.4 < p < 0.7,
        Emotion.MOTIVATIONAL
    ),
    EmotionRule(
        'low_energy_medium_pitch',
        lambda e, p: e < 0.5 and 0.4 < p < 0.6,
        Emotion.PEACEFUL
    ),
    EmotionRule(
        'high_energy_low_pitch',
        lambda e, p: e > 0.7 and p < 0.5,
        Emotion.ANGRY
    ),
    EmotionRule(
        'medium_energy_low_pitch',
        lambda e, p: 0.4 < e < 0.6 and p < 0.5,
        Emotion.NOSTALGIC
    ),
)

FALLBACK_EMOTION = Emotion.NEUTRAL


def classify(tone: ToneFeatures) -> Emotion:
    """
    Map tone features to a single emotion label.

    Pure and total: never raises for a valid ToneFeatures. Tempo is
    carried on the features but does not take part in any rule.

    Args:
        tone: Tone features of one sample

    Returns:
        The emotion of the first matching rule, or neutral
    """
    for rule in EMOTION_RULES:
        if rule.predicate(tone.energy, tone.pitch):
            logger.debug(
                "Matched rule %s: energy=%.3f, pitch=%.3f -> %s",
                rule.name, tone.energy, tone.pitch, rule.emotion.value
            )
            return rule.emotion

    return FALLBACK_EMOTION
