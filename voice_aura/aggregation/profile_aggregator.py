"""
Voice profile aggregation.

Builds a VoiceProfile from the full batch of analyses every time; no
aggregation state survives between calls.
"""

import logging
from typing import Dict, Sequence

from voice_aura.models.emotion import Emotion
from voice_aura.models.tone_features import ToneFeatures
from voice_aura.models.voice_analysis import VoiceAnalysis
from voice_aura.models.voice_profile import VoiceProfile


logger = logging.getLogger(__name__)


DEFAULT_PITCH = 0.5
DEFAULT_ENERGY = 0.5
DEFAULT_TEMPO = 120.0


def default_profile() -> VoiceProfile:
    """
    Profile returned for an empty batch.

    Returns:
        Neutral profile with mid-range tone and all weight on neutral
    """
    distribution = {emotion: 0.0 for emotion in Emotion}
    distribution[Emotion.NEUTRAL] = 1.0

    return VoiceProfile(
        dominant_emotion=Emotion.NEUTRAL,
        average_tone=ToneFeatures(
            pitch=DEFAULT_PITCH,
            energy=DEFAULT_ENERGY,
            tempo=DEFAULT_TEMPO
        ),
        emotion_distribution=distribution
    )


def aggregate(analyses: Sequence[VoiceAnalysis]) -> VoiceProfile:
    """
    Aggregate a batch of analyses into a voice profile.

    The dominant emotion is the first label, in scan order, to reach the
    highest count; a later label only takes over with a strictly higher
    count.

    Args:
        analyses: Ordered analyses, oldest first

    Returns:
        VoiceProfile for the batch (default profile when empty)
    """
    if not analyses:
        return default_profile()

    total = len(analyses)

    average_tone = ToneFeatures(
        pitch=sum(a.tone.pitch for a in analyses) / total,
        energy=sum(a.tone.energy for a in analyses) / total,
        tempo=sum(a.tone.tempo for a in analyses) / total
    )

    # Insertion order records first-seen order
    counts: Dict[Emotion, int] = {}
    for analysis in analyses:
        counts[analysis.emotion] = counts.get(analysis.emotion, 0) + 1

    dominant_emotion = Emotion.NEUTRAL
    max_count = 0
    for emotion, count in counts.items():
        if count > max_count:
            max_count = count
            dominant_emotion = emotion

    distribution = {
        emotion: counts.get(emotion, 0) / total for emotion in Emotion
    }

    logger.debug(f"Aggregated {total} analyses: dominant={dominant_emotion.value} ({max_count})")

    return VoiceProfile(
        dominant_emotion=dominant_emotion,
        average_tone=average_tone,
        emotion_distribution=distribution
    )
