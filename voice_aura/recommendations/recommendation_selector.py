"""
Recommendation query selection.

Produces descriptive query terms that the external poem store interprets.
No lookup happens here.
"""

import logging
from typing import Tuple

from voice_aura.models.emotion import Emotion


logger = logging.getLogger(__name__)


SIMILAR_TONE_QUERY = 'Similar emotional tone'
COMPLEMENTARY_QUERY = 'Complementary themes'


def recommend(emotion: Emotion, confidence: float) -> Tuple[str, ...]:
    """
    Build ordered poem store queries for a detected emotion.

    Confidence is accepted but does not change the queries. A low
    confidence would be the place to widen the query to a fallback set.

    Args:
        emotion: Detected emotion
        confidence: Confidence of the detection, 0 to 1

    Returns:
        Ordered query descriptors, most specific first
    """
    logger.debug(f"Selecting recommendations: emotion={emotion.value}, confidence={confidence:.2f}")

    return (
        f"Poems with {emotion.value} emotion",
        SIMILAR_TONE_QUERY,
        COMPLEMENTARY_QUERY,
    )
