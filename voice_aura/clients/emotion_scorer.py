"""
External emotion scoring collaborator interface.

A generative model may score emotion from the transcript together with
the tone features. Its result is reported next to the tone-based
analysis and never replaces it.
"""

from typing import Optional, Protocol

from voice_aura.models.analysis_result import EmotionScore
from voice_aura.models.tone_features import ToneFeatures


class EmotionScorer(Protocol):
    """
    Protocol defining the interface for external emotion scoring.

    Implementations should raise EmotionScoringError on service failures.
    """

    async def score(
        self,
        transcript: Optional[str],
        tone: ToneFeatures
    ) -> EmotionScore:
        """
        Score emotion from transcript and tone.

        Args:
            transcript: Transcript text, or None when unavailable
            tone: Tone features of the sample

        Returns:
            EmotionScore restricted to the 8 emotion labels
        """
        ...
