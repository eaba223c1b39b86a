"""
Voice session holding one user's analysis history.

The session owns the history; the profile is rebuilt from the whole
history on every read.
"""

import logging
import uuid
from typing import List, Optional, Tuple

from voice_aura.aggregation.profile_aggregator import aggregate
from voice_aura.analyzer import VoiceAnalyzer
from voice_aura.models.analysis_result import AnalysisResult
from voice_aura.models.audio_sample import AudioSample
from voice_aura.models.voice_analysis import VoiceAnalysis
from voice_aura.models.voice_profile import VoiceProfile


logger = logging.getLogger(__name__)


class VoiceSession:
    """
    Caller-owned analysis history with a derived voice profile.

    Not thread-safe; use one session per user context.
    """

    def __init__(
        self,
        analyzer: Optional[VoiceAnalyzer] = None,
        session_id: Optional[str] = None
    ):
        """
        Initialize voice session.

        Args:
            analyzer: Analyzer used by capture() (creates new if None)
            session_id: Session identifier (generates UUID if None)
        """
        self.analyzer = analyzer or VoiceAnalyzer()
        self.session_id = session_id or str(uuid.uuid4())
        self._history: List[VoiceAnalysis] = []

    @property
    def history(self) -> Tuple[VoiceAnalysis, ...]:
        """Recorded analyses, oldest first."""
        return tuple(self._history)

    @property
    def profile(self) -> VoiceProfile:
        """Profile aggregated fresh from the full history."""
        return aggregate(self._history)

    def record(self, analysis: VoiceAnalysis) -> None:
        """Append an analysis to the history."""
        if not isinstance(analysis, VoiceAnalysis):
            raise ValueError(f"analysis must be VoiceAnalysis, got {type(analysis)}")
        self._history.append(analysis)

    async def capture(self, sample: AudioSample) -> AnalysisResult:
        """
        Analyze a captured clip and record the resulting analysis.

        Raises:
            InvalidInputError: When the sample buffer is empty or malformed
        """
        correlation_id = f"{self.session_id}-{len(self._history) + 1}"
        result = await self.analyzer.analyze_audio(sample, correlation_id=correlation_id)
        self.record(result.analysis)

        logger.debug(
            f"Recorded analysis {len(self._history)} for session: "
            f"emotion={result.analysis.emotion.value}",
            extra={'correlation_id': correlation_id}
        )
        return result

    def clear(self) -> None:
        """Drop the whole history."""
        self._history.clear()
