"""
Voice Analyzer orchestrating tone extraction, classification and the
optional external collaborators.

This module runs the pure path (features -> emotion -> recommendations)
synchronously, then awaits transcription and external emotion scoring
when they are configured. Collaborator failures are recorded on the
result and never discard the tone-based analysis.
"""

import asyncio
import logging
import time
import uuid
from typing import Any, Awaitable, Callable, List, Optional, Sequence

from voice_aura.aggregation.profile_aggregator import aggregate
from voice_aura.classifiers.emotion_classifier import classify
from voice_aura.clients.emotion_scorer import EmotionScorer
from voice_aura.clients.transcriber import Transcriber
from voice_aura.config.settings import Settings, get_settings
from voice_aura.exceptions import EmotionScoringError, TranscriptionError
from voice_aura.extractors.feature_extractor import FeatureExtractor
from voice_aura.models.analysis_result import (
    AnalysisResult,
    CollaboratorFailure,
    EmotionScore,
)
from voice_aura.models.audio_sample import AudioSample
from voice_aura.models.tone_features import ToneFeatures
from voice_aura.models.voice_analysis import VoiceAnalysis
from voice_aura.models.voice_profile import VoiceProfile
from voice_aura.recommendations.recommendation_selector import recommend
from voice_aura.utils.metrics import VoiceAuraMetrics


logger = logging.getLogger(__name__)


class VoiceAnalyzer:
    """
    Orchestrator for voice tone analysis.

    This class coordinates:
    - Tone feature extraction from captured audio
    - Rule-based emotion classification
    - Recommendation query selection
    - Optional transcription and external emotion scoring with timeouts
    - Profile building over caller-owned analysis history

    The analyzer keeps no analyses; every result belongs to the caller.
    """

    TRANSCRIBER_COMPONENT = 'Transcriber'
    SCORER_COMPONENT = 'EmotionScorer'

    def __init__(
        self,
        feature_extractor: Optional[FeatureExtractor] = None,
        transcriber: Optional[Transcriber] = None,
        emotion_scorer: Optional[EmotionScorer] = None,
        settings: Optional[Settings] = None,
        metrics: Optional[VoiceAuraMetrics] = None
    ):
        """
        Initialize voice analyzer.

        Args:
            feature_extractor: Feature extractor (built from settings if None)
            transcriber: Optional speech-to-text collaborator
            emotion_scorer: Optional external emotion scoring collaborator
            settings: Settings instance (global settings if None)
            metrics: Metrics emitter (creates new if None)
        """
        self.settings = settings or get_settings()
        self.metrics = metrics or VoiceAuraMetrics(namespace=self.settings.metrics_namespace)
        self.feature_extractor = feature_extractor or FeatureExtractor.from_settings(
            self.settings, metrics=self.metrics
        )
        self.transcriber = transcriber
        self.emotion_scorer = emotion_scorer

        logger.info(
            f"Initialized VoiceAnalyzer: "
            f"transcriber={type(transcriber).__name__ if transcriber else None}, "
            f"emotion_scorer={type(emotion_scorer).__name__ if emotion_scorer else None}"
        )

    def analyze_characteristics(
        self,
        sample: AudioSample,
        correlation_id: Optional[str] = None
    ) -> ToneFeatures:
        """
        Extract tone features from a captured sample.

        Raises:
            InvalidInputError: When the sample buffer is empty or malformed
        """
        return self.feature_extractor.extract(sample, correlation_id=correlation_id)

    def analyze_tone(
        self,
        tone: ToneFeatures,
        confidence: Optional[float] = None,
        correlation_id: Optional[str] = None
    ) -> VoiceAnalysis:
        """
        Classify tone features and attach recommendations.

        Args:
            tone: Tone features of one sample
            confidence: Confidence to report (settings default if None)
            correlation_id: Optional correlation ID for tracking

        Returns:
            Immutable VoiceAnalysis
        """
        if confidence is None:
            confidence = self.settings.default_confidence

        emotion = classify(tone)
        self.metrics.emit_detected_emotion(emotion.value, correlation_id=correlation_id)

        return VoiceAnalysis(
            emotion=emotion,
            confidence=confidence,
            tone=tone,
            recommendations=recommend(emotion, confidence)
        )

    def analyze_sample(
        self,
        sample: AudioSample,
        confidence: Optional[float] = None,
        correlation_id: Optional[str] = None
    ) -> VoiceAnalysis:
        """
        Run the pure analysis path on a captured sample.

        Raises:
            InvalidInputError: When the sample buffer is empty or malformed
        """
        tone = self.analyze_characteristics(sample, correlation_id=correlation_id)
        return self.analyze_tone(tone, confidence=confidence, correlation_id=correlation_id)

    async def analyze_audio(
        self,
        sample: AudioSample,
        correlation_id: Optional[str] = None
    ) -> AnalysisResult:
        """
        Analyze a captured audio clip end to end.

        The tone-based analysis is computed first, so an invalid sample
        fails before any collaborator is called. Transcription runs next,
        then external scoring with the transcript (or None) and the tone.

        Args:
            sample: Captured audio sample
            correlation_id: Correlation ID for tracking (generates UUID if None)

        Returns:
            AnalysisResult with the analysis and any collaborator output

        Raises:
            InvalidInputError: When the sample buffer is empty or malformed
        """
        if correlation_id is None:
            correlation_id = str(uuid.uuid4())

        start_time = time.time()

        analysis = self.analyze_sample(sample, correlation_id=correlation_id)

        failures: List[CollaboratorFailure] = []
        transcript: Optional[str] = None
        external_score: Optional[EmotionScore] = None

        if self.transcriber is not None and self.settings.enable_transcription:
            transcript = await self._call_collaborator(
                self.TRANSCRIBER_COMPONENT,
                lambda: self._transcribe(sample),
                correlation_id,
                failures
            )

        if self.emotion_scorer is not None and self.settings.enable_emotion_scoring:
            external_score = await self._call_collaborator(
                self.SCORER_COMPONENT,
                lambda: self._score(transcript, analysis.tone),
                correlation_id,
                failures
            )

        processing_time_ms = int((time.time() - start_time) * 1000)
        self.metrics.emit_analysis_latency(processing_time_ms, correlation_id=correlation_id)

        logger.info(
            f"Voice analysis completed: "
            f"emotion={analysis.emotion.value}, "
            f"failures={len(failures)}, "
            f"processing_time={processing_time_ms}ms",
            extra={'correlation_id': correlation_id}
        )

        return AnalysisResult(
            analysis=analysis,
            correlation_id=correlation_id,
            processing_time_ms=processing_time_ms,
            transcript=transcript,
            external_score=external_score,
            failures=failures
        )

    def create_voice_profile(self, analyses: Sequence[VoiceAnalysis]) -> VoiceProfile:
        """Aggregate the caller's full analysis history into a profile."""
        return aggregate(analyses)

    async def _transcribe(self, sample: AudioSample) -> str:
        transcript = await self.transcriber.transcribe(sample)
        if not isinstance(transcript, str):
            raise TranscriptionError(
                f"Transcriber returned {type(transcript).__name__}, expected str"
            )
        return transcript

    async def _score(self, transcript: Optional[str], tone: ToneFeatures) -> EmotionScore:
        score = await self.emotion_scorer.score(transcript, tone)
        if not isinstance(score, EmotionScore):
            raise EmotionScoringError(
                f"Scorer returned {type(score).__name__}, expected EmotionScore"
            )
        return score

    async def _call_collaborator(
        self,
        component: str,
        call: Callable[[], Awaitable[Any]],
        correlation_id: str,
        failures: List[CollaboratorFailure]
    ) -> Optional[Any]:
        """
        Await one collaborator call under the configured timeout.

        Any exception except cancellation is recorded in failures and
        turned into a None result.
        """
        timeout = self.settings.collaborator_timeout_seconds
        start_time = time.time()

        try:
            result = await asyncio.wait_for(call(), timeout=timeout)
        except asyncio.TimeoutError:
            failure = CollaboratorFailure(
                component=component,
                error_type='Timeout',
                message=f"{component} did not respond within {timeout}s"
            )
        except Exception as e:
            failure = CollaboratorFailure(
                component=component,
                error_type=type(e).__name__,
                message=str(e)
            )
        else:
            latency_ms = (time.time() - start_time) * 1000
            self.metrics.emit_collaborator_latency(
                component, latency_ms, correlation_id=correlation_id
            )
            return result

        logger.warning(
            f"{component} failed: {failure.error_type}: {failure.message}. "
            f"Continuing with tone-based analysis",
            extra={'correlation_id': correlation_id}
        )
        self.metrics.emit_error_count(
            error_type=failure.error_type,
            component=component,
            correlation_id=correlation_id
        )
        failures.append(failure)
        return None
