"""
Analysis result data model.

Represents the output of the asynchronous "analyze a captured clip"
operation: the tone-based analysis plus whatever the optional external
collaborators returned or why they did not.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from .emotion import Emotion
from .voice_analysis import VoiceAnalysis


@dataclass(frozen=True)
class EmotionScore:
    """
    Emotion reported by an external scoring service.

    Attributes:
        emotion: Label chosen by the scorer
        confidence: Scorer-reported confidence, 0 to 1
    """

    emotion: Emotion
    confidence: float

    def __post_init__(self):
        """Validate emotion score data."""
        if not isinstance(self.emotion, Emotion):
            raise ValueError(f"emotion must be Emotion, got {type(self.emotion)}")

        if not 0.0 <= self.confidence <= 1.0:
            raise ValueError(f"confidence must be in [0, 1], got {self.confidence}")

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {'emotion': self.emotion.value, 'confidence': self.confidence}


@dataclass(frozen=True)
class CollaboratorFailure:
    """
    Non-fatal failure of an external collaborator.

    Attributes:
        component: Collaborator name (e.g., 'Transcriber', 'EmotionScorer')
        error_type: Exception class name, or 'Timeout'
        message: Error message
    """

    component: str
    error_type: str
    message: str

    def to_dict(self) -> Dict[str, str]:
        """Convert to dictionary for JSON serialization."""
        return {
            'component': self.component,
            'errorType': self.error_type,
            'message': self.message
        }


@dataclass
class AnalysisResult:
    """
    Result of the complete clip analysis pipeline.

    Attributes:
        analysis: Tone-based voice analysis (always present)
        correlation_id: Identifier linking this result to its input
        processing_time_ms: Total processing time in milliseconds
        transcript: Speech-to-text output, if a transcriber ran successfully
        external_score: External emotion score, if a scorer ran successfully
        failures: Collaborator failures that were tolerated
    """

    analysis: VoiceAnalysis
    correlation_id: str
    processing_time_ms: int
    transcript: Optional[str] = None
    external_score: Optional[EmotionScore] = None
    failures: List[CollaboratorFailure] = field(default_factory=list)

    def __post_init__(self):
        """Validate analysis result data."""
        if not isinstance(self.analysis, VoiceAnalysis):
            raise ValueError(f"analysis must be VoiceAnalysis, got {type(self.analysis)}")

        if not self.correlation_id or not isinstance(self.correlation_id, str):
            raise ValueError("correlation_id must be non-empty string")

        if not isinstance(self.processing_time_ms, int) or self.processing_time_ms < 0:
            raise ValueError(
                f"processing_time_ms must be non-negative integer, got {self.processing_time_ms}"
            )

    @property
    def degraded(self) -> bool:
        """True when at least one collaborator failed."""
        return bool(self.failures)

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert to dictionary for JSON serialization.

        Returns:
            Dictionary representation with camelCase keys
        """
        return {
            'analysis': self.analysis.to_dict(),
            'correlationId': self.correlation_id,
            'processingTimeMs': self.processing_time_ms,
            'transcript': self.transcript,
            'externalScore': self.external_score.to_dict() if self.external_score else None,
            'failures': [failure.to_dict() for failure in self.failures]
        }
