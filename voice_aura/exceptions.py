"""
Custom exceptions for voice tone analysis.

This module defines specific exception types for the failure scenarios
of the voice analysis pipeline and its external collaborators.
"""


class VoiceAuraError(Exception):
    """Base exception for voice aura module."""
    pass


class InvalidInputError(VoiceAuraError, ValueError):
    """
    Raised when an audio sample buffer cannot be analyzed.

    This can occur due to:
    - Empty sample buffer
    - Non-finite sample values (NaN, inf)
    - Non-positive sample rate or negative duration

    The caller must re-capture audio; the call cannot be retried as-is.
    """
    pass


class EstimationError(VoiceAuraError):
    """
    Raised when pitch or tempo estimation fails.

    Estimators catch this internally and fall back to their
    placeholder value.
    """
    pass


class TranscriptionError(VoiceAuraError):
    """
    Raised when the external speech-to-text service fails.

    Never fatal for an analysis: the tone-based result is still returned.
    """
    pass


class EmotionScoringError(VoiceAuraError):
    """
    Raised when the external emotion scoring service fails.

    Never fatal for an analysis: the tone-based result is still returned.
    """
    pass
