"""
Configuration settings for voice aura module.

Loads configuration from environment variables with sensible defaults.
"""

import os
from typing import Optional


class Settings:
    """
    Configuration settings for voice tone analysis.

    All settings are loaded from environment variables with defaults.
    """

    VALID_PITCH_ESTIMATORS = {'fixed', 'yin'}
    VALID_TEMPO_ESTIMATORS = {'fixed', 'onset'}

    def __init__(self):
        """Initialize settings from environment variables."""
        # Logging Configuration
        self.log_level: str = os.getenv('LOG_LEVEL', 'INFO')
        self.log_json: bool = self._parse_bool(os.getenv('LOG_JSON', 'true'))

        # Feature Extraction Strategies
        self.pitch_estimator: str = os.getenv('PITCH_ESTIMATOR', 'fixed').lower()
        self.tempo_estimator: str = os.getenv('TEMPO_ESTIMATOR', 'fixed').lower()
        self.pitch_min_hz: float = float(os.getenv('PITCH_MIN_HZ', '65.0'))
        self.pitch_max_hz: float = float(os.getenv('PITCH_MAX_HZ', '400.0'))

        # Analysis Configuration
        self.default_confidence: float = float(os.getenv('DEFAULT_CONFIDENCE', '0.75'))

        # External Collaborators
        self.enable_transcription: bool = self._parse_bool(
            os.getenv('ENABLE_TRANSCRIPTION', 'true')
        )
        self.enable_emotion_scoring: bool = self._parse_bool(
            os.getenv('ENABLE_EMOTION_SCORING', 'true')
        )
        self.collaborator_timeout_seconds: float = float(
            os.getenv('COLLABORATOR_TIMEOUT_SECONDS', '10.0')
        )

        # Audio Input Limits
        self.min_audio_duration_s: float = float(os.getenv('MIN_AUDIO_DURATION_S', '0.1'))
        self.max_audio_duration_s: float = float(os.getenv('MAX_AUDIO_DURATION_S', '30.0'))

        # Metrics Configuration
        self.metrics_namespace: str = os.getenv('METRICS_NAMESPACE', 'VoiceAura/Analysis')

        # Validate configuration
        self._validate()

    def _parse_bool(self, value: str) -> bool:
        """
        Parse boolean value from string.

        Args:
            value: String value to parse

        Returns:
            Boolean value
        """
        return value.lower() in ('true', '1', 'yes', 'on')

    def _validate(self):
        """Validate configuration values."""
        if self.pitch_estimator not in self.VALID_PITCH_ESTIMATORS:
            raise ValueError(
                f"Invalid PITCH_ESTIMATOR: {self.pitch_estimator}. "
                f"Must be one of {self.VALID_PITCH_ESTIMATORS}"
            )

        if self.tempo_estimator not in self.VALID_TEMPO_ESTIMATORS:
            raise ValueError(
                f"Invalid TEMPO_ESTIMATOR: {self.tempo_estimator}. "
                f"Must be one of {self.VALID_TEMPO_ESTIMATORS}"
            )

        if self.pitch_min_hz <= 0 or self.pitch_max_hz <= self.pitch_min_hz:
            raise ValueError(
                f"Invalid pitch range: PITCH_MIN_HZ={self.pitch_min_hz}, "
                f"PITCH_MAX_HZ={self.pitch_max_hz}"
            )

        if not 0.0 <= self.default_confidence <= 1.0:
            raise ValueError(
                f"DEFAULT_CONFIDENCE must be in [0, 1], got {self.default_confidence}"
            )

        if self.collaborator_timeout_seconds <= 0:
            raise ValueError(
                f"COLLABORATOR_TIMEOUT_SECONDS must be positive, "
                f"got {self.collaborator_timeout_seconds}"
            )

        if self.min_audio_duration_s < 0 or self.max_audio_duration_s <= self.min_audio_duration_s:
            raise ValueError(
                f"Invalid audio duration limits: MIN_AUDIO_DURATION_S={self.min_audio_duration_s}, "
                f"MAX_AUDIO_DURATION_S={self.max_audio_duration_s}"
            )

        valid_log_levels = {'DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'}
        if self.log_level.upper() not in valid_log_levels:
            raise ValueError(
                f"Invalid LOG_LEVEL: {self.log_level}. "
                f"Must be one of {valid_log_levels}"
            )


# Global settings instance
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """
    Get global settings instance (singleton pattern).

    Returns:
        Settings instance
    """
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def reset_settings() -> None:
    """Drop the cached settings so the next get_settings() re-reads the environment."""
    global _settings
    _settings = None
