"""
Shared pytest fixtures for voice aura tests.
"""

import numpy as np
import pytest

from voice_aura.config.settings import Settings, reset_settings
from voice_aura.models import AudioSample, Emotion, ToneFeatures, VoiceAnalysis
from voice_aura.utils.metrics import VoiceAuraMetrics


@pytest.fixture(autouse=True)
def clean_settings():
    """Ensure every test reads settings from its own environment."""
    reset_settings()
    yield
    reset_settings()


@pytest.fixture
def settings():
    """Fixture providing default settings."""
    return Settings()


@pytest.fixture
def metrics():
    """Fixture providing a log-only metrics emitter."""
    return VoiceAuraMetrics(use_cloudwatch=False)


@pytest.fixture
def sine_sample():
    """Fixture providing one second of a 220 Hz sine at amplitude 0.05."""
    sample_rate = 16000
    t = np.linspace(0, 1.0, sample_rate, endpoint=False)
    samples = np.sin(2 * np.pi * 220.0 * t) * 0.05
    return AudioSample.from_array(samples, sample_rate)


@pytest.fixture
def make_analysis():
    """Fixture providing a factory for VoiceAnalysis values."""
    def _make(
        emotion: Emotion,
        pitch: float = 0.5,
        energy: float = 0.5,
        tempo: float = 120.0,
        confidence: float = 0.75
    ) -> VoiceAnalysis:
        return VoiceAnalysis(
            emotion=emotion,
            confidence=confidence,
            tone=ToneFeatures(pitch=pitch, energy=energy, tempo=tempo),
            recommendations=()
        )
    return _make
