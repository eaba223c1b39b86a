"""Unit tests for voice aura data models."""

import dataclasses

import numpy as np
import pytest

from voice_aura.exceptions import InvalidInputError
from voice_aura.models import (
    AnalysisResult,
    AudioSample,
    CollaboratorFailure,
    Emotion,
    EmotionScore,
    ToneFeatures,
    VoiceAnalysis,
    VoiceProfile,
)


class TestEmotion:
    """Test suite for the Emotion enumeration."""

    def test_eight_labels(self):
        """Test the closed set of labels."""
        assert {e.value for e in Emotion} == {
            'happy', 'sad', 'romantic', 'motivational',
            'peaceful', 'angry', 'nostalgic', 'neutral',
        }

    def test_lookup_by_value(self):
        """Test wire strings map back to members."""
        assert Emotion('romantic') is Emotion.ROMANTIC
        assert str(Emotion.ANGRY) == 'angry'

    def test_unknown_label_rejected(self):
        """Test labels outside the set are rejected."""
        with pytest.raises(ValueError):
            Emotion('excited')


class TestToneFeatures:
    """Test suite for ToneFeatures."""

    def test_valid_features(self):
        """Test in-range values are accepted."""
        tone = ToneFeatures(pitch=0.0, energy=1.0, tempo=0.5)
        assert tone.pitch == 0.0

    @pytest.mark.parametrize('pitch,energy,tempo', [
        (-0.1, 0.5, 120.0),
        (1.1, 0.5, 120.0),
        (0.5, -0.01, 120.0),
        (0.5, 1.01, 120.0),
        (0.5, 0.5, 0.0),
        (0.5, 0.5, -10.0),
        (float('nan'), 0.5, 120.0),
        (0.5, float('nan'), 120.0),
        (0.5, 0.5, float('nan')),
        (0.5, 0.5, float('inf')),
    ])
    def test_invalid_features_rejected(self, pitch, energy, tempo):
        """Test out-of-range or non-finite values raise ValueError."""
        with pytest.raises(ValueError):
            ToneFeatures(pitch=pitch, energy=energy, tempo=tempo)

    def test_immutable(self):
        """Test features cannot be mutated after creation."""
        tone = ToneFeatures(pitch=0.5, energy=0.5, tempo=120.0)
        with pytest.raises(dataclasses.FrozenInstanceError):
            tone.pitch = 0.9

    def test_from_dict(self):
        """Test dictionary parsing coerces numbers."""
        tone = ToneFeatures.from_dict({'pitch': '0.25', 'energy': 1, 'tempo': 90})
        assert tone == ToneFeatures(pitch=0.25, energy=1.0, tempo=90.0)


class TestAudioSample:
    """Test suite for AudioSample."""

    def test_duration_derived_from_samples(self):
        """Test from_array computes duration from sample count."""
        sample = AudioSample.from_array(np.zeros(8000), 16000)
        assert sample.duration == pytest.approx(0.5)

    def test_explicit_duration_kept(self):
        """Test an explicit duration overrides the derived one."""
        sample = AudioSample.from_array(np.zeros(8000), 16000, duration=2.0)
        assert sample.duration == 2.0

    def test_multichannel_converted_to_mono(self):
        """Test channels-first input is averaged to one channel."""
        stereo = np.array([[0.2, 0.4, 0.6], [0.0, 0.0, 0.0]])
        sample = AudioSample.from_array(stereo, 16000)

        assert sample.samples.ndim == 1
        np.testing.assert_allclose(sample.samples, [0.1, 0.2, 0.3])

    def test_empty_buffer_allowed_but_flagged(self):
        """Test empty buffers construct and report is_empty."""
        sample = AudioSample.from_array(np.array([]), 16000)
        assert sample.is_empty
        assert sample.duration == 0.0

    def test_invalid_sample_rate(self):
        """Test non-positive sample rate is malformed input."""
        with pytest.raises(InvalidInputError):
            AudioSample(samples=np.zeros(10), sample_rate=0, duration=0.0)

    def test_negative_duration(self):
        """Test negative duration is malformed input."""
        with pytest.raises(InvalidInputError):
            AudioSample(samples=np.zeros(10), sample_rate=16000, duration=-1.0)

    @pytest.mark.parametrize('duration', [float('nan'), float('inf')])
    def test_non_finite_duration(self, duration):
        """Test NaN or infinite duration is malformed input."""
        with pytest.raises(InvalidInputError):
            AudioSample(samples=np.zeros(10), sample_rate=16000, duration=duration)

    def test_non_array_samples(self):
        """Test plain lists are rejected by the constructor."""
        with pytest.raises(InvalidInputError):
            AudioSample(samples=[0.1, 0.2], sample_rate=16000, duration=0.1)

    def test_from_array_accepts_lists(self):
        """Test from_array converts sequences."""
        sample = AudioSample.from_array([0.1, 0.2], 16000)
        assert isinstance(sample.samples, np.ndarray)


class TestVoiceAnalysis:
    """Test suite for VoiceAnalysis."""

    @pytest.fixture
    def analysis(self):
        return VoiceAnalysis(
            emotion=Emotion.PEACEFUL,
            confidence=0.75,
            tone=ToneFeatures(pitch=0.5, energy=0.45, tempo=120.0),
            recommendations=['Poems with peaceful emotion', 'Similar emotional tone']
        )

    def test_recommendations_frozen_as_tuple(self, analysis):
        """Test recommendations are stored immutably."""
        assert analysis.recommendations == (
            'Poems with peaceful emotion', 'Similar emotional tone'
        )

    def test_to_dict(self, analysis):
        """Test serialization uses label strings."""
        assert analysis.to_dict() == {
            'emotion': 'peaceful',
            'confidence': 0.75,
            'tone': {'pitch': 0.5, 'energy': 0.45, 'tempo': 120.0},
            'recommendations': ['Poems with peaceful emotion', 'Similar emotional tone'],
        }

    def test_from_dict_restores_value(self, analysis):
        """Test a serialized analysis parses back to an equal value."""
        assert VoiceAnalysis.from_dict(analysis.to_dict()) == analysis

    def test_rejects_string_emotion(self):
        """Test the label must be an Emotion member."""
        with pytest.raises(ValueError):
            VoiceAnalysis(
                emotion='happy',
                confidence=0.5,
                tone=ToneFeatures(pitch=0.5, energy=0.5, tempo=120.0)
            )

    def test_rejects_confidence_out_of_range(self):
        """Test confidence must be within [0, 1]."""
        with pytest.raises(ValueError):
            VoiceAnalysis(
                emotion=Emotion.HAPPY,
                confidence=1.2,
                tone=ToneFeatures(pitch=0.5, energy=0.5, tempo=120.0)
            )

    def test_from_dict_rejects_unknown_label(self, analysis):
        """Test unknown wire labels fail to parse."""
        data = analysis.to_dict()
        data['emotion'] = 'melancholy'
        with pytest.raises(ValueError):
            VoiceAnalysis.from_dict(data)


class TestVoiceProfile:
    """Test suite for VoiceProfile invariants."""

    def _tone(self):
        return ToneFeatures(pitch=0.5, energy=0.5, tempo=120.0)

    def test_missing_label_rejected(self):
        """Test the distribution must cover all 8 labels."""
        with pytest.raises(ValueError, match='missing labels'):
            VoiceProfile(
                dominant_emotion=Emotion.HAPPY,
                average_tone=self._tone(),
                emotion_distribution={Emotion.HAPPY: 1.0}
            )

    def test_distribution_must_sum_to_one(self):
        """Test distributions not summing to 1 are rejected."""
        distribution = {emotion: 0.0 for emotion in Emotion}
        distribution[Emotion.HAPPY] = 0.5
        with pytest.raises(ValueError, match='sum to 1'):
            VoiceProfile(
                dominant_emotion=Emotion.HAPPY,
                average_tone=self._tone(),
                emotion_distribution=distribution
            )

    def test_to_dict_lists_every_label(self):
        """Test serialization covers every label."""
        distribution = {emotion: 0.0 for emotion in Emotion}
        distribution[Emotion.SAD] = 1.0
        profile = VoiceProfile(
            dominant_emotion=Emotion.SAD,
            average_tone=self._tone(),
            emotion_distribution=distribution
        )

        data = profile.to_dict()

        assert data['dominantEmotion'] == 'sad'
        assert set(data['emotionDistribution']) == {e.value for e in Emotion}
        assert data['emotionDistribution']['sad'] == profile.share_of(Emotion.SAD) == 1.0


class TestAnalysisResult:
    """Test suite for AnalysisResult and its parts."""

    @pytest.fixture
    def analysis(self, make_analysis):
        return make_analysis(Emotion.HAPPY, pitch=0.9, energy=0.9)

    def test_not_degraded_without_failures(self, analysis):
        """Test a clean result is not degraded."""
        result = AnalysisResult(analysis=analysis, correlation_id='c-1', processing_time_ms=3)
        assert not result.degraded

    def test_to_dict_with_collaborator_output(self, analysis):
        """Test serialization includes transcript, score and failures."""
        result = AnalysisResult(
            analysis=analysis,
            correlation_id='c-1',
            processing_time_ms=12,
            transcript='the sun also rises',
            external_score=EmotionScore(emotion=Emotion.MOTIVATIONAL, confidence=0.6),
            failures=[CollaboratorFailure('Transcriber', 'Timeout', 'slow')]
        )

        data = result.to_dict()

        assert result.degraded
        assert data['correlationId'] == 'c-1'
        assert data['transcript'] == 'the sun also rises'
        assert data['externalScore'] == {'emotion': 'motivational', 'confidence': 0.6}
        assert data['failures'] == [
            {'component': 'Transcriber', 'errorType': 'Timeout', 'message': 'slow'}
        ]

    def test_rejects_empty_correlation_id(self, analysis):
        """Test correlation ID is required."""
        with pytest.raises(ValueError):
            AnalysisResult(analysis=analysis, correlation_id='', processing_time_ms=0)

    def test_rejects_negative_processing_time(self, analysis):
        """Test processing time must be non-negative."""
        with pytest.raises(ValueError):
            AnalysisResult(analysis=analysis, correlation_id='c', processing_time_ms=-1)

    def test_emotion_score_validates_confidence(self):
        """Test scorer confidence must be within [0, 1]."""
        with pytest.raises(ValueError):
            EmotionScore(emotion=Emotion.SAD, confidence=2.0)
