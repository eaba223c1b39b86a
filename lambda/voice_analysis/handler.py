"""
Voice Analysis Lambda handler for tone-based emotion detection.

This module provides the Lambda handler for analyzing a captured voice
clip: it decodes the audio, extracts tone features, classifies emotion,
selects poem recommendation queries and, when prior analyses are sent
along, returns the refreshed voice profile.
"""

import asyncio
import base64
import io
import json
import logging
from typing import Any, Dict, List, Optional, Tuple

import numpy as np
import soundfile as sf

from voice_aura.analyzer import VoiceAnalyzer
from voice_aura.config.settings import Settings, get_settings
from voice_aura.exceptions import InvalidInputError, VoiceAuraError
from voice_aura.models.audio_sample import AudioSample
from voice_aura.models.voice_analysis import VoiceAnalysis
from voice_aura.utils.structured_logger import configure_structured_logging

logger = logging.getLogger(__name__)

# Global analyzer instance (singleton per Lambda container)
# Initialized on cold start and reused across invocations
analyzer: Optional[VoiceAnalyzer] = None

SUPPORTED_FORMATS = {'pcm16', 'wav'}
PCM16_FULL_SCALE = 32768.0
MAX_AUDIO_BYTES = 10 * 1024 * 1024


def lambda_handler(event: Dict[str, Any], context: Any) -> Dict[str, Any]:
    """
    Lambda handler for voice tone analysis.

    Args:
        event: Lambda event object containing:
            - audioData: Base64-encoded audio data (required)
            - audioFormat: 'pcm16' (default) or 'wav' (optional)
            - sampleRate: Audio sample rate in Hz (required for pcm16)
            - correlationId: Correlation identifier (optional)
            - history: Previously returned analysis dicts (optional)
        context: Lambda context object

    Returns:
        Response dict with statusCode and body containing:
            - analysis: Emotion, confidence, tone and recommendations
            - correlationId: Correlation identifier
            - transcript / externalScore: Collaborator output, if any
            - failures: Tolerated collaborator failures
            - processingTimeMs: Total processing time
            - profile: Profile over history plus the new analysis

    Examples:
        >>> event = {
        ...     'audioData': 'base64_encoded_pcm16...',
        ...     'sampleRate': 16000
        ... }
        >>> response = lambda_handler(event, context)
        >>> assert response['statusCode'] == 200
        >>> body = json.loads(response['body'])
        >>> assert body['analysis']['emotion'] in {'happy', 'sad', 'neutral', ...}
    """
    global analyzer

    try:
        logger.info("Lambda handler invoked for voice analysis")

        settings = get_settings()

        # Initialize analyzer on cold start
        if analyzer is None:
            configure_structured_logging(
                level=logging.getLevelName(settings.log_level.upper()),
                use_json=settings.log_json
            )
            logger.info("Cold start: Initializing VoiceAnalyzer")
            analyzer = VoiceAnalyzer(settings=settings)

        try:
            sample, correlation_id, history = _parse_input_event(event, settings)
        except ValueError as e:
            logger.error(f"Input validation failed: {e}")
            return _error_response(400, 'Invalid input', str(e))

        try:
            result = asyncio.run(
                analyzer.analyze_audio(sample, correlation_id=correlation_id)
            )
        except InvalidInputError as e:
            logger.error(f"Audio sample rejected: {e}")
            return _error_response(400, 'Invalid input', str(e))
        except VoiceAuraError as e:
            logger.error(f"Voice analysis failed: {e}", exc_info=True)
            return _error_response(500, 'Processing failed', str(e))

        profile = analyzer.create_voice_profile(history + [result.analysis])

        logger.info(
            f"Processing completed successfully: "
            f"correlation_id={result.correlation_id}, "
            f"emotion={result.analysis.emotion.value}, "
            f"processing_time={result.processing_time_ms}ms"
        )

        body = result.to_dict()
        body['profile'] = profile.to_dict()
        return _response(200, body)

    except Exception as e:
        logger.error(f"Unexpected error in lambda_handler: {e}", exc_info=True)
        return _error_response(500, 'Internal server error', str(e))

    finally:
        # The analyzer outlives the invocation; drain its metrics buffer
        if analyzer is not None:
            analyzer.metrics.flush_metrics()


def _parse_input_event(
    event: Dict[str, Any],
    settings: Settings
) -> Tuple[AudioSample, Optional[str], List[VoiceAnalysis]]:
    """
    Parse and validate input event.

    Args:
        event: Lambda event object
        settings: Loaded settings (duration limits)

    Returns:
        Tuple of (sample, correlation_id, history)

    Raises:
        ValueError: When input validation fails
    """
    audio_data_b64 = event.get('audioData')
    if not audio_data_b64:
        raise ValueError("Missing required field: audioData")

    audio_format = event.get('audioFormat', 'pcm16')
    if audio_format not in SUPPORTED_FORMATS:
        raise ValueError(
            f"Invalid audioFormat: {audio_format}. Must be one of {sorted(SUPPORTED_FORMATS)}"
        )

    try:
        audio_bytes = base64.b64decode(audio_data_b64, validate=True)
    except Exception as e:
        raise ValueError(f"Invalid audioData: failed to decode base64: {e}")

    if len(audio_bytes) == 0:
        raise ValueError("audioData is empty after decoding")

    if len(audio_bytes) > MAX_AUDIO_BYTES:
        raise ValueError(
            f"audioData exceeds maximum size: "
            f"{len(audio_bytes)} > {MAX_AUDIO_BYTES} bytes"
        )

    if audio_format == 'wav':
        samples, sample_rate = _decode_wav(audio_bytes)
    else:
        sample_rate = event.get('sampleRate')
        if not sample_rate:
            raise ValueError("Missing required field: sampleRate")
        if not isinstance(sample_rate, int) or sample_rate <= 0:
            raise ValueError(f"Invalid sampleRate: must be positive integer, got {sample_rate}")
        samples = _decode_pcm16(audio_bytes)

    if samples.size == 0:
        raise ValueError("audioData array is empty")

    duration = samples.size / sample_rate
    if duration < settings.min_audio_duration_s:
        raise ValueError(
            f"audioData duration too short: "
            f"{duration:.3f}s < {settings.min_audio_duration_s}s"
        )
    if duration > settings.max_audio_duration_s:
        raise ValueError(
            f"audioData duration exceeds maximum: "
            f"{duration:.1f}s > {settings.max_audio_duration_s}s"
        )

    correlation_id = event.get('correlationId')
    if correlation_id is not None and not isinstance(correlation_id, str):
        raise ValueError(f"Invalid correlationId: must be string, got {type(correlation_id)}")

    history = _parse_history(event.get('history', []))

    logger.debug(
        f"Input parsed successfully: "
        f"format={audio_format}, "
        f"audio_samples={samples.size}, "
        f"sample_rate={sample_rate}, "
        f"history={len(history)}"
    )

    sample = AudioSample(samples=samples, sample_rate=int(sample_rate), duration=duration)
    return sample, correlation_id, history


def _decode_pcm16(audio_bytes: bytes) -> np.ndarray:
    """Decode little-endian 16-bit PCM into floats in [-1, 1]."""
    try:
        pcm = np.frombuffer(audio_bytes, dtype='<i2')
    except ValueError as e:
        raise ValueError(f"Invalid audioData: not 16-bit PCM: {e}")
    return pcm.astype(np.float32) / PCM16_FULL_SCALE


def _decode_wav(audio_bytes: bytes) -> Tuple[np.ndarray, int]:
    """Decode a WAV container into mono floats and its sample rate."""
    try:
        data, sample_rate = sf.read(io.BytesIO(audio_bytes), dtype='float32')
    except Exception as e:
        raise ValueError(f"Invalid audioData: failed to decode WAV: {e}")

    # soundfile returns (frames, channels) for multichannel audio
    if data.ndim > 1:
        data = np.mean(data, axis=1)

    return data, int(sample_rate)


def _parse_history(raw_history: Any) -> List[VoiceAnalysis]:
    """Rebuild prior analyses sent back by the client."""
    if not isinstance(raw_history, list):
        raise ValueError(f"Invalid history: must be list, got {type(raw_history)}")

    history = []
    for index, item in enumerate(raw_history):
        try:
            history.append(VoiceAnalysis.from_dict(item))
        except (KeyError, TypeError, ValueError) as e:
            raise ValueError(f"Invalid history entry {index}: {e}")
    return history


def _response(status_code: int, body: Dict[str, Any]) -> Dict[str, Any]:
    return {
        'statusCode': status_code,
        'headers': {
            'Content-Type': 'application/json'
        },
        'body': json.dumps(body)
    }


def _error_response(status_code: int, error_type: str, message: str) -> Dict[str, Any]:
    """
    Build error response.

    Args:
        status_code: HTTP status code
        error_type: Error type description
        message: Error message

    Returns:
        Lambda response dict with error details
    """
    return _response(status_code, {
        'error': error_type,
        'message': message
    })
