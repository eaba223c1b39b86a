"""Unit tests for metrics emission and structured logging."""

import json
import logging

import pytest
from botocore.exceptions import ClientError
from unittest.mock import Mock

from voice_aura.utils.metrics import VoiceAuraMetrics
from voice_aura.utils.structured_logger import StructuredFormatter


class TestVoiceAuraMetrics:
    """Test suite for VoiceAuraMetrics."""

    def test_cloudwatch_disabled_under_pytest(self):
        """Test auto-detection disables CloudWatch during tests."""
        metrics = VoiceAuraMetrics()

        assert metrics.use_cloudwatch is False
        assert metrics.cloudwatch is None

    def test_log_based_metrics_are_buffered(self, metrics):
        """Test metrics are buffered with name, unit and dimensions."""
        metrics.emit_detected_emotion('happy', correlation_id='c-1')

        assert metrics.metrics_buffer == [{
            'metric_name': 'DetectedEmotion',
            'value': 1,
            'unit': 'Count',
            'dimensions': {'Emotion': 'happy', 'CorrelationId': 'c-1'},
        }]

    def test_emits_to_cloudwatch(self):
        """Test metrics are sent with the CloudWatch datum format."""
        client = Mock()
        metrics = VoiceAuraMetrics(
            namespace='Test/Voice', use_cloudwatch=True, cloudwatch_client=client
        )

        metrics.emit_error_count('Timeout', 'Transcriber')

        client.put_metric_data.assert_called_once()
        kwargs = client.put_metric_data.call_args.kwargs
        assert kwargs['Namespace'] == 'Test/Voice'
        datum = kwargs['MetricData'][0]
        assert datum['MetricName'] == 'ErrorCount'
        assert {'Name': 'Component', 'Value': 'Transcriber'} in datum['Dimensions']

    def test_delivered_metrics_are_not_buffered(self):
        """Test metrics sent on emit are not kept for a second send."""
        client = Mock()
        metrics = VoiceAuraMetrics(use_cloudwatch=True, cloudwatch_client=client)

        for _ in range(30):
            metrics.emit_analysis_latency(5.0)
        metrics.flush_metrics()

        assert metrics.metrics_buffer == []
        assert client.put_metric_data.call_count == 30

    def test_cloudwatch_failure_does_not_raise(self):
        """Test CloudWatch API errors are logged, not raised."""
        client = Mock()
        client.put_metric_data.side_effect = ClientError(
            {'Error': {'Code': 'Throttling', 'Message': 'slow down'}}, 'PutMetricData'
        )
        metrics = VoiceAuraMetrics(use_cloudwatch=True, cloudwatch_client=client)

        metrics.emit_fallback_used('DefaultPitch')

        assert len(metrics.metrics_buffer) == 1

    def test_flush_batches_by_twenty(self):
        """Test flushing retries failed sends in CloudWatch-sized batches."""
        client = Mock()
        client.put_metric_data.side_effect = ClientError(
            {'Error': {'Code': 'Throttling', 'Message': 'slow down'}}, 'PutMetricData'
        )
        metrics = VoiceAuraMetrics(use_cloudwatch=True, cloudwatch_client=client)
        for _ in range(25):
            metrics.emit_analysis_latency(5.0)
        client.put_metric_data.side_effect = None
        client.reset_mock()

        metrics.flush_metrics()

        batch_sizes = [
            len(call.kwargs['MetricData']) for call in client.put_metric_data.call_args_list
        ]
        assert batch_sizes == [20, 5]
        assert metrics.metrics_buffer == []

    def test_flush_empty_buffer_is_noop(self):
        """Test flushing nothing makes no API calls."""
        client = Mock()
        metrics = VoiceAuraMetrics(use_cloudwatch=True, cloudwatch_client=client)

        metrics.flush_metrics()

        client.put_metric_data.assert_not_called()


class TestStructuredFormatter:
    """Test suite for StructuredFormatter."""

    def _record(self, **extra):
        record = logging.LogRecord(
            name='voice_aura.analyzer',
            level=logging.INFO,
            pathname=__file__,
            lineno=1,
            msg='Voice analysis completed: emotion=%s',
            args=('sad',),
            exc_info=None
        )
        for key, value in extra.items():
            setattr(record, key, value)
        return record

    def test_formats_json_with_core_fields(self):
        """Test core fields and the rendered message."""
        entry = json.loads(StructuredFormatter().format(self._record()))

        assert entry['level'] == 'INFO'
        assert entry['component'] == 'voice_aura.analyzer'
        assert entry['message'] == 'Voice analysis completed: emotion=sad'
        assert entry['timestamp'].endswith('Z')

    def test_includes_extra_fields(self):
        """Test extra fields such as correlation_id are carried."""
        entry = json.loads(
            StructuredFormatter().format(self._record(correlation_id='c-9', failures=2))
        )

        assert entry['correlation_id'] == 'c-9'
        assert entry['failures'] == 2

    def test_stringifies_unserializable_extras(self):
        """Test non-JSON values are converted to strings."""
        entry = json.loads(StructuredFormatter().format(self._record(shape=object())))

        assert isinstance(entry['shape'], str)
