"""
CloudWatch metrics utilities for voice tone analysis.

This module provides utilities for emitting custom CloudWatch metrics
to track extraction and analysis latency, detected emotions, errors
and fallback usage.
"""

import logging
import os
from typing import Optional, Dict, Any, List

import boto3
from botocore.exceptions import ClientError

logger = logging.getLogger(__name__)


class VoiceAuraMetrics:
    """
    Emits CloudWatch metrics for voice tone analysis.

    Uses boto3 CloudWatch client when enabled, otherwise logs metrics
    in structured format for CloudWatch Logs Insights parsing.
    """

    # CloudWatch accepts at most 20 datums per PutMetricData call
    MAX_BATCH_SIZE = 20

    def __init__(
        self,
        namespace: str = 'VoiceAura/Analysis',
        use_cloudwatch: Optional[bool] = None,
        cloudwatch_client: Optional[Any] = None
    ):
        """
        Initialize metrics emitter.

        Args:
            namespace: CloudWatch namespace for metrics
            use_cloudwatch: Whether to use CloudWatch client (auto-detects if None)
            cloudwatch_client: Preconfigured boto3 CloudWatch client (created if None)
        """
        self.namespace = namespace
        self.metrics_buffer: List[Dict[str, Any]] = []

        # Disable CloudWatch under pytest unless explicitly requested
        if use_cloudwatch is None:
            use_cloudwatch = os.getenv('PYTEST_CURRENT_TEST') is None

        self.use_cloudwatch = use_cloudwatch
        self.cloudwatch = None

        if self.use_cloudwatch:
            try:
                self.cloudwatch = cloudwatch_client or boto3.client('cloudwatch')
                logger.info(f"Initialized CloudWatch metrics client for namespace: {namespace}")
            except Exception as e:
                logger.warning(f"Failed to initialize CloudWatch client: {e}, falling back to logging")
                self.use_cloudwatch = False
        else:
            logger.info("CloudWatch metrics disabled, using log-based metrics")

    def emit_extraction_latency(
        self,
        latency_ms: float,
        correlation_id: Optional[str] = None
    ) -> None:
        """
        Emit metric for tone feature extraction latency.

        Args:
            latency_ms: Extraction latency in milliseconds
            correlation_id: Optional correlation ID for tracking
        """
        self._emit_metric(
            'FeatureExtractionLatency', latency_ms, 'Milliseconds',
            self._dimensions(correlation_id)
        )

    def emit_analysis_latency(
        self,
        latency_ms: float,
        correlation_id: Optional[str] = None
    ) -> None:
        """
        Emit metric for end-to-end clip analysis latency.

        Args:
            latency_ms: Total latency in milliseconds
            correlation_id: Optional correlation ID for tracking
        """
        self._emit_metric(
            'AnalysisLatency', latency_ms, 'Milliseconds',
            self._dimensions(correlation_id)
        )

    def emit_collaborator_latency(
        self,
        component: str,
        latency_ms: float,
        correlation_id: Optional[str] = None
    ) -> None:
        """
        Emit metric for an external collaborator call.

        Args:
            component: Collaborator name (e.g., 'Transcriber')
            latency_ms: Call latency in milliseconds
            correlation_id: Optional correlation ID for tracking
        """
        self._emit_metric(
            'CollaboratorLatency', latency_ms, 'Milliseconds',
            self._dimensions(correlation_id, Component=component)
        )

    def emit_detected_emotion(
        self,
        emotion: str,
        correlation_id: Optional[str] = None
    ) -> None:
        """
        Emit metric for a classified emotion label.

        Args:
            emotion: Detected emotion label
            correlation_id: Optional correlation ID for tracking
        """
        self._emit_metric(
            'DetectedEmotion', 1, 'Count',
            self._dimensions(correlation_id, Emotion=emotion)
        )

    def emit_error_count(
        self,
        error_type: str,
        component: str,
        correlation_id: Optional[str] = None
    ) -> None:
        """
        Emit metric for error count by type and component.

        Args:
            error_type: Type of error (e.g., 'EstimationError', 'Timeout')
            component: Component where error occurred (e.g., 'YinPitchEstimator')
            correlation_id: Optional correlation ID for tracking
        """
        self._emit_metric(
            'ErrorCount', 1, 'Count',
            self._dimensions(correlation_id, ErrorType=error_type, Component=component)
        )

    def emit_fallback_used(
        self,
        fallback_type: str,
        correlation_id: Optional[str] = None
    ) -> None:
        """
        Emit metric for fallback usage.

        Args:
            fallback_type: Type of fallback (e.g., 'DefaultPitch', 'DefaultTempo')
            correlation_id: Optional correlation ID for tracking
        """
        self._emit_metric(
            'FallbackUsed', 1, 'Count',
            self._dimensions(correlation_id, FallbackType=fallback_type)
        )

    def _dimensions(self, correlation_id: Optional[str], **dimensions: str) -> Dict[str, str]:
        if correlation_id:
            dimensions['CorrelationId'] = correlation_id
        return dimensions

    def _emit_metric(
        self,
        metric_name: str,
        value: float,
        unit: str,
        dimensions: Dict[str, str]
    ) -> None:
        """
        Emit metric to CloudWatch or log.

        Metrics already delivered to CloudWatch are not buffered; the
        buffer only holds log-based metrics and failed sends until the
        next flush_metrics().

        Args:
            metric_name: CloudWatch metric name
            value: Metric value
            unit: CloudWatch unit
            dimensions: Metric dimensions
        """
        metric = {
            'metric_name': metric_name,
            'value': value,
            'unit': unit,
            'dimensions': dimensions
        }

        logger.info(f"METRIC {metric_name}={value} unit={unit} dimensions={dimensions}")

        if self.use_cloudwatch and self.cloudwatch:
            try:
                self._emit_to_cloudwatch([metric])
                return
            except Exception as e:
                logger.error(f"Failed to emit metric to CloudWatch: {e}", exc_info=True)

        self.metrics_buffer.append(metric)

    def _emit_to_cloudwatch(self, metrics: List[Dict[str, Any]]) -> None:
        """
        Emit metrics to CloudWatch using boto3 client.

        Args:
            metrics: List of metric dictionaries
        """
        if not self.cloudwatch:
            return

        metric_data = []
        for metric in metrics:
            metric_datum = {
                'MetricName': metric['metric_name'],
                'Value': metric['value'],
                'Unit': metric['unit']
            }

            if metric['dimensions']:
                metric_datum['Dimensions'] = [
                    {'Name': k, 'Value': str(v)}
                    for k, v in metric['dimensions'].items()
                ]

            metric_data.append(metric_datum)

        try:
            for i in range(0, len(metric_data), self.MAX_BATCH_SIZE):
                self.cloudwatch.put_metric_data(
                    Namespace=self.namespace,
                    MetricData=metric_data[i:i + self.MAX_BATCH_SIZE]
                )
        except ClientError as e:
            logger.error(f"CloudWatch API error: {e}", exc_info=True)
            raise

        logger.debug(f"Emitted {len(metric_data)} metrics to CloudWatch")

    def flush_metrics(self) -> None:
        """
        Flush buffered metrics to CloudWatch and empty the buffer.

        Retries sends that failed at emit time. Log-based metrics were
        already written on emit and are simply dropped.
        """
        if not self.metrics_buffer:
            return

        logger.debug(f"Flushing {len(self.metrics_buffer)} buffered metrics")

        if self.use_cloudwatch and self.cloudwatch:
            try:
                self._emit_to_cloudwatch(self.metrics_buffer)
            except Exception as e:
                logger.error(f"Failed to flush metrics to CloudWatch: {e}", exc_info=True)

        self.metrics_buffer = []
