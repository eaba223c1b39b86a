"""
Utility modules for voice aura.
"""

from .metrics import VoiceAuraMetrics
from .structured_logger import StructuredFormatter, configure_structured_logging

__all__ = ['VoiceAuraMetrics', 'StructuredFormatter', 'configure_structured_logging']
