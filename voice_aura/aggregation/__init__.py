"""
Voice profile aggregation.
"""

from voice_aura.aggregation.profile_aggregator import aggregate, default_profile

__all__ = ['aggregate', 'default_profile']
