"""
Poem recommendation query selection.
"""

from voice_aura.recommendations.recommendation_selector import recommend

__all__ = ['recommend']
