"""
Tone features data model.

Represents the three signal measurements derived from one audio sample.
"""

import math
from dataclasses import dataclass
from typing import Any, Dict


@dataclass(frozen=True)
class ToneFeatures:
    """
    Normalized tone measurements for a single audio sample.

    Attributes:
        pitch: Relative pitch, 0 (low) to 1 (high)
        energy: Relative loudness, 0 (calm) to 1 (energetic)
        tempo: Speaking rate in words per minute
    """

    pitch: float
    energy: float
    tempo: float

    def __post_init__(self):
        """Validate tone feature ranges."""
        for field_name in ('pitch', 'energy'):
            value = getattr(self, field_name)
            if not isinstance(value, (int, float)) or not math.isfinite(value):
                raise ValueError(f"{field_name} must be a finite number, got {value!r}")
            if not 0.0 <= value <= 1.0:
                raise ValueError(f"{field_name} must be in [0, 1], got {value}")

        if not isinstance(self.tempo, (int, float)) or not math.isfinite(self.tempo):
            raise ValueError(f"tempo must be a finite number, got {self.tempo!r}")
        if self.tempo <= 0:
            raise ValueError(f"tempo must be positive, got {self.tempo}")

    def to_dict(self) -> Dict[str, float]:
        """
        Convert to dictionary for JSON serialization.

        Returns:
            Dictionary with pitch, energy and tempo
        """
        return {
            'pitch': self.pitch,
            'energy': self.energy,
            'tempo': self.tempo
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'ToneFeatures':
        """
        Create ToneFeatures from dictionary.

        Args:
            data: Dictionary with pitch, energy and tempo keys

        Returns:
            ToneFeatures instance
        """
        return cls(
            pitch=float(data['pitch']),
            energy=float(data['energy']),
            tempo=float(data['tempo'])
        )
