"""
Audio sample data model.

Wraps a captured amplitude buffer together with its sample rate and
duration, the input to feature extraction.
"""

import logging
import math
from dataclasses import dataclass
from typing import Optional

import numpy as np

from voice_aura.exceptions import InvalidInputError


logger = logging.getLogger(__name__)


@dataclass(frozen=True, eq=False)
class AudioSample:
    """
    Mono amplitude buffer captured from the platform audio API.

    Attributes:
        samples: Amplitudes in [-1, 1] as a 1D float numpy array
        sample_rate: Sample rate in Hz
        duration: Buffer duration in seconds
    """

    samples: np.ndarray
    sample_rate: int
    duration: float

    def __post_init__(self):
        """Validate buffer metadata and normalize samples to mono float."""
        if not isinstance(self.samples, np.ndarray):
            raise InvalidInputError(
                f"samples must be numpy array, got {type(self.samples)}"
            )

        if not isinstance(self.sample_rate, (int, np.integer)) or self.sample_rate <= 0:
            raise InvalidInputError(
                f"sample_rate must be positive integer, got {self.sample_rate}"
            )

        if not isinstance(self.duration, (int, float, np.number)) or not math.isfinite(self.duration):
            raise InvalidInputError(f"duration must be a finite number, got {self.duration!r}")

        if self.duration < 0:
            raise InvalidInputError(f"duration must be non-negative, got {self.duration}")

        samples = self.samples
        if samples.ndim > 1:
            logger.warning("Audio has %d dimensions, converting to mono", samples.ndim)
            samples = np.mean(samples, axis=0)

        object.__setattr__(self, 'samples', np.asarray(samples, dtype=np.float64))

    @property
    def is_empty(self) -> bool:
        """True when the buffer holds no samples."""
        return self.samples.size == 0

    @classmethod
    def from_array(
        cls,
        samples: np.ndarray,
        sample_rate: int,
        duration: Optional[float] = None
    ) -> 'AudioSample':
        """
        Create AudioSample, deriving duration from the sample count if omitted.

        Args:
            samples: Amplitude buffer (mono, or channels-first multichannel)
            sample_rate: Sample rate in Hz
            duration: Buffer duration in seconds (computed if None)

        Returns:
            AudioSample instance
        """
        samples = np.asarray(samples)
        if duration is None:
            frame_count = samples.shape[-1] if samples.ndim > 0 else 0
            duration = frame_count / sample_rate if sample_rate and sample_rate > 0 else 0.0
        return cls(samples=samples, sample_rate=sample_rate, duration=duration)
