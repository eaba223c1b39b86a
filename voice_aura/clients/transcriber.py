"""
Speech-to-text collaborator interface.

The engine never transcribes audio itself; a deployment plugs in a client
for its speech service.
"""

from typing import Protocol

from voice_aura.models.audio_sample import AudioSample


class Transcriber(Protocol):
    """
    Protocol defining the interface for speech-to-text services.

    Implementations should raise TranscriptionError on service failures.
    """

    async def transcribe(self, sample: AudioSample) -> str:
        """
        Transcribe a captured audio sample.

        Args:
            sample: Captured audio sample

        Returns:
            Transcript text (may be empty for silence)
        """
        ...
