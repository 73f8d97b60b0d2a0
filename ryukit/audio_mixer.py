"""Mixing of microphone and system audio with per-source mute and volume."""

from __future__ import annotations

from typing import Optional

import numpy as np

from ryukit.capture_options import AudioCaptureOption


class AudioMixer:
    """Mixes 32-bit float microphone audio with system audio.

    The result is always one block of ``option.frame_size`` bytes. Samples
    beyond the length of the microphone block keep what the previous mix left.
    System audio is used only when ``option.use_system_audio`` is set; a missing
    or muted source counts as silence.
    """

    def __init__(self, option: Optional[AudioCaptureOption] = None) -> None:
        self.option = option if option is not None else AudioCaptureOption()
        if self.option.sample_size != 4:
            raise ValueError("mixing needs 32-bit float samples (sample size 4)")
        self.mic_muted = False
        self.system_muted = False
        self.mic_volume = 1.0
        self.system_volume = 1.0
        self._output = np.zeros(self.option.frame_size // 4, dtype="<f4")

    def mix(self, mic: bytes, system: Optional[bytes] = None) -> bytes:
        """Mix one microphone block with an optional system audio block."""
        count = min(len(mic) // 4, len(self._output))

        if self.mic_muted:
            mic_samples = np.zeros(count, dtype="<f4")
        else:
            mic_samples = np.frombuffer(bytes(mic[: count * 4]), dtype="<f4")

        system_samples = np.zeros(count, dtype="<f4")
        if self.option.use_system_audio and system is not None and not self.system_muted:
            available = min(len(system) // 4, count)
            system_samples[:available] = np.frombuffer(bytes(system[: available * 4]), dtype="<f4")

        self._output[:count] = mic_samples * np.float32(self.mic_volume) + system_samples * np.float32(
            self.system_volume
        )
        return self._output.tobytes()