"""Capture settings for a recording controller, read from a JSON start option."""

from __future__ import annotations

from dataclasses import dataclass, field

from ryukit.capture_options import AudioCaptureOption, DesktopCaptureOption
from ryukit.json_reader import JsonReader

CONTROLLER_FPS = 20
PIPE_PREFIX = "\\\\.\\pipe\\"


@dataclass
class ControllerOptions:
    """Desktop and audio capture settings plus the room id naming the output pipes."""

    desktop: DesktopCaptureOption = field(default_factory=DesktopCaptureOption)
    audio: AudioCaptureOption = field(default_factory=AudioCaptureOption)
    rid: str = ""

    def audio_pipe(self) -> str:
        """Name of the pipe the audio stream is sent to."""
        return f"{PIPE_PREFIX}audio-{self.rid}"

    def video_pipe(self) -> str:
        """Name of the pipe the video stream is sent to."""
        return f"{PIPE_PREFIX}video-{self.rid}"


def parse_controller_options(text: str) -> ControllerOptions:
    """Build controller settings from a JSON text; raises ``ValueError`` if it does not parse."""
    reader = JsonReader()
    if not reader.load_text(text):
        raise ValueError("start option is not valid JSON")

    desktop = DesktopCaptureOption(
        target_handle=reader.get_int("window-handle", -1),
        left=reader.get_int("left", 0),
        top=reader.get_int("top", 0),
        width=reader.get_int("width", 0),
        height=reader.get_int("height", 0),
        fps=CONTROLLER_FPS,
        with_cursor=reader.get_bool("with-cursor", False),
    )

    sample_rate = 44100
    audio = AudioCaptureOption(
        mic_device_id=reader.get_int("mic", -1),
        use_system_audio=reader.get_bool("system-audio", False),
        channels=1,
        sample_rate=sample_rate,
        sample_size=4,
        frames=sample_rate // desktop.fps,
    )

    return ControllerOptions(desktop=desktop, audio=audio, rid=reader.get_string("rid", ""))