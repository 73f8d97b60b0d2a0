"""Settings for desktop, audio and video capture, with bitmap size alignment."""

from __future__ import annotations

from dataclasses import dataclass

BITMAP_PIXEL_SIZE = 4
BITMAP_CELL_WIDTH = 8
BITMAP_CELL_HEIGHT = 2

DEFAULT_FPS = 24
DEFAULT_BITRATE_KB = 1024
DEFAULT_CHANNEL = 1
DEFAULT_SAMPLE_RATE = 44100

AV_CH_FRONT_LEFT = 0x1
AV_CH_FRONT_RIGHT = 0x2
AV_CH_FRONT_CENTER = 0x4
AV_CH_LAYOUT_MONO = AV_CH_FRONT_CENTER
AV_CH_LAYOUT_STEREO = AV_CH_FRONT_LEFT | AV_CH_FRONT_RIGHT


def align_up(value: int, cell: int) -> int:
    """Round ``value`` up to the next multiple of ``cell``."""
    if cell <= 0:
        raise ValueError("cell must be positive")
    if value < 0:
        raise ValueError("value must not be negative")
    remainder = value % cell
    return value if remainder == 0 else value + (cell - remainder)


def _bitmap_width(width: int) -> int:
    return align_up(width, BITMAP_CELL_WIDTH)


def _bitmap_height(height: int) -> int:
    return align_up(height, BITMAP_CELL_HEIGHT)


@dataclass
class DesktopCaptureOption:
    """The region of the screen or window to capture and how often.

    A ``target_handle`` of -1 means the whole desktop, offset by ``left`` and ``top``.
    The captured bitmap is padded to a width that is a multiple of 8 and a
    height that is a multiple of 2, with 4 bytes per pixel.
    """

    target_handle: int = -1
    left: int = 0
    top: int = 0
    width: int = 0
    height: int = 0
    fps: int = DEFAULT_FPS
    with_cursor: bool = True

    @property
    def bitmap_width(self) -> int:
        return _bitmap_width(self.width)

    @property
    def bitmap_height(self) -> int:
        return _bitmap_height(self.height)

    @property
    def bitmap_size(self) -> int:
        """Bytes in one captured bitmap."""
        return self.bitmap_width * self.bitmap_height * BITMAP_PIXEL_SIZE

    @property
    def interval_ms(self) -> int:
        """Milliseconds between captures; 50 when ``fps`` is below 1."""
        return 50 if self.fps < 1 else 1000 // self.fps


@dataclass
class AudioCaptureOption:
    """Microphone and system audio capture settings."""

    mic_device_id: int = -1
    use_system_audio: bool = False
    channels: int = 1
    sample_rate: int = DEFAULT_SAMPLE_RATE
    sample_size: int = 4
    frames: int = 1024

    @property
    def frame_size(self) -> int:
        """Bytes in one block of ``frames`` frames."""
        return self.channels * self.sample_size * self.frames


@dataclass
class VideoCreaterOption:
    """Settings for writing a video file from bitmaps and audio."""

    filename: str = ""
    width: int = 0
    height: int = 0
    fps: int = DEFAULT_FPS
    speed: str = "fast"
    bitrate: int = DEFAULT_BITRATE_KB * 1024
    use_nvenc: bool = True
    channel: int = DEFAULT_CHANNEL
    sample_rate: int = DEFAULT_SAMPLE_RATE

    @property
    def channel_layout(self) -> int:
        """Mono for one channel, stereo otherwise."""
        return AV_CH_LAYOUT_MONO if self.channel == 1 else AV_CH_LAYOUT_STEREO

    @property
    def bitmap_width(self) -> int:
        return _bitmap_width(self.width)

    @property
    def bitmap_height(self) -> int:
        return _bitmap_height(self.height)

    @property
    def bitmap_size(self) -> int:
        """Bytes in one input bitmap."""
        return self.bitmap_width * self.bitmap_height * BITMAP_PIXEL_SIZE