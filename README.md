# ryukit

Small building blocks for capture and streaming tools. Everything is a
library: there are no commands to run.

## What is in it

- **Buffers**
  - `ryukit.memory_buffer.MemoryBuffer` – a FIFO of bytes. `read(size)`
    returns exactly `size` bytes, or `None` while fewer are buffered.
  - `ryukit.packet_reader.PacketReader` – the same idea with `can_read(size)`
    and a capacity of 1 MiB; writing past it raises `BufferError`.
- **Threads and scheduling**
  - `ryukit.simple_thread.SimpleThread` – runs `target(thread)` on a daemon
    thread, with `sleep(millis)` and `sleep_tight()` that end early on
    `wake_up()` or `terminate()`, plus `terminate_and_wait()` and
    `terminate_now()`. An optional `on_terminated(thread)` is called once.
  - `ryukit.scheduler.Scheduler` – runs queued `Task` items (`task`, `text`,
    `data`, `size`, `tag`) through `on_task`, and while started calls
    `on_repeat` between batches.
- **Networking**
  - `ryukit.udp.send_to_udp(host, port, text)` – sends one UTF-8 datagram to
    a dotted IPv4 address and returns the bytes sent; anything else raises
    `ValueError`.
  - `ryukit.broadcast_udp.BroadcastUDP` – queues text with `send()` and sends
    it from a background thread to `host` (255.255.255.255 by default) on the
    port given to `open()`. `close()` sends what is queued first. It can be
    used as a context manager.
- **Text and JSON**
  - `ryukit.charset.change_charset(src, dst, data)` – re-encodes bytes between
    any codecs Python knows.
  - `ryukit.json_data.JsonData` – an editable JSON object whose members can be
    read and set by position or by name, loaded from and saved to files.
  - `ryukit.json_reader.JsonReader` – parses JSON text and reads values with
    `get_int`, `get_bool`, `get_float` and `get_string`, falling back to a
    default when a value is missing or of the wrong type.
- **Codecs and images**
  - `ryukit.lzma_codec.encode` / `decode` – whole-buffer .xz compression
    (default preset, CRC64 check).
  - `ryukit.jpeg_codec.encode` / `decode` – RGBA pixels to JPEG (quality 80,
    no chroma subsampling) and back; decoded alpha is opaque.
  - `ryukit.image_resize.ImageResize` – bilinear resizing of 4-byte-per-pixel
    bitmaps with `read_bitmap32()` and `resize_bitmap32()`.
- **Downloads**
  - `ryukit.http_downloader.HttpDownloader` – streams a URL, calling
    `on_data(chunk, total)` per chunk; `stop()` cancels it, and `download()`
    then returns `False`.
- **Audio**
  - `ryukit.audio_resampling.AudioResampling` – converts blocks of 1024
    interleaved frames between 1 or 2 channels, 16-bit integer or 32-bit
    float samples and any sample rates, releasing output in chunks of a fixed
    number of frames.
  - `ryukit.audio_io` – `AudioErrorCode`, `apply_volume()`, the codec
    constants (`SAMPLE_RATE`, `FRAMES_PER_BUFFER`, …) and `AudioOutputQueue`,
    which queues packets and hands them out as fixed-size blocks, with silence
    when empty.
  - `ryukit.system_audio_capture.SystemAudioCapture` – takes raw audio packets
    through `push()`, resamples them on a background thread and returns
    converted blocks from `get_audio_data()`, dropping input while more than
    two blocks are waiting.
  - `ryukit.audio_mixer.AudioMixer` – mixes 32-bit float microphone and system
    audio blocks with per-source mute and volume.
- **Options**
  - `ryukit.capture_options` – `DesktopCaptureOption`, `AudioCaptureOption`,
    `VideoCreaterOption` and `align_up()`. Bitmap widths are padded to a
    multiple of 8 and heights to a multiple of 2, at 4 bytes per pixel.
  - `ryukit.controller_options.parse_controller_options(text)` – builds a
    `ControllerOptions` (desktop and audio settings plus the `rid` that names
    the audio and video pipes) from a JSON start option.

## What it does not do

The package works on data you hand it. It does not open microphones or
speakers, capture the screen or system audio, encode video files, or write to
named pipes: `AudioOutputQueue` only produces the blocks a player would
consume, `SystemAudioCapture` only converts packets pushed into it, and the
option classes and `ControllerOptions` only describe settings and pipe names.

## Installation

```
pip install ryukit
```

Python 3.10 or later is required. Pillow and NumPy are installed with it.

## Examples

### Reading fixed-size blocks from a byte stream

```python
from ryukit.memory_buffer import MemoryBuffer

buffer = MemoryBuffer()
buffer.write(b"abc")
buffer.write(b"defg")

len(buffer)        # 7
buffer.read(4)     # b"abcd"
buffer.read(10)    # None: not enough data yet
```

### Running work on a scheduler

```python
from ryukit.scheduler import Scheduler

def on_task(task):
    print("task", task.task, task.text)

scheduler = Scheduler(on_task=on_task)
scheduler.add(1, "open")
scheduler.start()
scheduler.terminate_and_wait(timeout=1.0)
```

### Reading options from JSON

```python
from ryukit.json_reader import JsonReader

reader = JsonReader()
reader.load_text('{"width": 640, "with-cursor": true}')
reader.get_int("width", 0)            # 640
reader.get_bool("with-cursor", False) # True
reader.get_string("rid", "")          # "" (missing, so the default)
```

### Bitmap sizes

```python
from ryukit.capture_options import DesktopCaptureOption

option = DesktopCaptureOption(width=101, height=51)
option.bitmap_width   # 104
option.bitmap_height  # 52
option.bitmap_size    # 104 * 52 * 4
```

### Sending a datagram

```python
from ryukit.udp import send_to_udp

send_to_udp("127.0.0.1", 9000, "hello")
```

### Compressing data

```python
from ryukit import lzma_codec

packed = lzma_codec.encode(b"x" * 1000)
lzma_codec.decode(packed) == b"x" * 1000  # True
```

## Tests

The tests are written for pytest, which the `test` extra installs.