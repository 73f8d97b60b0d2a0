import numpy as np
import pytest

from ryukit.audio_resampling import AudioResampling


def _floats(values):
    return np.asarray(values, dtype="<f4").tobytes()


def test_src_buffer_size_follows_input_layout():
    resampler = AudioResampling()
    resampler.open(2, 48000, 4, 1, 44100, 4, 1024)
    assert resampler.src_buffer_size() == AudioResampling.SRC_FRAMES * 2 * 4


@pytest.mark.parametrize(
    "args",
    [
        (3, 48000, 4, 1, 44100, 4, 1024),
        (1, 48000, 4, 0, 44100, 4, 1024),
        (1, 48000, 3, 1, 44100, 4, 1024),
        (1, 48000, 4, 1, 44100, 8, 1024),
        (1, 0, 4, 1, 44100, 4, 1024),
    ],
)
def test_open_rejects_unsupported_settings(args):
    with pytest.raises(ValueError):
        AudioResampling().open(*args)


def test_same_layout_is_identity():
    received = []
    resampler = AudioResampling(on_data=received.append)
    resampler.open(1, 44100, 4, 1, 44100, 4, 1024)
    rng = np.random.default_rng(1)
    block = _floats(rng.uniform(-1, 1, 1024))
    out = resampler.execute(block)
    assert out == block
    assert received == [block]


def test_execute_when_not_open_returns_none():
    received = []
    resampler = AudioResampling(on_data=received.append)
    assert resampler.execute(b"\x00" * 4096) is None
    assert received == []


def test_close_stops_output():
    resampler = AudioResampling()
    resampler.open(1, 44100, 4, 1, 44100, 4, 1024)
    resampler.close()
    assert resampler.execute(b"\x00" * 4096) is None


def test_short_input_is_rejected():
    resampler = AudioResampling()
    resampler.open(1, 44100, 4, 1, 44100, 4, 1024)
    with pytest.raises(ValueError):
        resampler.execute(b"\x00" * 100)


def test_mono_to_stereo_duplicates_samples():
    resampler = AudioResampling()
    resampler.open(1, 44100, 4, 2, 44100, 4, 1024)
    source = np.linspace(-1, 1, 1024, dtype=np.float32)
    out = np.frombuffer(resampler.execute(source.tobytes()), dtype="<f4").reshape(-1, 2)
    assert out.shape == (1024, 2)
    assert np.array_equal(out[:, 0], out[:, 1])
    assert np.array_equal(out[:, 0], source)


def test_int16_to_float_conversion():
    resampler = AudioResampling()
    resampler.open(1, 44100, 2, 1, 44100, 4, 1024)
    source = np.tile(np.array([16384, -16384], dtype="<i2"), 512)
    out = np.frombuffer(resampler.execute(source.tobytes()), dtype="<f4")
    assert out[0] == 0.5
    assert out[1] == -0.5


def test_float_to_int16_round_trip():
    forward = AudioResampling()
    forward.open(1, 44100, 2, 1, 44100, 4, 1024)
    backward = AudioResampling()
    backward.open(1, 44100, 4, 1, 44100, 2, 1024)
    source = np.arange(-512, 512, dtype="<i2").tobytes()
    assert backward.execute(forward.execute(source)) == source


def test_downsampling_halves_frames_and_keeps_constant_level():
    resampler = AudioResampling()
    resampler.open(1, 48000, 4, 1, 24000, 4, 512)
    block = _floats(np.full(1024, 0.25))
    for _ in range(3):
        out = resampler.execute(block)
        values = np.frombuffer(out, dtype="<f4")
        assert len(values) == 512
        assert np.allclose(values, 0.25)


def test_upsampled_output_buffers_until_chunk_complete():
    resampler = AudioResampling()
    resampler.open(1, 24000, 4, 1, 48000, 4, 1024)
    block = _floats(np.zeros(1024))
    outputs = [resampler.execute(block) for _ in range(4)]
    assert all(len(chunk) == 1024 * 4 for chunk in outputs)