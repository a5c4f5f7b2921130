import struct
import wave

import pytest

from bbxaudio.buffer import AudioBuffer
from bbxaudio.context import Context
from bbxaudio.generators import FileReaderGenerator, Waveform, WaveTableGenerator

CONTEXT = Context(sample_rate=128, num_channels=2, buffer_size=128)


def render(generator, length=128, channels=2, inputs=()):
    output = [AudioBuffer(length) for _ in range(channels)]
    generator.process(list(inputs), output)
    return output


def reference(waveform=Waveform.SINE, length=128):
    return render(WaveTableGenerator(CONTEXT, 1.0, waveform), length)[0].as_list()


def test_sine_period():
    values = reference()
    assert values[0] == 0.0
    assert values[32] == pytest.approx(1.0)
    assert values[96] == pytest.approx(-1.0)


def test_channels_are_identical():
    output = render(WaveTableGenerator(CONTEXT, 1.0, Waveform.SINE), channels=3)
    assert output[1].as_list() == output[0].as_list()
    assert output[2].as_list() == output[0].as_list()


def test_phase_continues_across_blocks():
    generator = WaveTableGenerator(CONTEXT, 1.0, Waveform.SINE)
    joined = render(generator, 64)[0].as_list() + render(generator, 64)[0].as_list()
    assert joined == reference()


def test_set_frequency_doubles_step():
    generator = WaveTableGenerator(CONTEXT, 1.0, Waveform.SINE)
    generator.set_frequency(2.0)
    assert render(generator, 64)[0].as_list() == reference()[::2]


def test_half_step_hits_table_on_even_samples():
    values = render(WaveTableGenerator(CONTEXT, 0.5, Waveform.SINE))[0].as_list()
    assert values[::2] == reference()[:64]


def test_square_wave():
    values = reference(Waveform.SQUARE)
    assert set(values) == {1.0, -1.0}
    assert values[0] == 1.0
    assert values[96] == -1.0


def test_triangle_wave():
    values = reference(Waveform.TRIANGLE)
    assert values[0] == -1.0
    assert values[32] == pytest.approx(1.0)
    assert all(-1.0 <= value <= 1.0 for value in values)


def test_sawtooth_wave():
    values = reference(Waveform.SAWTOOTH)
    assert values[0] == -1.0
    assert all(-1.0 <= value < 1.0 for value in values)


def test_inputs_are_ignored():
    noise = [[AudioBuffer.from_values([0.9] * 128) for _ in range(2)]]
    output = render(WaveTableGenerator(CONTEXT, 1.0, Waveform.SINE), inputs=noise)
    assert output[0].as_list() == reference()


def test_empty_output_raises():
    with pytest.raises(ValueError):
        WaveTableGenerator(CONTEXT, 1.0, Waveform.SINE).process([], [])


def write_wav(path, samples, channels):
    with wave.open(str(path), "wb") as wav:
        wav.setnchannels(channels)
        wav.setsampwidth(2)
        wav.setframerate(8000)
        wav.writeframes(struct.pack(f"<{len(samples)}h", *samples))
    return path


def test_file_reader_plays_blocks(tmp_path):
    path = write_wav(tmp_path / "mono.wav", [0, 16384, -16384, -32768], 1)
    generator = FileReaderGenerator(CONTEXT, path)
    assert render(generator, 2, 1)[0].as_list() == [0.0, 0.5]
    assert render(generator, 2, 1)[0].as_list() == [-0.5, -1.0]


def test_file_reader_past_end_raises(tmp_path):
    path = write_wav(tmp_path / "mono.wav", [0, 16384, -16384], 1)
    generator = FileReaderGenerator(CONTEXT, path)
    render(generator, 2, 1)
    with pytest.raises(IndexError):
        render(generator, 2, 1)


def test_file_reader_stereo(tmp_path):
    path = write_wav(tmp_path / "stereo.wav", [0, -16384, 16384, 0], 2)
    output = render(FileReaderGenerator(CONTEXT, path), 2, 2)
    assert output[0].as_list() == [0.0, 0.5]
    assert output[1].as_list() == [-0.5, 0.0]