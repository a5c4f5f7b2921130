import math

import pytest

from bbxaudio.buffer import AudioBuffer
from bbxaudio.process import Process, clear_output, sum_audio_inputs


def buffers(*channels):
    return [AudioBuffer.from_values(channel) for channel in channels]


def as_lists(output):
    return [buffer.as_list() for buffer in output]


def test_clear_output_zeroes_every_channel():
    output = buffers([0.3, -0.2], [1.0, 0.5])
    clear_output(output)
    assert as_lists(output) == [[0.0, 0.0], [0.0, 0.0]]


def test_clear_output_keeps_lengths():
    output = buffers([0.3, -0.2, 0.1], [1.0])
    clear_output(output)
    assert [len(buffer) for buffer in output] == [3, 1]


def test_single_input_is_copied():
    source = buffers([0.1, -0.4, 0.9], [0.2, 0.3, -0.7])
    output = [AudioBuffer(3), AudioBuffer(3)]
    sum_audio_inputs([source], output)
    assert as_lists(output) == as_lists(source)


def test_identical_inputs_average_to_themselves():
    values = [0.1, -0.4, 0.9]
    output = [AudioBuffer(3)]
    sum_audio_inputs([buffers(values), buffers(values)], output)
    assert output[0].as_list() == values


def test_opposite_inputs_cancel():
    output = [AudioBuffer(2)]
    sum_audio_inputs([buffers([0.5, -0.25]), buffers([-0.5, 0.25])], output)
    assert output[0].as_list() == [0.0, 0.0]


def test_sum_is_clamped_to_sample_range():
    output = [AudioBuffer(3)]
    sum_audio_inputs([buffers([3.0, -5.0, 0.25])], output)
    assert output[0].as_list() == [1.0, -1.0, 0.25]


def test_no_inputs_gives_nan():
    output = [AudioBuffer(2), AudioBuffer(2)]
    sum_audio_inputs([], output)
    samples = [sample for buffer in output for sample in buffer.as_list()]
    assert len(samples) == 4
    assert [math.isnan(sample) for sample in samples] == [True, True, True, True]


def test_mismatched_lengths_raise():
    output = [AudioBuffer(2)]
    with pytest.raises(ValueError):
        sum_audio_inputs([buffers([0.1, 0.2, 0.3])], output)


def test_process_is_abstract():
    with pytest.raises(TypeError):
        Process()