import pytest

from bbxaudio.buffer import AudioBuffer
from bbxaudio.context import Context
from bbxaudio.effectors import (
    AmplifierEffector,
    FilterEffector,
    FlangerEffector,
    MixerEffector,
    OverdriveEffector,
)


def signal(values, channels=2):
    return [AudioBuffer.from_values(values) for _ in range(channels)]


def silent(length, channels=2):
    return [AudioBuffer(length) for _ in range(channels)]


def as_lists(output):
    return [buffer.as_list() for buffer in output]


def run(effector, values, channels=2):
    output = silent(len(values), channels)
    effector.process([signal(values, channels)], output)
    return output


@pytest.mark.parametrize("gain, expected", [(2.0, 1.0), (-0.5, 0.0), (0.25, 0.25)])
def test_amplifier_gain_is_clamped(gain, expected):
    assert AmplifierEffector(gain).gain == expected


def test_amplifier_gain_setter_clamps():
    amplifier = AmplifierEffector(0.5)
    amplifier.gain = 7.0
    assert amplifier.gain == 1.0


def test_amplifier_unit_gain_passes_signal():
    values = [0.1, -0.6, 0.9]
    assert as_lists(run(AmplifierEffector(1.0), values)) == [values, values]


def test_amplifier_zero_gain_silences():
    output = run(AmplifierEffector(0.0), [0.1, -0.6, 0.9])
    assert as_lists(output) == [[0.0, 0.0, 0.0], [0.0, 0.0, 0.0]]


def test_amplifier_half_gain_halves():
    values = [0.1, -0.6, 0.9]
    output = run(AmplifierEffector(0.5), values)
    for before, after in zip(values, output[0]):
        assert after * 2 == pytest.approx(before)


def test_mixer_identical_inputs_unchanged():
    values = [0.2, -0.3, 0.7]
    output = silent(3)
    MixerEffector().process([signal(values), signal(values)], output)
    assert as_lists(output) == [values, values]


def test_mixer_opposite_inputs_cancel():
    output = silent(2)
    MixerEffector().process([signal([0.5, -0.25]), signal([-0.5, 0.25])], output)
    assert as_lists(output) == [[0.0, 0.0], [0.0, 0.0]]


def test_mixer_clamps():
    output = run(MixerEffector(), [4.0, -4.0])
    assert output[0].as_list() == [1.0, -1.0]


def test_overdrive_silence_stays_silent():
    assert as_lists(run(OverdriveEffector(), [0.0, 0.0])) == [[0.0, 0.0], [0.0, 0.0]]


def test_overdrive_is_odd_symmetric():
    positive = run(OverdriveEffector(), [0.3, 0.7])[0].as_list()
    negative = run(OverdriveEffector(), [-0.3, -0.7])[0].as_list()
    assert negative == [-value for value in positive]


def test_overdrive_full_scale():
    assert run(OverdriveEffector(), [1.0])[0][0] == pytest.approx(2.0 / 3.0)


def test_overdrive_is_monotonic_in_range():
    values = [-1.0, -0.75, -0.5, -0.25, 0.0, 0.25, 0.5, 0.75, 1.0]
    shaped = run(OverdriveEffector(), values, channels=1)[0].as_list()
    assert all(a < b for a, b in zip(shaped, shaped[1:]))


FILTER_CONTEXT = Context(sample_rate=44100, num_channels=2, buffer_size=128)


def test_filter_silence_stays_silent():
    output = run(FilterEffector(FILTER_CONTEXT, 1000.0, 0.5), [0.0] * 16)
    assert as_lists(output) == [[0.0] * 16, [0.0] * 16]


def test_filter_passes_constant_signal():
    effector = FilterEffector(FILTER_CONTEXT, 1000.0, 0.0)
    for _ in range(20):
        output = run(effector, [0.5] * 128)
    assert output[-1][-1] == pytest.approx(0.5, abs=1e-3)


def test_filter_smooths_a_step():
    output = run(FilterEffector(FILTER_CONTEXT, 1000.0, 0.0), [0.5] * 4)
    assert 0.0 < output[0][0] < 0.5


def test_filter_state_carries_over_blocks():
    effector = FilterEffector(FILTER_CONTEXT, 1000.0, 0.0)
    first = run(effector, [0.5] * 8)
    second = run(effector, [0.5] * 8)
    assert second[0][0] > first[0][0]


FLANGER_CONTEXT = Context(sample_rate=100, num_channels=2, buffer_size=8)


def test_flanger_without_feedback_passes_signal():
    effector = FlangerEffector(FLANGER_CONTEXT, 0.0, 0.0, 1.0, 0.1)
    for block in ([0.1] * 8, [-0.2, 0.3] * 4, [0.4] * 8):
        assert as_lists(run(effector, block)) == [block, block]


def test_flanger_feedback_arrives_after_delay():
    effector = FlangerEffector(FLANGER_CONTEXT, 0.0, 0.5, 1.0, 0.1)
    block = [0.2] * 8
    first = run(effector, block)
    assert as_lists(first) == [block, block]
    second = run(effector, block)[0].as_list()
    assert second[:2] == [0.2, 0.2]
    assert second[2] > 0.2
    assert second[3] == second[2]


def test_flanger_zero_delay_raises():
    effector = FlangerEffector(FLANGER_CONTEXT, 0.0, 0.5, 1.0, 0.0)
    with pytest.raises(ValueError):
        run(effector, [0.1] * 8)