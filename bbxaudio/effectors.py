"""Nodes that produce an output signal by modifying their inputs."""

from __future__ import annotations

import math
from collections.abc import Sequence

from bbxaudio.buffer import AudioBuffer
from bbxaudio.context import Context
from bbxaudio.process import AudioInput, Process, clear_output, sum_audio_inputs


def _round_to_index(value: float) -> int:
    """Round half away from zero; negative and NaN values become zero."""
    if not value > 0:
        return 0
    return math.floor(value + 0.5)


class AmplifierEffector(Process):
    """Scales the mixed input by a gain kept within [0, 1]."""

    def __init__(self, gain: float) -> None:
        self.gain = gain

    @property
    def gain(self) -> float:
        return self._gain

    @gain.setter
    def gain(self, value: float) -> None:
        self._gain = min(max(value, 0.0), 1.0)

    def process(
        self, inputs: Sequence[AudioInput], output: Sequence[AudioBuffer]
    ) -> None:
        clear_output(output)
        sum_audio_inputs(inputs, output)
        gain = self._gain
        for channel_buffer in output:
            channel_buffer.apply(lambda sample: sample * gain)


class FilterEffector(Process):
    """A four-stage resonant low-pass filter."""

    def __init__(self, context: Context, cutoff: float, resonance: float) -> None:
        self.context = context
        self.cutoff = cutoff
        self.resonance = resonance
        self._stages = [0.0, 0.0, 0.0, 0.0]

    def process(
        self, inputs: Sequence[AudioInput], output: Sequence[AudioBuffer]
    ) -> None:
        clear_output(output)
        sum_audio_inputs(inputs, output)

        g = math.sin(math.pi * self.cutoff / self.context.sample_rate)
        stages = self._stages
        for sample_index in range(len(output[0])):
            for channel_buffer in output:
                input_sample = channel_buffer[sample_index]
                feedback = self.resonance * stages[3]
                stages[0] += g * (input_sample - feedback - stages[0])
                stages[1] += g * (stages[0] - stages[1])
                stages[2] += g * (stages[1] - stages[2])
                stages[3] += g * (stages[2] - stages[3])
                channel_buffer[sample_index] = stages[3]


class FlangerEffector(Process):
    """Mixes the input with a copy delayed by a time swept by a sine LFO."""

    def __init__(
        self,
        context: Context,
        depth: float,
        feedback: float,
        rate: float,
        delay_time: float,
    ) -> None:
        self.context = context
        self.depth = depth
        self.feedback = feedback
        self.rate = rate
        self.delay_time = delay_time
        line_length = _round_to_index(delay_time * context.sample_rate)
        self._delay_lines = [
            AudioBuffer(line_length) for _ in range(context.num_channels)
        ]
        self._delay_index = 0
        self._delay_phase = 0.0

    def process(
        self, inputs: Sequence[AudioInput], output: Sequence[AudioBuffer]
    ) -> None:
        clear_output(output)
        sum_audio_inputs(inputs, output)

        sample_rate = self.context.sample_rate
        max_delay = _round_to_index(self.delay_time * sample_rate)
        if max_delay == 0:
            raise ValueError("delay time is shorter than one sample")

        for sample_index in range(self.context.buffer_size):
            lfo = math.sin(self._delay_phase * 2.0 * math.pi) * self.depth
            delay_samples = _round_to_index((self.delay_time + lfo) * sample_rate)
            read_index = (self._delay_index + max_delay - delay_samples) % max_delay

            for channel_index, channel_buffer in enumerate(output):
                delay_line = self._delay_lines[channel_index]
                wet_sample = (
                    channel_buffer[sample_index]
                    + self.feedback * delay_line[read_index]
                )
                channel_buffer[sample_index] = wet_sample
                delay_line[self._delay_index] = wet_sample

            self._delay_index = (self._delay_index + 1) % max_delay
            self._delay_phase += self.rate / sample_rate
            if self._delay_phase >= 1.0:
                self._delay_phase -= 1.0


class MixerEffector(Process):
    """Averages all inputs into one signal."""

    def process(
        self, inputs: Sequence[AudioInput], output: Sequence[AudioBuffer]
    ) -> None:
        clear_output(output)
        sum_audio_inputs(inputs, output)


class OverdriveEffector(Process):
    """Soft-clips the mixed input with a cubic curve, adding harmonics."""

    def process(
        self, inputs: Sequence[AudioInput], output: Sequence[AudioBuffer]
    ) -> None:
        clear_output(output)
        sum_audio_inputs(inputs, output)
        for channel_buffer in output:
            channel_buffer.apply(lambda sample: sample - sample**3 / 3.0)