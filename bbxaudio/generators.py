"""Nodes that produce their own output signal."""

from __future__ import annotations

import enum
import math
from collections.abc import Sequence
from pathlib import Path

from bbxaudio.audiofile import WavFileReader
from bbxaudio.buffer import AudioBuffer
from bbxaudio.context import Context
from bbxaudio.process import AudioInput, Process, clear_output

WAVE_TABLE_SIZE = 128


class Waveform(enum.Enum):
    """Shapes a wave table generator can produce."""

    SINE = "sine"
    SQUARE = "square"
    TRIANGLE = "triangle"
    SAWTOOTH = "sawtooth"


def _create_wave_table(size: int) -> list[float]:
    return [math.sin(n * math.pi * 2.0 / size) for n in range(size)]


def _shape(waveform: Waveform, sine_value: float) -> float:
    if waveform is Waveform.SINE:
        return sine_value
    if waveform is Waveform.SQUARE:
        return 1.0 if sine_value >= 0.0 else -1.0
    if waveform is Waveform.SAWTOOTH:
        return 2.0 * (sine_value - math.floor(sine_value)) - 1.0
    return 2.0 * abs(sine_value) - 1.0


class WaveTableGenerator(Process):
    """An oscillator reading an interpolated sine table, shaped by a waveform."""

    def __init__(self, context: Context, frequency: float, waveform: Waveform) -> None:
        self.context = context
        self.waveform = waveform
        self._table = _create_wave_table(WAVE_TABLE_SIZE)
        self._phase = 0.0
        self.set_frequency(frequency)

    def set_frequency(self, frequency: float) -> None:
        """Change the oscillator's frequency, keeping its phase."""
        self._phase_increment = frequency * len(self._table) / self.context.sample_rate

    def _lerp(self) -> float:
        index = int(self._phase)
        next_index = (index + 1) % len(self._table)
        next_weight = self._phase - index
        return self._table[index] * (1.0 - next_weight) + self._table[next_index] * next_weight

    def _next_sample(self) -> float:
        sine_value = self._lerp()
        self._phase = (self._phase + self._phase_increment) % len(self._table)
        return _shape(self.waveform, sine_value)

    def process(
        self, inputs: Sequence[AudioInput], output: Sequence[AudioBuffer]
    ) -> None:
        clear_output(output)
        if not output:
            raise ValueError("output must have at least one channel")
        model, *others = output
        model.apply(lambda _sample: self._next_sample())
        for channel_buffer in others:
            channel_buffer.copy_from(model)


class FileReaderGenerator(Process):
    """Plays a WAV file block by block, one file channel per output channel."""

    def __init__(self, context: Context, file_path: str | Path) -> None:
        self.context = context
        self.reader = WavFileReader(file_path)
        self._sample_index = 0

    def process(
        self, inputs: Sequence[AudioInput], output: Sequence[AudioBuffer]
    ) -> None:
        clear_output(output)
        for channel_index, channel_buffer in enumerate(output):
            channel_buffer.copy_from(
                self.reader.read_channel(
                    channel_index, self._sample_index, len(channel_buffer)
                )
            )
        self._sample_index += len(output[0])