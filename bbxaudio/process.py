"""The processing interface shared by graph nodes, with helpers for it."""

from __future__ import annotations

import enum
import math
from abc import ABC, abstractmethod
from collections.abc import Sequence

from bbxaudio.buffer import AudioBuffer
from bbxaudio.sample import SAMPLE_MAX, SAMPLE_MIN

AudioInput = Sequence[AudioBuffer]
"""The output buffers of one node, one per channel, fed into another node."""


class Process(ABC):
    """Something that generates or transforms audio, one block at a time."""

    @abstractmethod
    def process(
        self, inputs: Sequence[AudioInput], output: Sequence[AudioBuffer]
    ) -> None:
        """Fill ``output`` (one buffer per channel) from ``inputs``."""


Operation = Process
"""The processing object held by a node of a graph."""


class OperationType(enum.Enum):
    """Whether a node transforms incoming signals or produces its own."""

    EFFECTOR = "effector"
    GENERATOR = "generator"


def clear_output(output: Sequence[AudioBuffer]) -> None:
    """Reset every channel buffer in ``output`` to silence."""
    for channel_buffer in output:
        channel_buffer.clear()


def _clamp(value: float) -> float:
    return min(max(value, SAMPLE_MIN), SAMPLE_MAX)


def sum_audio_inputs(
    inputs: Sequence[AudioInput], output: Sequence[AudioBuffer]
) -> None:
    """Mix ``inputs`` into ``output`` channel by channel.

    Each output sample is the mean of the matching input samples, clamped
    to the range of a sample. With no inputs the mean is undefined and
    every output sample becomes NaN.
    """
    count = len(inputs)
    for channel_index, channel_buffer in enumerate(output):
        if count == 0:
            channel_buffer.apply(lambda _sample: math.nan)
            continue
        channel_sources = [source[channel_index] for source in inputs]
        channel_buffer.copy_from(
            _clamp(sum(column) / count)
            for column in zip(*channel_sources, strict=True)
        )