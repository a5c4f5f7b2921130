"""An endless stream of interleaved samples drawn from a graph."""

from __future__ import annotations

from collections.abc import Iterator

from bbxaudio.buffer import AudioBuffer
from bbxaudio.graph import Graph


class Signal(Iterator[float]):
    """Yields a graph's output interleaved by channel: L1, R1, L2, R2, ...

    The graph is evaluated again each time a whole block has been yielded.
    """

    def __init__(self, graph: Graph) -> None:
        self.graph = graph
        context = graph.context
        self._output = [
            AudioBuffer(context.buffer_size) for _ in range(context.num_channels)
        ]
        self._channel_index = 0
        self._sample_index = 0

    def __iter__(self) -> Signal:
        return self

    def __next__(self) -> float:
        context = self.graph.context
        if self._channel_index == 0 and self._sample_index == 0:
            result = self.graph.evaluate()
            for channel_buffer, source in zip(self._output, result, strict=True):
                channel_buffer.copy_from(source)

        sample = self._output[self._channel_index][self._sample_index]

        self._channel_index += 1
        if self._channel_index >= context.num_channels:
            self._channel_index = 0
            self._sample_index = (self._sample_index + 1) % context.buffer_size
        return sample

    def channels(self) -> int:
        """Number of interleaved channels."""
        return self.graph.context.num_channels

    def sample_rate(self) -> int:
        """Frames per second."""
        return self.graph.context.sample_rate